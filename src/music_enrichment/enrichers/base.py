# ============================================================================
# src/music_enrichment/enrichers/base.py
# ============================================================================
"""
Base Enricher Interface

An enricher takes one raw work and returns an EnrichmentOutcome. The outcome
is either OK (fields parsed from the model) or DEGRADED (the fixed fallback
value plus the reason enrichment failed). Enrichers never raise for backend
or parsing problems.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


FALLBACK_DESCRIPTION = "AI enrichment failed."
FALLBACK_SIMILAR_WORKS = "AI analysis unavailable."

# Index field name for each EnrichmentResult attribute
INDEX_FIELD_NAMES = {
    "description": "ai_description",
    "mood": "ai_mood",
    "keywords": "ai_keywords",
    "semantic_tags": "ai_semantic_tags",
    "similar_works_description": "ai_similar_works_description",
}


@dataclass(frozen=True)
class EnrichmentResult:
    """AI-generated metadata for one work. List fields are always lists."""
    description: Optional[str] = None
    mood: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    semantic_tags: List[str] = field(default_factory=list)
    similar_works_description: Optional[str] = None

    @classmethod
    def fallback(cls) -> "EnrichmentResult":
        """The fixed value used whenever enrichment cannot be completed."""
        return cls(
            description=FALLBACK_DESCRIPTION,
            mood=[],
            keywords=[],
            semantic_tags=[],
            similar_works_description=FALLBACK_SIMILAR_WORKS,
        )

    def to_index_fields(self) -> Dict[str, Any]:
        """Fields under the ai_ namespace."""
        return {
            INDEX_FIELD_NAMES["description"]: self.description,
            INDEX_FIELD_NAMES["mood"]: list(self.mood),
            INDEX_FIELD_NAMES["keywords"]: list(self.keywords),
            INDEX_FIELD_NAMES["semantic_tags"]: list(self.semantic_tags),
            INDEX_FIELD_NAMES["similar_works_description"]: self.similar_works_description,
        }


class OutcomeStatus(Enum):
    """Whether a record was genuinely enriched."""
    OK = "ok"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class EnrichmentOutcome:
    """Result of enriching one record."""
    status: OutcomeStatus
    result: EnrichmentResult
    reason: Optional[str] = None

    @classmethod
    def ok(cls, result: EnrichmentResult) -> "EnrichmentOutcome":
        return cls(status=OutcomeStatus.OK, result=result)

    @classmethod
    def degraded(cls, reason: str) -> "EnrichmentOutcome":
        return cls(
            status=OutcomeStatus.DEGRADED,
            result=EnrichmentResult.fallback(),
            reason=reason,
        )

    @property
    def is_degraded(self) -> bool:
        return self.status is OutcomeStatus.DEGRADED


class BaseEnricher(ABC):
    """
    Base class for record enrichers.

    Subclasses must return an outcome for every record; failures are
    reported through EnrichmentOutcome.degraded().
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    @property
    @abstractmethod
    def enricher_type(self) -> str:
        """Return the type of enricher (e.g., 'gemini')."""
        pass

    @abstractmethod
    async def enrich(self, record: Any) -> EnrichmentOutcome:
        """
        Enrich one record.

        Args:
            record: RawRecord to enrich

        Returns:
            EnrichmentOutcome (never raises for enrichment failures)
        """
        pass
