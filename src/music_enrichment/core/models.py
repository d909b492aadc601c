# ============================================================================
# src/music_enrichment/core/models.py
# ============================================================================
"""
Record models

RawRecord is what the fetch step writes; EnrichedRecord is a RawRecord plus
the outcome of its AI enrichment, ready to be sent to the index.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..enrichers.base import INDEX_FIELD_NAMES, EnrichmentOutcome


# Written by enrichment; upstream data may not use them
RESERVED_FIELDS = frozenset(INDEX_FIELD_NAMES.values())


class RawRecord(BaseModel):
    """One musical work as fetched upstream. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow", frozen=True)

    objectID: str = Field(min_length=1)
    title: str
    composer: str
    type: Optional[str] = None
    language: Optional[str] = None
    attributes: List[str] = Field(default_factory=list)

    @field_validator("attributes", mode="before")
    @classmethod
    def _null_attributes(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="after")
    def _no_reserved_fields(self) -> "RawRecord":
        clashes = sorted(RESERVED_FIELDS.intersection(self.model_extra or {}))
        if clashes:
            raise ValueError(f"fields reserved for enrichment: {', '.join(clashes)}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """All fields, including upstream extras, as a plain dict."""
        return self.model_dump()


@dataclass(frozen=True)
class EnrichedRecord:
    """A raw record merged with its enrichment outcome."""
    record: RawRecord
    outcome: EnrichmentOutcome

    @property
    def object_id(self) -> str:
        return self.record.objectID

    @property
    def degraded(self) -> bool:
        return self.outcome.is_degraded

    def to_index_object(self) -> Dict[str, Any]:
        """Raw fields plus ai_* fields, as sent to the index."""
        obj = self.record.to_dict()
        for key, value in self.outcome.result.to_index_fields().items():
            obj[key] = value
        return obj
