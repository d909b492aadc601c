# ============================================================================
# src/music_enrichment/enrichers/__init__.py
# ============================================================================
"""
Enrichers Package

Enrichers attach AI-generated metadata to raw works:
- MusicEnricher: Gemini description, mood, keywords, semantic tags and
  similar-works description

Parsing of model output lives in parsing.py and is usable on its own.
"""

from .base import (
    BaseEnricher,
    EnrichmentResult,
    EnrichmentOutcome,
    OutcomeStatus,
    FALLBACK_DESCRIPTION,
    FALLBACK_SIMILAR_WORKS,
)
from .parsing import extract_metadata
from .music_enricher import MusicEnricher

__all__ = [
    "BaseEnricher",
    "EnrichmentResult",
    "EnrichmentOutcome",
    "OutcomeStatus",
    "FALLBACK_DESCRIPTION",
    "FALLBACK_SIMILAR_WORKS",
    "extract_metadata",
    "MusicEnricher",
]
