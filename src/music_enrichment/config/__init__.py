# ============================================================================
# src/music_enrichment/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .gemini_config import GeminiSettings, gemini_settings
from .algolia_config import AlgoliaSettings, algolia_settings
from .pipeline_config import PipelineSettings, pipeline_settings
from .musicbrainz_config import MusicBrainzSettings, musicbrainz_settings
from .logging_config import LoggingSettings, logging_settings

__all__ = [
    "GeminiSettings",
    "gemini_settings",
    "AlgoliaSettings",
    "algolia_settings",
    "PipelineSettings",
    "pipeline_settings",
    "MusicBrainzSettings",
    "musicbrainz_settings",
    "LoggingSettings",
    "logging_settings",
]
