# ============================================================================
# src/music_enrichment/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the music enrichment pipeline.
"""

from typing import Any, Optional


class MusicEnrichmentError(Exception):
    """Base exception for all music enrichment errors."""
    pass


class ConfigurationError(MusicEnrichmentError):
    """Invalid or missing configuration."""
    pass


class BatchLoadError(MusicEnrichmentError):
    """Input batch missing, unreadable or malformed."""
    pass


class EnrichmentError(MusicEnrichmentError):
    """Generative backend unreachable or response missing content."""
    pass


class ExtractionError(MusicEnrichmentError):
    """Model response present but not parseable as the expected structure."""
    pass


class MusicBrainzError(MusicEnrichmentError):
    """Error talking to the MusicBrainz web service."""
    pass


class IndexBackendError(MusicEnrichmentError):
    """Transport or HTTP error returned by the index backend."""
    def __init__(self, message: str, status: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.status = status
        self.details = details


class IndexingError(MusicEnrichmentError):
    """Error publishing records to the search index."""
    step = "publish"

    def __init__(self, message: str, index_name: str):
        super().__init__(f"[{self.step}] index '{index_name}': {message}")
        self.index_name = index_name
        self.reason = message


class IndexConfigError(IndexingError):
    """Index settings could not be applied."""
    step = "configure"


class IndexWriteError(IndexingError):
    """Batch write failed or returned no task identifier."""
    step = "write"

    def __init__(self, message: str, index_name: str, raw_response: Any = None):
        super().__init__(message, index_name)
        self.raw_response = raw_response


class IndexTaskError(IndexingError):
    """Indexing task resolved to a failure state."""
    step = "confirm"

    def __init__(self, message: str, index_name: str, task_id: Any = None):
        super().__init__(message, index_name)
        self.task_id = task_id
