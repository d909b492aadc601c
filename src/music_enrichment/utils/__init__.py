# ============================================================================
# src/music_enrichment/utils/__init__.py
# ============================================================================
"""
Utility modules for the music enrichment pipeline.
"""

from .exceptions import (
    MusicEnrichmentError,
    ConfigurationError,
    BatchLoadError,
    EnrichmentError,
    ExtractionError,
    MusicBrainzError,
    IndexBackendError,
    IndexingError,
    IndexConfigError,
    IndexWriteError,
    IndexTaskError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    LogAdapter,
    record_logger,
)

from .metrics import (
    MetricsCollector,
    Timer,
)

from .file_utils import (
    ensure_directory,
    read_json,
    write_json,
)

__all__ = [
    # Exceptions
    'MusicEnrichmentError',
    'ConfigurationError',
    'BatchLoadError',
    'EnrichmentError',
    'ExtractionError',
    'MusicBrainzError',
    'IndexBackendError',
    'IndexingError',
    'IndexConfigError',
    'IndexWriteError',
    'IndexTaskError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'LogAdapter',
    'record_logger',
    # Metrics
    'MetricsCollector',
    'Timer',
    # File Utils
    'ensure_directory',
    'read_json',
    'write_json',
]
