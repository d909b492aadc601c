# ============================================================================
# src/music_enrichment/sources/__init__.py
# ============================================================================
"""
Upstream metadata sources.
"""

from .musicbrainz import MusicBrainzClient, format_work

__all__ = ["MusicBrainzClient", "format_work"]
