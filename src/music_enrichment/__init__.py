# ============================================================================
# src/music_enrichment/__init__.py
# ============================================================================
"""
Music Enrichment - AI metadata enrichment and search indexing for
classical music works.

Components:
- enrichers: Gemini-backed enrichment and model output parsing
- core: record models, batch orchestration, pipeline
- indexing: index publishing and task confirmation
- sources: upstream MusicBrainz fetch
"""

__version__ = "1.0.0"
