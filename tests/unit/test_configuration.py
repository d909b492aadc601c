# ============================================================================
# FILE: tests/unit/test_configuration.py
# ============================================================================
"""
Unit tests for settings
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from music_enrichment.config import (
    AlgoliaSettings,
    GeminiSettings,
    MusicBrainzSettings,
    PipelineSettings,
)
from music_enrichment.config.musicbrainz_config import PLACEHOLDER_USER_AGENT


def test_defaults(monkeypatch):
    for name in ("ALGOLIA_INDEX_NAME", "ENRICHMENT_DELAY_SECONDS", "INPUT_FILE", "GEMINI_MODEL"):
        monkeypatch.delenv(name, raising=False)

    assert AlgoliaSettings(_env_file=None).ALGOLIA_INDEX_NAME == "classical_music_enriched_by_ai"
    assert GeminiSettings(_env_file=None).GEMINI_MODEL == "gemini-1.5-flash"

    pipeline = PipelineSettings(_env_file=None)
    assert pipeline.ENRICHMENT_DELAY_SECONDS == 0.5
    assert pipeline.INPUT_FILE == Path("data/music_metadata.json")
    assert pipeline.SEARCHABLE_ATTRIBUTES[0] == "title"
    assert "unordered(ai_description)" in pipeline.SEARCHABLE_ATTRIBUTES


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ENRICHMENT_DELAY_SECONDS", "2")
    monkeypatch.setenv("SEARCHABLE_ATTRIBUTES", '["title", "ai_mood"]')

    settings = PipelineSettings(_env_file=None)

    assert settings.ENRICHMENT_DELAY_SECONDS == 2.0
    assert settings.SEARCHABLE_ATTRIBUTES == ["title", "ai_mood"]


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        PipelineSettings(_env_file=None, ENRICHMENT_DELAY_SECONDS=-1)
    with pytest.raises(ValidationError):
        AlgoliaSettings(_env_file=None, TASK_POLL_MULTIPLIER=0.5)


def test_musicbrainz_user_agent_check():
    assert not MusicBrainzSettings(_env_file=None, MUSICBRAINZ_USER_AGENT=None).has_valid_user_agent()
    assert not MusicBrainzSettings(
        _env_file=None, MUSICBRAINZ_USER_AGENT=PLACEHOLDER_USER_AGENT
    ).has_valid_user_agent()
    assert MusicBrainzSettings(
        _env_file=None, MUSICBRAINZ_USER_AGENT="MyApp/0.1 (me@example.org)"
    ).has_valid_user_agent()
