# ============================================================================
# src/music_enrichment/config/pipeline_config.py
# ============================================================================
"""
Pipeline Settings
- Input batch location
- Enrichment pacing
- Parser tolerance
- Searchable attributes
"""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SEARCHABLE_ATTRIBUTES = [
    "title",
    "composer",
    "type",
    "ai_description",
    "ai_mood",
    "ai_keywords",
    "ai_semantic_tags",
    "ai_similar_works_description",
    "unordered(ai_description)",
]


class PipelineSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    INPUT_FILE: Path = Field(
        default=Path("data/music_metadata.json"),
        description="JSON array of raw works produced by the fetch step"
    )
    ENRICHMENT_DELAY_SECONDS: float = Field(
        default=0.5,
        ge=0.0,
        description="Pause between enrichment requests (Gemini rate limits)"
    )
    ENRICHMENT_REPAIR_JSON: bool = Field(
        default=False,
        description="Run json_repair on malformed model JSON before giving up"
    )
    SEARCHABLE_ATTRIBUTES: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SEARCHABLE_ATTRIBUTES),
        description="Fields eligible for text search, in ranking order"
    )


pipeline_settings = PipelineSettings()
