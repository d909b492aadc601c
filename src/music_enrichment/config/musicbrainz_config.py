# ============================================================================
# src/music_enrichment/config/musicbrainz_config.py
# ============================================================================
"""
MusicBrainz Fetch Settings
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PLACEHOLDER_USER_AGENT = "ClassicalMusicAIEnrichmentApp/1.0.0 (your-email@example.com)"


class MusicBrainzSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MUSICBRAINZ_USER_AGENT: Optional[str] = Field(
        default=None,
        description="'AppName/Version (contact)' - required by MusicBrainz"
    )
    MUSICBRAINZ_BASE_URL: str = Field(
        default="https://musicbrainz.org/ws/2",
        description="MusicBrainz web service root"
    )
    MUSICBRAINZ_MIN_INTERVAL: float = Field(
        default=1.0,
        ge=0.0,
        description="Minimum seconds between requests (1 req/s policy)"
    )
    MUSICBRAINZ_TIMEOUT: int = Field(
        default=30,
        gt=0,
        description="Per-request timeout (seconds)"
    )
    MUSICBRAINZ_COMPOSER: str = Field(
        default="Johann Sebastian Bach",
        description="Composer fetched when none is given on the command line"
    )
    MUSICBRAINZ_LIMIT: int = Field(
        default=5,
        ge=0,
        description="Number of works to keep (0 = all)"
    )
    MUSICBRAINZ_OUTPUT_FILE: Path = Field(
        default=Path("data/music_metadata.json"),
        description="Where the fetched raw works are written"
    )

    def has_valid_user_agent(self) -> bool:
        return bool(self.MUSICBRAINZ_USER_AGENT) and self.MUSICBRAINZ_USER_AGENT != PLACEHOLDER_USER_AGENT


musicbrainz_settings = MusicBrainzSettings()
