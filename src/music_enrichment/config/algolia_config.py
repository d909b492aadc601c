# ============================================================================
# src/music_enrichment/config/algolia_config.py
# ============================================================================
"""
Algolia Index Settings
- Credentials
- Destination index
- Task confirmation polling
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AlgoliaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ALGOLIA_APP_ID: Optional[str] = Field(
        default=None,
        description="Algolia application id"
    )
    ALGOLIA_ADMIN_API_KEY: Optional[str] = Field(
        default=None,
        description="Algolia admin key (write access required)"
    )
    ALGOLIA_INDEX_NAME: str = Field(
        default="classical_music_enriched_by_ai",
        description="Destination index for enriched works"
    )
    ALGOLIA_TIMEOUT: int = Field(
        default=30,
        gt=0,
        description="Per-request timeout (seconds)"
    )
    TASK_POLL_INITIAL_DELAY: float = Field(
        default=0.5,
        gt=0.0,
        description="First wait before checking task status (seconds)"
    )
    TASK_POLL_MAX_DELAY: float = Field(
        default=5.0,
        gt=0.0,
        description="Upper bound for a single poll interval (seconds)"
    )
    TASK_POLL_MULTIPLIER: float = Field(
        default=1.5,
        ge=1.0,
        description="Backoff multiplier between polls"
    )
    TASK_POLL_TIMEOUT: float = Field(
        default=300.0,
        gt=0.0,
        description="Give up waiting for task confirmation after this many seconds"
    )


algolia_settings = AlgoliaSettings()
