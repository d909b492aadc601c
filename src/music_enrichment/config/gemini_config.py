# ============================================================================
# src/music_enrichment/config/gemini_config.py
# ============================================================================
"""
Gemini Configuration
- API key
- Model
- Generation limits
- Timeout
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        description="API key for the Gemini generateContent endpoint"
    )
    GEMINI_MODEL: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model used for enrichment"
    )
    GEMINI_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Generative Language API"
    )
    GEMINI_MAX_OUTPUT_TOKENS: int = Field(
        default=1024,
        gt=0,
        description="Maximum tokens per enrichment response"
    )
    GEMINI_TEMPERATURE: Optional[float] = Field(
        default=None,
        ge=0.0, le=2.0,
        description="Sampling temperature (None = model default)"
    )
    GEMINI_TIMEOUT: int = Field(
        default=60,
        gt=0,
        description="Per-request timeout (seconds)"
    )

    def to_client_config(self) -> dict:
        """Config dict consumed by create_client()."""
        return {
            "api_key": self.GEMINI_API_KEY,
            "model": self.GEMINI_MODEL,
            "base_url": self.GEMINI_BASE_URL,
            "max_tokens": self.GEMINI_MAX_OUTPUT_TOKENS,
            "temperature": self.GEMINI_TEMPERATURE,
            "timeout": self.GEMINI_TIMEOUT,
        }


gemini_settings = GeminiSettings()
