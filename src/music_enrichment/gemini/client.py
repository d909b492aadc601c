# ============================================================================
# src/music_enrichment/gemini/client.py
# ============================================================================
"""
Generative Client Factory

Usage:
    from music_enrichment.gemini.client import create_client

    client = create_client()                       # settings from env/.env
    client = create_client({'api_key': '...'})     # explicit overrides

    result = await client.generate("Describe BWV 147")
"""

import logging
from typing import Dict, Any, Optional

from .base import BaseGenerativeClient
from .gemini_client import GeminiClient
from ..config.gemini_config import GeminiSettings


DEFAULT_BACKEND = "gemini"

_logger = logging.getLogger(__name__)


def create_client(
    config: Optional[Dict[str, Any]] = None,
    settings: Optional[GeminiSettings] = None,
) -> BaseGenerativeClient:
    """
    Factory function to create a generative client.

    Settings are loaded from the environment and merged with any passed
    config. Passed config values take precedence.

    Args:
        config: Overrides, plus optional 'backend' (default: "gemini")
        settings: Settings instance (default: fresh GeminiSettings())

    Returns:
        Configured client instance

    Raises:
        ValueError: If backend type is not supported or api_key missing
    """
    settings = settings or GeminiSettings()
    config = {**settings.to_client_config(), **(config or {})}
    backend = config.pop('backend', DEFAULT_BACKEND).lower()

    if backend == "gemini":
        client = GeminiClient(config)
    else:
        raise ValueError(
            f"Unknown backend: {backend}. Supported backends: gemini"
        )

    _logger.debug(f"Created {backend} client for model {client.model_name}")
    return client


__all__ = [
    "create_client",
    "BaseGenerativeClient",
    "GeminiClient",
    "DEFAULT_BACKEND",
]
