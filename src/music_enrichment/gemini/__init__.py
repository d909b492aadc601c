# ============================================================================
# src/music_enrichment/gemini/__init__.py
# ============================================================================
"""
Gemini module - generative model clients used for enrichment
"""

from .base import BaseGenerativeClient, BackendType
from .gemini_client import GeminiClient, DEFAULT_GEMINI_MODEL, extract_candidate_text
from .client import create_client
from .prompts import build_enrichment_prompt

__all__ = [
    "BaseGenerativeClient",
    "BackendType",
    "GeminiClient",
    "DEFAULT_GEMINI_MODEL",
    "extract_candidate_text",
    "create_client",
    "build_enrichment_prompt",
]
