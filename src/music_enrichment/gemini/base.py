# ============================================================================
# src/music_enrichment/gemini/base.py
# ============================================================================
"""
Base Generative Client Interface

Defines the abstract interface that all text-generation backends implement.
Supported backends:
- gemini: Google Generative Language API (generateContent)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
from enum import Enum
import logging


class BackendType(Enum):
    """Supported inference backends."""
    GEMINI = "gemini"


class BaseGenerativeClient(ABC):
    """
    Abstract base class for generative model clients.

    All backends must implement:
    - generate(): Async text generation, raising EnrichmentError on any
      transport failure or unusable response
    - close(): Release network resources
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

        # Common statistics
        self._inference_count = 0
        self._failure_count = 0
        self._total_inference_time = 0.0

    @property
    @abstractmethod
    def backend_type(self) -> BackendType:
        """Return the backend type."""
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier."""
        pass

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Generate response from prompt.

        Args:
            prompt: Input text prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature

        Returns:
            {
                "text": str,              # Generated text (never empty)
                "prompt_tokens": int,     # Input token count
                "generated_tokens": int,  # Output token count
                "model": str,             # Model identifier
                "backend": str,           # Backend type
                "inference_time": float,  # Seconds
            }

        Raises:
            EnrichmentError: transport error, timeout, HTTP error, or a
                response without usable text
        """
        pass

    async def close(self) -> None:
        """Release resources held by the client."""
        return None

    def get_statistics(self) -> Dict[str, Any]:
        """Get inference statistics."""
        avg_time = (
            self._total_inference_time / self._inference_count
            if self._inference_count > 0
            else 0.0
        )

        return {
            "backend": self.backend_type.value,
            "model": self.model_name,
            "inference_count": self._inference_count,
            "failure_count": self._failure_count,
            "total_inference_time": self._total_inference_time,
            "average_inference_time": avg_time,
        }
