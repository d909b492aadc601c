# ============================================================================
# src/music_enrichment/gemini/gemini_client.py
# ============================================================================
"""
Gemini Client

Calls the Generative Language API generateContent endpoint over HTTP:

    POST {base_url}/models/{model}:generateContent
    header x-goog-api-key: <key>

Every way the call can go wrong (connection failure, timeout, non-200,
empty body, no candidates, safety block, no text part) surfaces as
EnrichmentError so callers only need to handle one exception type.
"""

import aiohttp
import asyncio
from typing import Dict, Any, Optional
from datetime import datetime

from .base import BaseGenerativeClient, BackendType
from ..utils.exceptions import EnrichmentError


DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def extract_candidate_text(data: Any) -> str:
    """
    Pull the first candidate's text out of a generateContent response.

    Raises:
        EnrichmentError: response empty, blocked, or missing content
    """
    if not data or not isinstance(data, dict):
        raise EnrichmentError("empty response")

    candidates = data.get("candidates") or []
    if not isinstance(candidates, list):
        raise EnrichmentError("malformed response: candidates is not a list")
    if not candidates:
        feedback = data.get("promptFeedback") or {}
        if not isinstance(feedback, dict):
            feedback = {}
        if feedback.get("blockReason") or feedback.get("safetyRatings"):
            reason = feedback.get("blockReason", "safety ratings only")
            raise EnrichmentError(f"response blocked by safety filter ({reason})")
        raise EnrichmentError("no candidates in response")

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        raise EnrichmentError("malformed response: candidate is not an object")

    content = candidate.get("content") or {}
    if not isinstance(content, dict):
        raise EnrichmentError("malformed response: content is not an object")
    parts = content.get("parts") or []
    if not isinstance(parts, list):
        raise EnrichmentError("malformed response: parts is not a list")
    if not parts:
        finish = candidate.get("finishReason")
        if finish == "SAFETY":
            raise EnrichmentError("response blocked by safety filter (SAFETY)")
        raise EnrichmentError("missing response content")

    if not isinstance(parts[0], dict):
        raise EnrichmentError("malformed response: part is not an object")
    text = parts[0].get("text")
    if text is not None and not isinstance(text, str):
        raise EnrichmentError("malformed response: text is not a string")
    if not text or not text.strip():
        raise EnrichmentError("empty response text")
    return text


class GeminiClient(BaseGenerativeClient):
    """
    Gemini inference client.

    Config options:
        api_key: API key (required)
        model: Model name (default: gemini-1.5-flash)
        base_url: API root (default: v1beta endpoint)
        max_tokens: Default max output tokens (default: 1024)
        temperature: Default temperature (default: None = model default)
        timeout: Request timeout in seconds (default: 60)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)

        self.api_key = self.config.get('api_key')
        if not self.api_key:
            raise ValueError("Gemini api_key is required")

        self._model_name = self.config.get('model') or DEFAULT_GEMINI_MODEL
        self.base_url = (self.config.get('base_url') or DEFAULT_BASE_URL).rstrip('/')

        # Generation defaults
        self.default_max_tokens = self.config.get('max_tokens', 1024)
        self.default_temperature = self.config.get('temperature')
        self.timeout = self.config.get('timeout', 60)

        # HTTP session (created lazily, tied to event loop)
        self._session: Optional[aiohttp.ClientSession] = None

        self.logger.info(f"Initialized Gemini client: {self._model_name}")

    @property
    def backend_type(self) -> BackendType:
        return BackendType.GEMINI

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self._model_name}:generateContent"

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={"x-goog-api-key": self.api_key},
            )
        return self._session

    async def close(self):
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def build_payload(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Request body for a single-turn text prompt."""
        generation_config: Dict[str, Any] = {
            "maxOutputTokens": max_tokens or self.default_max_tokens,
        }
        temperature = temperature if temperature is not None else self.default_temperature
        if temperature is not None:
            generation_config["temperature"] = temperature

        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }

    async def generate(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Generate response using Gemini.

        Returns:
            Response dict with text, tokens, timing info

        Raises:
            EnrichmentError: see module docstring
        """
        start_time = datetime.now()
        payload = self.build_payload(prompt, max_tokens, temperature)

        try:
            session = await self._get_session()
            async with session.post(self.endpoint, json=payload) as response:
                if response.status != 200:
                    error_text = await response.text()
                    raise EnrichmentError(
                        f"Gemini error ({response.status}): {error_text[:500]}"
                    )
                data = await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            self._failure_count += 1
            raise EnrichmentError(f"Gemini request timed out after {self.timeout}s") from e
        except aiohttp.ClientError as e:
            self._failure_count += 1
            raise EnrichmentError(f"Gemini request failed: {e}") from e
        except ValueError as e:
            # Body was not JSON
            self._failure_count += 1
            raise EnrichmentError(f"Gemini returned a non-JSON body: {e}") from e
        except EnrichmentError:
            self._failure_count += 1
            raise

        try:
            text = extract_candidate_text(data)
        except EnrichmentError:
            self._failure_count += 1
            self.logger.debug(f"Unexpected Gemini response structure: {data}")
            raise

        inference_time = (datetime.now() - start_time).total_seconds()
        usage = data.get("usageMetadata") or {}
        if not isinstance(usage, dict):
            usage = {}

        self._inference_count += 1
        self._total_inference_time += inference_time

        return {
            "text": text,
            "prompt_tokens": usage.get("promptTokenCount", 0),
            "generated_tokens": usage.get("candidatesTokenCount", 0),
            "model": self._model_name,
            "backend": self.backend_type.value,
            "inference_time": inference_time,
        }
