# ============================================================================
# src/music_enrichment/enrichers/music_enricher.py
# ============================================================================
"""
Music Work Enricher

Sends one prompt per work to the generative backend and parses the reply.
Backend and parsing failures are absorbed here: the caller always gets an
EnrichmentOutcome, degraded to the fallback value when anything went wrong.
"""

import logging
from typing import Any, Dict, Optional

from .base import BaseEnricher, EnrichmentOutcome
from .parsing import extract_metadata
from ..gemini.base import BaseGenerativeClient
from ..gemini.prompts import build_enrichment_prompt
from ..utils.exceptions import EnrichmentError, ExtractionError
from ..utils.logging import record_logger


class MusicEnricher(BaseEnricher):
    """
    Enriches musical works with Gemini-generated metadata.

    Config options:
        repair_json: Run json_repair on malformed JSON (default: False)
        max_tokens: Override client max tokens
        temperature: Override client temperature
    """

    def __init__(self, client: BaseGenerativeClient, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.client = client
        self.repair_json = bool(self.config.get('repair_json', False))
        self.logger = logging.getLogger(__name__)

    @property
    def enricher_type(self) -> str:
        return self.client.backend_type.value

    async def enrich(self, record: Any) -> EnrichmentOutcome:
        log = record_logger(self.logger, record.objectID, record.title)
        log.info(f"Sending content for enrichment (ID: {record.objectID}, Title: \"{record.title}\")...")

        try:
            response = await self.client.generate(
                build_enrichment_prompt(record),
                max_tokens=self.config.get('max_tokens'),
                temperature=self.config.get('temperature'),
            )
            result = extract_metadata(response["text"], repair=self.repair_json)
        except (EnrichmentError, ExtractionError) as e:
            reason = f"{type(e).__name__}: {e}"
            log.error(f"Error enriching work '{record.title}' (ID: {record.objectID}): {reason}")
            return EnrichmentOutcome.degraded(reason)
        except (KeyError, TypeError) as e:
            # Client returned a malformed result dict
            reason = f"EnrichmentError: malformed client response ({e})"
            log.error(f"Error enriching work '{record.title}' (ID: {record.objectID}): {reason}")
            return EnrichmentOutcome.degraded(reason)

        log.info(f"Enrichment successful for ID: {record.objectID}")
        return EnrichmentOutcome.ok(result)
