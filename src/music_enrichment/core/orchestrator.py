# ============================================================================
# src/music_enrichment/core/orchestrator.py
# ============================================================================
"""
Batch Orchestrator

Drives an enricher over an ordered batch of works:

    for each record, in order:
        outcome = await enricher.enrich(record)
        append EnrichedRecord(record, outcome)
        await pacer.wait()          # between records only

The output always has one entry per input, in input order. Per-record
failures never abort the batch; they show up as degraded outcomes.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .loader import load_records
from .models import EnrichedRecord, RawRecord
from .pacing import NoDelayPacer, Pacer
from ..enrichers.base import BaseEnricher
from ..utils.exceptions import BatchLoadError
from ..utils.metrics import MetricsCollector, Timer


class BatchOrchestrator:
    """Sequential enrichment of a finite batch."""

    def __init__(
        self,
        enricher: BaseEnricher,
        pacer: Optional[Pacer] = None,
        metrics: Optional[MetricsCollector] = None,
    ):
        self.enricher = enricher
        self.pacer = pacer or NoDelayPacer()
        self.metrics = metrics or MetricsCollector()
        self.logger = logging.getLogger(__name__)

    async def run(self, records: Iterable[RawRecord]) -> List[EnrichedRecord]:
        """
        Enrich every record, preserving order.

        Args:
            records: Raw works

        Returns:
            One EnrichedRecord per input record, same order
        """
        records = list(records)
        self.logger.info("Starting AI enrichment process...")

        enriched: List[EnrichedRecord] = []
        for position, record in enumerate(records):
            with Timer(self.metrics, "enrichment"):
                outcome = await self.enricher.enrich(record)

            enriched.append(EnrichedRecord(record=record, outcome=outcome))
            self.metrics.increment("records_degraded" if outcome.is_degraded else "records_enriched")

            if position < len(records) - 1:
                await self.pacer.wait()

        self._log_summary(enriched)
        return enriched

    async def run_file(self, path: Union[str, Path]) -> List[EnrichedRecord]:
        """
        Load the batch from disk, then run().

        A batch that cannot be loaded yields [] (never a partial batch).
        """
        try:
            records = load_records(path)
        except BatchLoadError as e:
            self.logger.error(f"Error reading or parsing {path}: {e}")
            return []
        return await self.run(records)

    def _log_summary(self, enriched: List[EnrichedRecord]) -> None:
        total = len(enriched)
        degraded = sum(1 for item in enriched if item.degraded)
        timing = self.metrics.get_timer_stats("enrichment")
        elapsed = f" in {timing['total']:.1f}s" if timing else ""
        self.logger.info(
            f"AI enrichment complete: {total} works processed{elapsed}, "
            f"{total - degraded} enriched, {degraded} fell back"
        )
