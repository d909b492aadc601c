# ============================================================================
# src/music_enrichment/core/pipeline.py
# ============================================================================
"""
Enrichment-and-indexing pipeline

    input file -> BatchOrchestrator -> IndexPublisher -> confirmed index

An empty enrichment result (empty file or unloadable batch) means there is
nothing to index: the publisher is not called at all.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from .models import EnrichedRecord
from .orchestrator import BatchOrchestrator
from ..indexing.publisher import IndexPublisher
from ..indexing.task import IndexingTask
from ..utils.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """What a pipeline run produced."""
    index_name: str
    enriched: List[EnrichedRecord] = field(default_factory=list)
    task: Optional[IndexingTask] = None

    @property
    def nothing_to_index(self) -> bool:
        return not self.enriched

    @property
    def degraded_count(self) -> int:
        return sum(1 for record in self.enriched if record.degraded)


def check_credentials(gemini_settings: Any, algolia_settings: Any) -> None:
    """
    Fail fast when a backend credential is missing.

    Raises:
        ConfigurationError: naming every missing variable
    """
    required = {
        "GEMINI_API_KEY": gemini_settings.GEMINI_API_KEY,
        "ALGOLIA_APP_ID": algolia_settings.ALGOLIA_APP_ID,
        "ALGOLIA_ADMIN_API_KEY": algolia_settings.ALGOLIA_ADMIN_API_KEY,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ConfigurationError(
            f"{', '.join(missing)} not set in the environment or .env file"
        )


async def run_pipeline(
    input_path: Union[str, Path],
    index_name: str,
    searchable_attributes: Sequence[str],
    orchestrator: BatchOrchestrator,
    publisher: IndexPublisher,
) -> PipelineResult:
    """
    Enrich the batch at input_path and publish it.

    Returns:
        PipelineResult; task is None when there was nothing to index

    Raises:
        IndexingError: any indexing step failed (batch not durable)
    """
    logger.info(f"Starting data enrichment and indexing to index: {index_name}")

    enriched = await orchestrator.run_file(input_path)
    result = PipelineResult(index_name=index_name, enriched=enriched)

    if result.nothing_to_index:
        logger.warning("No music works were enriched. Nothing to index.")
        return result

    logger.info(
        f"Successfully enriched {len(enriched)} music works "
        f"({result.degraded_count} with fallback metadata). Now indexing..."
    )
    result.task = await publisher.publish(index_name, searchable_attributes, enriched)
    return result
