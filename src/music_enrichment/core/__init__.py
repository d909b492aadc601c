# ============================================================================
# src/music_enrichment/core/__init__.py
# ============================================================================
"""
Core pipeline components

- RawRecord / EnrichedRecord: record models
- load_records: input batch loading
- Pacer implementations: request pacing
- BatchOrchestrator: ordered, failure-isolated enrichment
- run_pipeline: enrichment followed by publishing
"""

from .models import RawRecord, EnrichedRecord
from .loader import load_records
from .pacing import Pacer, NoDelayPacer, FixedDelayPacer, MinIntervalPacer
from .orchestrator import BatchOrchestrator
from .pipeline import PipelineResult, check_credentials, run_pipeline

__all__ = [
    "RawRecord",
    "EnrichedRecord",
    "load_records",
    "Pacer",
    "NoDelayPacer",
    "FixedDelayPacer",
    "MinIntervalPacer",
    "BatchOrchestrator",
    "PipelineResult",
    "check_credentials",
    "run_pipeline",
]
