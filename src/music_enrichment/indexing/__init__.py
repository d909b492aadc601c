# ============================================================================
# src/music_enrichment/indexing/__init__.py
# ============================================================================
"""
Indexing Package

- IndexPublisher: configure -> batch write -> wait for confirmation
- IndexingTask / TaskPollingPolicy: task state machine and polling bounds
- AlgoliaIndexBackend: REST backend
"""

from .base import BaseIndexBackend, TASK_PUBLISHED, TASK_NOT_PUBLISHED
from .task import IndexingTask, TaskState, TaskPollingPolicy, InvalidTaskTransition
from .publisher import IndexPublisher, extract_task_id
from .algolia_client import AlgoliaIndexBackend

__all__ = [
    "BaseIndexBackend",
    "TASK_PUBLISHED",
    "TASK_NOT_PUBLISHED",
    "IndexingTask",
    "TaskState",
    "TaskPollingPolicy",
    "InvalidTaskTransition",
    "IndexPublisher",
    "extract_task_id",
    "AlgoliaIndexBackend",
]
