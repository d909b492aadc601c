# ============================================================================
# src/music_enrichment/indexing/base.py
# ============================================================================
"""
Base Index Backend Interface

Three calls are all the publisher needs:
- set_settings(): apply index configuration
- save_objects(): batch upsert, returns the raw acknowledgment
- get_task_status(): "published" once a write is durable
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


TASK_PUBLISHED = "published"
TASK_NOT_PUBLISHED = "notPublished"


class BaseIndexBackend(ABC):
    """Abstract search index backend."""

    @abstractmethod
    async def set_settings(self, index_name: str, settings: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply index settings.

        Raises:
            IndexBackendError: on transport or HTTP failure
        """
        pass

    @abstractmethod
    async def save_objects(self, index_name: str, objects: List[Dict[str, Any]]) -> Any:
        """
        Upsert objects in one batch. Returns the backend acknowledgment
        untouched (normally a dict holding 'taskID').

        Raises:
            IndexBackendError: on transport or HTTP failure
        """
        pass

    @abstractmethod
    async def get_task_status(self, index_name: str, task_id: Any) -> str:
        """
        Return the task status ('published' or 'notPublished').

        Raises:
            IndexBackendError: on transport or HTTP failure
        """
        pass

    async def close(self) -> None:
        """Release resources held by the backend."""
        return None
