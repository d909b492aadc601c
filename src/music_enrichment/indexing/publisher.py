# ============================================================================
# src/music_enrichment/indexing/publisher.py
# ============================================================================
"""
Index Publisher

publish() is all-or-nothing from the caller's point of view. It returns
only once the backend has confirmed the write as durable; every other ending
raises an IndexingError subclass naming the step and the index:

    1. configure  -> IndexConfigError   (nothing written)
    2. write      -> IndexWriteError    (call failed, or no task id)
    3. confirm    -> IndexTaskError     (status error or polling timeout)

No retries happen here.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from .base import BaseIndexBackend, TASK_PUBLISHED
from .task import IndexingTask, TaskPollingPolicy
from ..utils.exceptions import (
    IndexBackendError,
    IndexConfigError,
    IndexTaskError,
    IndexWriteError,
)


def extract_task_id(response: Any) -> Any:
    """
    Task id from a batch acknowledgment: {'taskID': ...} or a list of such
    acknowledgments (first one wins). None when absent.
    """
    if isinstance(response, list):
        response = response[0] if response else None
    if isinstance(response, dict):
        return response.get("taskID")
    return None


class IndexPublisher:
    """Configures an index, writes a batch and waits for confirmation."""

    def __init__(
        self,
        backend: BaseIndexBackend,
        polling_policy: Optional[TaskPollingPolicy] = None,
        sleep: Optional[Callable] = None,
    ):
        self.backend = backend
        self.polling_policy = polling_policy or TaskPollingPolicy()
        self._sleep = sleep or asyncio.sleep
        self.logger = logging.getLogger(__name__)

    async def publish(
        self,
        index_name: str,
        searchable_attributes: Sequence[str],
        records: Iterable[Any],
    ) -> IndexingTask:
        """
        Publish records and block until the write is confirmed.

        Args:
            index_name: Destination index
            searchable_attributes: Fields eligible for text search
            records: EnrichedRecord objects or plain dicts

        Returns:
            IndexingTask in CONFIRMED state

        Raises:
            IndexConfigError, IndexWriteError, IndexTaskError
        """
        objects = [self._to_object(r) for r in records]

        await self._configure(index_name, list(searchable_attributes))
        task = await self._write(index_name, objects)
        await self.wait_for_task(task)

        self.logger.info(
            f"Successfully indexed {len(objects)} music works to index: {index_name}",
            extra={"index_name": index_name, "task_id": task.task_id},
        )
        return task

    @staticmethod
    def _to_object(record: Any) -> Dict[str, Any]:
        if hasattr(record, "to_index_object"):
            return record.to_index_object()
        return dict(record)

    async def _configure(self, index_name: str, searchable_attributes: List[str]) -> None:
        self.logger.info(
            f"Configuring index '{index_name}' ({len(searchable_attributes)} searchable attributes)...",
            extra={"index_name": index_name},
        )
        try:
            await self.backend.set_settings(
                index_name, {"searchableAttributes": searchable_attributes}
            )
        except IndexBackendError as e:
            raise IndexConfigError(str(e), index_name) from e
        self.logger.info("Index settings updated successfully.", extra={"index_name": index_name})

    async def _write(self, index_name: str, objects: List[Dict[str, Any]]) -> IndexingTask:
        try:
            response = await self.backend.save_objects(index_name, objects)
        except IndexBackendError as e:
            raise IndexWriteError(str(e), index_name, raw_response=e.details) from e

        task_id = extract_task_id(response)
        if task_id is None:
            raise IndexWriteError("missing task id", index_name, raw_response=response)

        self.logger.info(
            f"Indexing task {task_id} submitted. Waiting for task to complete...",
            extra={"index_name": index_name, "task_id": task_id},
        )
        return IndexingTask(index_name=index_name, task_id=task_id)

    async def wait_for_task(self, task: IndexingTask) -> IndexingTask:
        """
        Poll until the task is published or the policy gives up.

        Raises:
            IndexTaskError: backend error while polling, or timeout
        """
        for delay in self.polling_policy.delays():
            await self._sleep(delay)
            task.polls += 1
            try:
                status = await self.backend.get_task_status(task.index_name, task.task_id)
            except IndexBackendError as e:
                task.fail(str(e))
                raise IndexTaskError(str(e), task.index_name, task_id=task.task_id) from e

            if status == TASK_PUBLISHED:
                task.confirm()
                return task
            self.logger.debug(f"Task {task.task_id} status: {status}")

        reason = (
            f"task {task.task_id} not published after "
            f"{self.polling_policy.timeout:.0f}s ({task.polls} polls)"
        )
        task.fail(reason)
        raise IndexTaskError(reason, task.index_name, task_id=task.task_id)
