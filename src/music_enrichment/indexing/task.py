# ============================================================================
# src/music_enrichment/indexing/task.py
# ============================================================================
"""
Indexing Task

The index backend applies writes asynchronously and hands back a task id.
IndexingTask tracks that write through a small state machine:

    SUBMITTED --confirm()--> CONFIRMED
    SUBMITTED --fail()-----> FAILED

TaskPollingPolicy bounds how long and how often the task is polled.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional


class TaskState(Enum):
    """Lifecycle of an indexing task."""
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class InvalidTaskTransition(RuntimeError):
    """Attempt to move a task out of a terminal state."""
    pass


@dataclass
class IndexingTask:
    """Handle for one in-flight write. Single use, never persisted."""
    index_name: str
    task_id: Any
    state: TaskState = TaskState.SUBMITTED
    failure_reason: Optional[str] = None
    polls: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.state is not TaskState.SUBMITTED

    def confirm(self) -> None:
        self._require_submitted(TaskState.CONFIRMED)
        self.state = TaskState.CONFIRMED

    def fail(self, reason: str) -> None:
        self._require_submitted(TaskState.FAILED)
        self.state = TaskState.FAILED
        self.failure_reason = reason

    def _require_submitted(self, target: TaskState) -> None:
        if self.state is not TaskState.SUBMITTED:
            raise InvalidTaskTransition(
                f"Task {self.task_id} cannot go from {self.state.value} to {target.value}"
            )


@dataclass(frozen=True)
class TaskPollingPolicy:
    """
    Exponential backoff bounded by max_delay, abandoned after timeout
    seconds of cumulative waiting.
    """
    initial_delay: float = 0.5
    max_delay: float = 5.0
    multiplier: float = 1.5
    timeout: float = 300.0

    def __post_init__(self):
        if self.initial_delay <= 0 or self.max_delay <= 0 or self.timeout <= 0:
            raise ValueError("polling delays and timeout must be > 0")
        if self.multiplier < 1.0:
            raise ValueError("multiplier must be >= 1.0")

    def delays(self) -> Iterator[float]:
        """Successive sleep durations; their sum never exceeds timeout."""
        waited = 0.0
        delay = min(self.initial_delay, self.max_delay)
        while waited < self.timeout:
            step = min(delay, self.timeout - waited)
            yield step
            waited += step
            delay = min(delay * self.multiplier, self.max_delay)

    @classmethod
    def from_settings(cls, settings: Any) -> "TaskPollingPolicy":
        return cls(
            initial_delay=settings.TASK_POLL_INITIAL_DELAY,
            max_delay=settings.TASK_POLL_MAX_DELAY,
            multiplier=settings.TASK_POLL_MULTIPLIER,
            timeout=settings.TASK_POLL_TIMEOUT,
        )
