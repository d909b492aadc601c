# ============================================================================
# src/music_enrichment/core/pacing.py
# ============================================================================
"""
Request pacing

Backends (Gemini, MusicBrainz) enforce per-caller rate limits. Callers await
a Pacer between requests; tests inject NoDelayPacer.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Callable, Optional


class Pacer(ABC):
    """Decides how long to pause between two consecutive requests."""

    @abstractmethod
    async def wait(self) -> None:
        """Pause before the next request."""
        pass


class NoDelayPacer(Pacer):
    """Never pauses."""

    async def wait(self) -> None:
        return None


class FixedDelayPacer(Pacer):
    """Sleeps a fixed amount every time."""

    def __init__(self, delay: float, sleep: Optional[Callable] = None):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.delay = delay
        self._sleep = sleep or asyncio.sleep

    async def wait(self) -> None:
        if self.delay > 0:
            await self._sleep(self.delay)


class MinIntervalPacer(Pacer):
    """
    Keeps at least min_interval seconds between request starts.

    Only the remaining part of the interval is slept, so slow requests
    are not penalised twice.
    """

    def __init__(
        self,
        min_interval: float,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable] = None,
    ):
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep or asyncio.sleep
        self._last: Optional[float] = None
        self._lock = asyncio.Lock()

    def _now(self) -> float:
        if self._clock is not None:
            return self._clock()
        return asyncio.get_running_loop().time()

    async def wait(self) -> None:
        async with self._lock:
            if self._last is not None:
                remaining = self.min_interval - (self._now() - self._last)
                if remaining > 0:
                    await self._sleep(remaining)
            self._last = self._now()
