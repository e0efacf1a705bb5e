"""Deferred-call schedulers for simulated response latency.

Hides how "later" is implemented:
- AsyncioScheduler defers onto the running event loop (the TUI's loop)
- ManualScheduler keeps a virtual clock that tests advance explicitly
"""

import asyncio
import heapq
import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class ScheduledCall(ABC):
    """Handle for a deferred callback."""

    @abstractmethod
    def cancel(self) -> bool:
        """Cancel the call. Returns True if it had not run yet."""

    @property
    @abstractmethod
    def done(self) -> bool:
        """True once the call has run or been cancelled."""


class Scheduler(ABC):
    """Runs callbacks after a delay."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], Any]) -> ScheduledCall:
        """Schedule `callback` to run after `delay` seconds."""

    @property
    @abstractmethod
    def scheduler_type(self) -> str:
        """Get the scheduler type identifier."""


class _AsyncioCall(ScheduledCall):
    def __init__(self) -> None:
        self._handle: asyncio.TimerHandle | None = None
        self._finished = False

    def _run(self, callback: Callable[[], Any]) -> None:
        self._finished = True
        callback()

    def cancel(self) -> bool:
        if self._finished or self._handle is None:
            return False
        self._handle.cancel()
        self._finished = True
        return True

    @property
    def done(self) -> bool:
        return self._finished


class AsyncioScheduler(Scheduler):
    """Scheduler backed by `loop.call_later`.

    Must be used from code running on the event loop, as Textual handlers do.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], Any]) -> ScheduledCall:
        loop = self._loop or asyncio.get_running_loop()
        call = _AsyncioCall()
        call._handle = loop.call_later(delay, call._run, callback)
        return call

    @property
    def scheduler_type(self) -> str:
        return "asyncio"


class _ManualCall(ScheduledCall):
    def __init__(self, due: float, callback: Callable[[], Any]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.ran = False

    def cancel(self) -> bool:
        if self.ran or self.cancelled:
            return False
        self.cancelled = True
        return True

    @property
    def done(self) -> bool:
        return self.ran or self.cancelled


class ManualScheduler(Scheduler):
    """Virtual-clock scheduler for tests and synchronous front ends.

    Nothing runs until `advance()` (or `run_all()`) moves the clock past a
    call's due time. Calls due at the same time run in scheduling order.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[tuple[float, int, _ManualCall]] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, call in self._queue if not call.done)

    def call_later(self, delay: float, callback: Callable[[], Any]) -> ScheduledCall:
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        call = _ManualCall(self._now + delay, callback)
        heapq.heappush(self._queue, (call.due, next(self._counter), call))
        return call

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run every call that became due.

        Args:
            seconds: Amount of virtual time to advance

        Returns:
            Number of callbacks that ran
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds})")
        target = self._now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, call = heapq.heappop(self._queue)
            self._now = due
            if call.cancelled:
                continue
            call.ran = True
            call.callback()
            ran += 1
        self._now = target
        return ran

    def run_all(self) -> int:
        """Run every outstanding call regardless of due time."""
        ran = 0
        while self._queue:
            latest = max(due for due, _, _ in self._queue)
            ran += self.advance(max(latest - self._now, 0.0))
        return ran

    @property
    def scheduler_type(self) -> str:
        return "manual"


def create_scheduler(scheduler: str = "asyncio", **kwargs: Any) -> Scheduler:
    """Create a scheduler.

    Args:
        scheduler: Scheduler type ("asyncio" or "manual")
        **kwargs: Scheduler-specific configuration
            - loop: asyncio event loop (asyncio only)

    Returns:
        Scheduler instance

    Raises:
        ValueError: If scheduler type is not supported
    """
    if scheduler == "asyncio":
        return AsyncioScheduler(**kwargs)

    elif scheduler == "manual":
        return ManualScheduler(**kwargs)

    raise ValueError(
        f"Unsupported scheduler: {scheduler}. "
        f"Supported schedulers: asyncio, manual"
    )
