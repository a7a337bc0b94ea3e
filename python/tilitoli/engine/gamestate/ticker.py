"""Cancellable recurring tasks that drive the game clock.

The engine never reads the wall clock.  It asks a :class:`Scheduler` to call
it back every so often and keeps the returned :class:`TickHandle` so the task
can be cancelled.  Frontends supply a scheduler tied to their own event loop.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def every(self, interval: float, callback: Callable[[], None]) -> TickHandle:
        """Call *callback* every *interval* seconds until cancelled."""
        ...


class _ManualTask:
    __slots__ = ("interval", "callback", "due", "cancelled", "_owner")

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        due: float,
        owner: ManualScheduler,
    ) -> None:
        self.interval = interval
        self.callback = callback
        self.due = due
        self.cancelled = False
        self._owner = owner

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        self._owner._discard(self)


class ManualScheduler:
    """A scheduler whose time only moves when :meth:`advance` is called.

    Tests advance it directly; the terminal frontend advances it by the
    ``time.monotonic()`` delta between key polls.
    """

    def __init__(self) -> None:
        self.now: float = 0.0
        self._tasks: list[_ManualTask] = []

    def every(self, interval: float, callback: Callable[[], None]) -> _ManualTask:
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}.")
        task = _ManualTask(interval, callback, self.now + interval, self)
        self._tasks.append(task)
        return task

    @property
    def active(self) -> int:
        """Number of tasks that have not been cancelled."""
        return len(self._tasks)

    def _discard(self, task: _ManualTask) -> None:
        # Cancelled tasks must not keep their callback (and its session) alive.
        if task in self._tasks:
            self._tasks.remove(task)

    def advance(self, seconds: float) -> None:
        """Move time forward, firing every callback that falls due in order."""
        end = self.now + seconds
        while True:
            if not self._tasks:
                break
            task = min(self._tasks, key=lambda t: t.due)
            if task.due > end:
                break
            self.now = task.due
            task.due += task.interval
            task.callback()
        self.now = end
