"""One-shot deferred callbacks used for countdown ticks and feedback delays.

Architecture note:
    The game core never touches a toolkit timer directly. It asks a
    :class:`Scheduler` to run a callback after a delay and keeps the returned
    handle so the callback can be cancelled when a round ends early. The Qt
    application plugs in ``whiz_app.ui.qt_scheduler.QtScheduler``; tests and
    headless callers use :class:`VirtualScheduler`, whose clock only moves when
    :meth:`VirtualScheduler.advance` is called.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol


class ScheduledCall(Protocol):
    """Handle for a pending callback."""

    def cancel(self) -> None:
        ...

    def is_active(self) -> bool:
        ...


class Scheduler(Protocol):
    """Runs callbacks once after a delay on the caller's event loop."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledCall:
        ...


@dataclass(slots=True)
class VirtualCall:
    """Pending callback on a :class:`VirtualScheduler`."""

    due_at: float
    sequence: int
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    def is_active(self) -> bool:
        return not (self.cancelled or self.fired)


@dataclass(slots=True)
class VirtualScheduler:
    """Deterministic scheduler driven by explicit time advances."""

    now: float = 0.0
    _pending: list[VirtualCall] = field(default_factory=list, init=False, repr=False)
    _sequence: int = field(default=0, init=False, repr=False)

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> VirtualCall:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be non-negative")
        self._sequence += 1
        call = VirtualCall(due_at=self.now + delay_seconds, sequence=self._sequence, callback=callback)
        self._pending.append(call)
        return call

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due callbacks in time order.

        Callbacks scheduled while advancing run too if they fall due inside
        the same window.
        """
        if seconds < 0:
            raise ValueError("seconds must be non-negative")
        deadline = self.now + seconds
        while True:
            due = [call for call in self._pending if call.is_active() and call.due_at <= deadline]
            if not due:
                break
            call = min(due, key=lambda c: (c.due_at, c.sequence))
            self.now = max(self.now, call.due_at)
            call.fired = True
            call.callback()
        self.now = deadline
        self._pending = [call for call in self._pending if call.is_active()]

    def pending_count(self) -> int:
        return sum(1 for call in self._pending if call.is_active())
