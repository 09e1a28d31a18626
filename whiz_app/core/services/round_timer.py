"""Per-round countdown built on a :class:`Scheduler`."""

from __future__ import annotations

from typing import Callable

from whiz_app.constants.game_constants import ROUND_TIME_SECONDS
from whiz_app.core.services.scheduler import ScheduledCall, Scheduler


class RoundTimer:
    """Counts down once per second and fires ``on_expire`` exactly once at zero."""

    def __init__(
        self,
        scheduler: Scheduler,
        on_expire: Callable[[], None],
        on_tick: Callable[[int], None] | None = None,
        duration_seconds: int = ROUND_TIME_SECONDS,
    ) -> None:
        self._scheduler = scheduler
        self._on_expire = on_expire
        self._on_tick = on_tick
        self._duration_seconds = duration_seconds
        self._remaining_seconds: int = 0
        self._pending: ScheduledCall | None = None

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    def is_running(self) -> bool:
        return self._pending is not None

    def start(self) -> None:
        """(Re)start the countdown from the full duration."""
        self.cancel()
        self._remaining_seconds = self._duration_seconds
        self._schedule_tick()

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _schedule_tick(self) -> None:
        self._pending = self._scheduler.call_later(1.0, self._tick)

    def _tick(self) -> None:
        if self._pending is None:
            return
        self._remaining_seconds = max(0, self._remaining_seconds - 1)
        if self._remaining_seconds > 0:
            self._schedule_tick()
        else:
            self._pending = None
        if self._on_tick is not None:
            self._on_tick(self._remaining_seconds)
        if self._remaining_seconds == 0:
            self._on_expire()
