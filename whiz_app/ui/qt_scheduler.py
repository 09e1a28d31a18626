"""QTimer-backed scheduler for the game core."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtScheduledCall:
    """Single-shot QTimer that can be cancelled before it fires."""

    def __init__(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._timer = timer
        self._callback = callback
        self._done = False
        timer.timeout.connect(self._fire)

    def cancel(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.stop()
        self._timer.deleteLater()

    def is_active(self) -> bool:
        return not self._done

    def _fire(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.deleteLater()
        self._callback()


class QtScheduler:
    """Schedules callbacks on the Qt event loop that delivers player input."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> QtScheduledCall:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(int(delay_seconds * 1000))
        call = QtScheduledCall(timer, callback)
        timer.start()
        return call
