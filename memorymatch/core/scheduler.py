"""Fire-and-forget delayed callbacks."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, Set

from PySide6.QtCore import QObject, QTimer


class TimerHandle(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class QtTimerHandle:
    """Owns one single-shot ``QTimer``; the timer is deleted once it fires or is stopped."""

    def __init__(self, timer: QTimer, on_done: Callable[["QtTimerHandle"], None]) -> None:
        self._timer: Optional[QTimer] = timer
        self._on_done = on_done

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.stop()
        self._release()

    def _release(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.deleteLater()
        self._on_done(self)


class QtScheduler:
    """Schedules single-shot callbacks on the Qt event loop.

    Handles are kept here until they fire or are stopped, so timers without
    a parent are not garbage collected early.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent
        self._pending: Set[QtTimerHandle] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = QtTimerHandle(timer, self._pending.discard)

        def _fire() -> None:
            try:
                callback()
            finally:
                handle._release()

        timer.timeout.connect(_fire)
        self._pending.add(handle)
        timer.start(delay_ms)
        return handle
