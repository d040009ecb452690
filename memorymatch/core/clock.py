from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from memorymatch.core.scheduler import Scheduler, TimerHandle

TICK_MS = 1000


def format_time(seconds: int) -> str:
    """Format whole seconds as ``MM:SS``. Minutes are not capped."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"


class SessionClock:
    """Per-level elapsed seconds, advanced by one on every tick while running."""

    def __init__(
        self,
        scheduler: "Scheduler",
        on_tick: Optional[Callable[[int], None]] = None,
        tick_ms: int = TICK_MS,
    ) -> None:
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._tick_ms = tick_ms
        self._elapsed = 0
        self._running = False
        self._generation = 0
        self._handle: Optional["TimerHandle"] = None

    @property
    def elapsed(self) -> int:
        return self._elapsed

    @property
    def running(self) -> bool:
        return self._running

    @property
    def formatted(self) -> str:
        return format_time(self._elapsed)

    def start(self) -> None:
        """Reset to zero and start counting. A running clock is stopped first."""
        self.stop()
        self._elapsed = 0
        self._running = True
        self._generation += 1
        self._arm()

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.stop()
            self._handle = None
        self._running = False

    def _arm(self) -> None:
        generation = self._generation
        self._handle = self._scheduler.call_later(self._tick_ms, lambda: self._tick(generation))

    def _tick(self, generation: int) -> None:
        if not self._running or generation != self._generation:
            return
        self._elapsed += 1
        self._arm()
        if self._on_tick is not None:
            self._on_tick(self._elapsed)
