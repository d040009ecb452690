"""Shared fixtures: a Qt core application and a deterministic scheduler."""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Tuple

import pytest
from PySide6.QtCore import QCoreApplication

from memorymatch.core.levels import LevelRepository


class FakeTimer:
    def __init__(self) -> None:
        self.active = True

    def stop(self) -> None:
        self.active = False


class FakeScheduler:
    """Virtual-time scheduler. ``advance(ms)`` fires due callbacks in order."""

    def __init__(self) -> None:
        self.now = 0
        self._seq = itertools.count()
        self._queue: List[Tuple[int, int, FakeTimer, Callable[[], None]]] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer()
        heapq.heappush(self._queue, (self.now + delay_ms, next(self._seq), timer, callback))
        return timer

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, timer, callback = heapq.heappop(self._queue)
            self.now = due
            if timer.active:
                timer.active = False
                callback()
        self.now = target

    @property
    def pending(self) -> int:
        return sum(1 for _, _, timer, _ in self._queue if timer.active)


@pytest.fixture(scope="session", autouse=True)
def qt_core_app() -> QCoreApplication:
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def levels() -> LevelRepository:
    """The levels shipped with the package."""
    return LevelRepository()
