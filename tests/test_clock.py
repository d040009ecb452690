"""Tests for memorymatch.core.clock – session clock and time formatting."""

from __future__ import annotations

import pytest

from memorymatch.core.clock import SessionClock, format_time


class TestFormatTime:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "00:00"), (5, "00:05"), (60, "01:00"), (75, "01:15"), (3599, "59:59"), (7500, "125:00")],
    )
    def test_format(self, seconds: int, expected: str):
        assert format_time(seconds) == expected

    def test_negative_clamped(self):
        assert format_time(-3) == "00:00"


class TestSessionClock:
    def test_counts_seconds(self, scheduler):
        ticks = []
        clock = SessionClock(scheduler, on_tick=ticks.append)
        clock.start()
        scheduler.advance(3000)
        assert clock.elapsed == 3
        assert ticks == [1, 2, 3]
        assert clock.formatted == "00:03"

    def test_no_tick_before_a_second(self, scheduler):
        clock = SessionClock(scheduler)
        clock.start()
        scheduler.advance(999)
        assert clock.elapsed == 0

    def test_stop_freezes(self, scheduler):
        clock = SessionClock(scheduler)
        clock.start()
        scheduler.advance(2000)
        clock.stop()
        scheduler.advance(5000)
        assert clock.elapsed == 2
        assert not clock.running
        assert scheduler.pending == 0

    def test_restart_resets_without_overlap(self, scheduler):
        clock = SessionClock(scheduler)
        clock.start()
        scheduler.advance(2500)
        clock.start()
        assert clock.elapsed == 0
        scheduler.advance(1000)
        assert clock.elapsed == 1
        assert scheduler.pending == 1

    def test_stale_tick_ignored(self):
        class LeakyTimer:
            def stop(self) -> None:
                pass

        fired = []

        class LeakyScheduler:
            def call_later(self, delay_ms, callback):
                fired.append(callback)
                return LeakyTimer()

        clock = SessionClock(LeakyScheduler())
        clock.start()
        stale = fired[-1]
        clock.start()
        stale()
        assert clock.elapsed == 0
        fired[-1]()
        assert clock.elapsed == 1
