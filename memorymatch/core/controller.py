from __future__ import annotations

import itertools
import logging
import random
from datetime import datetime
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from memorymatch.core.board import Board
from memorymatch.core.clock import SessionClock
from memorymatch.core.deck import generate_deck
from memorymatch.core.leaderboard import LEADERBOARD_CAPACITY, LeaderboardStore, ScoreEntry, rank_scores
from memorymatch.core.levels import LevelRepository
from memorymatch.core.resolver import Evaluation, MatchResolver
from memorymatch.core.scheduler import QtScheduler, Scheduler
from memorymatch.core.session import GameSession

logger = logging.getLogger(__name__)


class GameController(QObject):
    """Drives the level lifecycle and publishes state changes as Qt signals.

    The controller never advances levels on its own: after
    ``level_completed`` the caller reads :attr:`next_level_index` and calls
    :meth:`start_level` (or :meth:`start_next_level`) when ready.
    """

    level_started = Signal(int)
    tile_flipped = Signal(str)
    pair_matched = Signal(str, str)
    pair_mismatched = Signal(str, str)
    level_completed = Signal(bool)
    clock_tick = Signal(int)
    leaderboard_updated = Signal(object)
    leaderboard_save_failed = Signal(str)

    def __init__(
        self,
        levels: LevelRepository,
        store: Optional[LeaderboardStore] = None,
        scheduler: Optional[Scheduler] = None,
        resolver: Optional[MatchResolver] = None,
        rng: Optional[random.Random] = None,
        clock_factory: Callable[[], datetime] = datetime.now,
        capacity: int = LEADERBOARD_CAPACITY,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._levels = levels
        self._store = store
        self._scheduler = scheduler or QtScheduler(self)
        self._resolver = resolver or MatchResolver()
        self._rng = rng or random.Random()
        self._now = clock_factory
        self._capacity = capacity
        self._clock = SessionClock(self._scheduler, on_tick=self._on_clock_tick)
        self._session_ids = itertools.count(1)
        self._session: Optional[GameSession] = None
        self._leaderboard: List[ScoreEntry] = []
        self._unsaved = False
        self._last_score: Optional[ScoreEntry] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    @property
    def clock(self) -> SessionClock:
        return self._clock

    @property
    def levels(self) -> LevelRepository:
        return self._levels

    @property
    def leaderboard(self) -> List[ScoreEntry]:
        return list(self._leaderboard)

    @property
    def last_score(self) -> Optional[ScoreEntry]:
        return self._last_score

    @property
    def is_final_level(self) -> bool:
        return self._session is not None and self._levels.is_final(self._session.level.index)

    @property
    def next_level_index(self) -> int:
        if self._session is None:
            return self._levels.first.index
        return self._levels.next_index(self._session.level.index)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_level(self, index: int) -> GameSession:
        """Discard any current session and start a fresh one at ``index``."""
        self._clock.stop()
        level = self._levels.get(index)
        board = Board(generate_deck(level.pair_count, self._rng))
        self._session = GameSession(session_id=next(self._session_ids), level=level, board=board)
        self._clock.start()
        logger.info("Started level %d (%d pairs)", level.index, level.pair_count)
        self.level_started.emit(level.index)
        return self._session

    def restart(self) -> GameSession:
        index = self._session.level.index if self._session else self._levels.first.index
        return self.start_level(index)

    def start_next_level(self) -> GameSession:
        return self.start_level(self.next_level_index)

    def load_leaderboard(self) -> List[ScoreEntry]:
        """Refresh the in-memory leaderboard from the store, e.g. for display at startup."""
        if self._store is not None and not self._unsaved:
            self._leaderboard = rank_scores(self._store.load(), capacity=self._capacity)
        return self.leaderboard

    def select_tile(self, tile_id: str) -> bool:
        """Handle player input. Returns False when the selection was ignored."""
        session = self._session
        if session is None:
            return False
        selection = self._resolver.select(session, tile_id)
        if selection is None:
            return False
        self.tile_flipped.emit(selection.tile.id)
        evaluation = selection.evaluation
        if evaluation is not None:
            self._scheduler.call_later(evaluation.delay_ms, lambda: self._on_evaluation_due(evaluation))
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_evaluation_due(self, evaluation: Evaluation) -> None:
        session = self._session
        if session is None or not self._resolver.resolve(session, evaluation):
            return
        first_id, second_id = evaluation.first.id, evaluation.second.id
        if not evaluation.is_match:
            self.pair_mismatched.emit(first_id, second_id)
            return
        self.pair_matched.emit(first_id, second_id)
        if session.all_pairs_found() and not session.completed:
            self._complete_level(session)

    def _complete_level(self, session: GameSession) -> None:
        session.completed = True
        self._clock.stop()
        session.elapsed_seconds = self._clock.elapsed
        entry = ScoreEntry.create(
            level=session.level.index,
            moves=session.moves,
            elapsed_seconds=session.elapsed_seconds,
            when=self._now(),
        )
        self._last_score = entry
        self._record_score(entry)
        is_final = self._levels.is_final(session.level.index)
        logger.info(
            "Completed level %d in %d moves and %s",
            session.level.index,
            session.moves,
            session.formatted_time,
        )
        self.level_completed.emit(is_final)

    def _record_score(self, entry: ScoreEntry) -> None:
        # After a failed save the file is behind memory; keep building on memory.
        if self._store is None or self._unsaved:
            existing = self._leaderboard
        else:
            existing = self._store.load()
        self._leaderboard = rank_scores(existing, entry, capacity=self._capacity)
        self.leaderboard_updated.emit(self.leaderboard)
        if self._store is None:
            return
        self._unsaved = not self._store.save(self._leaderboard)
        if self._unsaved:
            self.leaderboard_save_failed.emit(str(self._store.file_path))

    def _on_clock_tick(self, seconds: int) -> None:
        if self._session is not None:
            self._session.elapsed_seconds = seconds
        self.clock_tick.emit(seconds)

