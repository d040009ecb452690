from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from memorymatch.core.board import TileStatus
from memorymatch.core.deck import Tile
from memorymatch.core.session import GameSession

logger = logging.getLogger(__name__)

MATCH_DELAY_MS = 500
MISMATCH_DELAY_MS = 1000


class SelectionState(Enum):
    IDLE = "idle"
    ONE_SELECTED = "one_selected"
    EVALUATING = "evaluating"


@dataclass(frozen=True)
class Evaluation:
    """Two face-up tiles waiting for their delayed match or mismatch transition."""

    session_id: int
    first: Tile
    second: Tile
    delay_ms: int

    @property
    def is_match(self) -> bool:
        return self.first.value == self.second.value


@dataclass(frozen=True)
class Selection:
    tile: Tile
    evaluation: Optional[Evaluation] = None


class MatchResolver:
    """Two-slot selection buffer and the flip/match/mismatch state machine.

    :meth:`select` runs synchronously on player input. When it returns an
    :class:`Evaluation`, the caller schedules :meth:`resolve` after
    ``evaluation.delay_ms``. The board stays locked until then, so further
    selections are dropped rather than queued.
    """

    def __init__(self, match_delay_ms: int = MATCH_DELAY_MS, mismatch_delay_ms: int = MISMATCH_DELAY_MS) -> None:
        self._match_delay_ms = match_delay_ms
        self._mismatch_delay_ms = mismatch_delay_ms

    @staticmethod
    def state(session: GameSession) -> SelectionState:
        if session.locked or len(session.selection) >= 2:
            return SelectionState.EVALUATING
        if session.selection:
            return SelectionState.ONE_SELECTED
        return SelectionState.IDLE

    def select(self, session: GameSession, tile_id: str) -> Optional[Selection]:
        """Flip ``tile_id`` face-up. Returns None when the selection is ignored."""
        board = session.board
        if session.completed or self.state(session) is SelectionState.EVALUATING:
            logger.debug("Ignoring %s: board locked", tile_id)
            return None
        if tile_id not in board:
            logger.debug("Ignoring %s: not on this board", tile_id)
            return None
        if board.status(tile_id) is not TileStatus.FACE_DOWN:
            logger.debug("Ignoring %s: already %s", tile_id, board.status(tile_id).value)
            return None

        tile = board.tile(tile_id)
        board.flip_up(tile_id)
        session.selection.append(tile)
        if len(session.selection) < 2:
            return Selection(tile=tile)

        session.moves += 1
        session.locked = True
        first, second = session.selection
        delay = self._match_delay_ms if first.value == second.value else self._mismatch_delay_ms
        return Selection(
            tile=tile,
            evaluation=Evaluation(session_id=session.session_id, first=first, second=second, delay_ms=delay),
        )

    def resolve(self, session: GameSession, evaluation: Evaluation) -> bool:
        """Apply the delayed transition. Returns False if ``evaluation`` is stale."""
        if evaluation.session_id != session.session_id:
            logger.debug("Dropping evaluation for superseded session %d", evaluation.session_id)
            return False
        if session.selection != [evaluation.first, evaluation.second]:
            return False

        if evaluation.is_match:
            session.board.mark_matched(evaluation.first, evaluation.second)
            session.matched_pairs += 1
        else:
            session.board.flip_down(evaluation.first.id)
            session.board.flip_down(evaluation.second.id)
        session.selection.clear()
        session.locked = False
        return True
