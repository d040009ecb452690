from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from memorymatch.core.board import Board
from memorymatch.core.clock import format_time
from memorymatch.core.deck import Tile
from memorymatch.core.levels import LevelConfig


@dataclass
class GameSession:
    """Mutable state of one attempt at a level.

    A new session replaces the old one on every level start or restart.
    ``session_id`` tags delayed callbacks so that anything scheduled for a
    superseded session can be recognised and dropped.
    """

    session_id: int
    level: LevelConfig
    board: Board
    selection: List[Tile] = field(default_factory=list)
    matched_pairs: int = 0
    moves: int = 0
    elapsed_seconds: int = 0
    locked: bool = False
    completed: bool = False

    @property
    def pair_count(self) -> int:
        return self.level.pair_count

    @property
    def formatted_time(self) -> str:
        return format_time(self.elapsed_seconds)

    def all_pairs_found(self) -> bool:
        return self.matched_pairs >= self.pair_count
