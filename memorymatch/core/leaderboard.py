from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from memorymatch.core.clock import format_time

logger = logging.getLogger(__name__)

LEADERBOARD_CAPACITY = 10


@dataclass(frozen=True)
class ScoreEntry:
    level: int
    moves: int
    elapsed_seconds: int
    formatted_time: str
    date: str

    @classmethod
    def create(cls, level: int, moves: int, elapsed_seconds: int, when: Optional[datetime] = None) -> "ScoreEntry":
        when = when or datetime.now()
        return cls(
            level=level,
            moves=moves,
            elapsed_seconds=elapsed_seconds,
            formatted_time=format_time(elapsed_seconds),
            date=when.strftime("%x"),
        )


def _rank_key(entry: ScoreEntry) -> tuple[int, int, int]:
    return (-entry.level, entry.moves, entry.elapsed_seconds)


def rank_scores(
    existing: Iterable[ScoreEntry],
    entry: Optional[ScoreEntry] = None,
    capacity: int = LEADERBOARD_CAPACITY,
) -> List[ScoreEntry]:
    """Insert ``entry`` and return the best ``capacity`` scores.

    Higher level ranks first, then fewer moves, then less time. Entries
    beyond ``capacity`` are dropped.
    """
    scores = list(existing)
    if entry is not None:
        scores.append(entry)
    scores.sort(key=_rank_key)
    return scores[:capacity]


class LeaderboardStore:
    """Persists the ranked leaderboard as JSON.

    Default file: ~/.memorymatch/leaderboard.json. Read and write failures are
    logged and absorbed; :meth:`save` reports them through its return value.
    """

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path or Path.home() / ".memorymatch" / "leaderboard.json"

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> List[ScoreEntry]:
        if not self._file_path.exists():
            return []
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load leaderboard from %s: %s", self._file_path, e)
            return []

        raw_scores = payload.get("scores", []) if isinstance(payload, dict) else []
        if not isinstance(raw_scores, list):
            logger.warning("Ignoring leaderboard in %s: 'scores' is not a list", self._file_path)
            return []

        scores: List[ScoreEntry] = []
        for value in raw_scores:
            try:
                elapsed = int(value["elapsed_seconds"])
                scores.append(
                    ScoreEntry(
                        level=int(value["level"]),
                        moves=int(value["moves"]),
                        elapsed_seconds=elapsed,
                        formatted_time=str(value.get("formatted_time") or format_time(elapsed)),
                        date=str(value.get("date", "")),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed leaderboard entry %r: %s", value, e)
        return rank_scores(scores)

    def save(self, scores: Iterable[ScoreEntry]) -> bool:
        payload = {"scores": [asdict(entry) for entry in scores]}
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save leaderboard to %s: %s", self._file_path, e)
            return False
        return True
