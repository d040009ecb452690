from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelConfig:
    index: int
    name: str
    rows: int
    cols: int
    pair_count: int


def default_levels_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "levels"


class LevelRepository:
    """Static table of level configurations, read from ``level<N>.yaml`` files.

    Levels are keyed by the number in the file name. Looking up an unknown
    index falls back to the first level instead of failing.
    """

    def __init__(self, levels_dir: Optional[Path] = None) -> None:
        self._levels_dir = levels_dir or default_levels_dir()
        self._levels = self._load_levels()

    def all(self) -> List[LevelConfig]:
        return list(self._levels.values())

    @property
    def first(self) -> LevelConfig:
        return next(iter(self._levels.values()))

    @property
    def last(self) -> LevelConfig:
        return self._levels[max(self._levels)]

    def get(self, index: int) -> LevelConfig:
        level = self._levels.get(index)
        if level is None:
            logger.info("Unknown level %r, falling back to level %d", index, self.first.index)
            return self.first
        return level

    def is_final(self, index: int) -> bool:
        return index >= self.last.index

    def next_index(self, index: int) -> int:
        """Index to play after ``index`` completes; the final level wraps to the first."""
        if self.is_final(index):
            return self.first.index
        following = [key for key in self._levels if key > index]
        return min(following)

    def _load_levels(self) -> Dict[int, LevelConfig]:
        base_dir = self._levels_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        levels: Dict[int, LevelConfig] = {}
        pattern = re.compile(r"^level(\d+)$")

        for level_path in base_dir.glob("level*.yaml"):
            m = pattern.match(level_path.stem)
            if not m:
                logger.debug("Skipping %s: name is not level<N>.yaml", level_path.name)
                continue
            index = int(m.group(1))
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict):
                raise ValueError(f"{level_path.name}: expected YAML with 'title', 'rows', 'cols' and 'pairs'")
            title = raw.get("title")
            if not title or not isinstance(title, str):
                raise ValueError(f"{level_path.name}: missing or invalid 'title'")
            dims = {}
            for field in ("rows", "cols", "pairs"):
                value = raw.get(field)
                # bool is an int subclass; reject it explicitly
                if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                    raise ValueError(f"{level_path.name}: '{field}' must be a positive integer")
                dims[field] = value
            if dims["rows"] * dims["cols"] != dims["pairs"] * 2:
                raise ValueError(
                    f"{level_path.name}: {dims['rows']}x{dims['cols']} grid does not hold {dims['pairs']} pairs"
                )
            levels[index] = LevelConfig(
                index=index,
                name=title.strip(),
                rows=dims["rows"],
                cols=dims["cols"],
                pair_count=dims["pairs"],
            )

        if not levels:
            raise ValueError(f"No level files (level*.yaml) found in {base_dir}")
        return {key: levels[key] for key in sorted(levels)}
