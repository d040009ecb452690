from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Dict, Iterator, List, Sequence, Tuple

from memorymatch.core.deck import Tile


class TileStatus(Enum):
    FACE_DOWN = "faceDown"
    FACE_UP = "faceUp"
    MATCHED = "matched"


class Board:
    """Ordered tiles of one level plus the per-tile status tracked alongside them.

    Matched pairs leave interactive play and are appended, in the order they
    were found, to :attr:`solved`.
    """

    def __init__(self, tiles: Sequence[Tile]) -> None:
        ids = [tile.id for tile in tiles]
        if len(set(ids)) != len(ids):
            raise ValueError("tile ids must be unique")
        counts = Counter(tile.value for tile in tiles)
        unpaired = sorted(value for value, count in counts.items() if count != 2)
        if unpaired:
            raise ValueError(f"every value must appear exactly twice: {unpaired}")
        self._tiles: Tuple[Tile, ...] = tuple(tiles)
        self._by_id: Dict[str, Tile] = {tile.id: tile for tile in self._tiles}
        self._status: Dict[str, TileStatus] = {tile.id: TileStatus.FACE_DOWN for tile in self._tiles}
        self._solved: List[Tuple[Tile, Tile]] = []

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __contains__(self, tile_id: object) -> bool:
        return tile_id in self._by_id

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self._tiles

    @property
    def pair_count(self) -> int:
        return len(self._tiles) // 2

    @property
    def solved(self) -> List[Tuple[Tile, Tile]]:
        return list(self._solved)

    def tile(self, tile_id: str) -> Tile:
        return self._by_id[tile_id]

    def status(self, tile_id: str) -> TileStatus:
        return self._status[tile_id]

    def flip_up(self, tile_id: str) -> None:
        self._status[tile_id] = TileStatus.FACE_UP

    def flip_down(self, tile_id: str) -> None:
        self._status[tile_id] = TileStatus.FACE_DOWN

    def mark_matched(self, first: Tile, second: Tile) -> None:
        self._status[first.id] = TileStatus.MATCHED
        self._status[second.id] = TileStatus.MATCHED
        self._solved.append((first, second))
