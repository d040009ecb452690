from __future__ import annotations

import random
import uuid
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, TypeVar

T = TypeVar("T")

# Fixed, ordered symbol pool. A level with N pairs always uses the first N.
PALETTE = (
    "🐶", "🐱", "🐭", "🐹", "🐰", "🦊", "🐻", "🐼",
    "🐨", "🐯", "🦁", "🐮", "🐸", "🐙", "🐵", "🦄",
    "🐞", "🦋", "🐠", "🦖",
)


@dataclass(frozen=True)
class Tile:
    """A single card. ``value`` is the symbol shown when face-up."""

    id: str
    value: str


def shuffle_tiles(items: MutableSequence[T], rng: Optional[random.Random] = None) -> MutableSequence[T]:
    """Fisher-Yates shuffle, in place. Returns ``items`` for convenience."""
    rng = rng or random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


def build_pairs(pair_count: int) -> List[Tile]:
    """Unshuffled deck: two tiles for each of the first ``pair_count`` symbols."""
    if pair_count < 1:
        raise ValueError(f"pair_count must be positive, got {pair_count}")
    if pair_count > len(PALETTE):
        raise ValueError(f"pair_count {pair_count} exceeds palette size {len(PALETTE)}")
    tiles: List[Tile] = []
    for symbol in PALETTE[:pair_count]:
        tiles.append(Tile(id=uuid.uuid4().hex, value=symbol))
        tiles.append(Tile(id=uuid.uuid4().hex, value=symbol))
    return tiles


def generate_deck(pair_count: int, rng: Optional[random.Random] = None) -> List[Tile]:
    return list(shuffle_tiles(build_pairs(pair_count), rng))
