"""Tests for memorymatch.core.deck – deck construction and shuffling."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from memorymatch.core.deck import PALETTE, Tile, build_pairs, generate_deck, shuffle_tiles


# ---------------------------------------------------------------------------
# build_pairs
# ---------------------------------------------------------------------------

class TestBuildPairs:
    @pytest.mark.parametrize("pair_count", [1, 6, 8, 10, 12, len(PALETTE)])
    def test_length_and_pairs(self, pair_count: int):
        tiles = build_pairs(pair_count)
        assert len(tiles) == 2 * pair_count
        assert set(Counter(t.value for t in tiles).values()) == {2}

    def test_uses_palette_prefix(self):
        tiles = build_pairs(6)
        assert {t.value for t in tiles} == set(PALETTE[:6])

    def test_ids_unique(self):
        tiles = build_pairs(12)
        assert len({t.id for t in tiles}) == 24

    def test_too_many_pairs(self):
        with pytest.raises(ValueError, match="exceeds palette"):
            build_pairs(len(PALETTE) + 1)

    def test_zero_pairs(self):
        with pytest.raises(ValueError, match="must be positive"):
            build_pairs(0)


class TestTile:
    def test_frozen(self):
        tile = Tile(id="a", value="🐶")
        with pytest.raises(AttributeError):
            tile.value = "🐱"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# shuffle / generate_deck
# ---------------------------------------------------------------------------

class TestShuffle:
    def test_in_place_permutation(self):
        items = list(range(20))
        result = shuffle_tiles(items, random.Random(7))
        assert result is items
        assert sorted(items) == list(range(20))

    def test_seeded_is_reproducible(self):
        a = shuffle_tiles(list(range(20)), random.Random(42))
        b = shuffle_tiles(list(range(20)), random.Random(42))
        assert a == b

    def test_empty_and_single(self):
        assert shuffle_tiles([], random.Random(1)) == []
        assert shuffle_tiles([1], random.Random(1)) == [1]

    def test_reorders_eventually(self):
        rng = random.Random(3)
        orders = {tuple(shuffle_tiles(list(range(6)), rng)) for _ in range(50)}
        assert len(orders) > 1


class TestGenerateDeck:
    @pytest.mark.parametrize("pair_count", [6, 8, 10, 12])
    def test_multiset_preserved_across_runs(self, pair_count: int):
        rng = random.Random(pair_count)
        expected = Counter(value for value in PALETTE[:pair_count] for _ in range(2))
        for _ in range(25):
            deck = generate_deck(pair_count, rng)
            assert len(deck) == 2 * pair_count
            assert Counter(t.value for t in deck) == expected

    def test_too_many_pairs_fails_fast(self):
        with pytest.raises(ValueError):
            generate_deck(len(PALETTE) + 1)
