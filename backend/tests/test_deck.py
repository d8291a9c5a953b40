"""Tests for the tile deck assigner."""
import random
from collections import Counter

import pytest

from solitaire.core.deck import DeckAssigner, shuffled
from solitaire.core.layout import generate_positions
from solitaire.models.board import FACE_VALUES, LayerSpec


@pytest.fixture
def assigner():
    """Create a seeded assigner."""
    return DeckAssigner(rng=random.Random(42))


class TestShuffled:
    """Test cases for the Fisher-Yates shuffle."""

    def test_preserves_multiset(self):
        """Test that shuffling keeps the same elements."""
        items = ["A", "A", "B", "C", "D", "D"]
        result = shuffled(items, random.Random(1))

        assert Counter(result) == Counter(items)

    def test_does_not_mutate_input(self):
        """Test that the input list is left alone."""
        items = [1, 2, 3, 4, 5]
        shuffled(items, random.Random(1))

        assert items == [1, 2, 3, 4, 5]

    def test_seeded_is_reproducible(self):
        """Test that the same seed gives the same order."""
        items = list(range(20))

        assert shuffled(items, random.Random(3)) == shuffled(items, random.Random(3))

    def test_no_swap_source_keeps_order(self, no_swap_rng):
        """Test that j == i at every step leaves the order unchanged."""
        assert shuffled([1, 2, 3], no_swap_rng) == [1, 2, 3]

    def test_empty_and_single(self):
        """Test degenerate inputs."""
        assert shuffled([]) == []
        assert shuffled(["A"]) == ["A"]


class TestDeckAssigner:
    """Test cases for DeckAssigner."""

    def test_face_alphabet_has_34_values(self):
        """Test the size of the face alphabet."""
        assert len(FACE_VALUES) == 34
        assert len(set(FACE_VALUES)) == 34

    def test_one_tile_per_position(self, assigner):
        """Test that every position gets a tile, in order."""
        positions = generate_positions()
        tiles = assigner.assign(positions)

        assert len(tiles) == len(positions)
        assert [t.position for t in tiles] == positions

    def test_ids_are_sequential(self, assigner):
        """Test that ids are 1-based in position order."""
        tiles = assigner.assign(generate_positions())

        assert [t.id for t in tiles] == list(range(1, 113))

    def test_tiles_start_present(self, assigner):
        """Test that no tile starts removed."""
        tiles = assigner.assign(generate_positions())

        assert not any(t.removed for t in tiles)

    def test_every_face_count_is_even(self, assigner):
        """Test that the full deck pairs every face value."""
        tiles = assigner.assign(generate_positions())
        counts = Counter(t.face_value for t in tiles)

        assert all(count % 2 == 0 for count in counts.values())

    def test_face_values_cycle_through_alphabet(self, assigner):
        """Test that 56 pairs wrap around the 34-value alphabet."""
        tiles = assigner.assign(generate_positions())
        counts = Counter(t.face_value for t in tiles)

        needed = [FACE_VALUES[i % 34] for i in range(56)]
        assert counts == Counter(needed + needed)
        assert counts[FACE_VALUES[0]] == 4
        assert counts[FACE_VALUES[-1]] == 2

    def test_small_deck_is_perfect_pairing(self, assigner):
        """Test that each value appears exactly twice when pairs fit the alphabet."""
        positions = generate_positions([LayerSpec(z=0, x0=0, x1=9, y0=0, y1=1)])
        tiles = assigner.assign(positions)
        counts = Counter(t.face_value for t in tiles)

        assert len(tiles) == 20
        assert set(counts.values()) == {2}
        assert set(counts) == set(FACE_VALUES[:10])

    def test_odd_position_count_raises(self, assigner):
        """Test that an odd layout is rejected."""
        positions = generate_positions([LayerSpec(z=0, x0=0, x1=2, y0=0, y1=0)])

        with pytest.raises(ValueError):
            assigner.assign(positions)

    def test_empty_layout(self, assigner):
        """Test that no positions produce no tiles."""
        assert assigner.assign([]) == []

    def test_seeded_deals_match(self):
        """Test that equal seeds produce equal decks."""
        positions = generate_positions()
        first = DeckAssigner(rng=random.Random(9)).assign(positions)
        second = DeckAssigner(rng=random.Random(9)).assign(positions)

        assert [t.face_value for t in first] == [t.face_value for t in second]

    def test_custom_alphabet(self):
        """Test assignment with a custom alphabet."""
        positions = generate_positions([LayerSpec(z=0, x0=0, x1=3, y0=0, y1=0)])
        tiles = DeckAssigner(face_values=["A", "B"], rng=random.Random(0)).assign(positions)

        assert Counter(t.face_value for t in tiles) == {"A": 2, "B": 2}
