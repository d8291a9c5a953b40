"""Shared test fixtures."""
import random

import pytest

from solitaire.models.board import Board, Position, Tile


class NoSwapRandom(random.Random):
    """Random source whose Fisher-Yates shuffle leaves lists unchanged."""

    def randint(self, a, b):
        return b


@pytest.fixture
def make_board():
    """Build a board from (x, y, z, face_value) rows; ids follow list order."""
    def _make(rows):
        return Board([
            Tile(id=i + 1, position=Position(x, y, z), face_value=face)
            for i, (x, y, z, face) in enumerate(rows)
        ])
    return _make


@pytest.fixture
def no_swap_rng():
    """Random source that never reorders."""
    return NoSwapRandom()
