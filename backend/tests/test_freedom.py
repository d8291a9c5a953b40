"""Tests for the occlusion rules."""
import random

from solitaire.core.deck import DeckAssigner
from solitaire.core.freedom import OcclusionIndex, free_tiles, is_free
from solitaire.core.layout import generate_positions
from solitaire.models.board import Board


class TestIsFree:
    """Test cases for is_free."""

    def test_single_tile_is_free(self, make_board):
        """Test that a lone tile is free."""
        board = make_board([(0, 0, 0, "A")])

        assert is_free(board.get(1), board)

    def test_removed_tile_is_not_free(self, make_board):
        """Test that removed tiles are never free."""
        board = make_board([(0, 0, 0, "A")])
        board.get(1).removed = True

        assert not is_free(board.get(1), board)

    def test_middle_of_row_is_blocked(self, make_board):
        """Test that a tile with both neighbors is blocked."""
        board = make_board([(0, 0, 0, "A"), (1, 0, 0, "B"), (2, 0, 0, "C")])

        assert is_free(board.get(1), board)
        assert not is_free(board.get(2), board)
        assert is_free(board.get(3), board)

    def test_one_open_side_is_enough(self, make_board):
        """Test that removing one neighbor frees the middle tile."""
        board = make_board([(0, 0, 0, "A"), (1, 0, 0, "B"), (2, 0, 0, "C")])
        board.get(3).removed = True

        assert is_free(board.get(2), board)

    def test_tile_above_blocks(self, make_board):
        """Test that a tile directly on top blocks the one below."""
        board = make_board([(0, 0, 0, "A"), (0, 0, 1, "B")])

        assert not is_free(board.get(1), board)
        assert is_free(board.get(2), board)

    def test_removing_top_frees_tile(self, make_board):
        """Test that the lower tile becomes free once the top is removed."""
        board = make_board([(0, 0, 0, "A"), (0, 0, 1, "B")])
        board.get(2).removed = True

        assert is_free(board.get(1), board)

    def test_any_higher_layer_blocks(self, make_board):
        """Test that a tile two layers up also blocks."""
        board = make_board([(3, 3, 0, "A"), (3, 3, 2, "B")])

        assert not is_free(board.get(1), board)

    def test_top_blocks_even_with_open_sides(self, make_board):
        """Test that top occlusion wins over open sides."""
        board = make_board([(5, 5, 0, "A"), (5, 5, 1, "B")])
        tile = board.get(1)
        index = OcclusionIndex(board)

        assert not index.has_neighbor(tile, -1)
        assert not index.has_neighbor(tile, 1)
        assert not is_free(tile, board)

    def test_tile_below_does_not_block(self, make_board):
        """Test that tiles in lower layers do not block."""
        board = make_board([(0, 0, 0, "A"), (0, 0, 1, "B")])

        assert is_free(board.get(2), board)

    def test_neighbors_on_other_rows_do_not_block(self, make_board):
        """Test that side blocking needs the same row."""
        board = make_board([(0, 1, 0, "A"), (1, 0, 0, "B"), (2, 1, 0, "C")])

        assert is_free(board.get(2), board)

    def test_neighbors_on_other_layers_do_not_block(self, make_board):
        """Test that side blocking needs the same layer."""
        board = make_board([(0, 0, 1, "A"), (1, 0, 0, "B"), (2, 0, 1, "C")])

        assert is_free(board.get(2), board)

    def test_gap_is_not_a_neighbor(self, make_board):
        """Test that tiles two columns away do not block."""
        board = make_board([(0, 0, 0, "A"), (2, 0, 0, "B"), (4, 0, 0, "C")])

        assert is_free(board.get(2), board)

    def test_removed_neighbors_do_not_block(self, make_board):
        """Test that removed neighbors are ignored."""
        board = make_board([(0, 0, 0, "A"), (1, 0, 0, "B"), (2, 0, 0, "C")])
        board.get(1).removed = True
        board.get(3).removed = True

        assert is_free(board.get(2), board)

    def test_reflects_current_removals(self, make_board):
        """Test that each query sees the latest removed flags."""
        board = make_board([(0, 0, 0, "A"), (1, 0, 0, "B"), (2, 0, 0, "C")])
        middle = board.get(2)

        assert not is_free(middle, board)
        board.get(1).removed = True
        assert is_free(middle, board)


class TestFreeTiles:
    """Test cases for free_tiles."""

    def test_fresh_pyramid(self):
        """Test the free tiles of a freshly dealt pyramid."""
        tiles = DeckAssigner(rng=random.Random(0)).assign(generate_positions())
        board = Board(tiles)
        free = free_tiles(board)

        # Row ends on every row of every layer
        assert len(free) == 24
        assert {(t.x, t.z) for t in free} == {
            (0, 0), (11, 0), (2, 1), (9, 1), (4, 2), (7, 2)
        }

    def test_matches_is_free(self):
        """Test that free_tiles agrees with is_free for every tile."""
        tiles = DeckAssigner(rng=random.Random(1)).assign(generate_positions())
        board = Board(tiles)
        for tile in tiles[::5]:
            tile.removed = True

        expected = [t for t in board.live_tiles() if is_free(t, board)]
        assert free_tiles(board) == expected

    def test_empty_board(self):
        """Test that an empty board has no free tiles."""
        assert free_tiles(Board()) == []
