"""Occlusion rules deciding which tiles are free to select."""
from typing import Dict, List, Optional, Set, Tuple

from ..models.board import Board, Tile


class OcclusionIndex:
    """Occupancy of live tiles, built once per query batch."""

    def __init__(self, board: Board):
        self.cells: Set[Tuple[int, int, int]] = set()
        # (x, y) -> highest live z
        self.column_top: Dict[Tuple[int, int], int] = {}

        for tile in board.live_tiles():
            self.cells.add((tile.x, tile.y, tile.z))
            key = (tile.x, tile.y)
            if key not in self.column_top or tile.z > self.column_top[key]:
                self.column_top[key] = tile.z

    def has_top(self, tile: Tile) -> bool:
        """Check if a live tile sits anywhere above this one."""
        return self.column_top.get((tile.x, tile.y), tile.z) > tile.z

    def has_neighbor(self, tile: Tile, direction: int) -> bool:
        """Check for a live tile at x + direction on the same row and layer."""
        return (tile.x + direction, tile.y, tile.z) in self.cells


def is_free(tile: Tile, board: Board, index: Optional[OcclusionIndex] = None) -> bool:
    """
    Check whether a tile can be selected.

    A tile is free when it is not removed, nothing lies on top of it,
    and at least one of its left/right neighbors is missing.

    Args:
        tile: Tile to check.
        board: Current board.
        index: Prebuilt occupancy index for the same board state.

    Returns:
        True if the tile is free.
    """
    if tile.removed:
        return False

    index = index or OcclusionIndex(board)
    if index.has_top(tile):
        return False

    left_blocked = index.has_neighbor(tile, -1)
    right_blocked = index.has_neighbor(tile, 1)
    return not (left_blocked and right_blocked)


def free_tiles(board: Board) -> List[Tile]:
    """Get all free tiles in board order."""
    index = OcclusionIndex(board)
    return [tile for tile in board.live_tiles() if is_free(tile, board, index)]
