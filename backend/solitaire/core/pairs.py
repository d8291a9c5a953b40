"""Matchable pair discovery."""
from typing import Dict, List, Tuple

from ..models.board import Board, Tile
from .freedom import free_tiles


def available_pairs(board: Board) -> List[Tuple[Tile, Tile]]:
    """
    Find one matchable pair per face value.

    Free tiles are grouped by face value in first-seen order; each group
    with two or more members yields its first two tiles.

    Args:
        board: Current board.

    Returns:
        List of (tile, tile) pairs, empty when the board is stuck or cleared.
    """
    grouped: Dict[str, List[Tile]] = {}
    for tile in free_tiles(board):
        grouped.setdefault(tile.face_value, []).append(tile)

    return [
        (group[0], group[1]) for group in grouped.values() if len(group) >= 2
    ]
