"""Utility helper functions for presenting boards."""
from typing import Dict, Any, List, Tuple

# Screen metrics in pixels
TILE_WIDTH = 56
TILE_HEIGHT = 72
GAP = 6
LAYER_OFFSET = 6
MARGIN = 10
BOARD_PADDING = 80


def tile_placement(tile: Dict[str, Any]) -> Tuple[int, int, int]:
    """
    Compute the screen placement of a tile.

    Higher layers shift right and up so lower tiles stay visible.

    Args:
        tile: Snapshot record with x, y and z.

    Returns:
        Tuple of (left, top, z_index).
    """
    left = tile["x"] * (TILE_WIDTH + GAP) + tile["z"] * LAYER_OFFSET + MARGIN
    top = tile["y"] * (TILE_HEIGHT + GAP) - tile["z"] * LAYER_OFFSET + MARGIN
    return left, top, 10 + tile["z"]


def board_extent(snapshot: List[Dict[str, Any]]) -> Tuple[int, int]:
    """
    Compute the board size in pixels.

    Args:
        snapshot: Board snapshot.

    Returns:
        Tuple of (width, height); (0, 0) for an empty snapshot.
    """
    if not snapshot:
        return 0, 0
    max_x = max(tile["x"] for tile in snapshot)
    max_y = max(tile["y"] for tile in snapshot)
    width = (max_x + 1) * (TILE_WIDTH + GAP) + BOARD_PADDING
    height = (max_y + 1) * (TILE_HEIGHT + GAP) + BOARD_PADDING
    return width, height


def format_board_for_display(snapshot: List[Dict[str, Any]]) -> str:
    """
    Format a board snapshot for human-readable display.

    Args:
        snapshot: Board snapshot.

    Returns:
        Formatted string representation, top layer first.
    """
    if not snapshot:
        return "Empty board"

    live = [tile for tile in snapshot if not tile["removed"]]
    max_x = max(tile["x"] for tile in snapshot)
    max_y = max(tile["y"] for tile in snapshot)
    layers = sorted({tile["z"] for tile in snapshot}, reverse=True)

    lines = [f"Board with {len(layers)} layers, {len(live)} tiles left:"]
    lines.append("-" * 40)

    for z in layers:
        layer_tiles = [tile for tile in live if tile["z"] == z]
        lines.append(f"\nLayer {z} ({len(layer_tiles)} tiles):")

        grid = [[" ." for _ in range(max_x + 1)] for _ in range(max_y + 1)]
        for tile in layer_tiles:
            grid[tile["y"]][tile["x"]] = f"{tile['face_value']:>2}"

        for row in grid:
            lines.append("  " + " ".join(row))

    return "\n".join(lines)
