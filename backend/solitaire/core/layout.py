"""Board layout generator."""
from typing import List, Sequence

from ..models.board import LayerSpec, Position, LAYOUT


def generate_positions(layers: Sequence[LayerSpec] = LAYOUT) -> List[Position]:
    """
    Build the grid positions for a layered layout.

    Layers are emitted in order, each one row by row (y outer, x inner).

    Args:
        layers: Layer extents with inclusive bounds.

    Returns:
        Ordered list of positions.
    """
    positions = []
    for layer in layers:
        for y in range(layer.y0, layer.y1 + 1):
            for x in range(layer.x0, layer.x1 + 1):
                positions.append(Position(x=x, y=y, z=layer.z))
    return positions
