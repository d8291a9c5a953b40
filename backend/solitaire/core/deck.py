"""Tile deck assignment with a perfect pairing of face values."""
import random
from typing import List, Optional, Sequence, TypeVar

from ..models.board import Position, Tile, FACE_VALUES

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a Fisher-Yates shuffled copy of items."""
    rng = rng or random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


class DeckAssigner:
    """Assigns face values to positions so that every value appears twice."""

    def __init__(
        self,
        face_values: Sequence[str] = FACE_VALUES,
        rng: Optional[random.Random] = None,
    ):
        self.face_values = list(face_values)
        self._rng = rng or random.Random()

    def assign(self, positions: Sequence[Position]) -> List[Tile]:
        """
        Create tiles for positions with shuffled, paired face values.

        Args:
            positions: Grid positions; the count must be even.

        Returns:
            Tiles in position order with 1-based ids.

        Raises:
            ValueError: If the position count is odd.
        """
        if len(positions) % 2 != 0:
            raise ValueError(
                f"Position count must be even, got {len(positions)}"
            )

        pair_count = len(positions) // 2
        needed = [
            self.face_values[i % len(self.face_values)] for i in range(pair_count)
        ]
        values = shuffled(needed + needed, self._rng)

        return [
            Tile(id=i + 1, position=pos, face_value=values[i])
            for i, pos in enumerate(positions)
        ]
