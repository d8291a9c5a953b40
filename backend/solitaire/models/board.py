"""Board data models and structures."""
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Tuple
from enum import Enum


class GameStatus(str, Enum):
    """Game status enumeration."""
    PLAYING = "playing"
    STUCK = "stuck"  # Tiles remain but no free pair
    WON = "won"  # Board cleared


@dataclass(frozen=True)
class Position:
    """Grid cell occupied by a tile (column, row, layer)."""
    x: int
    y: int
    z: int


@dataclass(frozen=True)
class LayerSpec:
    """Rectangular layer extent with inclusive bounds."""
    z: int
    x0: int
    x1: int
    y0: int
    y1: int


@dataclass
class Tile:
    """A single tile on the board.

    Only face_value (during reshuffle) and removed change after creation.
    """
    id: int
    position: Position
    face_value: str
    removed: bool = False

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def z(self) -> int:
        return self.position.z

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "x": self.position.x,
            "y": self.position.y,
            "z": self.position.z,
            "face_value": self.face_value,
            "removed": self.removed,
        }


@dataclass
class Board:
    """Ordered collection of all tiles in a session."""
    tiles: List[Tile] = field(default_factory=list)
    _by_id: Dict[int, Tile] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Index tiles by id."""
        self._by_id = {tile.id: tile for tile in self.tiles}

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self):
        return iter(self.tiles)

    def get(self, tile_id: int) -> Optional[Tile]:
        """Get a tile by id, or None if it does not exist."""
        return self._by_id.get(tile_id)

    def live_tiles(self) -> List[Tile]:
        """Tiles that have not been removed, in board order."""
        return [tile for tile in self.tiles if not tile.removed]

    @property
    def remaining(self) -> int:
        return sum(1 for tile in self.tiles if not tile.removed)

    def snapshot(self) -> List[Dict[str, Any]]:
        """Ordered list of plain tile records."""
        return [tile.to_dict() for tile in self.tiles]


@dataclass
class TransitionResult:
    """Outcome of choosing a tile."""
    changed: bool = False  # False when the input was ignored
    matched: bool = False
    removed_ids: Optional[Tuple[int, int]] = None
    selected_id: Optional[int] = None
    won: bool = False
    stuck: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "changed": self.changed,
            "matched": self.matched,
            "removed_ids": list(self.removed_ids) if self.removed_ids else None,
            "selected_id": self.selected_id,
            "won": self.won,
            "stuck": self.stuck,
        }


@dataclass
class SimulationResult:
    """Result of autoplay simulation."""
    clear_rate: float
    avg_moves: float
    min_moves: int
    max_moves: int
    avg_reshuffles: float
    iterations: int
    strategy: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "clear_rate": round(self.clear_rate, 3),
            "avg_moves": round(self.avg_moves, 2),
            "min_moves": self.min_moves,
            "max_moves": self.max_moves,
            "avg_reshuffles": round(self.avg_reshuffles, 2),
            "iterations": self.iterations,
            "strategy": self.strategy,
        }


# Pyramid layout: each layer sits strictly inside the one below
LAYOUT: List[LayerSpec] = [
    LayerSpec(z=0, x0=0, x1=11, y0=0, y1=5),
    LayerSpec(z=1, x0=2, x1=9, y0=1, y1=4),
    LayerSpec(z=2, x0=4, x1=7, y0=2, y1=3),
]

# Face value definitions (34 standard Mahjong faces)
FACE_VALUES: List[str] = (
    [f"B{i}" for i in range(1, 10)]  # Bamboo
    + [f"C{i}" for i in range(1, 10)]  # Characters
    + [f"D{i}" for i in range(1, 10)]  # Dots
    + ["E", "S", "W", "N"]  # Winds
    + ["R", "G", "P"]  # Dragons
)
