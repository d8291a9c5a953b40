"""Data models package.

This package contains board data models and API schemas.
"""
from .board import (
    GameStatus,
    Position,
    LayerSpec,
    Tile,
    Board,
    TransitionResult,
    SimulationResult,
    LAYOUT,
    FACE_VALUES,
)
from .schemas import (
    NewGameRequest,
    TileSchema,
    GameStateResponse,
    SelectRequest,
    SelectResponse,
    HintResponse,
    TileFreeResponse,
    SimulateRequest,
    SimulateResponse,
    ErrorResponse,
)

__all__ = [
    # Board models
    "GameStatus",
    "Position",
    "LayerSpec",
    "Tile",
    "Board",
    "TransitionResult",
    "SimulationResult",
    "LAYOUT",
    "FACE_VALUES",
    # API schemas
    "NewGameRequest",
    "TileSchema",
    "GameStateResponse",
    "SelectRequest",
    "SelectResponse",
    "HintResponse",
    "TileFreeResponse",
    "SimulateRequest",
    "SimulateResponse",
    "ErrorResponse",
]
