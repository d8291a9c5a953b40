"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional


class NewGameRequest(BaseModel):
    """Request schema for starting a game."""
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible deal")


class TileSchema(BaseModel):
    """A tile in a board snapshot, with its screen placement."""
    id: int = Field(..., description="Tile id (1-based, stable)")
    x: int = Field(..., description="Column")
    y: int = Field(..., description="Row")
    z: int = Field(..., description="Layer")
    face_value: str = Field(..., description="Face value")
    removed: bool = Field(..., description="Whether the tile has been removed")
    free: bool = Field(..., description="Whether the tile can be selected")
    left: int = Field(..., description="Screen x in pixels")
    top: int = Field(..., description="Screen y in pixels")
    z_index: int = Field(..., description="Stacking order")


class GameStateResponse(BaseModel):
    """Response schema for game state."""
    game_id: str = Field(..., description="Session id")
    tiles: List[TileSchema] = Field(..., description="Board snapshot in tile order")
    pairs_remaining: int = Field(..., ge=0, description="Remaining tiles / 2")
    moves_made: int = Field(..., ge=0, description="Successful matches")
    elapsed_seconds: int = Field(..., ge=0, description="Elapsed time in seconds")
    elapsed_display: str = Field(..., description="Elapsed time as MM:SS")
    selected_id: Optional[int] = Field(default=None, description="Selected tile id")
    status: str = Field(..., description="Game status (playing/stuck/won)")
    won: bool = Field(..., description="Board cleared")
    stuck: bool = Field(..., description="No free pair available")
    board_width: int = Field(..., description="Board width in pixels")
    board_height: int = Field(..., description="Board height in pixels")
    message: str = Field(default="", description="Status message")


class SelectRequest(BaseModel):
    """Request schema for choosing a tile."""
    tile_id: int = Field(..., description="Id of the chosen tile")


class SelectResponse(BaseModel):
    """Response schema for a selection transition."""
    changed: bool = Field(..., description="False when the choice was ignored")
    matched: bool = Field(..., description="Whether a pair was removed")
    removed_ids: Optional[List[int]] = Field(default=None, description="Ids of removed tiles")
    selected_id: Optional[int] = Field(default=None, description="Selected tile id after the transition")
    won: bool = Field(..., description="Board cleared")
    stuck: bool = Field(..., description="No free pair available")
    pairs_remaining: int = Field(..., ge=0, description="Remaining tiles / 2")
    moves_made: int = Field(..., ge=0, description="Successful matches")
    removal_fade_ms: int = Field(..., description="Suggested fade duration before hiding removed tiles")
    message: str = Field(default="", description="Status message")


class HintResponse(BaseModel):
    """Response schema for a hint."""
    tile_ids: Optional[List[int]] = Field(default=None, description="Ids of the hinted pair, or null")
    face_value: Optional[str] = Field(default=None, description="Face value of the hinted pair")
    highlight_ms: int = Field(..., description="Suggested highlight duration")
    message: str = Field(default="", description="Status message")


class TileFreeResponse(BaseModel):
    """Response schema for a freedom query."""
    tile_id: int = Field(..., description="Tile id")
    free: bool = Field(..., description="Whether the tile can be selected")


class SimulateRequest(BaseModel):
    """Request schema for autoplay simulation."""
    iterations: int = Field(default=50, ge=1, le=1000, description="Number of games to play")
    strategy: str = Field(default="greedy", description="Simulation strategy (random/greedy/lookahead)")
    max_reshuffles: int = Field(default=5, ge=0, le=100, description="Reshuffles allowed per game")
    seed: Optional[int] = Field(default=None, description="Seed for reproducible runs")


class SimulateResponse(BaseModel):
    """Response schema for autoplay simulation."""
    clear_rate: float = Field(..., ge=0, le=1, description="Clear rate (0-1)")
    avg_moves: float = Field(..., description="Average matches per game")
    min_moves: int = Field(..., description="Minimum matches")
    max_moves: int = Field(..., description="Maximum matches")
    avg_reshuffles: float = Field(..., description="Average reshuffles per game")
    iterations: int = Field(..., description="Games played")
    strategy: str = Field(..., description="Strategy used")


class ErrorResponse(BaseModel):
    """Error response schema (body of an HTTPException)."""
    detail: str = Field(..., description="Error message")
