"""Tile selection and matching state machine."""
import logging
from typing import Optional

from ..models.board import Board, TransitionResult
from .freedom import is_free

logger = logging.getLogger(__name__)


class SelectionMachine:
    """Tracks at most one selected tile and applies match transitions.

    States are Idle (selected_id is None) and Selected(selected_id).
    """

    def __init__(self):
        self.selected_id: Optional[int] = None

    @property
    def is_idle(self) -> bool:
        return self.selected_id is None

    def reset(self) -> None:
        """Return to Idle."""
        self.selected_id = None

    def choose(self, board: Board, tile_id: int) -> TransitionResult:
        """
        Apply the player's choice of a tile.

        Blocked, removed and unknown tiles are ignored. Choosing the
        selected tile again deselects it. Choosing a second tile with the
        same face value removes both; otherwise the selection moves.

        Args:
            board: Current board, mutated on a match.
            tile_id: Id of the chosen tile.

        Returns:
            TransitionResult; won/stuck are left for the caller to fill.
        """
        tile = board.get(tile_id)
        if tile is None or not is_free(tile, board):
            return TransitionResult(changed=False, selected_id=self.selected_id)

        if self.selected_id is None:
            self.selected_id = tile_id
            return TransitionResult(changed=True, selected_id=tile_id)

        if self.selected_id == tile_id:
            self.selected_id = None
            return TransitionResult(changed=True)

        selected = board.get(self.selected_id)
        if selected is None or selected.removed:
            # Stale selection: reset without selecting the new tile
            self.selected_id = None
            return TransitionResult(changed=True)

        if selected.face_value == tile.face_value:
            selected.removed = True
            tile.removed = True
            self.selected_id = None
            logger.debug(
                "Matched %s: tiles %d and %d", tile.face_value, selected.id, tile.id
            )
            return TransitionResult(
                changed=True,
                matched=True,
                removed_ids=(selected.id, tile.id),
            )

        self.selected_id = tile_id
        return TransitionResult(changed=True, selected_id=tile_id)
