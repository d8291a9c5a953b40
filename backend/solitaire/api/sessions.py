"""In-memory store of game sessions."""
import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from ..config import get_settings
from ..core.controller import GameController
from ..models.board import LayerSpec, LAYOUT

logger = logging.getLogger(__name__)


class GameNotFoundError(KeyError):
    """Raised when a game id is not in the store."""


@dataclass
class GameSession:
    """A game controller together with its session metadata."""
    game_id: str
    controller: GameController
    created_at: datetime = field(default_factory=datetime.now)
    message: str = ""


class GameStore:
    """Keeps live sessions in memory; the oldest is evicted beyond capacity."""

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(
        self,
        seed: Optional[int] = None,
        layers: Sequence[LayerSpec] = LAYOUT,
    ) -> GameSession:
        """
        Create a session and deal its first game.

        Args:
            seed: Seed for a reproducible deal.
            layers: Layer extents of the board layout.

        Returns:
            The new GameSession.
        """
        game_id = uuid.uuid4().hex
        controller = GameController(layers=layers, seed=seed)
        controller.new_game()
        session = GameSession(game_id=game_id, controller=controller)

        self._sessions[game_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted game session %s", evicted_id)

        logger.info("Created game session %s", game_id)
        return session

    def get(self, game_id: str) -> GameSession:
        """Get a session by id or raise GameNotFoundError."""
        try:
            return self._sessions[game_id]
        except KeyError:
            raise GameNotFoundError(game_id) from None

    def delete(self, game_id: str) -> None:
        """Discard a session or raise GameNotFoundError."""
        if self._sessions.pop(game_id, None) is None:
            raise GameNotFoundError(game_id)
        logger.info("Deleted game session %s", game_id)


# Singleton instance
_store: Optional[GameStore] = None


def get_game_store() -> GameStore:
    """Get or create game store singleton instance."""
    global _store
    if _store is None:
        _store = GameStore(max_sessions=get_settings().max_sessions)
    return _store
