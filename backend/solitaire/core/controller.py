"""Game session controller."""
import logging
import random
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models.board import (
    Board,
    GameStatus,
    LayerSpec,
    Tile,
    TransitionResult,
    FACE_VALUES,
    LAYOUT,
)
from .clock import GameClock
from .deck import DeckAssigner, shuffled
from .freedom import is_free
from .layout import generate_positions
from .pairs import available_pairs
from .selection import SelectionMachine

logger = logging.getLogger(__name__)


class GameController:
    """Owns the board of one session and exposes the game operations."""

    def __init__(
        self,
        layers: Sequence[LayerSpec] = LAYOUT,
        face_values: Sequence[str] = FACE_VALUES,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[GameClock] = None,
    ):
        """
        Initialize a controller. No game is dealt until new_game().

        Args:
            layers: Layer extents of the board layout.
            face_values: Face value alphabet.
            seed: Seed for the random source (ignored if rng is given).
            rng: Random source for dealing and reshuffling.
            clock: Elapsed time counter.
        """
        self.layers = list(layers)
        self._rng = rng or random.Random(seed)
        self._deck = DeckAssigner(face_values, self._rng)
        self.board = Board()
        self.selection = SelectionMachine()
        self.clock = clock or GameClock()
        self._moves = 0

    def new_game(self) -> List[Dict[str, Any]]:
        """
        Deal a fresh board and reset selection, moves and clock.

        If the deal has no available pair, the tiles are reshuffled once.

        Returns:
            Board snapshot.
        """
        positions = generate_positions(self.layers)
        self.board = Board(self._deck.assign(positions))
        self.selection.reset()
        self._moves = 0
        self.clock.start()

        if not self.available_pairs():
            self.reshuffle()

        logger.info("New game dealt with %d tiles", len(self.board))
        return self.snapshot()

    def select_tile(self, tile_id: int) -> TransitionResult:
        """
        Choose a tile and run the terminal check after a match.

        Args:
            tile_id: Id of the chosen tile.

        Returns:
            TransitionResult describing what changed.
        """
        result = self.selection.choose(self.board, tile_id)
        if not result.matched:
            return result

        self._moves += 1
        result.won = self.is_won()
        if result.won:
            self.clock.stop()
            logger.info(
                "Board cleared in %d moves, %d seconds",
                self._moves,
                self.clock.elapsed_seconds,
            )
        else:
            result.stuck = self.is_stuck()
            if result.stuck:
                logger.info("No free pairs left with %d tiles", self.board.remaining)
        return result

    def reshuffle(self) -> List[Dict[str, Any]]:
        """
        Redistribute face values among the remaining tiles.

        Removed tiles, ids and positions are untouched. The result may
        still have no available pair.

        Returns:
            Board snapshot.
        """
        remaining = self.board.live_tiles()
        if len(remaining) < 2:
            return self.snapshot()

        values = shuffled([tile.face_value for tile in remaining], self._rng)
        for tile, value in zip(remaining, values):
            tile.face_value = value

        self.selection.reset()
        logger.info("Reshuffled %d remaining tiles", len(remaining))
        return self.snapshot()

    def hint(self) -> Optional[Tuple[int, int]]:
        """Get the ids of the first available pair, or None."""
        pairs = self.available_pairs()
        if not pairs:
            return None
        first, second = pairs[0]
        return first.id, second.id

    def available_pairs(self) -> List[Tuple[Tile, Tile]]:
        return available_pairs(self.board)

    def is_free(self, tile_id: int) -> bool:
        """Check whether a tile can be selected; unknown ids are not free."""
        tile = self.board.get(tile_id)
        if tile is None:
            return False
        return is_free(tile, self.board)

    def is_won(self) -> bool:
        return self.board.remaining == 0

    def is_stuck(self) -> bool:
        return self.board.remaining > 0 and not self.available_pairs()

    @property
    def status(self) -> GameStatus:
        if self.is_won():
            return GameStatus.WON
        if self.is_stuck():
            return GameStatus.STUCK
        return GameStatus.PLAYING

    @property
    def selected_id(self) -> Optional[int]:
        return self.selection.selected_id

    def pairs_remaining(self) -> int:
        return self.board.remaining // 2

    def moves_made(self) -> int:
        return self._moves

    def elapsed_seconds(self) -> int:
        return self.clock.elapsed_seconds

    def snapshot(self) -> List[Dict[str, Any]]:
        return self.board.snapshot()
