"""Autoplay simulation engine driving full games through the controller."""
import logging
import random
import statistics
from typing import List, Optional, Sequence, Tuple
from enum import Enum

from ..models.board import Board, LayerSpec, SimulationResult, Tile, LAYOUT
from .controller import GameController
from .pairs import available_pairs

logger = logging.getLogger(__name__)


class SimulationStrategy(str, Enum):
    """Simulation strategy enumeration."""
    RANDOM = "random"
    GREEDY = "greedy"  # Always take the hint pair
    LOOKAHEAD = "lookahead"  # Take the pair leaving the most pairs open


class GameSimulator:
    """Plays complete games with a scripted player."""

    def __init__(self, layers: Sequence[LayerSpec] = LAYOUT):
        self.layers = list(layers)

    def simulate(
        self,
        iterations: int = 100,
        strategy: str = "greedy",
        max_reshuffles: int = 5,
        seed: Optional[int] = None,
    ) -> SimulationResult:
        """
        Run Monte Carlo simulation of whole games.

        Args:
            iterations: Number of games to play.
            strategy: Strategy to use (random/greedy/lookahead).
            max_reshuffles: Reshuffles allowed per game when stuck.
            seed: Seed for reproducible runs.

        Returns:
            SimulationResult with statistics.
        """
        strategy_enum = SimulationStrategy(strategy)
        rng = random.Random(seed)
        cleared = 0
        moves_list: List[int] = []
        reshuffle_list: List[int] = []

        for _ in range(iterations):
            controller = GameController(
                layers=self.layers, rng=random.Random(rng.getrandbits(32))
            )
            controller.new_game()
            won, reshuffles = self._play_game(
                controller, strategy_enum, max_reshuffles, rng
            )
            if won:
                cleared += 1
            moves_list.append(controller.moves_made())
            reshuffle_list.append(reshuffles)

        logger.info(
            "Simulated %d games (%s): %d cleared", iterations, strategy, cleared
        )

        return SimulationResult(
            clear_rate=cleared / iterations if iterations else 0.0,
            avg_moves=statistics.mean(moves_list) if moves_list else 0,
            min_moves=min(moves_list) if moves_list else 0,
            max_moves=max(moves_list) if moves_list else 0,
            avg_reshuffles=statistics.mean(reshuffle_list) if reshuffle_list else 0,
            iterations=iterations,
            strategy=strategy_enum.value,
        )

    def _play_game(
        self,
        controller: GameController,
        strategy: SimulationStrategy,
        max_reshuffles: int,
        rng: random.Random,
    ) -> Tuple[bool, int]:
        """Play until the board is cleared or reshuffles run out."""
        reshuffles = 0
        while not controller.is_won():
            pairs = controller.available_pairs()
            if not pairs:
                if reshuffles >= max_reshuffles:
                    break
                controller.reshuffle()
                reshuffles += 1
                continue

            if strategy == SimulationStrategy.RANDOM:
                first, second = rng.choice(pairs)
            elif strategy == SimulationStrategy.GREEDY:
                first, second = pairs[0]
            else:
                first, second = self._select_lookahead_pair(controller.board, pairs)

            controller.select_tile(first.id)
            controller.select_tile(second.id)

        return controller.is_won(), reshuffles

    def _select_lookahead_pair(
        self, board: Board, pairs: List[Tuple[Tile, Tile]]
    ) -> Tuple[Tile, Tile]:
        """Pick the pair whose removal leaves the most available pairs."""
        best = pairs[0]
        best_score = -1
        for first, second in pairs:
            taken = {first.id, second.id}
            scratch = Board([
                Tile(
                    id=tile.id,
                    position=tile.position,
                    face_value=tile.face_value,
                    removed=tile.removed or tile.id in taken,
                )
                for tile in board
            ])
            score = len(available_pairs(scratch))
            if score > best_score:
                best, best_score = (first, second), score
        return best


# Singleton instance
_simulator: Optional[GameSimulator] = None


def get_simulator() -> GameSimulator:
    """Get or create simulator singleton instance."""
    global _simulator
    if _simulator is None:
        _simulator = GameSimulator()
    return _simulator
