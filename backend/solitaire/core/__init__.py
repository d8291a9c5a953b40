"""Core game logic package.

This package contains the board layout, occlusion rules, pair discovery,
selection state machine, game controller and autoplay simulator.
"""
from .layout import generate_positions
from .deck import DeckAssigner, shuffled
from .freedom import OcclusionIndex, is_free, free_tiles
from .pairs import available_pairs
from .selection import SelectionMachine
from .clock import GameClock, format_elapsed
from .controller import GameController
from .simulator import GameSimulator, SimulationStrategy, get_simulator

__all__ = [
    "generate_positions",
    "DeckAssigner",
    "shuffled",
    "OcclusionIndex",
    "is_free",
    "free_tiles",
    "available_pairs",
    "SelectionMachine",
    "GameClock",
    "format_elapsed",
    "GameController",
    "GameSimulator",
    "SimulationStrategy",
    "get_simulator",
]
