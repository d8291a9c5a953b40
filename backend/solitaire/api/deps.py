"""API dependencies."""
from ..config import Settings, get_settings
from ..core.simulator import get_simulator, GameSimulator
from .sessions import get_game_store, GameStore


def get_store() -> GameStore:
    """Dependency for game session store."""
    return get_game_store()


def get_game_simulator() -> GameSimulator:
    """Dependency for autoplay simulator."""
    return get_simulator()


def get_app_settings() -> Settings:
    """Dependency for application settings."""
    return get_settings()
