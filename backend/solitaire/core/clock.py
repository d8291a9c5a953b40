"""Elapsed game time counter."""
import time
from typing import Callable, Optional


class GameClock:
    """Counts whole seconds since start; frozen once stopped.

    The clock never touches board state.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        self._time_source = time_source
        self._started_at: Optional[float] = None
        self._frozen: Optional[int] = 0

    @property
    def running(self) -> bool:
        return self._started_at is not None and self._frozen is None

    def start(self) -> None:
        """Reset to zero and start counting."""
        self._started_at = self._time_source()
        self._frozen = None

    def stop(self) -> None:
        """Freeze the counter at its current value."""
        if self.running:
            self._frozen = self.elapsed_seconds

    @property
    def elapsed_seconds(self) -> int:
        if self._frozen is not None:
            return self._frozen
        return max(0, int(self._time_source() - self._started_at))


def format_elapsed(seconds: int) -> str:
    """Format seconds as MM:SS."""
    return f"{seconds // 60:02d}:{seconds % 60:02d}"
