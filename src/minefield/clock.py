"""
Elapsed-time tracking for a game.

The clock ticks once per interval while the game is in progress and is
stopped exactly once when the game ends. It is polled rather than driven
by a background thread, so elapsed time is read from a monotonic source.
"""
import time
from typing import Callable, Optional


def format_time(seconds: int) -> str:
    """
    Format elapsed seconds as ``M:SS``.

    Minutes are not padded, seconds are always two digits,
    e.g. 125 -> "2:05".

    Raises:
        ValueError: If seconds is negative.
    """
    if seconds < 0:
        raise ValueError("seconds cannot be negative")
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


class GameClock:
    """
    Counts whole ticks since the game started.

    Attributes:
        interval: Tick length in seconds.
    """

    def __init__(
        self,
        interval: float = 1.0,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize a stopped clock.

        Args:
            interval: Tick length in seconds, must be positive.
            time_source: Monotonic time function, injectable for tests.
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._time_source = time_source
        self._started_at: Optional[float] = None
        self._frozen = 0

    @property
    def running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> int:
        """Whole ticks elapsed; frozen once the clock is stopped."""
        if self._started_at is None:
            return self._frozen
        delta = self._time_source() - self._started_at
        return int(delta // self.interval)

    def start(self) -> None:
        """Start counting from zero. No-op if already running."""
        if self.running:
            return
        self._frozen = 0
        self._started_at = self._time_source()

    def stop(self) -> bool:
        """
        Stop the clock and freeze the elapsed count.

        Returns:
            True if the clock was running, False if it was already stopped.
        """
        if not self.running:
            return False
        self._frozen = self.elapsed
        self._started_at = None
        return True

    def restart(self) -> None:
        """Reset to zero and start again."""
        self._started_at = None
        self._frozen = 0
        self.start()

    @property
    def text(self) -> str:
        return format_time(self.elapsed)
