"""
Deadline oracles ("arbitrators") that bound one move search.

The engine polls is_time_up() at every node it visits and publishes its current
best column with set_move() after every search pass; the last published column
is the move that gets played.
"""

import time
from abc import ABC, abstractmethod
from typing import Optional


class TimeUpError(TimeoutError):
    """A player finished its turn without publishing any move."""


class Arbitrator(ABC):
    """
    Mediates between the match driver and a player for a single move.
    """

    def __init__(self):
        self._move: Optional[int] = None
        self.moves_reported = 0

    @abstractmethod
    def is_time_up(self) -> bool:
        """
        Returns True once the player should stop searching.
        """
        pass

    def set_move(self, col: int):
        """Record the current best column; the last call wins."""
        self._move = int(col)
        self.moves_reported += 1

    @property
    def move(self) -> Optional[int]:
        return self._move


class TimedArbitrator(Arbitrator):
    """
    Wall-clock deadline of msec_per_move milliseconds.

    The clock starts on construction; start() re-arms it for a new move.
    A non-positive budget never expires.
    """

    def __init__(self, msec_per_move: int, clock=time.perf_counter):
        super().__init__()
        self.msec_per_move = msec_per_move
        self.clock = clock
        self.start()

    def start(self):
        self._move = None
        self.moves_reported = 0
        self.start_time = self.clock()

    def elapsed_ms(self) -> float:
        return (self.clock() - self.start_time) * 1000

    def is_time_up(self) -> bool:
        if self.msec_per_move <= 0:
            return False
        return self.elapsed_ms() >= self.msec_per_move

    def overrun_ms(self) -> float:
        """Milliseconds spent beyond the budget (0 if within it)."""
        if self.msec_per_move <= 0:
            return 0.0
        return max(0.0, self.elapsed_ms() - self.msec_per_move)


class PassLimitArbitrator(Arbitrator):
    """
    Expires after max_passes published moves.

    The search engine publishes once per completed depth, so this yields a
    fixed-depth search whose outcome does not depend on machine speed.
    """

    def __init__(self, max_passes: int):
        super().__init__()
        if max_passes < 1:
            raise ValueError(f"max_passes must be at least 1, got {max_passes}")
        self.max_passes = max_passes

    def is_time_up(self) -> bool:
        return self.moves_reported >= self.max_passes
