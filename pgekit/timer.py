"""Frame timer measuring elapsed seconds between updates."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

__all__ = ["Timer"]


@dataclass
class Timer:
    """Tracks per-frame delta time and accumulated total time in seconds.

    ``clock`` returns the current time in seconds; it defaults to a
    monotonic clock.
    """

    clock: Callable[[], float] = time.monotonic
    delta_time: float = 0.0
    total: float = 0.0
    paused: bool = False
    _last: float = field(init=False, repr=False)
    _now: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._last = self.clock()
        self._now = self._last

    def update(self) -> None:
        """Advance the timer; call once at the start of each frame."""
        self._now = self.clock()
        self.delta_time = 0.0 if self.paused else self._now - self._last
        self._last = self._now
        self.total += self.delta_time

    def peek_delta_time(self) -> float:
        """Time since the last update, added to the total without resetting."""
        if self.paused:
            return 0.0
        self._now = self.clock()
        elapsed = self._now - self._last
        self.total += elapsed
        return elapsed

    def total_time(self) -> float:
        """Total time, adding the time since the last update unless paused."""
        if self.paused:
            return self.total
        self._now = self.clock()
        self.total += self._now - self._last
        return self.total

    def pause(self) -> None:
        """Stop time from accumulating."""
        self.paused = True

    def unpause(self) -> None:
        """Let time accumulate again."""
        self.paused = False