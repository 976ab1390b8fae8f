"""Frame timing shared by the engine and its components."""

from __future__ import annotations

import time
from typing import Callable, ClassVar, Optional


class GameTime:
    """Tracks the time between consecutive frames."""

    _instance: ClassVar[Optional["GameTime"]] = None

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.perf_counter
        self._delta_time = 0.0
        self._last_time: Optional[float] = None

    @classmethod
    def instance(cls) -> "GameTime":
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def update(self) -> None:
        """Sample the clock and compute the time since the previous sample."""
        now = self._clock()
        if self._last_time is None:
            self._last_time = now
        self._delta_time = now - self._last_time
        self._last_time = now

    @property
    def delta_time(self) -> float:
        """Seconds elapsed between the last two updates."""
        return self._delta_time

    @property
    def last_time(self) -> Optional[float]:
        """Clock value of the last update, or None before the first one."""
        return self._last_time