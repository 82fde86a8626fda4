"""A restartable stopwatch."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures seconds since creation or the last restart."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()

    def restart(self) -> None:
        """Start measuring again from now."""
        self._start = self._clock()

    def elapsed(self) -> float:
        """Return the seconds elapsed since the start."""
        return self._clock() - self._start