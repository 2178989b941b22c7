"""A simple accumulating stopwatch."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class Timer:
    """Stopwatch that accumulates time across start/stop pairs."""

    clock: Callable[[], int] = time.perf_counter_ns
    _total_ns: int = field(default=0, init=False, repr=False)
    _started_ns: int = field(default=0, init=False, repr=False)

    def start(self) -> None:
        """Begin timing an interval."""
        self._started_ns = self.clock()

    def stop(self) -> None:
        """End the current interval and add it to the total."""
        self._total_ns += self.clock() - self._started_ns

    def elapsed(self) -> float:
        """Total time measured so far, in seconds."""
        return self._total_ns / 1e9

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()