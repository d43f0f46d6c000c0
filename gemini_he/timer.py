"""Accumulating wall-clock timer usable as a context manager."""

from __future__ import annotations

import time
from typing import Optional

__all__ = ["AutoTimer"]


class AutoTimer:
    """Adds the time since start (or last reset) to ``elapsed`` on each stop.

    ``units`` scales seconds: 1 for seconds, 1000 for milliseconds,
    1_000_000 for microseconds. With a ``tag`` the running total is printed
    on every stop.
    """

    def __init__(self, units: float = 1, tag: Optional[str] = None) -> None:
        self.units = units
        self.tag = tag
        self.elapsed = 0.0
        self._stamp = time.perf_counter_ns()

    def reset(self) -> None:
        self._stamp = time.perf_counter_ns()

    def stop(self) -> float:
        self.elapsed += (time.perf_counter_ns() - self._stamp) / 1.0e9 * self.units
        if self.tag is not None:
            print(f"{self.tag} {self.elapsed:g}")
        return self.elapsed

    def __enter__(self) -> "AutoTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()