"""Wall-clock timing with millisecond resolution."""

from __future__ import annotations

from time import perf_counter
from typing import Any, Callable


class Timer:
    """A start/stop stopwatch reporting whole elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def reset(self) -> None:
        """Mark the timer as not running."""
        self._running = False

    def start(self) -> None:
        """Start (or restart) measuring."""
        self._running = True
        self._start = perf_counter()

    def stop(self) -> None:
        """Stop measuring; has no effect when the timer is not running."""
        if self._running:
            self._end = perf_counter()
            self._running = False

    def result(self) -> int:
        """Elapsed milliseconds, truncated; measured up to now while running."""
        end = perf_counter() if self._running else self._end
        return int((end - self._start) * 1000)


def measure_time_ms(func: Callable[[], Any]) -> int:
    """Call ``func`` once and return how long it took in whole milliseconds."""
    timer = Timer()
    timer.start()
    func()
    timer.stop()
    return timer.result()