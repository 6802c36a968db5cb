"""
Wall-clock timing for Result.timing.

Decoding is cheap, so timings are mostly useful for spotting pathological
inputs (very long parameter lists, rule tables that backtrack).
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating timer with named sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('decode'):
            ...
        timer.stop()
        timer.result()
        # {'total_seconds': 0.0004, 'decode': 0.0003}

    A section entered more than once accumulates.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._started is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """
        'total_seconds' followed by the sections, in first-entered order.

        Raises:
            RuntimeError: If the timer has not been stopped.
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
