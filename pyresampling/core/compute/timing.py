"""
Wall-clock timing for backends and composite solvers.

A Timer measures one run from start() to stop() and, inside it, any
number of named sections. The result dict always has 'total_seconds';
section names are added as they are used, e.g.

    {'total_seconds': 0.21, 'observed_stat': 0.0001, 'replicates': 0.20}
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """Total run time plus accumulated time per named section."""

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Add the time spent in the block to section `name`.

        Re-entering a name adds to its running total, so a section used
        inside a loop reports the sum over all iterations.
        """
        began = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - began
            self._sections[name] = self._sections.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Timings in seconds, keyed by 'total_seconds' and section name.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block of caller code.

        with timed() as timer:
            null = permutation_null_distribution(sample, 5000, seed=1)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
