"""
Execution timing.

Backends time their phases with a Timer and store the breakdown in
Result.timing. CUDA kernels run asynchronously, so GPU timings synchronize
the device before each reading.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating wall-clock timer with named sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('normalization'):
            ...
        with timer.section('iterations'):
            ...
        timer.stop()
        timer.result()
        # {'total_seconds': 0.012, 'normalization': 0.001, 'iterations': 0.011}
    """

    def __init__(self, sync_cuda: bool = False):
        self._sync_cuda = sync_cuda
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def _now(self) -> float:
        if self._sync_cuda:
            import torch
            if torch.cuda.is_available():
                torch.cuda.synchronize()
        return time.perf_counter()

    def start(self) -> None:
        self._start_time = self._now()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._now() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time a named block; repeated sections accumulate."""
        begin = self._now()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + self._now() - begin

    def result(self) -> dict[str, float]:
        """
        Timing breakdown in seconds.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}
