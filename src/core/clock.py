import time
from typing import Callable, Optional


class Clock:
    """Monotonic elapsed-time source in seconds.

    `time_source` is injectable so frame timing can be driven by hand.
    """

    def __init__(self, time_source: Callable[[], float] = time.perf_counter) -> None:
        self._time_source = time_source
        self._start: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._start is not None

    def start(self) -> None:
        self._start = self._time_source()

    def get_elapsed_time(self) -> float:
        # Starts lazily on first read
        if self._start is None:
            self.start()
        return self._time_source() - self._start


class ManualTimeSource:
    """Callable time source advanced explicitly (headless runs and tests)."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = float(now)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("Time only moves forward")
        self.now += seconds
        return self.now
