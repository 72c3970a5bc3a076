"""Clock backed by the interpreter's performance counter."""

from __future__ import annotations

import time

from pyhrtime._constants import MILLISECONDS_TO_NANOSECONDS
from pyhrtime.clock._base import Clock, LegacyTiming


class PerformanceClock(Clock):
    """Monotonic clock anchored to the wall clock at construction.

    The perf-counter and wall-clock samples are taken back to back so that
    ``time_origin + now()`` tracks epoch time for the life of the clock.
    """

    def __init__(self) -> None:
        self._origin_perf_ns = time.perf_counter_ns()
        self._origin_epoch_ns = time.time_ns()

    def now(self) -> float:
        return (time.perf_counter_ns() - self._origin_perf_ns) / MILLISECONDS_TO_NANOSECONDS

    @property
    def time_origin(self) -> float:
        return self._origin_epoch_ns / MILLISECONDS_TO_NANOSECONDS

    @property
    def timing(self) -> LegacyTiming:
        return LegacyTiming(fetch_start=self.time_origin)
