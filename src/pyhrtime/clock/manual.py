"""Clock whose origin and reading are set by the caller."""

from __future__ import annotations

from pyhrtime.clock._base import Clock, LegacyTiming


class ManualClock(Clock):
    """Clock for tests and for replaying recorded readings.

    ``origin`` may be ``None`` to model a source that only provides the
    legacy ``timing.fetch_start`` field.
    """

    def __init__(
        self,
        origin: float | None = 0.0,
        reading: float = 0.0,
        legacy_timing: LegacyTiming | None = None,
    ) -> None:
        self.origin = origin
        self.reading = reading
        self.legacy_timing = legacy_timing

    def now(self) -> float:
        return self.reading

    @property
    def time_origin(self) -> float | None:
        return self.origin

    @property
    def timing(self) -> LegacyTiming | None:
        return self.legacy_timing

    def advance(self, millis: float) -> None:
        """Move the monotonic reading forward by ``millis``."""
        self.reading += millis

    def __repr__(self) -> str:
        return f"ManualClock(origin={self.origin!r}, reading={self.reading!r})"
