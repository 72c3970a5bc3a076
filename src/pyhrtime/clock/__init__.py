"""Platform clock sources for high-resolution time conversion."""

from __future__ import annotations

import logging

from pyhrtime.clock._base import Clock, ClockName, LegacyTiming
from pyhrtime.clock.manual import ManualClock
from pyhrtime.clock.performance import PerformanceClock

__all__ = [
    "Clock",
    "ClockName",
    "LegacyTiming",
    "ManualClock",
    "PerformanceClock",
    "get_clock",
    "get_default_clock",
    "set_default_clock",
]

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, type[Clock]] = {
    ClockName.PERFORMANCE: PerformanceClock,
    ClockName.MANUAL: ManualClock,
}

_default_clock: Clock = PerformanceClock()


def get_clock(name: str) -> Clock:
    """Get a new clock instance by name.

    Args:
        name: Clock name (``"performance"`` or ``"manual"``).

    Returns:
        A Clock instance.

    Raises:
        ValueError: If the clock name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown clock: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()


def get_default_clock() -> Clock:
    """Return the clock used when an operation is called without ``clock=``."""
    return _default_clock


def set_default_clock(clock: Clock) -> Clock:
    """Replace the process-wide default clock and return the previous one.

    Raises:
        TypeError: If ``clock`` is not a Clock.
    """
    global _default_clock
    if not isinstance(clock, Clock):
        raise TypeError(f"expected a Clock, got {type(clock).__name__}")
    previous = _default_clock
    _default_clock = clock
    logger.debug("default clock replaced: %r -> %r", previous, clock)
    return previous
