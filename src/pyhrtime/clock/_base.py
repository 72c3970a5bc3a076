"""Abstract base class for platform clocks."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass


class ClockName(enum.StrEnum):
    PERFORMANCE = "performance"
    MANUAL = "manual"


@dataclass(frozen=True)
class LegacyTiming:
    """Navigation-timing style fields exposed by older clock sources."""

    fetch_start: float | None = None


class Clock(ABC):
    """Abstract base class defining the platform clock interface.

    A clock supplies a monotonic reading in milliseconds since its origin,
    and that origin expressed in epoch milliseconds.
    """

    @abstractmethod
    def now(self) -> float:
        """Milliseconds elapsed since ``time_origin``."""

    @property
    @abstractmethod
    def time_origin(self) -> float | None:
        """Epoch milliseconds of the origin, or ``None`` if unavailable."""

    @property
    def timing(self) -> LegacyTiming | None:
        return None
