"""Time representation types and runtime type guards."""

from __future__ import annotations

import numbers
from datetime import datetime
from typing import Any, NamedTuple, TypeGuard


class HighResTime(NamedTuple):
    """Whole seconds since epoch (or of a duration) plus a nanosecond remainder."""

    seconds: int
    nanoseconds: int


TimeInput = HighResTime | tuple[int, int] | list[int] | int | float | datetime
"""Any value accepted by ``time_input_to_high_res_time``."""


def is_number(value: Any) -> bool:
    """Report whether ``value`` is a real number; ``bool`` does not count."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_high_res_time(value: Any) -> TypeGuard[HighResTime]:
    """Check that ``value`` is a list or tuple of exactly two numbers.

    This is a shape check only; the nanosecond range is not verified.
    """
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and is_number(value[0])
        and is_number(value[1])
    )


def is_time_input(value: Any) -> TypeGuard[TimeInput]:
    """Check that ``value`` is a HighResTime, a number or a datetime."""
    return is_high_res_time(value) or is_number(value) or isinstance(value, datetime)
