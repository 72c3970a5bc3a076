"""Conversions between epoch milliseconds, clock readings and HighResTime."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Any

from pyhrtime._constants import (
    MILLISECONDS_PER_SECOND,
    MILLISECONDS_TO_NANOSECONDS,
    NANOSECOND_DIGITS,
    SECOND_TO_NANOSECONDS,
)
from pyhrtime._errors import ERR_MSG_INVALID_INPUT_TYPE, InvalidInputTypeError
from pyhrtime._types import HighResTime, is_high_res_time, is_number
from pyhrtime.clock import Clock, get_default_clock

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NAIVE_EPOCH = datetime(1970, 1, 1)
_ONE_MICROSECOND = timedelta(microseconds=1)


def _trunc(value: float) -> Any:
    # NaN and infinities pass through unchanged
    if not math.isfinite(value):
        return value
    return math.trunc(value)


def _round_half_away(value: float) -> Any:
    """Round to the nearest integer, ties away from zero."""
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def number_to_high_res_time(epoch_millis: float) -> HighResTime:
    """Split epoch milliseconds into whole seconds and a nanosecond remainder.

    Sub-nanosecond accuracy is rounded to the nearest nanosecond. The
    remainder carries the sign of ``epoch_millis``.
    """
    seconds = _trunc(epoch_millis / MILLISECONDS_PER_SECOND)
    if math.isfinite(epoch_millis):
        remainder = math.fmod(epoch_millis, MILLISECONDS_PER_SECOND)
    else:
        remainder = math.nan
    nanos = _round_half_away(remainder * MILLISECONDS_TO_NANOSECONDS)
    return HighResTime(seconds, nanos)


def get_time_origin(*, clock: Clock | None = None) -> float:
    """Return the clock origin in epoch milliseconds.

    Falls back to the legacy ``timing.fetch_start`` field when the clock
    does not report a numeric origin, and to NaN when neither is a number.
    """
    if clock is None:
        clock = get_default_clock()
    time_origin = clock.time_origin
    if not is_number(time_origin):
        timing = clock.timing
        time_origin = timing.fetch_start if timing is not None else None
        logger.debug("clock %r has no time origin, using fetch_start=%r", clock, time_origin)
        if not is_number(time_origin):
            time_origin = math.nan
    return time_origin


def current_high_res_time(
    monotonic_now: float | None = None, *, clock: Clock | None = None
) -> HighResTime:
    """Return the current time, or the time of a monotonic reading, as HighResTime.

    Args:
        monotonic_now: Milliseconds since the clock origin. Read from the
            clock when omitted.
        clock: Clock to read. Defaults to the process-wide default clock.

    Note:
        Nanoseconds are carried into seconds only when their sum is strictly
        greater than one second, so a sum of exactly 1e9 is returned as is.
    """
    if clock is None:
        clock = get_default_clock()
    time_origin = number_to_high_res_time(get_time_origin(clock=clock))
    now = number_to_high_res_time(monotonic_now if is_number(monotonic_now) else clock.now())

    seconds = time_origin[0] + now[0]
    nanos = time_origin[1] + now[1]

    if nanos > SECOND_TO_NANOSECONDS:
        nanos -= SECOND_TO_NANOSECONDS
        seconds += 1

    return HighResTime(seconds, nanos)


def time_input_to_high_res_time(value: Any, *, clock: Clock | None = None) -> HighResTime:
    """Convert a HighResTime, a number or a datetime to HighResTime.

    A number smaller than the clock origin is taken as a monotonic reading,
    anything else as epoch milliseconds. HighResTime values are returned
    unchanged. Naive datetimes are read as UTC.

    Raises:
        InvalidInputTypeError: If ``value`` is none of the accepted types.
    """
    if is_high_res_time(value):
        return value
    if is_number(value):
        if value < get_time_origin(clock=clock):
            logger.debug("treating %r as a monotonic clock reading", value)
            return current_high_res_time(value, clock=clock)
        logger.debug("treating %r as epoch milliseconds", value)
        return number_to_high_res_time(value)
    if isinstance(value, datetime):
        return number_to_high_res_time(_datetime_to_epoch_millis(value))
    raise InvalidInputTypeError(
        ERR_MSG_INVALID_INPUT_TYPE,
        f"cannot convert value of type {type(value).__name__} to HighResTime",
    )


def _datetime_to_epoch_millis(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return ((value - _EPOCH) // _ONE_MICROSECOND) / 1000


def high_res_time_duration(start: HighResTime, end: HighResTime) -> HighResTime:
    """Return ``end - start``.

    The nanosecond field is kept in ``[0, 1e9)`` by borrowing from seconds,
    so a negative duration has negative seconds and non-negative nanoseconds.
    """
    seconds = end[0] - start[0]
    nanos = end[1] - start[1]

    if nanos < 0:
        seconds -= 1
        nanos += SECOND_TO_NANOSECONDS

    return HighResTime(seconds, nanos)


def add_high_res_times(first: HighResTime, second: HighResTime) -> HighResTime:
    """Return the sum of two HighResTime values, carrying whole seconds."""
    seconds = first[0] + second[0]
    nanos = first[1] + second[1]

    if nanos >= SECOND_TO_NANOSECONDS:
        nanos -= SECOND_TO_NANOSECONDS
        seconds += 1

    return HighResTime(seconds, nanos)


def high_res_time_to_timestamp(time: HighResTime) -> str:
    """Convert HighResTime to an ISO-8601 UTC string.

    For example ``(1557853200, 123456)`` becomes
    ``"2019-05-14T17:00:00.000123456Z"``.
    """
    precision = NANOSECOND_DIGITS
    tmp = f"{'0' * precision}{_number_text(time[1])}Z"
    nano_string = tmp[len(tmp) - precision - 1:]
    date = (_NAIVE_EPOCH + timedelta(seconds=time[0])).isoformat(timespec="milliseconds") + "Z"
    return date.replace("000Z", nano_string, 1)


def _number_text(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def high_res_time_to_nanoseconds(time: HighResTime) -> int:
    return time[0] * SECOND_TO_NANOSECONDS + time[1]


def high_res_time_to_milliseconds(time: HighResTime) -> int:
    return _round_half_away(time[0] * 1e3 + time[1] / 1e6)


def high_res_time_to_microseconds(time: HighResTime) -> int:
    return _round_half_away(time[0] * 1e6 + time[1] / 1e3)
