"""pyhrtime - High-resolution time conversion helpers for telemetry."""

from __future__ import annotations

from pyhrtime._errors import InvalidInputTypeError, TimeConversionError
from pyhrtime._time import (
    add_high_res_times,
    current_high_res_time,
    get_time_origin,
    high_res_time_duration,
    high_res_time_to_microseconds,
    high_res_time_to_milliseconds,
    high_res_time_to_nanoseconds,
    high_res_time_to_timestamp,
    number_to_high_res_time,
    time_input_to_high_res_time,
)
from pyhrtime._types import HighResTime, TimeInput, is_high_res_time, is_time_input
from pyhrtime.clock import (
    Clock,
    ManualClock,
    PerformanceClock,
    get_clock,
    get_default_clock,
    set_default_clock,
)

__version__ = "0.1.0"

__all__ = [
    "add_high_res_times",
    "current_high_res_time",
    "get_time_origin",
    "high_res_time_duration",
    "high_res_time_to_microseconds",
    "high_res_time_to_milliseconds",
    "high_res_time_to_nanoseconds",
    "high_res_time_to_timestamp",
    "is_high_res_time",
    "is_time_input",
    "number_to_high_res_time",
    "time_input_to_high_res_time",
    "HighResTime",
    "TimeInput",
    "Clock",
    "ManualClock",
    "PerformanceClock",
    "get_clock",
    "get_default_clock",
    "set_default_clock",
    "InvalidInputTypeError",
    "TimeConversionError",
]
