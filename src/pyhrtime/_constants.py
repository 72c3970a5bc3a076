"""Unit constants for high-resolution time conversion."""

NANOSECOND_DIGITS = 9
"""Fractional digits written by ``high_res_time_to_timestamp``."""

NANOSECOND_DIGITS_IN_MILLIS = 6
"""Digits between a millisecond and a nanosecond."""

MILLISECONDS_TO_NANOSECONDS = 10**NANOSECOND_DIGITS_IN_MILLIS
"""Nanoseconds in one millisecond."""

SECOND_TO_NANOSECONDS = 10**NANOSECOND_DIGITS
"""Nanoseconds in one second; the carry/borrow threshold."""

MILLISECONDS_PER_SECOND = 1000
