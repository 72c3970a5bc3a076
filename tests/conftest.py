"""Shared test fixtures."""

import pytest

from pyhrtime.clock import ManualClock, set_default_clock

# 2019-05-14T17:00:00Z
ORIGIN_MILLIS = 1_557_853_200_000.0


@pytest.fixture
def manual_clock():
    return ManualClock(origin=ORIGIN_MILLIS)


@pytest.fixture
def default_clock(manual_clock):
    previous = set_default_clock(manual_clock)
    yield manual_clock
    set_default_clock(previous)
