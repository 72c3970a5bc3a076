"""Clock source tests."""

import time

import pytest

from pyhrtime import current_high_res_time, high_res_time_to_milliseconds
from pyhrtime.clock import (
    Clock,
    ClockName,
    LegacyTiming,
    ManualClock,
    PerformanceClock,
    get_clock,
    get_default_clock,
    set_default_clock,
)


class TestGetClock:
    @pytest.mark.parametrize(
        "name, cls",
        [("performance", PerformanceClock), ("manual", ManualClock)],
    )
    def test_known_names(self, name, cls):
        assert isinstance(get_clock(name), cls)

    def test_enum_name(self):
        assert isinstance(get_clock(ClockName.MANUAL), ManualClock)

    def test_returns_new_instance(self):
        assert get_clock("manual") is not get_clock("manual")

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="unknown clock: 'sundial'"):
            get_clock("sundial")


class TestDefaultClock:
    def test_default_is_performance_clock(self):
        assert isinstance(get_default_clock(), PerformanceClock)

    def test_set_returns_previous(self):
        replacement = ManualClock()
        previous = set_default_clock(replacement)
        try:
            assert get_default_clock() is replacement
        finally:
            assert set_default_clock(previous) is replacement

    def test_rejects_non_clock(self):
        with pytest.raises(TypeError, match="expected a Clock"):
            set_default_clock(time.time)


class TestPerformanceClock:
    def test_origin_tracks_wall_clock(self):
        clock = PerformanceClock()
        assert abs(clock.time_origin - time.time() * 1000) < 1000

    def test_readings_do_not_decrease(self):
        clock = PerformanceClock()
        first = clock.now()
        second = clock.now()
        assert 0 <= first <= second

    def test_legacy_timing_matches_origin(self):
        clock = PerformanceClock()
        assert clock.timing == LegacyTiming(fetch_start=clock.time_origin)

    def test_current_time_close_to_wall_clock(self):
        clock = PerformanceClock()
        now_millis = high_res_time_to_milliseconds(current_high_res_time(clock=clock))
        assert abs(now_millis - time.time() * 1000) < 1000


class TestManualClock:
    def test_advance(self):
        clock = ManualClock(origin=10.0, reading=1.0)
        clock.advance(2.5)
        assert clock.now() == 3.5
        assert clock.time_origin == 10.0

    def test_no_legacy_timing_by_default(self):
        assert ManualClock().timing is None


class TestClockInterface:
    def test_abstract(self):
        with pytest.raises(TypeError):
            Clock()

    def test_subclass_defaults_timing_to_none(self):
        class FixedClock(Clock):
            def now(self):
                return 1.0

            @property
            def time_origin(self):
                return 2.0

        clock = FixedClock()
        assert clock.timing is None
        assert current_high_res_time(clock=clock) == (0, 3000000)
