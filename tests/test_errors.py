"""Error class hierarchy tests."""

import pytest

from pyhrtime import time_input_to_high_res_time
from pyhrtime._errors import (
    ERR_MSG_INVALID_INPUT_TYPE,
    InvalidInputTypeError,
    TimeConversionError,
)


class TestTimeConversionErrorBase:
    def test_str_returns_user_message(self):
        err = TimeConversionError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = TimeConversionError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = TimeConversionError("same message")
        assert err.internal() == "same message"

    def test_is_exception(self):
        assert isinstance(TimeConversionError("test"), Exception)


class TestInvalidInputTypeError:
    def test_hierarchy(self):
        assert issubclass(InvalidInputTypeError, TimeConversionError)
        assert issubclass(InvalidInputTypeError, TypeError)

    def test_raised_for_string(self, default_clock):
        with pytest.raises(InvalidInputTypeError, match=ERR_MSG_INVALID_INPUT_TYPE):
            time_input_to_high_res_time("bad")

    def test_caught_as_type_error(self, default_clock):
        with pytest.raises(TypeError):
            time_input_to_high_res_time(None)

    def test_dual_messaging(self, default_clock):
        with pytest.raises(InvalidInputTypeError) as exc_info:
            time_input_to_high_res_time({"seconds": 1})
        assert str(exc_info.value) == "invalid input type"
        assert "dict" not in str(exc_info.value)
        assert "dict" in exc_info.value.internal()
