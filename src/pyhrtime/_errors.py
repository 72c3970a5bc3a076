"""Exception hierarchy for time conversion."""


class TimeConversionError(Exception):
    """Base exception for time conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(self, user_message: str, internal_details: str = "") -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message

    def internal(self) -> str:
        return self.internal_details


class InvalidInputTypeError(TimeConversionError, TypeError):
    """Raised when a value is not a HighResTime, a number or a datetime."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_INPUT_TYPE = "invalid input type"
