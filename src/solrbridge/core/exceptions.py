"""Translation errors raised on malformed client input."""


class TranslationError(Exception):
    """Base exception for request translation errors."""


class InvalidParameterError(TranslationError):
    """Raised when a request parameter cannot be interpreted.

    Args:
        param: Name of the offending parameter.
        value: The raw value that was rejected.
        reason: Short description of what was expected.
    """

    def __init__(self, param: str, value: str, reason: str = "expected a non-negative integer") -> None:
        self.param = param
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value '{value}' for parameter '{param}': {reason}")
