"""fuzzydate exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic built by
ErrorTemplate. The concrete errors also subclass ValueError, so callers that
only expect the standard "bad value" contract keep working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConversionError",
    "DurationUnitError",
    "FuzzyDateError",
    "RegistrationError",
]


class FuzzyDateError(Exception):
    """Base exception for all fuzzydate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FuzzyDateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ConversionError(FuzzyDateError, ValueError):
    """Expression could not be converted.

    Attributes:
        input_value: The expression that failed to convert
        target: What the expression was converted into
            ('datetime', 'date', 'seconds')

    Example:
        >>> try:
        ...     to_datetime("next moon")
        ... except ConversionError as e:
        ...     print(e)
        Unable to convert "next moon" into datetime
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        target: str = "",
    ) -> None:
        super().__init__(message)
        self.input_value = input_value
        self.target = target


class DurationUnitError(ConversionError):
    """Duration uses a unit without a fixed length in seconds (months, years).

    Attributes:
        unit: Name of the rejected unit ('months' or 'years')
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        unit: str = "",
    ) -> None:
        super().__init__(message, input_value=input_value, target="seconds")
        self.unit = unit


class RegistrationError(FuzzyDateError, ValueError):
    """Custom token, pattern or locale cannot be registered.

    Attributes:
        key: The keyword, alias or locale code that was rejected
    """

    def __init__(self, message: str | Diagnostic, *, key: str = "") -> None:
        super().__init__(message)
        self.key = key
