"""Diagnostic codes and data structures.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Conversion errors (input that cannot be resolved)
        2000-2999: Registration errors (invalid custom tokens, patterns, locales)
    """

    # Conversion errors (1000-1999)
    CONVERSION_FAILED = 1001
    DURATION_INVALID = 1002
    DURATION_UNIT_UNSUPPORTED = 1003

    # Registration errors (2000-2999)
    TOKEN_VALUE_INVALID = 2001
    PATTERN_UNKNOWN = 2002
    PATTERN_ARITY_MISMATCH = 2003
    LOCALE_UNKNOWN = 2004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: The expression or keyword the error refers to
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[CONVERSION_FAILED]: Unable to convert "next moon" into datetime
              --> input: next moon
              = help: Check the expression against the supported patterns
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
