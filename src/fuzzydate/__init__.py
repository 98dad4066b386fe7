"""fuzzydate - convert loosely written date expressions into exact times.

Resolves expressions such as "yesterday", "next Friday", "first day of last
month", "-2d 1h", "2023-12-07 15:02:01" or "@1705072948" relative to a
reference time, and exact durations such as "1d 2h 30min" into seconds.

Public API:
    to_datetime - Expression to timezone-aware datetime
    to_date - Expression to date
    to_seconds - Duration expression to seconds
    add_tokens / add_patterns / add_locale - Extend the default vocabulary
    FuzzyConfig - Scoped vocabulary and week-start convention
    Pattern - Built-in pattern templates (targets for add_patterns)
    tokenize / convert / is_time_duration - Lower-level pipeline stages

Exceptions:
    FuzzyDateError - Base exception class
    ConversionError - Expression could not be converted
    DurationUnitError - Duration uses months or years
    RegistrationError - Invalid custom token, pattern or locale

Submodules:
    fuzzydate.constants - Token identifiers for add_tokens()
    fuzzydate.diagnostics - Diagnostic codes, templates and formatting
    fuzzydate.core - Calendar arithmetic
"""

from . import constants
from .api import (
    add_locale,
    add_patterns,
    add_tokens,
    get_default_config,
    to_date,
    to_datetime,
    to_seconds,
)
from .diagnostics import ConversionError, DurationUnitError, FuzzyDateError, RegistrationError
from .runtime import FuzzyConfig, Pattern, convert
from .syntax import Token, TokenKind, is_time_duration, tokenize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("fuzzydate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConversionError",
    "DurationUnitError",
    "FuzzyConfig",
    "FuzzyDateError",
    "Pattern",
    "RegistrationError",
    "Token",
    "TokenKind",
    "__version__",
    "add_locale",
    "add_patterns",
    "add_tokens",
    "constants",
    "convert",
    "get_default_config",
    "is_time_duration",
    "to_date",
    "to_datetime",
    "to_seconds",
    "tokenize",
]
