"""Conversion runtime.

Provides the pattern library, the conversion engine and the FuzzyConfig API.
Depends on the syntax package for tokenization and on core for calendar
arithmetic.

Python 3.13+.
"""

from .config import FuzzyConfig
from .context import FuzzyContext, Rules
from .engine import convert, find_pattern_calls
from .patterns import PATTERN_RULES, Pattern, PatternRule, placeholder_count
from .rwlock import RWLock

__all__ = [
    "PATTERN_RULES",
    "FuzzyConfig",
    "FuzzyContext",
    "Pattern",
    "PatternRule",
    "RWLock",
    "Rules",
    "convert",
    "find_pattern_calls",
    "placeholder_count",
]
