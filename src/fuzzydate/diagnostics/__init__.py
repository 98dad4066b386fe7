"""Diagnostic system for fuzzydate errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ConversionError, DurationUnitError, FuzzyDateError, RegistrationError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConversionError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DurationUnitError",
    "ErrorTemplate",
    "FuzzyDateError",
    "OutputFormat",
    "RegistrationError",
]
