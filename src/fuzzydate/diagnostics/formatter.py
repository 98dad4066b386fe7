"""Diagnostic formatting service.

Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render Diagnostic objects for people or tools.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate user input to max_content_length
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> diagnostic = ErrorTemplate.conversion_failed("next moon", "datetime")
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        CONVERSION_FAILED: Unable to convert "next moon" into datetime
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[DURATION_UNIT_UNSUPPORTED]: Converting years into seconds is not supported
              --> input: 1y 2d
              = help: Use weeks or smaller units for exact durations
        """
        parts = [f"error[{diagnostic.code.name}]: {self._escape(diagnostic.message)}"]

        if diagnostic.input_value is not None:
            parts.append(f"  --> input: {self._escape(diagnostic.input_value)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._escape(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
        }

        if diagnostic.input_value is not None:
            data["input_value"] = self._maybe_sanitize(diagnostic.input_value)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _escape(self, text: str) -> str:
        """Escape line breaks so user input cannot forge extra output lines."""
        escaped = text.replace("\r", "\\r").replace("\n", "\\n")
        return self._maybe_sanitize(escaped)

    def _maybe_sanitize(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
