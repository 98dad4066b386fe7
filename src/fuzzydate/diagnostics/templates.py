"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def conversion_failed(source: str, target: str) -> Diagnostic:
        """Expression matched no supported pattern or gave an invalid date.

        Args:
            source: The expression as given by the caller
            target: What it was converted into ('datetime', 'date')

        Returns:
            Diagnostic for CONVERSION_FAILED
        """
        msg = f'Unable to convert "{source}" into {target}'
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_FAILED,
            message=msg,
            hint="Check the expression against the supported patterns and calendar ranges",
            input_value=source,
        )

    @staticmethod
    def duration_invalid(source: str) -> Diagnostic:
        """Expression is not made of numbers and units only.

        Args:
            source: The expression as given by the caller

        Returns:
            Diagnostic for DURATION_INVALID
        """
        msg = f'Unable to convert "{source}" into seconds'
        return Diagnostic(
            code=DiagnosticCode.DURATION_INVALID,
            message=msg,
            hint='Durations combine numbers and units, e.g. "1d 2h 30min"',
            input_value=source,
        )

    @staticmethod
    def duration_unit_unsupported(source: str, unit: str) -> Diagnostic:
        """Duration uses months or years, which have no fixed length.

        Args:
            source: The expression as given by the caller
            unit: Rejected unit name ('months', 'years')

        Returns:
            Diagnostic for DURATION_UNIT_UNSUPPORTED
        """
        msg = f"Converting {unit} into seconds is not supported"
        return Diagnostic(
            code=DiagnosticCode.DURATION_UNIT_UNSUPPORTED,
            message=msg,
            hint="Use weeks or smaller units for exact durations",
            input_value=source,
        )

    @staticmethod
    def token_value_invalid(keyword: str, value: object) -> Diagnostic:
        """Custom token refers to an unknown token identifier.

        Args:
            keyword: The custom keyword being registered
            value: The rejected token identifier

        Returns:
            Diagnostic for TOKEN_VALUE_INVALID
        """
        msg = f"Invalid token value {value!r} for keyword '{keyword}'"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_VALUE_INVALID,
            message=msg,
            hint="Use one of the TOKEN_* identifiers from fuzzydate.constants",
            input_value=keyword,
        )

    @staticmethod
    def pattern_unknown(alias: str, target: str) -> Diagnostic:
        """Custom pattern points to a template that does not exist.

        Args:
            alias: The custom pattern being registered
            target: The unknown template it refers to

        Returns:
            Diagnostic for PATTERN_UNKNOWN
        """
        msg = f"Pattern '{alias}' refers to unknown pattern '{target}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNKNOWN,
            message=msg,
            hint="Use a member of fuzzydate.Pattern as the target",
            input_value=alias,
        )

    @staticmethod
    def pattern_arity_mismatch(
        alias: str, target: str, alias_count: int, target_count: int
    ) -> Diagnostic:
        """Custom pattern has a different number of placeholders than its target.

        Args:
            alias: The custom pattern being registered
            target: The template it refers to
            alias_count: Placeholders in the alias
            target_count: Placeholders in the target

        Returns:
            Diagnostic for PATTERN_ARITY_MISMATCH
        """
        msg = (
            f"Pattern '{alias}' has {alias_count} placeholder(s), "
            f"but '{target}' expects {target_count}"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_ARITY_MISMATCH,
            message=msg,
            hint="Keep the same placeholders as the target pattern",
            input_value=alias,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale has no CLDR data.

        Args:
            locale_code: The locale code that was not recognized

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX locale code known to Babel, e.g. 'fi_FI'",
            input_value=locale_code,
        )
