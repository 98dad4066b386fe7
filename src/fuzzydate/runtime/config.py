"""FuzzyConfig: custom vocabulary and conversion entry points.

A FuzzyConfig owns the caller-registered token aliases ("maanantai" ->
Monday) and pattern aliases ("viime [wday]" -> "last [wday]"), plus the
week-start convention. Aliases are merged with the built-in tables on every
conversion; they never replace them.

Thread safety: conversions hold the read lock only while snapshotting the
alias tables, registration holds the write lock while publishing new tables.
Registration validates a whole batch before publishing, so a rejected call
registers nothing.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time, timedelta, timezone
from types import MappingProxyType
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from fuzzydate.diagnostics import (
    ConversionError,
    DurationUnitError,
    ErrorTemplate,
    RegistrationError,
)
from fuzzydate.enums import TimeUnit
from fuzzydate.locale_utils import (
    get_calendar_tokens,
    locale_week_starts_monday,
    normalize_locale,
)
from fuzzydate.syntax import Token, TokenKind, is_time_duration, token_from_gid, tokenize

from .context import FuzzyContext, Rules
from .engine import convert, find_pattern_calls
from .patterns import PATTERN_RULES, Pattern, placeholder_count
from .rwlock import RWLock

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["FuzzyConfig"]

logger = logging.getLogger(__name__)

# Reference instant for durations: a Monday at midnight UTC. With Monday-first
# weeks, a week step from it is exactly seven days.
_DURATION_ANCHOR = datetime(2024, 1, 1, tzinfo=UTC)

_UNIT_KINDS = frozenset({TokenKind.UNIT, TokenKind.SHORT_UNIT, TokenKind.LONG_UNIT})

_UNSUPPORTED_DURATION_UNITS = {
    TimeUnit.YEARS: "years",
    TimeUnit.MONTHS: "months",
}


class FuzzyConfig:
    """Vocabulary, conventions and entry points for fuzzy date conversion.

    Example:
        >>> config = FuzzyConfig(week_start_mon=False)
        >>> config.add_tokens({"maanantai": TOKEN_WDAY_MON})
        >>> config.add_patterns({"ensi [wday]": Pattern.NEXT_WDAY})
        >>> config.to_datetime("ensi maanantai", now).date()
        datetime.date(2024, 1, 22)
    """

    __slots__ = ("_locale", "_lock", "_patterns", "_tokens", "_week_start_mon")

    def __init__(
        self,
        *,
        week_start_mon: bool | None = None,
        locale: str | None = None,
    ) -> None:
        """Initialize FuzzyConfig.

        Args:
            week_start_mon: True for Monday-first weeks, False for Sunday-first.
                Defaults to the locale's convention, or Monday without a locale.
            locale: Locale whose month and weekday names are registered as
                custom tokens (BCP-47 or POSIX, e.g. "fi-FI")

        Raises:
            RegistrationError: If the locale is not known to Babel.
        """
        self._lock = RWLock()
        self._tokens: Mapping[str, Token] = MappingProxyType({})
        self._patterns: Mapping[str, str] = MappingProxyType({})
        self._locale: str | None = None
        self._week_start_mon = True if week_start_mon is None else week_start_mon

        if locale is not None:
            self.add_locale(locale)
            self._locale = normalize_locale(locale)
            if week_start_mon is None:
                self._week_start_mon = locale_week_starts_monday(locale)

        logger.info(
            "FuzzyConfig initialized for locale: %s (week starts %s)",
            self._locale or "none",
            "Monday" if self._week_start_mon else "Sunday",
        )

    @property
    def locale(self) -> str | None:
        """Normalized locale given at construction, if any."""
        return self._locale

    @property
    def week_start_mon(self) -> bool:
        """True when weeks start on Monday by default."""
        return self._week_start_mon

    @property
    def tokens(self) -> Mapping[str, Token]:
        """Read-only snapshot of the custom token aliases."""
        with self._lock.read():
            return self._tokens

    @property
    def patterns(self) -> Mapping[str, str]:
        """Read-only snapshot of the custom pattern aliases."""
        with self._lock.read():
            return self._patterns

    def add_tokens(self, tokens: Mapping[str, int]) -> None:
        """Register custom keywords for weekdays, months and units.

        Args:
            tokens: Keyword -> token identifier from fuzzydate.constants
                (e.g. {"maanantai": TOKEN_WDAY_MON}). Keywords are
                case-insensitive.

        Raises:
            RegistrationError: If any identifier is not a valid token; no
                keyword from this call is registered.
        """
        decoded = {
            keyword.lower(): self._validate_token(keyword, gid)
            for keyword, gid in tokens.items()
        }

        with self._lock.write():
            merged = dict(self._tokens)
            merged.update(decoded)
            self._tokens = MappingProxyType(merged)

        logger.debug("Registered %d custom token(s)", len(decoded))

    def add_patterns(self, patterns: Mapping[str, str]) -> None:
        """Register aliases for built-in pattern templates.

        Args:
            patterns: Alias -> built-in template (a Pattern member or its
                string), e.g. {"viime [wday]": Pattern.LAST_WDAY}

        Raises:
            RegistrationError: If a target is not a built-in template, or the
                alias has a different number of placeholders than its target;
                no alias from this call is registered.
        """
        validated = {
            alias.lower(): self._validate_pattern(alias, target)
            for alias, target in patterns.items()
        }

        with self._lock.write():
            merged = dict(self._patterns)
            merged.update(validated)
            self._patterns = MappingProxyType(merged)

        logger.debug("Registered %d custom pattern(s)", len(validated))

    def add_locale(self, locale_code: str) -> None:
        """Register the CLDR month and weekday names of a locale.

        Raises:
            RegistrationError: If the locale is not known to Babel.
        """
        try:
            gids = get_calendar_tokens(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            raise RegistrationError(
                ErrorTemplate.locale_unknown(locale_code), key=locale_code
            ) from e

        if not gids:
            logger.warning("Locale %s provided no calendar names to register", locale_code)
            return
        self.add_tokens(gids)

    def to_datetime(
        self,
        source: str,
        now: datetime | None = None,
        *,
        week_start_mon: bool | None = None,
    ) -> datetime:
        """Convert an expression into a datetime.

        Args:
            source: Expression such as "yesterday" or "next Friday"
            now: Reference time; defaults to the current local time. Naive
                values are taken as local time.
            week_start_mon: Override the configured week start

        Returns:
            Timezone-aware datetime with a fixed UTC offset.

        Raises:
            ConversionError: If the expression cannot be converted.
        """
        result = self._convert(source, _fixed_offset(now), week_start_mon)
        if result is None:
            raise ConversionError(
                ErrorTemplate.conversion_failed(source, "datetime"),
                input_value=source,
                target="datetime",
            )
        return result

    def to_date(
        self,
        source: str,
        today: date | None = None,
        *,
        week_start_mon: bool | None = None,
    ) -> date:
        """Convert an expression into a date, relative to local midnight of ``today``.

        Raises:
            ConversionError: If the expression cannot be converted.
        """
        reference = None if today is None else datetime.combine(today, time())
        result = self._convert(source, _fixed_offset(reference), week_start_mon)
        if result is None:
            raise ConversionError(
                ErrorTemplate.conversion_failed(source, "date"),
                input_value=source,
                target="date",
            )
        return result.date()

    def to_seconds(self, source: str) -> float:
        """Convert an exact duration ("1d 2h 30min", "-5 minutes") into seconds.

        Months and years have no fixed length and are rejected.

        Raises:
            DurationUnitError: If the duration uses months or years.
            ConversionError: If the expression is not a duration.
        """
        tokens, patterns = self._snapshot()
        pattern, values = tokenize(source, tokens)

        if not is_time_duration(pattern):
            raise ConversionError(
                ErrorTemplate.duration_invalid(source), input_value=source, target="seconds"
            )

        for token in values:
            if token.kind not in _UNIT_KINDS:
                continue
            unit = _UNSUPPORTED_DURATION_UNITS.get(TimeUnit.from_value(token.value))
            if unit is not None:
                raise DurationUnitError(
                    ErrorTemplate.duration_unit_unsupported(source, unit),
                    input_value=source,
                    unit=unit,
                )

        calls = find_pattern_calls(pattern, patterns)
        if not calls:
            raise ConversionError(
                ErrorTemplate.duration_invalid(source), input_value=source, target="seconds"
            )

        # Each term is measured from the anchor on its own, so a week term
        # following a day term still counts as exactly seven days.
        anchor = FuzzyContext(_DURATION_ANCHOR)
        rules = Rules(week_start_mon=True)
        numbers = [token.value for token in values]
        total = timedelta(0)
        cursor = 0

        for template, rule in calls:
            used = placeholder_count(template)
            try:
                total += rule(anchor, numbers[cursor : cursor + used], rules).time - anchor.time
            except (ValueError, OverflowError) as e:
                raise ConversionError(
                    ErrorTemplate.duration_invalid(source), input_value=source, target="seconds"
                ) from e
            cursor += used

        return total.total_seconds()

    def _convert(
        self,
        source: str,
        now: datetime,
        week_start_mon: bool | None,
    ) -> datetime | None:
        tokens, patterns = self._snapshot()
        pattern, values = tokenize(source, tokens)
        return convert(
            pattern,
            [token.value for token in values],
            now,
            self._week_start_mon if week_start_mon is None else week_start_mon,
            patterns,
        )

    def _snapshot(self) -> tuple[Mapping[str, Token], Mapping[str, str]]:
        with self._lock.read():
            return self._tokens, self._patterns

    @staticmethod
    def _validate_token(keyword: str, gid: int) -> Token:
        token = token_from_gid(gid)
        if token is None:
            raise RegistrationError(
                ErrorTemplate.token_value_invalid(keyword, gid), key=keyword
            )
        return token

    @staticmethod
    def _validate_pattern(alias: str, target: str) -> str:
        if target not in PATTERN_RULES:
            raise RegistrationError(
                ErrorTemplate.pattern_unknown(alias, str(target)), key=alias
            )

        alias_count = placeholder_count(alias)
        target_count = placeholder_count(target)
        if alias_count != target_count:
            raise RegistrationError(
                ErrorTemplate.pattern_arity_mismatch(alias, target, alias_count, target_count),
                key=alias,
            )
        return Pattern(target).value


def _fixed_offset(value: datetime | None) -> datetime:
    """Normalize a reference time to a fixed UTC offset."""
    if value is None:
        value = datetime.now().astimezone()
    elif value.tzinfo is None or value.utcoffset() is None:
        value = value.astimezone()

    offset = value.utcoffset() or timedelta(0)
    return value.astimezone(timezone(offset))
