"""Pattern templates and the rule applied for each one.

A template is a pattern string built from literal words and token
placeholders. Each template maps to a rule: a pure function taking the
current context, the integer values of the template's placeholders (in
order) and the conversion rules, and returning the next context.

Templates by family:

    Keywords             now, today, midnight, yesterday, tomorrow
    Weekday offsets      this/prev/last/next [wday]
    Unit offsets         this/prev/last/next [long_unit], +/-[int][unit],
                         +/-[int][short_unit], +/-[int] [long_unit],
                         [int] [unit] ago, [int] [long_unit] ago
    Range offsets        first/last [long_unit] of [month],
                         first/last [long_unit] of this/prev/last/next [long_unit]
    Timestamps           [timestamp], [timestamp].[int]
    Dates                [year]-[int]-[int], [int].[int].[year], [int]/[int]/[year],
                         [month] [int] [year], [month] [nth] [year], [int] [month] [year],
                         [month] [int], [month] [nth], [int] [month]
    Date and time        [year]-[int]-[int] [int]:[int], ... [int]:[int]:[int]

Rules raise ValueError when the values do not describe a valid calendar
position; the engine treats that as a failed conversion.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import StrEnum
from types import MappingProxyType
from typing import TypeAlias

from fuzzydate.enums import Change, TimeUnit

from .context import FuzzyContext, Rules

__all__ = [
    "PATTERN_RULES",
    "Pattern",
    "PatternRule",
    "placeholder_count",
]

PatternRule: TypeAlias = Callable[[FuzzyContext, Sequence[int], Rules], FuzzyContext]


class Pattern(StrEnum):
    """Built-in pattern templates.

    The value of each member is the template string, so members can be used
    wherever a template string is expected: Pattern.NEXT_WDAY == "next [wday]"
    """

    NOW = "now"
    TODAY = "today"
    MIDNIGHT = "midnight"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"

    THIS_WDAY = "this [wday]"
    PREV_WDAY = "prev [wday]"
    LAST_WDAY = "last [wday]"
    NEXT_WDAY = "next [wday]"

    THIS_LONG_UNIT = "this [long_unit]"
    PREV_LONG_UNIT = "prev [long_unit]"
    LAST_LONG_UNIT = "last [long_unit]"
    NEXT_LONG_UNIT = "next [long_unit]"

    MINUS_UNIT = "-[int][unit]"
    MINUS_SHORT_UNIT = "-[int][short_unit]"
    MINUS_LONG_UNIT = "-[int] [long_unit]"
    PLUS_UNIT = "+[int][unit]"
    PLUS_SHORT_UNIT = "+[int][short_unit]"
    PLUS_LONG_UNIT = "+[int] [long_unit]"
    UNIT_AGO = "[int] [unit] ago"
    LONG_UNIT_AGO = "[int] [long_unit] ago"

    FIRST_LONG_UNIT_OF_MONTH = "first [long_unit] of [month]"
    LAST_LONG_UNIT_OF_MONTH = "last [long_unit] of [month]"
    FIRST_LONG_UNIT_OF_THIS_LONG_UNIT = "first [long_unit] of this [long_unit]"
    LAST_LONG_UNIT_OF_THIS_LONG_UNIT = "last [long_unit] of this [long_unit]"
    FIRST_LONG_UNIT_OF_PREV_LONG_UNIT = "first [long_unit] of prev [long_unit]"
    LAST_LONG_UNIT_OF_PREV_LONG_UNIT = "last [long_unit] of prev [long_unit]"
    FIRST_LONG_UNIT_OF_LAST_LONG_UNIT = "first [long_unit] of last [long_unit]"
    LAST_LONG_UNIT_OF_LAST_LONG_UNIT = "last [long_unit] of last [long_unit]"
    FIRST_LONG_UNIT_OF_NEXT_LONG_UNIT = "first [long_unit] of next [long_unit]"
    LAST_LONG_UNIT_OF_NEXT_LONG_UNIT = "last [long_unit] of next [long_unit]"

    TIMESTAMP = "[timestamp]"
    TIMESTAMP_FLOAT = "[timestamp].[int]"

    DATE_YMD = "[year]-[int]-[int]"
    DATE_DMY = "[int].[int].[year]"
    DATE_MDY = "[int]/[int]/[year]"
    DATE_MONTH_DAY = "[month] [int]"
    DATE_MONTH_DAY_YEAR = "[month] [int] [year]"
    DATE_MONTH_NTH = "[month] [nth]"
    DATE_MONTH_NTH_YEAR = "[month] [nth] [year]"
    DATE_DAY_MONTH = "[int] [month]"
    DATE_DAY_MONTH_YEAR = "[int] [month] [year]"

    DATETIME_YMD_HM = "[year]-[int]-[int] [int]:[int]"
    DATETIME_YMD_HMS = "[year]-[int]-[int] [int]:[int]:[int]"


def placeholder_count(template: str) -> int:
    """Number of token placeholders (and so token values) in a template."""
    return template.count("[")


def _unit(value: int) -> TimeUnit | None:
    return TimeUnit.from_value(value)


def _range_unit(value: int) -> TimeUnit:
    unit = TimeUnit.from_value(value)
    if unit is None:
        msg = f"Unknown unit value {value}"
        raise ValueError(msg)
    return unit


def _range_of_month(change: Change) -> PatternRule:
    """Rule for "first/last [long_unit] of [month]"."""

    def rule(ctx: FuzzyContext, values: Sequence[int], rules: Rules) -> FuzzyContext:
        if _unit(values[0]) is not TimeUnit.DAYS:
            msg = "Only days can be selected within a month"
            raise ValueError(msg)
        return ctx.offset_range_month(values[1], change).time_reset()

    return rule


def _range_of_unit(change: Change, amount: int | None) -> PatternRule:
    """Rule for "first/last [long_unit] of this/prev/last/next [long_unit]".

    ``amount`` is the offset applied to the enclosing unit first; None
    keeps the current one.
    """

    def rule(ctx: FuzzyContext, values: Sequence[int], rules: Rules) -> FuzzyContext:
        target, unit = _range_unit(values[0]), _range_unit(values[1])
        if amount is not None:
            ctx = ctx.offset_unit(unit, amount, rules)
        return ctx.offset_range_unit(target, unit, change).time_reset()

    return rule


def _step_days(amount: int) -> PatternRule:
    def rule(ctx: FuzzyContext, values: Sequence[int], rules: Rules) -> FuzzyContext:
        return ctx.time_reset().offset_unit(TimeUnit.DAYS, amount, rules)

    return rule


PATTERN_RULES: Mapping[Pattern, PatternRule] = MappingProxyType({
    # Keywords
    Pattern.NOW: lambda c, v, r: c,
    Pattern.TODAY: lambda c, v, r: c.time_reset(),
    Pattern.MIDNIGHT: lambda c, v, r: c.time_reset(),
    Pattern.YESTERDAY: _step_days(-1),
    Pattern.TOMORROW: _step_days(1),
    # Weekday offsets
    Pattern.THIS_WDAY: lambda c, v, r: c.offset_weekday(v[0], Change.NONE),
    Pattern.PREV_WDAY: lambda c, v, r: c.offset_weekday(v[0], Change.PREV),
    Pattern.LAST_WDAY: lambda c, v, r: c.offset_weekday(v[0], Change.PREV),
    Pattern.NEXT_WDAY: lambda c, v, r: c.offset_weekday(v[0], Change.NEXT),
    # Keyword unit offsets
    Pattern.THIS_LONG_UNIT: lambda c, v, r: c.offset_unit(_unit(v[0]), 0, r),
    Pattern.PREV_LONG_UNIT: lambda c, v, r: c.offset_unit(_unit(v[0]), -1, r),
    Pattern.LAST_LONG_UNIT: lambda c, v, r: c.offset_unit(_unit(v[0]), -1, r),
    Pattern.NEXT_LONG_UNIT: lambda c, v, r: c.offset_unit(_unit(v[0]), 1, r),
    # Numeric unit offsets
    Pattern.MINUS_UNIT: lambda c, v, r: c.offset_unit(_unit(v[1]), -v[0], r),
    Pattern.MINUS_SHORT_UNIT: lambda c, v, r: c.offset_unit(_unit(v[1]), -v[0], r),
    Pattern.MINUS_LONG_UNIT: lambda c, v, r: c.offset_unit(_unit(v[1]), -v[0], r),
    Pattern.PLUS_UNIT: lambda c, v, r: c.offset_unit(_unit(v[1]), v[0], r),
    Pattern.PLUS_SHORT_UNIT: lambda c, v, r: c.offset_unit(_unit(v[1]), v[0], r),
    Pattern.PLUS_LONG_UNIT: lambda c, v, r: c.offset_unit(_unit(v[1]), v[0], r),
    Pattern.UNIT_AGO: lambda c, v, r: c.offset_unit(_unit(v[1]), -v[0], r),
    Pattern.LONG_UNIT_AGO: lambda c, v, r: c.offset_unit(_unit(v[1]), -v[0], r),
    # Range offsets
    Pattern.FIRST_LONG_UNIT_OF_MONTH: _range_of_month(Change.FIRST),
    Pattern.LAST_LONG_UNIT_OF_MONTH: _range_of_month(Change.LAST),
    Pattern.FIRST_LONG_UNIT_OF_THIS_LONG_UNIT: _range_of_unit(Change.FIRST, None),
    Pattern.LAST_LONG_UNIT_OF_THIS_LONG_UNIT: _range_of_unit(Change.LAST, None),
    Pattern.FIRST_LONG_UNIT_OF_PREV_LONG_UNIT: _range_of_unit(Change.FIRST, -1),
    Pattern.LAST_LONG_UNIT_OF_PREV_LONG_UNIT: _range_of_unit(Change.LAST, -1),
    Pattern.FIRST_LONG_UNIT_OF_LAST_LONG_UNIT: _range_of_unit(Change.FIRST, -1),
    Pattern.LAST_LONG_UNIT_OF_LAST_LONG_UNIT: _range_of_unit(Change.LAST, -1),
    Pattern.FIRST_LONG_UNIT_OF_NEXT_LONG_UNIT: _range_of_unit(Change.FIRST, 1),
    Pattern.LAST_LONG_UNIT_OF_NEXT_LONG_UNIT: _range_of_unit(Change.LAST, 1),
    # @1705072948, @1705072948.544
    Pattern.TIMESTAMP: lambda c, v, r: c.date_stamp(v[0]),
    Pattern.TIMESTAMP_FLOAT: lambda c, v, r: c.date_stamp(v[0], v[1]),
    # 2023-12-07, 7.12.2023, 12/7/2023
    Pattern.DATE_YMD: lambda c, v, r: c.date_ymd(v[0], v[1], v[2]).time_reset(),
    Pattern.DATE_DMY: lambda c, v, r: c.date_ymd(v[2], v[1], v[0]).time_reset(),
    Pattern.DATE_MDY: lambda c, v, r: c.date_ymd(v[2], v[0], v[1]).time_reset(),
    # Dec 7 2023, Dec 7th 2023, 7 Dec 2023, and the same without a year
    Pattern.DATE_MONTH_DAY: lambda c, v, r: c.date_md(v[0], v[1]).time_reset(),
    Pattern.DATE_MONTH_DAY_YEAR: lambda c, v, r: c.date_ymd(v[2], v[0], v[1]).time_reset(),
    Pattern.DATE_MONTH_NTH: lambda c, v, r: c.date_md(v[0], v[1]).time_reset(),
    Pattern.DATE_MONTH_NTH_YEAR: lambda c, v, r: c.date_ymd(v[2], v[0], v[1]).time_reset(),
    Pattern.DATE_DAY_MONTH: lambda c, v, r: c.date_md(v[1], v[0]).time_reset(),
    Pattern.DATE_DAY_MONTH_YEAR: lambda c, v, r: c.date_ymd(v[2], v[1], v[0]).time_reset(),
    # 2023-12-07 15:02, 2023-12-07 15:02:01
    Pattern.DATETIME_YMD_HM: lambda c, v, r: c.date_ymd(v[0], v[1], v[2]).time_hms(v[3], v[4], 0),
    Pattern.DATETIME_YMD_HMS: lambda c, v, r: c.date_ymd(v[0], v[1], v[2]).time_hms(v[3], v[4], v[5]),
})
