"""Hypothesis property-based tests for conversion invariants.

Properties:
- "now" returns the reference instant unchanged
- Month and year steps from a month end always land on a valid, clamped day
- Integer literals classify by magnitude at the 1000 / 10000 boundaries
- "next W" followed by "prev W" returns to the week ending at the origin
- Exact durations sum their terms
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from fuzzydate import FuzzyConfig, TokenKind, tokenize
from tests.strategies import (
    FIXED_SHORT_UNITS,
    duration_parts,
    month_end_datetimes,
    month_steps,
    reference_datetimes,
    weekday_numbers,
    year_steps,
)

_CONFIG = FuzzyConfig()

_WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _month_index(value: datetime) -> int:
    return value.year * 12 + value.month - 1


class TestIdentity:
    @given(now=reference_datetimes)
    def test_now_is_identity(self, now: datetime) -> None:
        result = _CONFIG.to_datetime("now", now)

        assert result == now
        assert result.utcoffset() == now.utcoffset()

    @given(now=reference_datetimes)
    def test_today_is_local_midnight(self, now: datetime) -> None:
        result = _CONFIG.to_datetime("today", now)

        assert result.date() == now.date()
        assert (result.hour, result.minute, result.second, result.microsecond) == (0, 0, 0, 0)


class TestCalendarSteps:
    @given(origin=month_end_datetimes(), amount=month_steps)
    def test_month_step_clamps(self, origin: datetime, amount: int) -> None:
        result = _CONFIG.to_datetime(f"{amount:+d}m", origin)
        last_day = calendar.monthrange(result.year, result.month)[1]

        event(f"clamped={result.day < origin.day}")
        assert _month_index(result) - _month_index(origin) == amount
        assert result.day == min(origin.day, last_day)
        assert result.time() == origin.time()

    @given(origin=month_end_datetimes(), amount=year_steps)
    def test_year_step_clamps(self, origin: datetime, amount: int) -> None:
        result = _CONFIG.to_datetime(f"{amount:+d}y", origin)
        last_day = calendar.monthrange(result.year, result.month)[1]

        event(f"leap_day_clamped={origin.month == 2 and result.day < origin.day}")
        assert result.year == origin.year + amount
        assert result.month == origin.month
        assert result.day == min(origin.day, last_day)

    @given(origin=reference_datetimes, amount=st.integers(min_value=-500, max_value=500))
    def test_week_step_lands_on_week_start(self, origin: datetime, amount: int) -> None:
        monday = _CONFIG.to_datetime(f"{amount:+d}w", origin, week_start_mon=True)
        sunday = _CONFIG.to_datetime(f"{amount:+d}w", origin, week_start_mon=False)

        assert monday.isoweekday() == 1
        assert sunday.isoweekday() == 7
        assert abs((monday - origin) - timedelta(weeks=amount)) < timedelta(weeks=1)


class TestNumberClassification:
    @given(value=st.integers(min_value=0, max_value=10**12))
    def test_boundaries(self, value: int) -> None:
        _, tokens = tokenize(str(value))

        if value >= 10000:
            expected = TokenKind.TIMESTAMP
        elif value >= 1000:
            expected = TokenKind.YEAR
        else:
            expected = TokenKind.INTEGER
        event(f"kind={expected.name}")
        assert [token.kind for token in tokens] == [expected]
        assert tokens[0].value == value


class TestWeekdaySymmetry:
    @given(origin=reference_datetimes, weekday=weekday_numbers)
    def test_next_then_prev(self, origin: datetime, weekday: int) -> None:
        name = _WEEKDAY_NAMES[weekday - 1]

        forward = _CONFIG.to_datetime(f"next {name}", origin)
        back = _CONFIG.to_datetime(f"prev {name}", forward)

        assert forward.isoweekday() == weekday
        assert timedelta(0) < forward - origin <= timedelta(days=7)
        assert back.isoweekday() == weekday
        assert origin - timedelta(days=7) < back <= origin

    @given(origin=reference_datetimes, weekday=weekday_numbers)
    def test_this_stays_in_week(self, origin: datetime, weekday: int) -> None:
        result = _CONFIG.to_datetime(f"this {_WEEKDAY_NAMES[weekday - 1]}", origin)

        assert result.isoweekday() == weekday
        assert result.isocalendar()[:2] == origin.isocalendar()[:2]


class TestDurations:
    @given(parts=duration_parts(), negative=st.booleans())
    def test_sum_of_terms(self, parts: list[tuple[int, str]], negative: bool) -> None:
        source = " ".join(f"{amount}{unit}" for amount, unit in parts)
        if negative:
            source = "-" + source
        sign = -1 if negative else 1
        expected = sign * sum(amount * FIXED_SHORT_UNITS[unit] for amount, unit in parts)

        event(f"terms={len(parts)}")
        assert _CONFIG.to_seconds(source) == expected


@pytest.mark.fuzz
class TestRobustness:
    """Arbitrary input never escapes as anything but ConversionError."""

    @given(source=st.text(alphabet=st.sampled_from("0123456789 -+/:.,@dhmswy"), max_size=30))
    def test_arbitrary_input(self, source: str) -> None:
        try:
            result = _CONFIG.to_datetime(source, datetime.fromisoformat("2024-01-12T15:22:28+02:00"))
        except ValueError:
            event("outcome=rejected")
            return
        event("outcome=converted")
        assert result.tzinfo is not None
