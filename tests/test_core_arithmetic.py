"""Tests for calendar arithmetic primitives.

Tests verify:
- Day-of-month clamping (leap and non-leap February)
- Month and year stepping across year boundaries
- Weekday offsets (strictly before / strictly after semantics)
- Week starts for Monday-first and Sunday-first conventions
- Validated date and time setters
- Unix timestamps in UTC
"""

from datetime import UTC, datetime

import pytest

from fuzzydate.core import (
    date_stamp,
    date_ymd,
    into_month_day,
    offset_months,
    offset_range_month,
    offset_weekday,
    offset_weeks,
    offset_years,
    time_hms,
    time_reset,
)
from fuzzydate.enums import Change


def _dt(value: str) -> datetime:
    return datetime.fromisoformat(value)


class TestIntoMonthDay:
    """Test day-of-month clamping."""

    @pytest.mark.parametrize(
        ("year", "month", "day", "expected"),
        [
            (2024, 2, 1, 1),
            (2024, 2, 29, 29),
            (2024, 2, 30, 29),
            (2023, 2, 29, 28),
            (2023, 4, 31, 30),
            (2023, 12, 31, 31),
            (2023, 12, 32, 31),
        ],
    )
    def test_clamps_to_month_length(
        self, year: int, month: int, day: int, expected: int
    ) -> None:
        """Days past the month end clamp to its last day."""
        assert into_month_day(year, month, day) == expected


class TestDateStamp:
    """Test Unix timestamp conversion."""

    @pytest.mark.parametrize(
        ("seconds", "milliseconds", "expected"),
        [
            (0, 0, "1970-01-01T00:00:00+00:00"),
            (-100, 0, "1969-12-31T23:58:20+00:00"),
            (1705072948, 0, "2024-01-12T15:22:28+00:00"),
            (1705072948, 544, "2024-01-12T15:22:28.544000+00:00"),
        ],
    )
    def test_timestamps_are_utc(self, seconds: int, milliseconds: int, expected: str) -> None:
        """Timestamps resolve in UTC with millisecond precision."""
        assert date_stamp(seconds, milliseconds).isoformat() == expected

    def test_milliseconds_out_of_range(self) -> None:
        """Millisecond fractions above 999 are rejected."""
        with pytest.raises(ValueError, match="Milliseconds"):
            date_stamp(0, 1000)

    def test_timestamp_beyond_datetime_range(self) -> None:
        """Timestamps past year 9999 overflow."""
        with pytest.raises(OverflowError):
            date_stamp(10**15)


class TestDateYmd:
    """Test validated date setter."""

    def test_valid_dates(self) -> None:
        """Date changes keep the time of day and offset."""
        from_time = _dt("2022-01-31T15:22:28+02:00")

        assert date_ymd(from_time, 2022, 2, 25).isoformat() == "2022-02-25T15:22:28+02:00"
        assert date_ymd(from_time, 2024, 2, 29).isoformat() == "2024-02-29T15:22:28+02:00"

    @pytest.mark.parametrize(("year", "month", "day"), [(2024, 13, 10), (2024, 2, 30), (0, 1, 1)])
    def test_invalid_dates(self, year: int, month: int, day: int) -> None:
        """Invalid calendar dates raise ValueError."""
        with pytest.raises(ValueError):
            date_ymd(_dt("2022-01-31T15:22:28+02:00"), year, month, day)


class TestOffsetMonths:
    """Test month stepping."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (0, "2024-01-31T15:22:28+02:00"),
            (-1, "2023-12-31T15:22:28+02:00"),
            (-24, "2022-01-31T15:22:28+02:00"),
            (1, "2024-02-29T15:22:28+02:00"),
            (24, "2026-01-31T15:22:28+02:00"),
            (-13, "2022-12-31T15:22:28+02:00"),
            (13, "2025-02-28T15:22:28+02:00"),
        ],
    )
    def test_month_steps(self, amount: int, expected: str) -> None:
        """Months carry into years and clamp the day."""
        assert offset_months(_dt("2024-01-31T15:22:28+02:00"), amount).isoformat() == expected


class TestOffsetYears:
    """Test year stepping."""

    @pytest.mark.parametrize(
        ("from_time", "amount", "expected"),
        [
            ("2022-02-28T15:22:28+02:00", 0, "2022-02-28T15:22:28+02:00"),
            ("2022-03-31T15:22:28+02:00", 1, "2023-03-31T15:22:28+02:00"),
            ("2024-02-29T15:22:28+02:00", -1, "2023-02-28T15:22:28+02:00"),
            ("2024-02-29T15:22:28+02:00", 4, "2028-02-29T15:22:28+02:00"),
        ],
    )
    def test_year_steps(self, from_time: str, amount: int, expected: str) -> None:
        """February 29 falls back to February 28 in non-leap years."""
        assert offset_years(_dt(from_time), amount).isoformat() == expected


class TestOffsetRangeMonth:
    """Test first/last day of month."""

    @pytest.mark.parametrize(
        ("change", "expected"),
        [
            (Change.NONE, "2024-01-31T15:22:28+02:00"),
            (Change.FIRST, "2024-02-01T15:22:28+02:00"),
            (Change.LAST, "2024-02-29T15:22:28+02:00"),
        ],
    )
    def test_range_of_february(self, change: Change, expected: str) -> None:
        """First and last day follow the target month length."""
        result = offset_range_month(_dt("2024-01-31T15:22:28+02:00"), 2, change)
        assert result.isoformat() == expected

    def test_invalid_month(self) -> None:
        """Months outside 1-12 raise ValueError."""
        with pytest.raises(ValueError):
            offset_range_month(_dt("2024-01-31T15:22:28+02:00"), 13, Change.LAST)


class TestOffsetWeekday:
    """Test weekday offsets from Wednesday 2022-02-23."""

    @pytest.mark.parametrize(
        ("weekday", "change", "expected_day"),
        [
            (1, Change.NONE, "2022-02-21"),
            (2, Change.NONE, "2022-02-22"),
            (3, Change.NONE, "2022-02-23"),
            (4, Change.NONE, "2022-02-24"),
            (5, Change.NONE, "2022-02-25"),
            (6, Change.NONE, "2022-02-26"),
            (7, Change.NONE, "2022-02-27"),
            (1, Change.PREV, "2022-02-21"),
            (2, Change.PREV, "2022-02-22"),
            (3, Change.PREV, "2022-02-16"),
            (4, Change.PREV, "2022-02-17"),
            (5, Change.PREV, "2022-02-18"),
            (6, Change.PREV, "2022-02-19"),
            (7, Change.PREV, "2022-02-20"),
            (1, Change.NEXT, "2022-02-28"),
            (2, Change.NEXT, "2022-03-01"),
            (3, Change.NEXT, "2022-03-02"),
            (4, Change.NEXT, "2022-02-24"),
            (5, Change.NEXT, "2022-02-25"),
            (6, Change.NEXT, "2022-02-26"),
            (7, Change.NEXT, "2022-02-27"),
        ],
    )
    def test_weekday_table(self, weekday: int, change: Change, expected_day: str) -> None:
        """PREV is strictly before, NEXT strictly after, NONE within the week."""
        result = offset_weekday(_dt("2022-02-23T15:22:28+02:00"), weekday, change)
        assert result.isoformat() == f"{expected_day}T15:22:28+02:00"


class TestOffsetWeeks:
    """Test week stepping from the start of the week."""

    @pytest.mark.parametrize(
        ("from_time", "amount", "start_day", "expected"),
        [
            # Monday as start of week
            ("2022-02-28T15:22:28+02:00", 0, 1, "2022-02-28T15:22:28+02:00"),
            ("2023-03-21T12:00:00+02:00", -1, 1, "2023-03-13T12:00:00+02:00"),
            ("2023-03-21T12:00:00+02:00", -25, 1, "2022-09-26T12:00:00+02:00"),
            ("2023-03-21T12:00:00+02:00", 1, 1, "2023-03-27T12:00:00+02:00"),
            ("2023-03-21T12:00:00+02:00", 125, 1, "2025-08-11T12:00:00+02:00"),
            # Sunday as start of week
            ("2022-02-28T15:22:28+02:00", 0, 7, "2022-02-27T15:22:28+02:00"),
            ("2023-03-21T12:00:00+02:00", -1, 7, "2023-03-12T12:00:00+02:00"),
            ("2023-03-21T12:00:00+02:00", -25, 7, "2022-09-25T12:00:00+02:00"),
            ("2023-03-21T12:00:00+02:00", 1, 7, "2023-03-26T12:00:00+02:00"),
            ("2023-03-21T12:00:00+02:00", 125, 7, "2025-08-10T12:00:00+02:00"),
        ],
    )
    def test_week_table(self, from_time: str, amount: int, start_day: int, expected: str) -> None:
        """Weeks step from the first day of the current week."""
        assert offset_weeks(_dt(from_time), amount, start_day).isoformat() == expected


class TestTimeSetters:
    """Test time-of-day setters."""

    def test_time_hms_valid(self) -> None:
        """Valid times replace the time of day."""
        from_time = _dt("2022-02-28T15:22:28.250+02:00")

        assert time_hms(from_time, 0, 0, 0).isoformat() == "2022-02-28T00:00:00+02:00"
        assert time_hms(from_time, 23, 15, 1).isoformat() == "2022-02-28T23:15:01+02:00"

    @pytest.mark.parametrize(
        ("hour", "minute", "second"),
        [(-1, 0, 0), (24, 0, 0), (0, -1, 0), (0, 60, 0), (0, 0, -1), (0, 0, 60)],
    )
    def test_time_hms_invalid(self, hour: int, minute: int, second: int) -> None:
        """Out-of-range components raise ValueError."""
        with pytest.raises(ValueError, match="Invalid time of day"):
            time_hms(_dt("2022-02-28T15:22:28+02:00"), hour, minute, second)

    def test_time_reset(self) -> None:
        """Reset moves to midnight and drops sub-second precision."""
        from_time = datetime(2024, 1, 12, 15, 22, 28, 544000, tzinfo=UTC)
        assert time_reset(from_time) == datetime(2024, 1, 12, tzinfo=UTC)
