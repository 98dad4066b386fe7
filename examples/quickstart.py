"""Quickstart example for fuzzydate.

This example demonstrates converting loosely written date expressions into
exact datetimes, dates and durations.

Note: Examples pass an explicit reference time so the output is stable. In
production, omit it to convert relative to the current local time.
"""

from datetime import date, datetime

from fuzzydate import (
    ConversionError,
    DurationUnitError,
    FuzzyConfig,
    Pattern,
    to_date,
    to_datetime,
    to_seconds,
)
from fuzzydate.constants import TOKEN_LONG_UNIT_DAY, TOKEN_WDAY_MON

now = datetime.fromisoformat("2024-01-12T15:22:28+02:00")

# Example 1: Keywords and relative offsets
print("=" * 50)
print("Example 1: Relative Expressions")
print("=" * 50)

for expression in ("yesterday", "next Monday", "-2d 1h", "3 weeks ago", "last day of next month"):
    print(f"{expression!r:28} -> {to_datetime(expression, now).isoformat()}")
# Output:
# 'yesterday'                  -> 2024-01-11T00:00:00+02:00
# 'next Monday'                -> 2024-01-15T15:22:28+02:00
# '-2d 1h'                     -> 2024-01-10T14:22:28+02:00
# '3 weeks ago'                -> 2023-12-18T15:22:28+02:00
# 'last day of next month'     -> 2024-02-29T00:00:00+02:00

# Example 2: Absolute dates and timestamps
print("\n" + "=" * 50)
print("Example 2: Absolute Dates")
print("=" * 50)

for expression in ("2023-12-07 15:02", "7.12.2023", "Dec 7th 2023", "@1705072948.544"):
    print(f"{expression!r:28} -> {to_datetime(expression, now).isoformat()}")

print(to_date("first day of Jan last year", date(2024, 5, 12)))
# Output: 2023-01-01

# Example 3: Exact durations
print("\n" + "=" * 50)
print("Example 3: Durations")
print("=" * 50)

print(to_seconds("1d 2h 30min"))
# Output: 95400.0

try:
    to_seconds("1y 2d")
except DurationUnitError as e:
    print(f"Rejected: {e}")
    # Output: Rejected: Converting years into seconds is not supported

# Example 4: Custom vocabulary
print("\n" + "=" * 50)
print("Example 4: Custom Tokens and Patterns")
print("=" * 50)

config = FuzzyConfig(week_start_mon=True)
config.add_tokens({"maanantai": TOKEN_WDAY_MON, "päivää": TOKEN_LONG_UNIT_DAY})
config.add_patterns({
    "ensi [wday]": Pattern.NEXT_WDAY,
    "[int] [long_unit] sitten": Pattern.LONG_UNIT_AGO,
})

print(config.to_datetime("ensi maanantai", now).isoformat())
# Output: 2024-01-15T15:22:28+02:00
print(config.to_datetime("3 päivää sitten", now).isoformat())
# Output: 2024-01-09T15:22:28+02:00

# Example 5: Locale vocabulary from CLDR
print("\n" + "=" * 50)
print("Example 5: Locale Names")
print("=" * 50)

german = FuzzyConfig(locale="de_DE")
print(german.to_datetime("3 März 2024", now).isoformat())
# Output: 2024-03-03T00:00:00+02:00

# Example 6: Error handling
print("\n" + "=" * 50)
print("Example 6: Errors")
print("=" * 50)

try:
    to_datetime("next moon", now)
except ConversionError as e:
    print(e)
    # Output: Unable to convert "next moon" into datetime
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())
