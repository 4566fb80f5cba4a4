"""Pure calendar calculations, no UI dependencies.

Months and days are zero-based here: January is month 0 and the first of a
month is day 0. Dates themselves are plain ``datetime.date`` values.
"""

from __future__ import annotations

from datetime import date

from ordinals import Month, WeekDay

_THIRTY_DAY_MONTHS = (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Return 28–31 for the given zero-based month (proleptic Gregorian)."""
    month = Month.from_index(month)
    if month == Month.FEBRUARY:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def days_in_previous_month(month: int, year: int) -> int:
    """Return the length of the month before ``month`` (December of year-1 for January)."""
    month = Month.from_index(month)
    if month == Month.JANUARY:
        return days_in_month(Month.DECEMBER, year - 1)
    return days_in_month(month.pred(), year)


def month0(d: date) -> int:
    return d.month - 1


def day0(d: date) -> int:
    return d.day - 1


def make_date(year: int, month: int, day: int) -> date:
    """Build a date from a year, zero-based month and zero-based day."""
    return date(year, month + 1, day + 1)


def shift_date(
    d: date,
    day_offset: int = 0,
    month_offset: int = 0,
    year_offset: int = 0,
    day: int | None = None,
) -> date:
    """Move ``d`` by whole years, months and days.

    Years are applied first, then months (normalised into 0–11 with the
    overflow carried into the year). The day is ``day`` when given, else the
    original day clamped to the end of the target month, so Jan 31 + 1 month
    is the last day of February. ``day_offset`` is then carried across month
    boundaries one month at a time.

    Raises ValueError when the result falls outside the years ``date`` supports.
    """
    year_carry, month = divmod(month0(d) + month_offset, 12)
    year = d.year + year_offset + year_carry

    length = days_in_month(month, year)
    current = day if day is not None else min(length - 1, day0(d))
    current += day_offset

    # Each step consumes a whole month, so |current| shrinks until it fits.
    while current < 0:
        current += days_in_previous_month(month, year)
        year_carry, month = divmod(month - 1, 12)
        year += year_carry
        length = days_in_month(month, year)
    while current >= length:
        current -= length
        year_carry, month = divmod(month + 1, 12)
        year += year_carry
        length = days_in_month(month, year)

    return make_date(year, month, current)


def month_start_weekday(d: date) -> WeekDay:
    """Return the weekday of the first day of ``d``'s month."""
    return WeekDay(d.replace(day=1).weekday())


def iso_week(d: date) -> int:
    """Return the ISO-8601 week number of ``d``."""
    return d.isocalendar()[1]
