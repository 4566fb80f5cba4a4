from datetime import date, timedelta

import pytest

from calendar_logic import (
    day0,
    days_in_month,
    days_in_previous_month,
    iso_week,
    is_leap_year,
    make_date,
    month0,
    month_start_weekday,
    shift_date,
)
from ordinals import Month, WeekDay

MOON_LANDING = date(1969, 7, 20)


@pytest.mark.parametrize("year, days", [(1900, 28), (2000, 29), (2020, 29), (2021, 28)])
def test_february_follows_gregorian_leap_rule(year, days):
    assert days_in_month(Month.FEBRUARY, year) == days
    assert is_leap_year(year) == (days == 29)


def test_month_lengths():
    assert days_in_month(Month.JANUARY, 2021) == 31
    assert days_in_month(Month.APRIL, 2021) == 30
    assert days_in_month(Month.SEPTEMBER, 2021) == 30
    assert days_in_month(Month.DECEMBER, 2021) == 31
    assert sum(days_in_month(m, 2021) for m in Month) == 365
    assert sum(days_in_month(m, 2024) for m in Month) == 366


def test_days_in_previous_month_wraps_to_december_of_previous_year():
    assert days_in_previous_month(Month.JANUARY, 2021) == 31
    assert days_in_previous_month(Month.MARCH, 2020) == 29
    assert days_in_previous_month(Month.MARCH, 2021) == 28
    assert days_in_previous_month(Month.MAY, 2021) == 30


def test_month_index_out_of_range_raises():
    with pytest.raises(ValueError):
        days_in_month(12, 2020)


def test_zero_based_accessors():
    assert month0(MOON_LANDING) == 6
    assert day0(MOON_LANDING) == 19
    assert make_date(1969, 6, 19) == MOON_LANDING


def test_moon_landing_offsets():
    assert shift_date(MOON_LANDING) == MOON_LANDING
    assert shift_date(MOON_LANDING, day_offset=-4) == date(1969, 7, 16)
    assert shift_date(MOON_LANDING, day_offset=4) == date(1969, 7, 24)
    assert shift_date(MOON_LANDING, day_offset=21) == date(1969, 8, 10)
    assert shift_date(MOON_LANDING, day_offset=-10, month_offset=1) == date(1969, 8, 10)


def test_month_shift_clamps_to_end_of_month():
    assert shift_date(date(2020, 1, 31), month_offset=1) == date(2020, 2, 29)
    assert shift_date(date(2021, 1, 31), month_offset=1) == date(2021, 2, 28)
    assert shift_date(date(2021, 3, 31), month_offset=1) == date(2021, 4, 30)


def test_month_shift_carries_into_year():
    assert shift_date(date(2020, 1, 15), month_offset=-1) == date(2019, 12, 15)
    assert shift_date(date(2020, 1, 15), month_offset=13) == date(2021, 2, 15)
    assert shift_date(date(2020, 1, 15), month_offset=-25) == date(2017, 12, 15)


def test_year_shift_from_leap_day():
    assert shift_date(date(2020, 2, 29), year_offset=1) == date(2021, 2, 28)
    assert shift_date(date(2020, 2, 29), year_offset=4) == date(2024, 2, 29)


def test_day_shift_crosses_month_and_year_boundaries():
    assert shift_date(date(2020, 3, 1), day_offset=-1) == date(2020, 2, 29)
    assert shift_date(date(2019, 12, 31), day_offset=1) == date(2020, 1, 1)
    assert shift_date(date(2020, 1, 1), day_offset=366) == date(2021, 1, 1)
    assert shift_date(date(2021, 1, 1), day_offset=-365) == date(2020, 1, 2)


def test_day_shift_agrees_with_timedelta():
    start = date(2019, 11, 30)
    for offset in range(-800, 801, 37):
        assert shift_date(start, day_offset=offset) == start + timedelta(days=offset)


def test_day_shift_round_trip():
    for start in (date(2020, 2, 29), date(1999, 12, 31), date(2000, 1, 1)):
        for offset in (-7, -1, 1, 7, 45):
            moved = shift_date(start, day_offset=offset)
            assert shift_date(moved, day_offset=-offset) == start


def test_explicit_day_replaces_source_day():
    assert shift_date(date(2020, 1, 20), month_offset=1, day=0) == date(2020, 2, 1)
    assert shift_date(date(2020, 1, 20), day=30) == date(2020, 1, 31)


def test_shift_past_supported_years_raises():
    with pytest.raises(ValueError):
        shift_date(date(9999, 12, 31), day_offset=1)
    with pytest.raises(ValueError):
        shift_date(date(1, 1, 1), year_offset=-1)


def test_month_start_weekday():
    assert month_start_weekday(MOON_LANDING) == WeekDay.TUESDAY
    assert month_start_weekday(date(2024, 1, 31)) == WeekDay.MONDAY


def test_iso_week():
    assert iso_week(date(2020, 12, 31)) == 53
    assert iso_week(date(2021, 1, 1)) == 53
    assert iso_week(date(2021, 1, 4)) == 1
