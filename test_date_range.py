from datetime import date

import pytest

from date_range import DateRange

RANGE = DateRange(date(2020, 3, 15), date(2021, 10, 1))


def test_clamp_to_bounds():
    assert RANGE.clamp(date(2019, 1, 1)) == date(2020, 3, 15)
    assert RANGE.clamp(date(2050, 1, 1)) == date(2021, 10, 1)


def test_clamp_in_range_is_identity():
    for d in (date(2020, 3, 15), date(2020, 12, 24), date(2021, 10, 1)):
        assert RANGE.clamp(d) == d
        assert RANGE.clamp(RANGE.clamp(d)) == d


def test_open_bounds():
    assert DateRange().clamp(date(1, 1, 1)) == date(1, 1, 1)
    assert DateRange(latest=date(2000, 1, 1)).clamp(date(1999, 5, 5)) == date(1999, 5, 5)
    assert DateRange(earliest=date(2000, 1, 1)).clamp(date(3000, 5, 5)) == date(3000, 5, 5)


def test_inverted_range_is_rejected():
    with pytest.raises(ValueError):
        DateRange(date(2021, 1, 1), date(2020, 1, 1))
    with pytest.raises(ValueError):
        RANGE.with_latest(date(2019, 1, 1))


def test_with_bounds_returns_new_range():
    widened = RANGE.with_earliest(None)
    assert widened.earliest is None
    assert widened.latest == RANGE.latest
    assert RANGE.earliest == date(2020, 3, 15)


def test_year_availability():
    assert not RANGE.is_year_available(2019)
    assert RANGE.is_year_available(2020)
    assert RANGE.is_year_available(2021)
    assert not RANGE.is_year_available(2022)


def test_month_availability():
    assert not RANGE.is_month_available(1, 2020)
    assert RANGE.is_month_available(2, 2020)
    assert RANGE.is_month_available(0, 2021)
    assert RANGE.is_month_available(9, 2021)
    assert not RANGE.is_month_available(10, 2021)
    assert not RANGE.is_month_available(5, 2019)


def test_date_availability_is_inclusive():
    assert not RANGE.is_date_available(date(2020, 3, 14))
    assert RANGE.is_date_available(date(2020, 3, 15))
    assert RANGE.is_date_available(date(2021, 10, 1))
    assert not RANGE.is_date_available(date(2021, 10, 2))
