import pytest

from ordinals import Month, ViewMode, WeekDay


def test_month_checked_conversion():
    assert Month.from_index(0) is Month.JANUARY
    assert Month.from_index(11) is Month.DECEMBER
    with pytest.raises(ValueError):
        Month.from_index(12)
    with pytest.raises(ValueError):
        Month.from_index(-1)


def test_successor_and_predecessor_wrap():
    assert Month.DECEMBER.succ() is Month.JANUARY
    assert Month.JANUARY.pred() is Month.DECEMBER
    assert WeekDay.SUNDAY.succ() is WeekDay.MONDAY
    assert WeekDay.MONDAY.pred() is WeekDay.SUNDAY
    assert WeekDay.wrap(-1) is WeekDay.SUNDAY
    assert WeekDay.wrap(13) is WeekDay.SUNDAY


def test_weekday_parse():
    assert WeekDay.parse(WeekDay.FRIDAY) is WeekDay.FRIDAY
    assert WeekDay.parse("sunday") is WeekDay.SUNDAY
    assert WeekDay.parse(" Tuesday ") is WeekDay.TUESDAY
    assert WeekDay.parse(6) is WeekDay.SUNDAY
    assert WeekDay.parse(7) is None
    assert WeekDay.parse(True) is None
    assert WeekDay.parse("funday") is None
    assert WeekDay.parse(None) is None


def test_view_mode_order_and_steps():
    assert ViewMode.DAY < ViewMode.MONTH < ViewMode.DECADE
    assert ViewMode.DAY.coarser() is ViewMode.MONTH
    assert ViewMode.DECADE.coarser() is ViewMode.DECADE
    assert ViewMode.DECADE.finer() is ViewMode.MONTH
    assert ViewMode.DAY.finer() is ViewMode.DAY


def test_view_mode_parse():
    assert ViewMode.parse("Month") is ViewMode.MONTH
    assert ViewMode.parse(ViewMode.DAY) is ViewMode.DAY
    assert ViewMode.parse("year") is None
    assert ViewMode.parse(1) is None
