"""Month and weekday names for the picker's title and header rows."""

from __future__ import annotations

import calendar as _cal
from typing import Protocol

from ordinals import Month, WeekDay


class Locale(Protocol):
    """Lookup of display names. Short weekday names must fit in two columns."""

    def weekday_name(self, day: WeekDay, long: bool = False) -> str: ...

    def month_name(self, month: Month, long: bool = False) -> str: ...


_WEEKDAYS_LONG = ["Monday", "Tuesday", "Wednesday", "Thursday",
                  "Friday", "Saturday", "Sunday"]
_WEEKDAYS_SHORT = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
_MONTHS_LONG = ["January", "February", "March", "April", "May", "June", "July",
                "August", "September", "October", "November", "December"]
_MONTHS_SHORT = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                 "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


class EnglishLocale:
    """Fixed English names, independent of the process locale."""

    def weekday_name(self, day: WeekDay, long: bool = False) -> str:
        table = _WEEKDAYS_LONG if long else _WEEKDAYS_SHORT
        return table[WeekDay.from_index(day)]

    def month_name(self, month: Month, long: bool = False) -> str:
        table = _MONTHS_LONG if long else _MONTHS_SHORT
        return table[Month.from_index(month)]


class SystemLocale:
    """Names from the ``calendar`` module, i.e. whatever LC_TIME is set to."""

    def weekday_name(self, day: WeekDay, long: bool = False) -> str:
        day = WeekDay.from_index(day)
        if long:
            return _cal.day_name[day]
        return _cal.day_abbr[day][:2]

    def month_name(self, month: Month, long: bool = False) -> str:
        # calendar's month tables are 1-based with an empty entry at 0
        month = Month.from_index(month)
        if long:
            return _cal.month_name[month + 1]
        return _cal.month_abbr[month + 1]
