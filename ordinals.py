"""Month, weekday and view-mode enumerations with zero-based ordinals."""

from __future__ import annotations

from enum import IntEnum


class _Cyclic(IntEnum):
    """IntEnum whose members wrap around at both ends."""

    @classmethod
    def from_index(cls, index: int):
        """Checked conversion; raises ValueError outside 0..len-1."""
        if not 0 <= index < len(cls):
            raise ValueError(f"{cls.__name__} index out of range: {index}")
        return cls(index)

    @classmethod
    def wrap(cls, index: int):
        return cls(index % len(cls))

    def succ(self):
        return type(self).wrap(self + 1)

    def pred(self):
        return type(self).wrap(self - 1)


class Month(_Cyclic):
    JANUARY = 0
    FEBRUARY = 1
    MARCH = 2
    APRIL = 3
    MAY = 4
    JUNE = 5
    JULY = 6
    AUGUST = 7
    SEPTEMBER = 8
    OCTOBER = 9
    NOVEMBER = 10
    DECEMBER = 11


class WeekDay(_Cyclic):
    """Weekdays with Monday as ordinal 0 (same as ``date.weekday()``)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value) -> WeekDay | None:
        """Return the weekday for a member, an index or a name, else None."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls(value) if 0 <= value < len(cls) else None
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


class ViewMode(IntEnum):
    """Zoom level of the picker, finest first."""

    DAY = 0
    MONTH = 1
    DECADE = 2

    def finer(self) -> ViewMode:
        return ViewMode(max(self - 1, ViewMode.DAY))

    def coarser(self) -> ViewMode:
        return ViewMode(min(self + 1, ViewMode.DECADE))

    @classmethod
    def parse(cls, value) -> ViewMode | None:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None
