"""Inclusive [earliest, latest] window of selectable dates."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from calendar_logic import month0


@dataclass(frozen=True)
class DateRange:
    """Optional inclusive bounds. A missing bound means unlimited on that side."""

    earliest: date | None = None
    latest: date | None = None

    def __post_init__(self) -> None:
        if self.earliest is not None and self.latest is not None and self.earliest > self.latest:
            raise ValueError(
                f"earliest date {self.earliest} is after latest date {self.latest}"
            )

    def with_earliest(self, earliest: date | None) -> DateRange:
        return replace(self, earliest=earliest)

    def with_latest(self, latest: date | None) -> DateRange:
        return replace(self, latest=latest)

    def clamp(self, d: date) -> date:
        """Return the nearest bound when ``d`` is outside the range, else ``d``."""
        if self.earliest is not None and d < self.earliest:
            return self.earliest
        if self.latest is not None and d > self.latest:
            return self.latest
        return d

    def is_date_available(self, d: date) -> bool:
        if self.earliest is not None and d < self.earliest:
            return False
        if self.latest is not None and d > self.latest:
            return False
        return True

    def is_month_available(self, month: int, year: int) -> bool:
        """``month`` is zero-based."""
        if not self.is_year_available(year):
            return False
        if self.earliest is not None and year == self.earliest.year and month < month0(self.earliest):
            return False
        if self.latest is not None and year == self.latest.year and month > month0(self.latest):
            return False
        return True

    def is_year_available(self, year: int) -> bool:
        if self.earliest is not None and year < self.earliest.year:
            return False
        if self.latest is not None and year > self.latest.year:
            return False
        return True
