"""Cell layout for the three picker grids and the pointer reverse mapping.

The picker occupies a fixed character footprint of 20x8 (23x8 with ISO week
numbers). Row 0 holds the title, row 1 the weekday names (day grid only) and
the cells start at row 2:

* day grid: 6 rows x 7 columns, 3 characters per column;
* month and decade grids: 3 rows x 4 columns, 5 characters per column, on
  every other row.

Nothing here knows about colours. Each cell carries a ``Highlight`` category
and a ``DrawSurface`` decides how to render it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Protocol

from calendar_logic import (
    day0,
    days_in_month,
    iso_week,
    make_date,
    month0,
    month_start_weekday,
    shift_date,
)
from ordinals import Month, ViewMode, WeekDay

WIDTH = 20
ISO_WIDTH = 23
HEIGHT = 8

_GRID_TOP = 2
_DAY_COLUMNS = 7
_DAY_CELLS = 42
_DAY_STRIDE = 3
_PERIOD_COLUMNS = 4
_PERIOD_CELLS = 12
_PERIOD_STRIDE = 5


class Highlight(Enum):
    UNAVAILABLE = "unavailable"
    CURSOR_FOCUSED = "cursor-focused"
    CURSOR_UNFOCUSED = "cursor-unfocused"
    SELECTED_FOCUSED = "selected-focused"
    SELECTED_UNFOCUSED = "selected-unfocused"
    NEIGHBOR = "neighbor"
    NORMAL = "normal"
    # chrome
    TITLE = "title"
    WEEKDAY = "weekday"
    WEEK_NUMBER = "week-number"


@dataclass(frozen=True)
class Cell:
    """One label of a grid.

    ``index`` is relative to the displayed period: the zero-based day of the
    month, the zero-based month, or the year within the decade (-1 and 10 for
    the neighbouring years). ``date`` is the first day the cell stands for.
    """

    index: int
    date: date
    col: int
    row: int
    label: str
    highlight: Highlight
    week_number: int | None = None


class DrawSurface(Protocol):
    def print_text(self, col: int, row: int, text: str, highlight: Highlight) -> None: ...


def required_size(show_iso_weeks: bool) -> tuple[int, int]:
    return (ISO_WIDTH if show_iso_weeks else WIDTH), HEIGHT


def gutter(mode: ViewMode, show_iso_weeks: bool) -> int:
    """Width of the left margin reserved for week numbers."""
    if not show_iso_weeks:
        return 0
    return 3 if mode == ViewMode.DAY else 2


def first_cell_offset(month_start: WeekDay, week_start: WeekDay) -> int:
    """Number of leading cells that belong to the previous month."""
    shift = (WeekDay.MONDAY - week_start + 7) % 7
    return (month_start + shift) % 7


def classify(available: bool, is_cursor: bool, is_selected: bool,
             primary: bool, enabled: bool, focused: bool) -> Highlight:
    """Pick a cell's highlight.

    Precedence: unavailable, cursor, selected, neighbour, normal. A selected
    cell keeps its highlight while unfocused only inside the displayed period;
    a selected neighbour cell falls back to neighbour dimming.
    """
    if not available:
        return Highlight.UNAVAILABLE
    active = enabled and focused
    if is_cursor and primary:
        return Highlight.CURSOR_FOCUSED if active else Highlight.CURSOR_UNFOCUSED
    if is_selected:
        if active:
            return Highlight.SELECTED_FOCUSED
        if enabled and primary:
            return Highlight.SELECTED_UNFOCUSED
    if not primary:
        return Highlight.NEIGHBOR
    return Highlight.NORMAL


def day_cells(picker, focused: bool = True) -> list[Cell]:
    """The 42 cells of the month around the picker's cursor."""
    cursor = picker.cursor_date
    selected = picker.selected_date
    first = cursor.replace(day=1)
    length = days_in_month(month0(cursor), cursor.year)
    offset = first_cell_offset(month_start_weekday(cursor), picker.week_start)
    left = gutter(ViewMode.DAY, picker.show_iso_weeks)

    cells: list[Cell] = []
    for position in range(_DAY_CELLS):
        index = position - offset
        try:
            d = shift_date(first, day_offset=index)
        except ValueError:
            # neighbour month outside the years ``date`` supports
            continue
        week_number = None
        if picker.show_iso_weeks and position % _DAY_COLUMNS == 0:
            week_number = iso_week(d)
        cells.append(Cell(
            index=index,
            date=d,
            col=left + (position % _DAY_COLUMNS) * _DAY_STRIDE,
            row=_GRID_TOP + position // _DAY_COLUMNS,
            label=f"{d.day:>2}",
            highlight=classify(
                picker.range.is_date_available(d),
                d == cursor,
                d == selected,
                0 <= index < length,
                picker.enabled,
                focused,
            ),
            week_number=week_number,
        ))
    return cells


def month_cells(picker, focused: bool = True) -> list[Cell]:
    """The 12 months of the cursor's year."""
    cursor = picker.cursor_date
    selected = picker.selected_date
    year = cursor.year
    left = gutter(ViewMode.MONTH, picker.show_iso_weeks)

    cells: list[Cell] = []
    for month in Month:
        cells.append(Cell(
            index=int(month),
            date=make_date(year, month, 0),
            col=left + (month % _PERIOD_COLUMNS) * _PERIOD_STRIDE,
            row=_GRID_TOP + (month // _PERIOD_COLUMNS) * 2,
            label=f"{picker.locale.month_name(month):>4}",
            highlight=classify(
                picker.range.is_month_available(month, year),
                month == month0(cursor),
                selected.year == year and month0(selected) == month,
                True,
                picker.enabled,
                focused,
            ),
        ))
    return cells


def decade_cells(picker, focused: bool = True) -> list[Cell]:
    """The cursor's decade plus one neighbouring year on each side."""
    cursor = picker.cursor_date
    selected = picker.selected_date
    decade = cursor.year - cursor.year % 10
    left = gutter(ViewMode.DECADE, picker.show_iso_weeks)

    cells: list[Cell] = []
    for position, index in enumerate(range(-1, _PERIOD_CELLS - 1)):
        year = decade + index
        try:
            first = date(year, 1, 1)
        except ValueError:
            continue
        cells.append(Cell(
            index=index,
            date=first,
            col=left + (position % _PERIOD_COLUMNS) * _PERIOD_STRIDE,
            row=_GRID_TOP + (position // _PERIOD_COLUMNS) * 2,
            label=f"{year:>4}",
            highlight=classify(
                picker.range.is_year_available(year),
                year == cursor.year,
                year == selected.year,
                0 <= index <= 9,
                picker.enabled,
                focused,
            ),
        ))
    return cells


_PLANNERS = {
    ViewMode.DAY: day_cells,
    ViewMode.MONTH: month_cells,
    ViewMode.DECADE: decade_cells,
}


def cells(picker, focused: bool = True) -> list[Cell]:
    return _PLANNERS[picker.mode](picker, focused)


def hit_offset(picker, col: int, row: int) -> int | None:
    """Map a pointer position to an offset from the cursor cell.

    The offset is in days, months or years depending on the view mode.
    Returns None for positions outside the cells (title rows, gutters,
    separator columns, blank rows, past the widget edge).
    """
    width, height = required_size(picker.show_iso_weeks)
    if not (0 <= col < width and _GRID_TOP <= row < height):
        return None
    left = gutter(picker.mode, picker.show_iso_weeks)
    if col < left:
        return None
    x = col - left
    y = row - _GRID_TOP
    cursor = picker.cursor_date

    if picker.mode == ViewMode.DAY:
        if x % _DAY_STRIDE == _DAY_STRIDE - 1:
            return None
        position = x // _DAY_STRIDE + _DAY_COLUMNS * y
        if x // _DAY_STRIDE >= _DAY_COLUMNS or position >= _DAY_CELLS:
            return None
        offset = first_cell_offset(month_start_weekday(cursor), picker.week_start)
        return position - (offset + day0(cursor))

    if x % _PERIOD_STRIDE == _PERIOD_STRIDE - 1 or y % 2 != 0:
        return None
    column = x // _PERIOD_STRIDE
    position = column + _PERIOD_COLUMNS * (y // 2)
    if column >= _PERIOD_COLUMNS or position >= _PERIOD_CELLS:
        return None
    if picker.mode == ViewMode.MONTH:
        return position - month0(cursor)
    return position - (1 + cursor.year % 10)


def title(picker) -> str:
    cursor = picker.cursor_date
    if picker.mode == ViewMode.DAY:
        month = Month.from_index(month0(cursor))
        return f"{picker.locale.month_name(month, long=True)} {cursor.year}"
    if picker.mode == ViewMode.MONTH:
        return f"{cursor.year}"
    decade = cursor.year - cursor.year % 10
    return f"{decade} - {decade + 9}"


def draw(picker, surface: DrawSurface, focused: bool = True) -> None:
    """Write the current grid to ``surface`` as text placements."""
    width, _height = required_size(picker.show_iso_weeks)
    surface.print_text(0, 0, f"{title(picker):^{width}}", Highlight.TITLE)

    if picker.mode == ViewMode.DAY:
        left = gutter(ViewMode.DAY, picker.show_iso_weeks)
        for column in range(_DAY_COLUMNS):
            day = WeekDay.wrap(column + picker.week_start)
            surface.print_text(left + column * _DAY_STRIDE, 1,
                               picker.locale.weekday_name(day), Highlight.WEEKDAY)

    for cell in cells(picker, focused):
        surface.print_text(cell.col, cell.row, cell.label, cell.highlight)
        if cell.week_number is not None:
            surface.print_text(0, cell.row, f"{cell.week_number:>2}", Highlight.WEEK_NUMBER)
