"""Date picker state machine: view modes, cursor movement and submission.

The picker keeps two dates. The *selected* date is the last one the user
confirmed; the *cursor* date is the one currently highlighted while
navigating. Gestures move the cursor (arrow and page keys), switch the view
mode (back / confirm) or commit the cursor as the new selection.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Callable

from loguru import logger

import grid_layout
from calendar_logic import shift_date
from date_range import DateRange
from locale_names import EnglishLocale, Locale
from ordinals import ViewMode, WeekDay

DateCallback = Callable[[date], None]


class Gesture(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page-up"
    PAGE_DOWN = "page-down"
    BACK = "back"
    CONFIRM = "confirm"


class PointerButton(Enum):
    PRIMARY = 1
    MIDDLE = 2
    SECONDARY = 3


# (days, months, years) per gesture and view mode. Up/Down move a full row of
# the grid, Left/Right one cell, Page one unit of the next coarser mode.
OFFSETS: dict[Gesture, dict[ViewMode, tuple[int, int, int]]] = {
    Gesture.UP: {
        ViewMode.DAY: (-7, 0, 0), ViewMode.MONTH: (0, -4, 0), ViewMode.DECADE: (0, 0, -4),
    },
    Gesture.DOWN: {
        ViewMode.DAY: (7, 0, 0), ViewMode.MONTH: (0, 4, 0), ViewMode.DECADE: (0, 0, 4),
    },
    Gesture.LEFT: {
        ViewMode.DAY: (-1, 0, 0), ViewMode.MONTH: (0, -1, 0), ViewMode.DECADE: (0, 0, -1),
    },
    Gesture.RIGHT: {
        ViewMode.DAY: (1, 0, 0), ViewMode.MONTH: (0, 1, 0), ViewMode.DECADE: (0, 0, 1),
    },
    Gesture.PAGE_UP: {
        ViewMode.DAY: (0, -1, 0), ViewMode.MONTH: (0, 0, -1), ViewMode.DECADE: (0, 0, -10),
    },
    Gesture.PAGE_DOWN: {
        ViewMode.DAY: (0, 1, 0), ViewMode.MONTH: (0, 0, 1), ViewMode.DECADE: (0, 0, 10),
    },
}

# tkinter keysyms
_KEY_GESTURES = {
    "Up": Gesture.UP,
    "KP_Up": Gesture.UP,
    "Down": Gesture.DOWN,
    "KP_Down": Gesture.DOWN,
    "Left": Gesture.LEFT,
    "KP_Left": Gesture.LEFT,
    "Right": Gesture.RIGHT,
    "KP_Right": Gesture.RIGHT,
    "Prior": Gesture.PAGE_UP,
    "KP_Prior": Gesture.PAGE_UP,
    "Next": Gesture.PAGE_DOWN,
    "KP_Next": Gesture.PAGE_DOWN,
    "BackSpace": Gesture.BACK,
    "Escape": Gesture.BACK,
    "Return": Gesture.CONFIRM,
    "KP_Enter": Gesture.CONFIRM,
}


def gesture_for_key(keysym: str) -> Gesture | None:
    """Translate a key name to a gesture, or None for unrelated keys."""
    return _KEY_GESTURES.get(keysym)


def _pointer_offsets(mode: ViewMode, offset: int) -> tuple[int, int, int]:
    if mode == ViewMode.DAY:
        return offset, 0, 0
    if mode == ViewMode.MONTH:
        return 0, offset, 0
    return 0, 0, offset


class DatePicker:
    """Date selection across day, month and decade grids.

    ``today`` seeds both the selected and the cursor date; the picker never
    reads the system clock itself. Setters return ``self`` so a picker can be
    configured in one chained expression.
    """

    def __init__(
        self,
        today: date,
        *,
        locale: Locale | None = None,
        week_start: WeekDay = WeekDay.MONDAY,
        show_iso_weeks: bool = False,
        lowest_mode: ViewMode = ViewMode.DAY,
        highest_mode: ViewMode = ViewMode.DECADE,
        earliest: date | None = None,
        latest: date | None = None,
        on_submit: DateCallback | None = None,
        on_select: DateCallback | None = None,
        enabled: bool = True,
    ) -> None:
        self.locale: Locale = locale if locale is not None else EnglishLocale()
        self._enabled = enabled
        self._show_iso_weeks = show_iso_weeks
        self._week_start = WeekDay.MONDAY
        self._lowest_mode = ViewMode.DAY
        self._highest_mode = ViewMode.DECADE
        self._mode = ViewMode.DAY
        self._range = DateRange(earliest, latest)
        self._selected = self._range.clamp(today)
        self._cursor = self._selected
        self._on_submit = on_submit
        self._on_select = on_select

        self.set_week_start(week_start)
        self.set_mode_bounds(lowest_mode, highest_mode)
        self._mode = self._lowest_mode

    def __repr__(self) -> str:
        return (f"DatePicker(mode={self._mode.name}, selected={self._selected}, "
                f"cursor={self._cursor})")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def mode_bounds(self) -> tuple[ViewMode, ViewMode]:
        return self._lowest_mode, self._highest_mode

    @property
    def selected_date(self) -> date:
        return self._selected

    @property
    def cursor_date(self) -> date:
        return self._cursor

    @property
    def range(self) -> DateRange:
        return self._range

    @property
    def week_start(self) -> WeekDay:
        return self._week_start

    @property
    def show_iso_weeks(self) -> bool:
        return self._show_iso_weeks

    def can_focus(self) -> bool:
        return self._enabled

    def required_size(self) -> tuple[int, int]:
        return grid_layout.required_size(self._show_iso_weeks)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_enabled(self, enabled: bool) -> DatePicker:
        self._enabled = enabled
        return self

    def enable(self) -> DatePicker:
        return self.set_enabled(True)

    def disable(self) -> DatePicker:
        return self.set_enabled(False)

    def set_selected_date(self, d: date) -> DatePicker:
        self._selected = self._range.clamp(d)
        return self

    def set_cursor_date(self, d: date) -> DatePicker:
        self._cursor = self._range.clamp(d)
        return self

    def set_view_mode(self, mode: ViewMode) -> DatePicker:
        if self._lowest_mode <= mode <= self._highest_mode:
            self._mode = ViewMode(mode)
        else:
            logger.debug("Ignoring view mode {} outside {}..{}",
                         mode, self._lowest_mode.name, self._highest_mode.name)
        return self

    def set_lowest_view_mode(self, mode: ViewMode) -> DatePicker:
        """Limit drilling in. Accepted only below the highest mode."""
        if mode < self._highest_mode:
            self._lowest_mode = ViewMode(mode)
            if self._mode < self._lowest_mode:
                self._mode = self._lowest_mode
        else:
            logger.debug("Ignoring lowest view mode {} (highest is {})",
                         mode, self._highest_mode.name)
        return self

    def set_highest_view_mode(self, mode: ViewMode) -> DatePicker:
        """Limit drilling out. Accepted only above the lowest mode."""
        if mode > self._lowest_mode:
            self._highest_mode = ViewMode(mode)
            if self._mode > self._highest_mode:
                self._mode = self._highest_mode
        else:
            logger.debug("Ignoring highest view mode {} (lowest is {})",
                         mode, self._lowest_mode.name)
        return self

    def set_mode_bounds(self, lowest: ViewMode, highest: ViewMode) -> DatePicker:
        """Replace both bounds at once; ignored unless lowest < highest."""
        if lowest < highest:
            self._lowest_mode = ViewMode(lowest)
            self._highest_mode = ViewMode(highest)
            self._mode = min(max(self._mode, self._lowest_mode), self._highest_mode)
        else:
            logger.debug("Ignoring view mode bounds {}..{}", lowest, highest)
        return self

    def set_range(self, earliest: date | None, latest: date | None) -> DatePicker:
        """Replace both bounds. Raises ValueError when earliest > latest."""
        return self._apply_range(DateRange(earliest, latest))

    def set_earliest_date(self, earliest: date | None) -> DatePicker:
        return self._apply_range(self._range.with_earliest(earliest))

    def set_latest_date(self, latest: date | None) -> DatePicker:
        return self._apply_range(self._range.with_latest(latest))

    def _apply_range(self, new_range: DateRange) -> DatePicker:
        self._range = new_range
        self._selected = new_range.clamp(self._selected)
        self._cursor = new_range.clamp(self._cursor)
        return self

    def set_week_start(self, day: WeekDay) -> DatePicker:
        parsed = WeekDay.parse(day)
        if parsed is None:
            logger.debug("Ignoring invalid week start {!r}", day)
        else:
            self._week_start = parsed
        return self

    def set_show_iso_weeks(self, show: bool) -> DatePicker:
        """ISO week numbers only line up with rows when weeks start on Monday."""
        self._show_iso_weeks = show
        return self

    def set_on_submit(self, callback: DateCallback | None) -> DatePicker:
        self._on_submit = callback
        return self

    def set_on_select(self, callback: DateCallback | None) -> DatePicker:
        self._on_select = callback
        return self

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def handle(self, gesture: Gesture) -> bool:
        """Process one gesture. Returns False when the picker ignored it."""
        if not self._enabled:
            return False
        if gesture is Gesture.BACK:
            self._drill_out()
        elif gesture is Gesture.CONFIRM:
            self._submit()
        else:
            self._move(OFFSETS[gesture][self._mode])
        return True

    def handle_key(self, keysym: str) -> bool:
        gesture = gesture_for_key(keysym)
        if gesture is None:
            return False
        return self.handle(gesture)

    def click(self, col: int, row: int,
              button: PointerButton = PointerButton.PRIMARY) -> bool:
        """Process a pointer press at widget-relative character coordinates.

        A primary click on the highlighted cell confirms it; any other cell
        moves the cursor there.
        """
        if not self._enabled:
            return False
        offset = grid_layout.hit_offset(self, col, row)
        if offset is None:
            return False
        if offset == 0 and button is PointerButton.PRIMARY:
            self._submit()
        else:
            self._move(_pointer_offsets(self._mode, offset))
        return True

    def _drill_out(self) -> None:
        if self._mode < self._highest_mode:
            self._mode = self._mode.coarser()
            logger.debug("View mode -> {}", self._mode.name)

    def _submit(self) -> None:
        if self._mode == self._lowest_mode:
            self._selected = self._cursor
            logger.debug("Submitted {}", self._selected)
            if self._on_submit is not None:
                self._on_submit(self._selected)
        else:
            self._mode = self._mode.finer()
            logger.debug("View mode -> {}", self._mode.name)

    def _move(self, offsets: tuple[int, int, int]) -> None:
        previous = self._cursor
        days, months, years = offsets
        try:
            candidate = shift_date(previous, days, months, years)
        except ValueError:
            logger.debug("Cursor move {} from {} leaves the supported years", offsets, previous)
            return
        self._cursor = self._range.clamp(candidate)
        if self._cursor != previous and self._on_select is not None:
            self._on_select(self._cursor)
