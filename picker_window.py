"""Date picker window (tkinter) drawing the picker grid on a character Canvas."""

from datetime import date
from typing import Callable
from tkinter import font as tkfont
import tkinter as tk

from loguru import logger

import grid_layout
from grid_layout import Highlight
from navigation import DatePicker, PointerButton
from ordinals import ViewMode, WeekDay
from settings import load_settings, picker_kwargs, save_settings

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
GRID_BG = "white"
WN_FG = "#888888"
DARK_BG = "#202020"

# (foreground, background) per highlight category
LIGHT_STYLE: dict[Highlight, tuple[str, str]] = {
    Highlight.UNAVAILABLE: ("#C8C8C8", GRID_BG),
    Highlight.CURSOR_FOCUSED: ("white", ACCENT),
    Highlight.CURSOR_UNFOCUSED: ("black", "#D9D9D9"),
    Highlight.SELECTED_FOCUSED: ("black", SEL_BG),
    Highlight.SELECTED_UNFOCUSED: ("black", "#EDEDED"),
    Highlight.NEIGHBOR: (WN_FG, GRID_BG),
    Highlight.NORMAL: ("black", GRID_BG),
    Highlight.TITLE: ("#333333", GRID_BG),
    Highlight.WEEKDAY: ("#333333", GRID_BG),
    Highlight.WEEK_NUMBER: (WN_FG, GRID_BG),
}

DARK_STYLE: dict[Highlight, tuple[str, str]] = {
    Highlight.UNAVAILABLE: ("#555555", DARK_BG),
    Highlight.CURSOR_FOCUSED: ("white", ACCENT),
    Highlight.CURSOR_UNFOCUSED: ("white", "#444444"),
    Highlight.SELECTED_FOCUSED: ("white", "#2B4F6E"),
    Highlight.SELECTED_UNFOCUSED: ("white", "#333333"),
    Highlight.NEIGHBOR: (WN_FG, DARK_BG),
    Highlight.NORMAL: ("#E6E6E6", DARK_BG),
    Highlight.TITLE: ("white", DARK_BG),
    Highlight.WEEKDAY: ("#BBBBBB", DARK_BG),
    Highlight.WEEK_NUMBER: (WN_FG, DARK_BG),
}

_PAD = 6
_BUTTONS = {1: PointerButton.PRIMARY, 2: PointerButton.MIDDLE, 3: PointerButton.SECONDARY}
_MODE_LABELS = {ViewMode.DAY: "Day", ViewMode.MONTH: "Month", ViewMode.DECADE: "Decade"}


class TkSurface:
    """Draw surface that lays text out on a Canvas in fixed-size character cells."""

    __slots__ = ("canvas", "font", "style", "char_w", "char_h")

    def __init__(self, canvas: tk.Canvas, font: tkfont.Font,
                 style: dict[Highlight, tuple[str, str]]) -> None:
        self.canvas = canvas
        self.font = font
        self.style = style
        self.char_w = font.measure("0")
        self.char_h = font.metrics("linespace")

    @property
    def background(self) -> str:
        return self.style[Highlight.NORMAL][1]

    def pixel_size(self, cols: int, rows: int) -> tuple[int, int]:
        return cols * self.char_w + 2 * _PAD, rows * self.char_h + 2 * _PAD

    def clear(self) -> None:
        self.canvas.delete("all")
        self.canvas.configure(bg=self.background)

    def print_text(self, col: int, row: int, text: str, highlight: Highlight) -> None:
        fg, bg = self.style[highlight]
        x = _PAD + col * self.char_w
        y = _PAD + row * self.char_h
        if bg != self.background:
            self.canvas.create_rectangle(
                x, y, x + len(text) * self.char_w, y + self.char_h, fill=bg, outline="",
            )
        self.canvas.create_text(x, y, text=text, anchor="nw", fill=fg, font=self.font)

    def cell_at(self, x: int, y: int) -> tuple[int, int] | None:
        """Return the (col, row) character cell under a pixel, if any."""
        if x < _PAD or y < _PAD:
            return None
        return (x - _PAD) // self.char_w, (y - _PAD) // self.char_h


class PickerWindow:
    """Keyboard and mouse driven date picker in a small top-level window."""

    def __init__(self, today: date,
                 on_date_chosen: Callable[[date], None] | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Select Date")
        self.root.resizable(False, False)
        self.root.attributes("-topmost", True)

        settings = load_settings()
        self._dark_mode: bool = settings["dark_mode"]
        self._on_date_chosen = on_date_chosen
        self._focused = False

        self.picker = DatePicker(
            today,
            on_submit=self._on_submit,
            on_select=self._on_select,
            **picker_kwargs(settings),
        )

        self._setup_fonts()
        self._build()
        self._redraw()

        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        if "Consolas" in families:
            self.font_grid = tkfont.Font(family="Consolas", size=11)
        else:
            self.font_grid = tkfont.nametofont("TkFixedFont").copy()
            self.font_grid.configure(size=11)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")

    def _style(self) -> dict[Highlight, tuple[str, str]]:
        return DARK_STYLE if self._dark_mode else LIGHT_STYLE

    # ------------------------------------------------------------------
    # Build (once): grid canvas + footer
    # ------------------------------------------------------------------
    def _build(self) -> None:
        bg = self._style()[Highlight.NORMAL][1]
        self.root.configure(bg=bg)

        self._canvas = tk.Canvas(self.root, highlightthickness=0, borderwidth=0,
                                 takefocus=True)
        self._canvas.pack(padx=4, pady=(4, 0))
        self._surface = TkSurface(self._canvas, self.font_grid, self._style())
        self._resize_canvas()

        self._footer_label = tk.Label(
            self.root, text=self._footer_text(), font=self.font_normal,
            bg=bg, fg=WN_FG,
        )
        self._footer_label.pack(pady=(2, 4))

        self._canvas.bind("<Key>", self._on_key)
        self._canvas.bind("<ButtonPress>", self._on_press)
        self._canvas.bind("<FocusIn>", self._on_focus_in)
        self._canvas.bind("<FocusOut>", self._on_focus_out)

    def _resize_canvas(self) -> None:
        width, height = self._surface.pixel_size(*self.picker.required_size())
        self._canvas.configure(width=width, height=height)

    def _redraw(self) -> None:
        self._surface.clear()
        grid_layout.draw(self.picker, self._surface, focused=self._focused)

    def _footer_text(self) -> str:
        return f"Selected: {self.picker.selected_date.strftime('%d.%m.%Y')}"

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def _on_key(self, event: tk.Event) -> str | None:
        if self.picker.handle_key(event.keysym):
            self._redraw()
            return "break"
        return None

    def _on_press(self, event: tk.Event) -> None:
        if not self.picker.can_focus():
            return
        self._canvas.focus_set()
        cell = self._surface.cell_at(event.x, event.y)
        button = _BUTTONS.get(event.num)
        if cell is None or button is None:
            return
        if self.picker.click(cell[0], cell[1], button):
            self._redraw()

    def _on_focus_in(self, _event: tk.Event) -> None:
        self._focused = True
        self._redraw()

    def _on_focus_out(self, _event: tk.Event) -> None:
        self._focused = False
        self._redraw()

    # ------------------------------------------------------------------
    # Picker callbacks
    # ------------------------------------------------------------------
    def _on_select(self, d: date) -> None:
        self.root.title(f"Select Date – {d.isoformat()}")

    def _on_submit(self, d: date) -> None:
        logger.info("Date chosen: {}", d.isoformat())
        self.root.clipboard_clear()
        self.root.clipboard_append(d.isoformat())
        self._footer_label.configure(text=self._footer_text())
        if self._on_date_chosen is not None:
            self._on_date_chosen(d)
        self.hide()

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        weekday_names = [self.picker.locale.weekday_name(d, long=True) for d in WeekDay]
        tk.Label(frame, text="Week starts on:", font=self.font_normal).grid(
            row=0, column=0, sticky="w", pady=4,
        )
        week_var = tk.StringVar(value=weekday_names[self.picker.week_start])
        tk.OptionMenu(frame, week_var, *weekday_names).grid(
            row=0, column=1, sticky="we", padx=(8, 0), pady=4,
        )

        lowest, highest = self.picker.mode_bounds
        mode_names = [_MODE_LABELS[m] for m in ViewMode]
        tk.Label(frame, text="Finest view:", font=self.font_normal).grid(
            row=1, column=0, sticky="w", pady=4,
        )
        lowest_var = tk.StringVar(value=_MODE_LABELS[lowest])
        tk.OptionMenu(frame, lowest_var, *mode_names).grid(
            row=1, column=1, sticky="we", padx=(8, 0), pady=4,
        )
        tk.Label(frame, text="Coarsest view:", font=self.font_normal).grid(
            row=2, column=0, sticky="w", pady=4,
        )
        highest_var = tk.StringVar(value=_MODE_LABELS[highest])
        tk.OptionMenu(frame, highest_var, *mode_names).grid(
            row=2, column=1, sticky="we", padx=(8, 0), pady=4,
        )

        iso_var = tk.BooleanVar(value=self.picker.show_iso_weeks)
        tk.Checkbutton(
            frame, text="Show ISO week numbers", variable=iso_var, font=self.font_normal,
        ).grid(row=3, column=0, columnspan=2, sticky="w", pady=4)

        dark_var = tk.BooleanVar(value=self._dark_mode)
        tk.Checkbutton(
            frame, text="Dark mode", variable=dark_var, font=self.font_normal,
        ).grid(row=4, column=0, columnspan=2, sticky="w", pady=4)

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=5, column=0, columnspan=2, pady=(8, 0))

        def on_ok() -> None:
            week_start = WeekDay(weekday_names.index(week_var.get()))
            new_lowest = ViewMode(mode_names.index(lowest_var.get()))
            new_highest = ViewMode(mode_names.index(highest_var.get()))
            if new_lowest >= new_highest:
                return

            settings = load_settings()
            settings["week_start"] = week_start.name.lower()
            settings["lowest_mode"] = new_lowest.name.lower()
            settings["highest_mode"] = new_highest.name.lower()
            settings["show_iso_weeks"] = iso_var.get()
            settings["dark_mode"] = dark_var.get()
            save_settings(settings)

            self.picker.set_week_start(week_start) \
                .set_mode_bounds(new_lowest, new_highest) \
                .set_show_iso_weeks(iso_var.get())
            self._dark_mode = dark_var.get()
            self._apply_style()
            dlg.destroy()

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    def _apply_style(self) -> None:
        style = self._style()
        bg = style[Highlight.NORMAL][1]
        self._surface.style = style
        self.root.configure(bg=bg)
        self._footer_label.configure(bg=bg)
        self._resize_canvas()
        self._redraw()

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.picker.set_cursor_date(self.picker.selected_date)
        self.picker.set_view_mode(self.picker.mode_bounds[0])
        self.root.title("Select Date")
        self._redraw()
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        if self.picker.can_focus():
            self._canvas.focus_force()

    def hide(self) -> None:
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"+{x}+{y}")
