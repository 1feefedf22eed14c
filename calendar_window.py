"""Hijri month calendar window (tkinter) positioned above the taskbar."""

import logging
from tkinter import colorchooser, messagebox
from tkinter import font as tkfont
import tkinter as tk

from calendar_logic import (
    DAY_ABBR,
    FRIDAY,
    GRID_ROWS,
    GridCell,
    day_of_year,
    month_grid,
    weeks,
)
from hijri_date import HijriDate, MONTH_NAMES
from islamic_events import (
    EVENTS,
    IslamicEvent,
    event_name,
    events_for_month,
    upcoming_events,
)
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)

# Colours
LIGHT = {
    "bg": "white",
    "header_bg": "#F3F3F3",
    "fg": "#333333",
    "muted": "#AAAAAA",
    "footer": "#555555",
    "friday": "#047857",
}
DARK = {
    "bg": "#1F2937",
    "header_bg": "#374151",
    "fg": "#E5E7EB",
    "muted": "#6B7280",
    "footer": "#9CA3AF",
    "friday": "#34D399",
}
EVENT_BG = "#FDE68A"


def footer_text(today: HijriDate, enabled_events: set[str], lang: str = "en") -> str:
    """Today in both languages plus the next enabled occasion."""
    other = "ar" if lang == "en" else "en"
    lines = [
        f"Today: {today.format('DAY, D MONTH YYYY', lang)}"
        f"  ({today.to_gregorian().strftime('%d.%m.%Y')})",
        today.format("D MONTH YYYY", other),
    ]
    for when, ev, days in upcoming_events(today, enabled_events, limit=1):
        if days == 0:
            lines.append(f"{event_name(ev, lang)}: today")
        else:
            lines.append(f"{event_name(ev, lang)}: {when.format('D MONTH', lang)}"
                         f"  (in {days} day{'s' if days != 1 else ''})")
    return "\n".join(lines)


def occasion_label(event: IslamicEvent, lang: str = "en") -> str:
    """Settings checkbox text, e.g. ``Eid al-Fitr  (1 Shawwal)``."""
    return f"{event_name(event, lang)}  ({event.day} {MONTH_NAMES[lang][event.month - 1]})"


class _ToolTip:
    """Lightweight shared tooltip for event labels."""

    __slots__ = ("_root", "_tw")

    def __init__(self, root: tk.Tk) -> None:
        self._root = root
        self._tw: tk.Toplevel | None = None

    def show(self, widget: tk.Widget, text: str) -> None:
        self.hide()
        tw = tk.Toplevel(self._root)
        tw.wm_overrideredirect(True)
        tw.wm_attributes("-topmost", True)
        lbl = tk.Label(
            tw, text=text, bg="#FFFFE0", fg="black",
            relief="solid", borderwidth=1, padx=6, pady=3, justify="left",
        )
        lbl.pack()
        x = widget.winfo_rootx() + widget.winfo_width() // 2
        y = widget.winfo_rooty() + widget.winfo_height() + 2
        tw.wm_geometry(f"+{x}+{y}")
        self._tw = tw

    def hide(self) -> None:
        if self._tw:
            self._tw.destroy()
            self._tw = None


class CalendarWindow:
    """Single Hijri month view that appears above the taskbar."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.resizable(True, True)
        self.root.attributes("-topmost", True)

        settings = load_settings()
        self.language: str = settings["language"]
        self.dark_mode: bool = settings["dark_mode"]
        self._enabled_events: set[str] = set(settings["events"])
        self.highlight_color: str = settings["highlight_color"]
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]
        self._colors = DARK if self.dark_mode else LIGHT

        self.today = HijriDate.today()
        self.current = self.today.first_of_month()
        self.root.title(self._title())

        self._setup_fonts()

        # Canvas id -> grid cell (filled during _render)
        self._widget_cells: dict[int, GridCell] = {}
        self._month_events: dict[int, list[str]] = {}

        self._build_shell()
        self._tooltip = _ToolTip(self.root)
        self._render()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.bind("<Configure>", self._on_configure)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=10)
        self.font_bold = tkfont.Font(family=base, size=10, weight="bold")
        self.font_header = tkfont.Font(family=base, size=12, weight="bold")
        self.font_sub = tkfont.Font(family=base, size=10)
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    def _title(self) -> str:
        doy = day_of_year(self.today.year, self.today.month, self.today.date)
        return f"Hijri Calendar  Day: {doy}"

    # ------------------------------------------------------------------
    # Build shell (once) — nav bar + month header + grid + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        c = self._colors
        self.root.configure(bg=c["bg"])
        self._outer = tk.Frame(self.root, bg=c["bg"])
        self._outer.pack(padx=8, pady=6)

        # Navigation row: ◀◀  ◀  Today  ▶  ▶▶
        nav = tk.Frame(self._outer, bg=c["bg"])
        nav.pack(fill="x", pady=(0, 2))
        buttons = (
            ("left", "◀◀", lambda _e: self._navigate_year(-1)),
            ("left", "◀", lambda _e: self._navigate(-1)),
            ("right", "▶▶", lambda _e: self._navigate_year(1)),
            ("right", "▶", lambda _e: self._navigate(1)),
        )
        for side, text, handler in buttons:
            btn = tk.Label(nav, text=text, font=self.font_nav, bg=c["bg"],
                           fg=c["fg"], cursor="hand2")
            btn.pack(side=side, padx=6)
            btn.bind("<Button-1>", handler)

        btn_today = tk.Label(
            nav, text="Today", font=self.font_bold, bg=c["bg"],
            fg=self.highlight_color, cursor="hand2",
        )
        btn_today.pack(side="left", expand=True)
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

        # Month header: primary language on top, the other below
        head = tk.Frame(self._outer, bg=c["header_bg"])
        head.pack(fill="x", pady=(0, 4))
        self._header = tk.Label(head, font=self.font_header, bg=c["header_bg"], fg=c["fg"])
        self._header.pack()
        self._subheader = tk.Label(head, font=self.font_sub, bg=c["header_bg"], fg=c["footer"])
        self._subheader.pack()

        grid = tk.Frame(self._outer, bg=c["bg"])
        grid.pack()
        for col, abbr in enumerate(DAY_ABBR[self.language]):
            fg = c["friday"] if col == FRIDAY else c["fg"]
            tk.Label(grid, text=abbr, font=self.font_bold, bg=c["bg"], fg=fg,
                     width=5).grid(row=0, column=col)

        # Measure cell size to match a Label width=4
        tmp = tk.Label(self.root, text="00", font=self.font_normal, width=4)
        tmp.update_idletasks()
        cell_w, cell_h = tmp.winfo_reqwidth(), tmp.winfo_reqheight() + 4
        tmp.destroy()

        self._cells: list[tk.Canvas] = []
        for r in range(GRID_ROWS):
            for col in range(7):
                cell = tk.Canvas(
                    grid, width=cell_w, height=cell_h, bg=c["bg"],
                    highlightthickness=0, borderwidth=0,
                )
                cell.grid(row=r + 1, column=col, padx=1, pady=1)
                cell.bind("<Enter>", self._on_cell_enter)
                cell.bind("<Leave>", self._on_cell_leave)
                self._cells.append(cell)

        self._footer_label = tk.Label(
            self._outer, font=self.font_footer, bg=c["bg"], fg=c["footer"],
            justify="center",
        )
        self._footer_label.pack(pady=(6, 0))

    def _rebuild_shell(self) -> None:
        self._outer.destroy()
        self._colors = DARK if self.dark_mode else LIGHT
        self._build_shell()
        self._render()

    # ------------------------------------------------------------------
    # Render the displayed month into the pooled canvases
    # ------------------------------------------------------------------
    def _render(self) -> None:
        year, month = self.current.year, self.current.month
        other = "ar" if self.language == "en" else "en"
        self._header.configure(text=f"{self.current.month_name(self.language)} {year}")
        self._subheader.configure(text=MONTH_NAMES[other][month - 1])

        self._month_events = events_for_month(month, self._enabled_events, self.language)
        self._widget_cells.clear()

        cells = month_grid(year, month)
        for r, row in enumerate(weeks(cells)):
            for col, gc in enumerate(row):
                canvas = self._cells[r * 7 + col]
                is_today = (gc.year, gc.month, gc.date) == (
                    self.today.year, self.today.month, self.today.date)
                has_event = gc.is_current_month and gc.date in self._month_events
                bg, fg = self._day_colors(gc.is_current_month, is_today,
                                          col == FRIDAY, has_event)
                self._draw_cell(canvas, str(gc.date), bg, fg,
                                self.font_bold if is_today else self.font_normal)
                self._widget_cells[id(canvas)] = gc

        self._footer_label.configure(text=self._footer_text())

    # ------------------------------------------------------------------
    # Day colour logic
    # ------------------------------------------------------------------
    def _day_colors(self, is_current: bool, is_today: bool, is_friday: bool,
                    has_event: bool) -> tuple[str, str]:
        c = self._colors
        if is_today:
            return self.highlight_color, "white"
        if not is_current:
            return c["bg"], c["muted"]
        if has_event:
            return EVENT_BG, "black"
        if is_friday:
            return c["bg"], c["friday"]
        return c["bg"], c["fg"]

    def _draw_cell(self, cell: tk.Canvas, text: str, bg: str, fg: str, font) -> None:
        cell.delete("all")
        w = cell.winfo_width()
        h = cell.winfo_height()
        if w <= 1:
            w = int(cell["width"]) + 2
        if h <= 1:
            h = int(cell["height"]) + 2
        cell.configure(bg=bg)
        cell.create_text(w // 2, h // 2, text=text, fill=fg, font=font)

    # ------------------------------------------------------------------
    # Tooltip on hover
    # ------------------------------------------------------------------
    def _on_cell_enter(self, event: tk.Event) -> None:
        gc = self._widget_cells.get(id(event.widget))
        if gc is None or not gc.is_current_month:
            return
        lines = list(self._month_events.get(gc.date, []))
        greg = HijriDate.of(gc.year, gc.month, gc.date).to_gregorian()
        lines.append(greg.strftime("%d.%m.%Y"))
        self._tooltip.show(event.widget, "\n".join(lines))

    def _on_cell_leave(self, _event: tk.Event) -> None:
        self._tooltip.hide()

    # ------------------------------------------------------------------
    # Footer text
    # ------------------------------------------------------------------
    def _footer_text(self) -> str:
        return footer_text(self.today, self._enabled_events, self.language)

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

        tk.Label(frame, text="Language:", font=self.font_normal).grid(
            row=0, column=0, sticky="w", pady=4,
        )
        lang_var = tk.StringVar(value=self.language)
        lang_frame = tk.Frame(frame)
        lang_frame.grid(row=0, column=1, sticky="w", padx=(8, 0))
        for code, label in (("en", "English"), ("ar", "العربية")):
            tk.Radiobutton(lang_frame, text=label, value=code, variable=lang_var,
                           font=self.font_normal).pack(side="left")

        dark_var = tk.BooleanVar(value=self.dark_mode)
        tk.Checkbutton(
            frame, text="Dark mode", variable=dark_var, font=self.font_normal,
        ).grid(row=1, column=0, columnspan=2, sticky="w", pady=4)

        color_val = [self.highlight_color]
        tk.Label(frame, text="Highlight colour:", font=self.font_normal).grid(
            row=2, column=0, sticky="w", pady=4,
        )
        swatch = tk.Label(frame, text="    ", bg=self.highlight_color,
                          relief="raised", borderwidth=1, cursor="hand2")
        swatch.grid(row=2, column=1, sticky="w", padx=(8, 0))

        def _pick(_e=None) -> None:
            result = colorchooser.askcolor(color=color_val[0], parent=dlg,
                                           title="Highlight colour")
            if result[1]:
                color_val[0] = result[1]
                swatch.configure(bg=result[1])

        swatch.bind("<Button-1>", _pick)

        # --- Occasions section ---
        events_frame = tk.LabelFrame(
            frame, text="Occasions", font=self.font_bold, padx=8, pady=4,
        )
        events_frame.grid(row=3, column=0, columnspan=2, sticky="we", pady=(8, 0))
        check_vars: dict[str, tk.BooleanVar] = {}
        for ev in EVENTS:
            var = tk.BooleanVar(value=(ev.key in self._enabled_events))
            check_vars[ev.key] = var
            tk.Checkbutton(
                events_frame, text=occasion_label(ev, self.language),
                variable=var, font=self.font_normal, anchor="w",
            ).pack(fill="x")

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=4, column=0, columnspan=2, pady=(8, 0))

        def on_ok() -> None:
            new_events = [k for k, v in check_vars.items() if v.get()]
            settings = load_settings()
            settings["language"] = lang_var.get()
            settings["dark_mode"] = dark_var.get()
            settings["events"] = new_events
            settings["highlight_color"] = color_val[0]
            save_settings(settings)

            self.language = settings["language"]
            self.dark_mode = settings["dark_mode"]
            self._enabled_events = set(new_events)
            self.highlight_color = color_val[0]
            dlg.destroy()
            self._rebuild_shell()

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    def open_about(self) -> None:
        messagebox.showinfo(
            "About",
            "Hijri Calendar\n\n"
            "Tabular (arithmetic) Islamic calendar. Dates may differ by a day\n"
            "or two from calendars based on moon sighting.",
            parent=self.root,
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _navigate(self, direction: int) -> None:
        if direction < 0:
            self.current = self.current.prev_month()
        else:
            self.current = self.current.next_month()
        logger.debug("Showing %s", self.current)
        self._render()

    def _navigate_year(self, direction: int) -> None:
        self.current = HijriDate.of(self.current.year + direction, self.current.month, 1)
        logger.debug("Showing %s", self.current)
        self._render()

    def _go_today(self) -> None:
        self.today = HijriDate.today()
        self.current = self.today.first_of_month()
        self._render()

    # ------------------------------------------------------------------
    # Window size tracking (persisted on hide)
    # ------------------------------------------------------------------
    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.root:
            return
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()

    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        save_settings(settings)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self._go_today()
        self.root.title(self._title())
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self._tooltip.hide()
        if self._saved_width is not None and self._saved_height is not None:
            self._persist_size()
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = max(self._saved_width or 0, self.root.winfo_reqwidth())
        win_h = max(self._saved_height or 0, self.root.winfo_reqheight())
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60  # leave room for a taskbar
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
