"""Hijri month-grid calculations — no UI dependencies."""

from __future__ import annotations

from typing import NamedTuple

from hijri_date import HijriDate, days_in_month

DAY_ABBR = {
    "en": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
    "ar": ["أحد", "إثنين", "ثلاثاء", "أربعاء", "خميس", "جمعة", "سبت"],
}
FRIDAY = 5

GRID_ROWS = 6
GRID_SIZE = GRID_ROWS * 7


class GridCell(NamedTuple):
    date: int
    month: int
    year: int
    is_current_month: bool


def month_grid(year: int, month: int) -> list[GridCell]:
    """Return the 42 cells (6×7, Sunday first) for a Hijri month.

    Leading cells are the tail of the previous month, trailing cells the
    start of the next one.  Always 42 so the calendar height stays constant.
    """
    total = days_in_month(year, month)
    starting_day_of_week = HijriDate.of(year, month, 1).day

    py, pm = prev_month(year, month)
    days_in_prev = days_in_month(py, pm)
    cells = [
        GridCell(days_in_prev - i, pm, py, False)
        for i in reversed(range(starting_day_of_week))
    ]

    cells.extend(GridCell(d, month, year, True) for d in range(1, total + 1))

    ny, nm = next_month(year, month)
    cells.extend(
        GridCell(d, nm, ny, False) for d in range(1, GRID_SIZE - len(cells) + 1)
    )
    return cells


def weeks(cells: list[GridCell]) -> list[list[GridCell]]:
    """Split a flat grid into rows of 7."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def day_of_year(year: int, month: int, date: int) -> int:
    """Return the 1-based day-of-year of a Hijri date."""
    return sum(days_in_month(year, m) for m in range(1, month)) + date


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
