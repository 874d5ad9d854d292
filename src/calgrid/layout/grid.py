"""Fixed 6x7 month grid used by the month view.

The grid always holds 42 cells so that every month renders with the same
number of week rows. Cells outside the displayed month are ``None``; the rest
carry their day-of-month. Weeks start on Sunday.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple

from ..domain import InvalidDateError, parse_date

GRID_WEEKS = 6
DAYS_PER_WEEK = 7
GRID_SIZE = GRID_WEEKS * DAYS_PER_WEEK

WEEKDAY_LABELS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def weekday_labels(short: bool = False) -> Tuple[str, ...]:
    if short:
        return tuple(label[:3] for label in WEEKDAY_LABELS)
    return WEEKDAY_LABELS


def sunday_weekday(day: date) -> int:
    """Weekday index with 0 = Sunday."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    leading_offset: int
    days_in_month: int
    cells: Tuple[Optional[int], ...]

    @property
    def first_of_month(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_of_month(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    @property
    def title(self) -> str:
        return month_title(self.first_of_month)

    def cell_for_day(self, day: int) -> int:
        if not 1 <= day <= self.days_in_month:
            raise ValueError(f"Day {day} is outside {self.title}.")
        return day + self.leading_offset - 1

    def date_for_cell(self, index: int) -> Optional[date]:
        if not 0 <= index < GRID_SIZE:
            raise IndexError(f"Cell index {index} is outside the {GRID_SIZE}-cell grid.")
        day = self.cells[index]
        return date(self.year, self.month, day) if day is not None else None

    def week_cells(self, week_index: int) -> Tuple[Optional[int], ...]:
        start = week_start_cell(week_index)
        return self.cells[start : start + DAYS_PER_WEEK]


def week_start_cell(week_index: int) -> int:
    if not 0 <= week_index < GRID_WEEKS:
        raise ValueError(f"week_index must be between 0 and {GRID_WEEKS - 1}, got {week_index}.")
    return week_index * DAYS_PER_WEEK


def _coerce_reference(reference_date: Any) -> date:
    if isinstance(reference_date, (tuple, list)) and len(reference_date) == 2:
        year, month = reference_date
        try:
            return date(int(year), int(month), 1)
        except (TypeError, ValueError) as exc:
            raise InvalidDateError(f"Invalid reference month: {reference_date!r}") from exc
    return parse_date(reference_date)


def build_grid(reference_date: Any) -> MonthGrid:
    """Build the 42-cell grid for the month containing ``reference_date``.

    ``reference_date`` may be a ``date``/``datetime``, an ISO string
    (``YYYY-MM-DD`` or ``YYYY-MM``) or a ``(year, month)`` pair.
    """

    reference = _coerce_reference(reference_date)
    first = reference.replace(day=1)
    leading_offset = sunday_weekday(first)
    days_in_month = calendar.monthrange(first.year, first.month)[1]

    cells = []
    for index in range(GRID_SIZE):
        day_number = index - leading_offset + 1
        cells.append(day_number if 0 < day_number <= days_in_month else None)

    return MonthGrid(
        year=first.year,
        month=first.month,
        leading_offset=leading_offset,
        days_in_month=days_in_month,
        cells=tuple(cells),
    )


def shift_month(reference_date: Any, months: int) -> date:
    """Return the first day of the month ``months`` away from ``reference_date``."""

    reference = _coerce_reference(reference_date)
    index = reference.year * 12 + (reference.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_title(reference_date: Any) -> str:
    return _coerce_reference(reference_date).strftime("%B %Y")
