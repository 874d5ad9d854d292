from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Tuple, Union

from ..domain import CalendarEvent, InvalidDateError, parse_datetime
from .grid import GRID_SIZE, MonthGrid, build_grid

logger = logging.getLogger(__name__)

ReferenceMonth = Union[MonthGrid, Tuple[int, int]]


@dataclass(frozen=True)
class ClippedSpan:
    """An event restricted to the displayed month, in grid coordinates."""

    event: CalendarEvent
    effective_start: date
    effective_end: date
    start_cell: int
    span: int

    @property
    def end_cell(self) -> int:
        return self.start_cell + self.span - 1

    @property
    def start(self) -> datetime:
        return self.event.start


def _month_bounds(reference_month: ReferenceMonth) -> Tuple[date, date]:
    if isinstance(reference_month, MonthGrid):
        return reference_month.first_of_month, reference_month.last_of_month
    grid = build_grid(reference_month)
    return grid.first_of_month, grid.last_of_month


def _event_days(event: Any) -> Tuple[date, date]:
    try:
        start = parse_datetime(event.start).date()
        end = parse_datetime(event.end).date()
    except AttributeError as exc:
        raise InvalidDateError(f"Event {event!r} has no start/end") from exc
    if end < start:
        logger.warning(
            "Event %s ends (%s) before it starts (%s); laying it out as a single day",
            getattr(event, "id", "?"),
            end,
            start,
        )
        end = start
    return start, end


def clip(event: CalendarEvent, reference_month: ReferenceMonth, leading_offset: int) -> Optional[ClippedSpan]:
    """Clip ``event`` to the displayed month.

    Returns ``None`` when the event does not touch the month at all. Day
    arithmetic uses calendar dates, so an event from 23:00 to 01:00 the next
    day spans two cells.
    """

    month_start, month_end = _month_bounds(reference_month)
    start, end = _event_days(event)
    if end < month_start or start > month_end:
        return None

    effective_start = max(start, month_start)
    effective_end = min(end, month_end)
    start_cell = effective_start.day + leading_offset - 1
    span = max((effective_end - effective_start).days + 1, 1)
    # the month always fits in the grid, guard against a caller-supplied offset that does not
    span = min(span, GRID_SIZE - start_cell)
    if not 0 <= start_cell < GRID_SIZE or span < 1:
        raise ValueError(f"Leading offset {leading_offset} does not fit the month into the grid.")

    return ClippedSpan(
        event=event,
        effective_start=effective_start,
        effective_end=effective_end,
        start_cell=start_cell,
        span=span,
    )
