"""Month-grid event layout for booking calendars."""

from __future__ import annotations

from .domain import Calendar, CalendarEvent, EventState, InvalidDateError
from .layout import (
    MonthGrid,
    MonthLayout,
    ProcessedEvent,
    WeekEvents,
    assign_rows,
    build_grid,
    clip,
    events_for_week,
    layout_month,
)

__all__ = [
    "Calendar",
    "CalendarEvent",
    "EventState",
    "InvalidDateError",
    "MonthGrid",
    "MonthLayout",
    "ProcessedEvent",
    "WeekEvents",
    "assign_rows",
    "build_grid",
    "clip",
    "events_for_week",
    "layout_month",
    "main",
]


def main() -> int:
    from .cli import main as cli_main

    return cli_main()
