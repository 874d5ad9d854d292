from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from ..config import LayoutSettings
from ..domain import Calendar, CalendarEvent
from ..layout import MonthGrid, MonthLayout, WeekEvents
from .models import EventPayload, GridPayload, month_layout_payload, week_payload


def calendar_colors(calendars: Iterable[Calendar]) -> Dict[str, Optional[str]]:
    return {calendar.id: calendar.color for calendar in calendars}


def serialize_event(event: CalendarEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump()


def serialize_grid(grid: MonthGrid) -> Dict[str, Any]:
    return GridPayload.from_domain(grid).model_dump()


def serialize_week(
    week: WeekEvents,
    grid: MonthGrid,
    settings: LayoutSettings,
    calendars: Iterable[Calendar] = (),
) -> Dict[str, Any]:
    return week_payload(week, grid, settings, calendar_colors(calendars)).model_dump()


def serialize_layout(
    layout: MonthLayout,
    settings: LayoutSettings,
    calendars: Iterable[Calendar] = (),
) -> Dict[str, Any]:
    return month_layout_payload(layout, settings, calendar_colors(calendars)).model_dump()
