from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..config import get_settings
from ..domain import Calendar, CalendarEvent
from ..layout import MonthLayout, build_grid, events_for_week, layout_month
from .registry import get_api_functions, register_api
from .serializers import serialize_grid, serialize_layout, serialize_week


def _events(records: List[Dict[str, Any]]) -> List[CalendarEvent]:
    return [CalendarEvent.from_record(record) for record in records]


def _calendars(records: Optional[List[Dict[str, Any]]]) -> List[Calendar]:
    return [Calendar.from_record(record) for record in records or []]


def _visible(events: List[CalendarEvent], calendars: List[Calendar]) -> List[CalendarEvent]:
    hidden = {calendar.id for calendar in calendars if not calendar.is_available}
    return [event for event in events if event.calendar_id not in hidden]


def _layout(
    reference: str,
    events: List[Dict[str, Any]],
    calendars: List[Calendar],
    only_available: bool,
) -> MonthLayout:
    parsed_events = _events(events)
    if only_available:
        parsed_events = _visible(parsed_events, calendars)
    return layout_month(reference, parsed_events)


@register_api(
    "month_grid",
    description="Return the 42-cell month grid and weekday labels for the month containing the reference date.",
    category="layout",
)
def month_grid(reference: str) -> Dict[str, Any]:
    return serialize_grid(build_grid(reference))


@register_api(
    "month_layout",
    description="Lay out events on the month grid: track assignment and per-week bar positions.",
    category="layout",
)
def month_layout(
    reference: str,
    events: List[Dict[str, Any]],
    calendars: Optional[List[Dict[str, Any]]] = None,
    only_available: bool = True,
) -> Dict[str, Any]:
    parsed_calendars = _calendars(calendars)
    layout = _layout(reference, events, parsed_calendars, only_available)
    return serialize_layout(layout, get_settings().layout, parsed_calendars)


@register_api(
    "week_layout",
    description="Lay out events on the month grid and return a single week's bar positions.",
    category="layout",
)
def week_layout(
    reference: str,
    week_index: int,
    events: List[Dict[str, Any]],
    calendars: Optional[List[Dict[str, Any]]] = None,
    only_available: bool = True,
) -> Dict[str, Any]:
    parsed_calendars = _calendars(calendars)
    layout = _layout(reference, events, parsed_calendars, only_available)
    week = events_for_week(int(week_index), layout.events)
    return serialize_week(week, layout.grid, get_settings().layout, parsed_calendars)


@register_api(
    "list_available_tools",
    description="List the registered layout functions with their parameters.",
    category="meta",
)
def list_available_tools() -> Dict[str, List[dict]]:
    return {"tools": [func.describe() for func in sorted(get_api_functions(), key=lambda item: item.name)]}
