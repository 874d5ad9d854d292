"""Domain models for booking calendars."""

from __future__ import annotations

from .enums import EventState
from .errors import InvalidDateError
from .models import Calendar, CalendarEvent, instant_key, parse_date, parse_datetime

__all__ = [
    "Calendar",
    "CalendarEvent",
    "EventState",
    "InvalidDateError",
    "instant_key",
    "parse_date",
    "parse_datetime",
]
