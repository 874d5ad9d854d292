from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional

from ..domain import Calendar, CalendarEvent, parse_date
from ..layout import MonthLayout, layout_month, month_title, shift_month
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarService:
    """Month-view state: the displayed month, calendar visibility and layout."""

    context: ServiceContext
    current: date = field(default_factory=lambda: date.today().replace(day=1))

    @property
    def title(self) -> str:
        return month_title(self.current)

    def go_to(self, reference: Any) -> date:
        self.current = parse_date(reference).replace(day=1)
        return self.current

    def next_month(self) -> date:
        self.current = shift_month(self.current, 1)
        return self.current

    def previous_month(self) -> date:
        self.current = shift_month(self.current, -1)
        return self.current

    def today(self, *, today: Optional[date] = None) -> date:
        self.current = (today or date.today()).replace(day=1)
        return self.current

    def calendar_for(self, event: CalendarEvent) -> Optional[Calendar]:
        return self.context.calendars.get(event.calendar_id)

    def is_visible(self, event: CalendarEvent) -> bool:
        calendar = self.calendar_for(event)
        # events of unknown calendars stay visible
        return calendar is None or calendar.is_available

    def visible_events(self, *, only_available: Optional[bool] = None) -> List[CalendarEvent]:
        if only_available is None:
            only_available = self.context.settings.layout.only_available_calendars
        events = self.context.cache.events_for_month(self.current.year, self.current.month)
        if not only_available:
            return events
        return [event for event in events if self.is_visible(event)]

    def month_layout(self, *, only_available: Optional[bool] = None) -> MonthLayout:
        events = self.visible_events(only_available=only_available)
        logger.debug("Computing layout for %s with %d events", self.title, len(events))
        return layout_month(self.current, events)

    def upsert_event(self, event: CalendarEvent) -> None:
        self.context.cache.upsert(event)

    def delete_event(self, event_id: str) -> bool:
        return self.context.cache.remove(event_id)
