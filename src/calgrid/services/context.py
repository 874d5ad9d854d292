from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from ..config import AppSettings, get_settings
from ..data import EventCache, Snapshot
from ..domain import Calendar


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, calendars and the event cache."""

    settings: AppSettings = field(default_factory=get_settings)
    cache: EventCache = field(default_factory=EventCache)
    calendars: Dict[str, Calendar] = field(default_factory=dict)

    def set_calendars(self, calendars: Iterable[Calendar]) -> None:
        self.calendars = {calendar.id: calendar for calendar in calendars}

    def load(self, snapshot: Snapshot) -> None:
        self.set_calendars(snapshot.calendars)
        self.cache.hydrate(snapshot.events)
