from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, Iterator, List, Tuple

from ...domain import CalendarEvent, instant_key

MonthKey = Tuple[int, int]


def _month_range(start: date, end: date) -> Iterator[MonthKey]:
    if end < start:
        end = start
    index = start.year * 12 + start.month - 1
    last = end.year * 12 + end.month - 1
    while index <= last:
        yield index // 12, index % 12 + 1
        index += 1


def _months_for(event: CalendarEvent) -> Iterator[MonthKey]:
    return _month_range(event.start.date(), event.end.date())


@dataclass
class EventCache:
    """In-memory event set indexed by the months each event touches."""

    events_by_id: Dict[str, CalendarEvent] = field(default_factory=dict)
    months_index: Dict[MonthKey, List[str]] = field(default_factory=dict)

    def hydrate(self, events: Iterable[CalendarEvent]) -> None:
        self.clear()
        for event in sorted(events, key=lambda item: instant_key(item.start)):
            self.upsert(event)

    def _index_event(self, event: CalendarEvent) -> None:
        self.events_by_id[event.id] = event
        for key in _months_for(event):
            self.months_index.setdefault(key, []).append(event.id)

    def upsert(self, event: CalendarEvent) -> None:
        if event.id in self.events_by_id:
            self._remove_event(event.id)
        self._index_event(event)

    def _remove_event(self, event_id: str) -> None:
        event = self.events_by_id.pop(event_id)
        for key in _months_for(event):
            ids = self.months_index.get(key, [])
            if event_id in ids:
                ids.remove(event_id)
            if not ids:
                self.months_index.pop(key, None)

    def remove(self, event_id: str) -> bool:
        if event_id not in self.events_by_id:
            return False
        self._remove_event(event_id)
        return True

    def events_for_month(self, year: int, month: int) -> List[CalendarEvent]:
        identifiers = self.months_index.get((year, month), [])
        return [self.events_by_id[event_id] for event_id in identifiers]

    def __len__(self) -> int:
        return len(self.events_by_id)

    def clear(self) -> None:
        self.events_by_id.clear()
        self.months_index.clear()
