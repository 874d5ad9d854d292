from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional

from .enums import EventState
from .errors import InvalidDateError


def parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise InvalidDateError(f"Invalid ISO timestamp: {value!r}") from exc
    raise InvalidDateError(f"Unsupported datetime value: {value!r}")


def instant_key(value: Any) -> datetime:
    """Comparable start instant; aware values are converted to UTC, naive ones are taken as written."""
    moment = parse_datetime(value)
    if moment.tzinfo is not None:
        return moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        try:
            return date.fromisoformat(raw)
        except ValueError:
            pass
        # "YYYY-MM" selects the first day of the month
        try:
            return datetime.strptime(raw, "%Y-%m").date()
        except ValueError:
            return parse_datetime(raw).date()
    raise InvalidDateError(f"Unsupported date value: {value!r}")


def _pick(record: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return default


@dataclass(frozen=True, slots=True)
class Calendar:
    id: str
    name: str
    color: Optional[str] = None
    emoji: Optional[str] = None
    description: str = ""
    is_available: bool = True

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Calendar":
        return cls(
            id=str(record["id"]),
            name=str(record.get("name") or record["id"]),
            color=record.get("color"),
            emoji=record.get("emoji"),
            description=record.get("description") or "",
            is_available=bool(_pick(record, "is_available", "isAvailable", default=True)),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "emoji": self.emoji,
            "description": self.description,
            "is_available": self.is_available,
        }


@dataclass(frozen=True, slots=True)
class CalendarEvent:
    """A materialized booking with concrete start and end instants."""

    id: str
    title: str
    start: datetime
    end: datetime
    calendar_id: str
    state: EventState = EventState.BUSY
    description: str = ""
    location: Optional[str] = None
    employee: Optional[str] = None
    client_name: Optional[str] = None
    notes: str = ""

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        client = record.get("client")
        client_name = client.get("name") if isinstance(client, dict) else _pick(record, "client_name", "clientName")
        return cls(
            id=str(record["id"]),
            title=str(record.get("title") or ""),
            start=parse_datetime(_pick(record, "start", "starts_at")),
            end=parse_datetime(_pick(record, "end", "ends_at")),
            calendar_id=str(_pick(record, "calendar_id", "calendarId", default="")),
            state=EventState(record.get("state") or EventState.BUSY),
            description=record.get("description") or "",
            location=record.get("location"),
            employee=record.get("employee"),
            client_name=client_name,
            notes=record.get("notes") or "",
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "calendar_id": self.calendar_id,
            "state": self.state.value,
            "description": self.description,
            "location": self.location,
            "employee": self.employee,
            "client_name": self.client_name,
            "notes": self.notes,
        }
