from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import orjson

from ..domain import Calendar, CalendarEvent, InvalidDateError

logger = logging.getLogger(__name__)


class SnapshotError(RuntimeError):
    """Raised when a calendar snapshot file cannot be read or decoded."""


@dataclass
class Snapshot:
    """Calendars and events exported from the booking backend."""

    calendars: List[Calendar] = field(default_factory=list)
    events: List[CalendarEvent] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snapshot":
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot root must be a JSON object.")
        try:
            calendars = [Calendar.from_record(item) for item in data.get("calendars", [])]
            events = [CalendarEvent.from_record(item) for item in data.get("events", [])]
        except InvalidDateError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed snapshot record: {exc}") from exc
        return cls(calendars=calendars, events=events)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "calendars": [calendar.to_record() for calendar in self.calendars],
            "events": [event.to_record() for event in self.events],
        }


def load_snapshot(path: Union[str, Path]) -> Snapshot:
    source = Path(path)
    try:
        raw = source.read_bytes()
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot {source}: {exc}") from exc
    try:
        data = orjson.loads(raw or b"{}")
    except orjson.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot {source} is not valid JSON: {exc}") from exc
    snapshot = Snapshot.from_dict(data)
    logger.info(
        "Loaded snapshot %s with %d calendars and %d events",
        source,
        len(snapshot.calendars),
        len(snapshot.events),
    )
    return snapshot


def dump_snapshot(snapshot: Snapshot, path: Union[str, Path]) -> None:
    payload = orjson.dumps(snapshot.to_dict(), option=orjson.OPT_INDENT_2)
    Path(path).write_bytes(payload + b"\n")
