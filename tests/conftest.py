"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime

import pytest

from calgrid.config import get_settings
from calgrid.domain import Calendar, CalendarEvent


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Reset cached settings and drop any CALGRID_* variables from the environment."""
    for name in [
        "CALGRID_ROW_HEIGHT_PX",
        "CALGRID_MAX_VISIBLE_ROWS",
        "CALGRID_ONLY_AVAILABLE",
        "CALGRID_API_HOST",
        "CALGRID_API_PORT",
        "CALGRID_APP_NAME",
    ]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_event():
    """Factory building events from ISO strings."""

    def _make(event_id, start, end=None, calendar_id="cal1", title=None):
        return CalendarEvent(
            id=event_id,
            title=title or event_id,
            start=datetime.fromisoformat(start),
            end=datetime.fromisoformat(end or start),
            calendar_id=calendar_id,
        )

    return _make


@pytest.fixture
def calendars():
    return [
        Calendar(id="cal1", name="Cleaning", color="#4cc9f0"),
        Calendar(id="cal2", name="Repairs", color="#ffb703", is_available=False),
    ]


@pytest.fixture
def snapshot_records():
    """Snapshot dictionary in the booking backend's export format."""
    return {
        "calendars": [
            {"id": "cal1", "name": "Cleaning", "color": "#4cc9f0", "emoji": "🧹", "isAvailable": True},
            {"id": "cal2", "name": "Repairs", "color": "#ffb703", "isAvailable": False},
        ],
        "events": [
            {
                "id": "evt-1",
                "title": "Office deep clean",
                "start": "2025-03-03T09:00:00Z",
                "end": "2025-03-07T17:00:00Z",
                "calendarId": "cal1",
                "state": "busy",
                "client": {"name": "Acme Ltd"},
            },
            {
                "id": "evt-2",
                "title": "Window check",
                "start": "2025-03-05T10:00:00Z",
                "end": "2025-03-05T11:00:00Z",
                "calendarId": "cal1",
            },
            {
                "id": "evt-3",
                "title": "Boiler repair",
                "start": "2025-03-06T08:00:00Z",
                "end": "2025-03-06T12:00:00Z",
                "calendarId": "cal2",
            },
            {
                "id": "evt-4",
                "title": "April move-out",
                "start": "2025-04-10T08:00:00Z",
                "end": "2025-04-10T12:00:00Z",
                "calendarId": "cal1",
            },
        ],
    }
