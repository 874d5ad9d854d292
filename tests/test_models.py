"""Tests for domain records."""

from datetime import date, datetime, timezone

import pytest

from calgrid.domain import Calendar, CalendarEvent, EventState, InvalidDateError, parse_date, parse_datetime


def test_event_from_camel_case_record(snapshot_records):
    event = CalendarEvent.from_record(snapshot_records["events"][0])

    assert event.calendar_id == "cal1"
    assert event.start == datetime(2025, 3, 3, 9, 0, tzinfo=timezone.utc)
    assert event.state is EventState.BUSY
    assert event.client_name == "Acme Ltd"


def test_event_record_round_trip():
    event = CalendarEvent(
        id="e1",
        title="Visit",
        start=datetime(2025, 3, 3, 9),
        end=datetime(2025, 3, 3, 10),
        calendar_id="cal1",
        state=EventState.FREE,
    )

    record = event.to_record()

    assert record["start"] == "2025-03-03T09:00:00"
    assert record["state"] == "free"
    assert CalendarEvent.from_record(record) == event


def test_event_with_bad_timestamp():
    with pytest.raises(InvalidDateError):
        CalendarEvent.from_record({"id": "x", "start": "yesterday", "end": "2025-03-03", "calendarId": "c"})


def test_calendar_availability_flag():
    calendar = Calendar.from_record({"id": "cal2", "name": "Repairs", "isAvailable": False})

    assert calendar.is_available is False
    assert Calendar.from_record({"id": "cal3"}).name == "cal3"


def test_parsers():
    assert parse_date("2025-03") == date(2025, 3, 1)
    assert parse_date("2025-03-09T10:00:00Z") == date(2025, 3, 9)
    assert parse_datetime(date(2025, 3, 9)) == datetime(2025, 3, 9)
    with pytest.raises(InvalidDateError):
        parse_datetime(None)
    with pytest.raises(InvalidDateError):
        parse_date(3.5)
    assert issubclass(InvalidDateError, ValueError)
