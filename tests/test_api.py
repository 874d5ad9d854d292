"""Tests for the registered layout functions and the HTTP server."""

import pytest
from fastapi.testclient import TestClient

from calgrid.api import call_api, get_api_functions
from calgrid.services.http import app


@pytest.fixture
def client():
    return TestClient(app)


def test_registry_lists_layout_functions():
    names = {func.name for func in get_api_functions()}

    assert {"month_grid", "month_layout", "week_layout", "list_available_tools"} <= names


def test_month_grid_function():
    result = call_api("month_grid", reference="2025-03")

    assert result["title"] == "March 2025"
    assert result["leading_offset"] == 6
    assert len(result["cells"]) == 42
    assert result["weekday_labels"][0] == "Sun"


def test_month_layout_function(snapshot_records):
    result = call_api("month_layout", reference="2025-03-15", **snapshot_records)

    week = result["weeks"][1]
    assert week["days"] == [2, 3, 4, 5, 6, 7, 8]
    assert week["max_row"] == 1
    assert week["reserved_height_px"] == 48
    placed = {item["event"]["id"]: item for item in week["events"]}
    assert set(placed) == {"evt-1", "evt-2"}
    assert placed["evt-1"]["offset_in_week"] == 1
    assert placed["evt-1"]["visible_span_in_week"] == 5
    assert placed["evt-1"]["color"] == "#4cc9f0"
    assert placed["evt-2"]["top_px"] == 24


def test_month_layout_can_include_hidden_calendars(snapshot_records):
    result = call_api("month_layout", reference="2025-03", only_available=False, **snapshot_records)

    ids = {item["event"]["id"]: item["row"] for item in result["weeks"][1]["events"]}
    assert ids == {"evt-1": 0, "evt-2": 1, "evt-3": 1}


def test_week_layout_function(snapshot_records):
    result = call_api("week_layout", reference="2025-03", week_index=1, events=snapshot_records["events"])

    assert result["week_index"] == 1
    assert result["row_count"] == 2


def test_week_layout_matches_month_layout_with_hidden_calendar(snapshot_records):
    week = call_api("week_layout", reference="2025-03", week_index=1, **snapshot_records)
    month = call_api("month_layout", reference="2025-03", **snapshot_records)

    rows = {item["event"]["id"]: item["row"] for item in week["events"]}
    assert rows == {"evt-1": 0, "evt-2": 1}
    assert week == month["weeks"][1]
    assert {item["color"] for item in week["events"]} == {"#4cc9f0"}

    everything = call_api("week_layout", reference="2025-03", week_index=1, only_available=False, **snapshot_records)
    assert "evt-3" in {item["event"]["id"] for item in everything["events"]}


def test_row_height_comes_from_settings(monkeypatch, snapshot_records):
    monkeypatch.setenv("CALGRID_ROW_HEIGHT_PX", "30")

    result = call_api("month_layout", reference="2025-03", **snapshot_records)

    assert result["weeks"][1]["reserved_height_px"] == 60


def test_unknown_function():
    with pytest.raises(KeyError):
        call_api("nope")


def test_http_health_and_listing(client):
    assert client.get("/health").json()["status"] == "ok"
    functions = client.get("/api/functions").json()["functions"]
    assert "month_layout" in {func["name"] for func in functions}


def test_http_invoke(client, snapshot_records):
    response = client.post(
        "/api/functions/month_layout",
        json={"arguments": {"reference": "2025-03", **snapshot_records}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "month_layout"
    assert len(body["result"]["weeks"]) == 6


def test_http_errors(client):
    missing = client.post("/api/functions/nope", json={"arguments": {}})
    bad_date = client.post("/api/functions/month_grid", json={"arguments": {"reference": "soon"}})
    bad_args = client.post("/api/functions/month_grid", json={"arguments": {}})
    bad_record = client.post(
        "/api/functions/month_layout",
        json={
            "arguments": {
                "reference": "2025-03",
                "events": [{"title": "no id", "start": "2025-03-05T10:00:00Z", "end": "2025-03-05T11:00:00Z"}],
            }
        },
    )

    assert missing.status_code == 404
    assert bad_date.status_code == 400
    assert bad_args.status_code == 400
    assert bad_record.status_code == 400
    assert "not registered" not in bad_record.json()["detail"]


def test_tool_listing_describes_parameters():
    tools = {tool["name"]: tool for tool in call_api("list_available_tools")["tools"]}

    assert tools["week_layout"]["required"] == ["reference", "week_index", "events"]
    assert "only_available" in tools["week_layout"]["parameters"]
    assert tools["month_grid"]["category"] == "layout"
