"""Tests for environment-driven settings."""

from calgrid.config import get_settings


def test_defaults():
    settings = get_settings()

    assert settings.layout.row_height_px == 24
    assert settings.layout.max_visible_rows is None
    assert settings.layout.only_available_calendars is True
    assert settings.server.bind == "127.0.0.1:8000"
    assert settings.layout.bar_top_px(2) == 48


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CALGRID_ROW_HEIGHT_PX", "30")
    monkeypatch.setenv("CALGRID_MAX_VISIBLE_ROWS", "3")
    monkeypatch.setenv("CALGRID_ONLY_AVAILABLE", "no")
    monkeypatch.setenv("CALGRID_API_PORT", "9000")

    settings = get_settings()

    assert settings.layout.row_height_px == 30
    assert settings.layout.max_visible_rows == 3
    assert settings.layout.only_available_calendars is False
    assert settings.server.port == 9000


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("CALGRID_ROW_HEIGHT_PX", "tall")
    monkeypatch.setenv("CALGRID_MAX_VISIBLE_ROWS", "-2")

    settings = get_settings()

    assert settings.layout.row_height_px == 24
    assert settings.layout.max_visible_rows is None
