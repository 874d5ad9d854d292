"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, LayoutSettings, ServerSettings, UiSettings, get_settings

__all__ = ["AppSettings", "LayoutSettings", "ServerSettings", "UiSettings", "get_settings"]
