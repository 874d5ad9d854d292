from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class LayoutSettings:
    row_height_px: int
    max_visible_rows: Optional[int]
    only_available_calendars: bool

    def bar_top_px(self, row: int) -> int:
        return row * self.row_height_px


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int

    @property
    def bind(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class UiSettings:
    app_name: str


@dataclass(frozen=True)
class AppSettings:
    layout: LayoutSettings
    server: ServerSettings
    ui: UiSettings


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    layout = LayoutSettings(
        row_height_px=_int_from_env("CALGRID_ROW_HEIGHT_PX", 24) or 24,
        max_visible_rows=_int_from_env("CALGRID_MAX_VISIBLE_ROWS", None),
        only_available_calendars=_bool_from_env("CALGRID_ONLY_AVAILABLE", True),
    )

    server = ServerSettings(
        host=os.getenv("CALGRID_API_HOST", "127.0.0.1"),
        port=_int_from_env("CALGRID_API_PORT", 8000) or 8000,
    )

    ui = UiSettings(app_name=os.getenv("CALGRID_APP_NAME", "calgrid"))

    return AppSettings(layout=layout, server=server, ui=ui)
