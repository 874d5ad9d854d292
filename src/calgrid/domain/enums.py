from __future__ import annotations

from enum import Enum


class EventState(str, Enum):
    BUSY = "busy"
    FREE = "free"
