from __future__ import annotations

from .event_cache import EventCache

__all__ = ["EventCache"]
