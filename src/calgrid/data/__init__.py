"""Data access layer."""

from __future__ import annotations

from .cache import EventCache
from .snapshot import Snapshot, SnapshotError, dump_snapshot, load_snapshot

__all__ = ["EventCache", "Snapshot", "SnapshotError", "dump_snapshot", "load_snapshot"]
