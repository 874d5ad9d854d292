"""Month-grid event layout engine."""

from __future__ import annotations

from .clipping import ClippedSpan, clip
from .grid import (
    DAYS_PER_WEEK,
    GRID_SIZE,
    GRID_WEEKS,
    WEEKDAY_LABELS,
    MonthGrid,
    build_grid,
    month_title,
    shift_month,
    weekday_labels,
)
from .packing import ProcessedEvent, assign_rows
from .weeks import MonthLayout, PositionedEvent, WeekEvents, events_for_week, layout_month

__all__ = [
    "ClippedSpan",
    "DAYS_PER_WEEK",
    "GRID_SIZE",
    "GRID_WEEKS",
    "MonthGrid",
    "MonthLayout",
    "PositionedEvent",
    "ProcessedEvent",
    "WEEKDAY_LABELS",
    "WeekEvents",
    "assign_rows",
    "build_grid",
    "clip",
    "events_for_week",
    "layout_month",
    "month_title",
    "shift_month",
    "weekday_labels",
]
