from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..domain import CalendarEvent
from .clipping import clip
from .grid import DAYS_PER_WEEK, GRID_WEEKS, MonthGrid, build_grid, week_start_cell
from .packing import ProcessedEvent, assign_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionedEvent:
    """An event bar placed inside one week's seven-column strip."""

    event: ProcessedEvent
    offset_in_week: int
    visible_span_in_week: int
    row: int
    continues_before: bool = False
    continues_after: bool = False

    @property
    def left_percent(self) -> float:
        return self.offset_in_week * 100 / DAYS_PER_WEEK

    @property
    def width_percent(self) -> float:
        return self.visible_span_in_week * 100 / DAYS_PER_WEEK


@dataclass(frozen=True)
class WeekEvents:
    week_index: int
    week_start: int
    events: Tuple[PositionedEvent, ...]

    @property
    def max_row(self) -> int:
        return max((item.row for item in self.events), default=0)

    @property
    def row_count(self) -> int:
        return self.max_row + 1 if self.events else 0

    def reserved_height(self, row_height: int) -> int:
        """Vertical space kept above the day numbers for event bars."""
        return (self.max_row + 1) * row_height

    def hidden_count(self, max_rows: Optional[int]) -> int:
        if max_rows is None:
            return 0
        return sum(1 for item in self.events if item.row >= max_rows)

    def __len__(self) -> int:
        return len(self.events)


def events_for_week(week_index: int, processed_events: Iterable[ProcessedEvent]) -> WeekEvents:
    week_start = week_start_cell(week_index)
    week_end = week_start + DAYS_PER_WEEK
    positioned: List[PositionedEvent] = []

    for item in processed_events:
        if not (item.start_cell < week_end and item.end_cell >= week_start):
            continue
        visible_start = max(item.start_cell, week_start)
        visible_end = min(item.start_cell + item.span, week_end)
        positioned.append(
            PositionedEvent(
                event=item,
                offset_in_week=visible_start - week_start,
                visible_span_in_week=visible_end - visible_start,
                row=item.row,
                continues_before=item.start_cell < week_start,
                continues_after=item.start_cell + item.span > week_end,
            )
        )

    return WeekEvents(week_index=week_index, week_start=week_start, events=tuple(positioned))


@dataclass(frozen=True)
class MonthLayout:
    grid: MonthGrid
    events: Tuple[ProcessedEvent, ...]
    weeks: Tuple[WeekEvents, ...]

    def week(self, week_index: int) -> WeekEvents:
        week_start_cell(week_index)
        return self.weeks[week_index]

    def find(self, event_id: str) -> Optional[ProcessedEvent]:
        for item in self.events:
            if item.id == event_id:
                return item
        return None


def layout_month(reference_date: Any, events: Sequence[CalendarEvent]) -> MonthLayout:
    """Run the full pipeline: grid, clipping, packing and per-week grouping."""

    grid = build_grid(reference_date)
    clipped = [span for span in (clip(event, grid, grid.leading_offset) for event in events) if span is not None]
    processed = assign_rows(clipped)
    weeks = tuple(events_for_week(index, processed) for index in range(GRID_WEEKS))
    logger.debug(
        "Laid out %s: %d of %d events visible",
        grid.title,
        len(processed),
        len(events),
    )
    return MonthLayout(grid=grid, events=tuple(processed), weeks=weeks)
