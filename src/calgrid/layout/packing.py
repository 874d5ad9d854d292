"""First-fit track assignment for month-view event bars.

Events are placed longest-first, ties broken by earliest start, each into the
lowest row whose cells are all free. The result is deterministic but not
guaranteed to use the fewest possible rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Tuple

from ..domain import CalendarEvent, instant_key
from .clipping import ClippedSpan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessedEvent:
    event: CalendarEvent
    start_cell: int
    span: int
    row: int

    @property
    def end_cell(self) -> int:
        return self.start_cell + self.span - 1

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def title(self) -> str:
        return self.event.title

    @property
    def start(self) -> datetime:
        return self.event.start

    @property
    def end(self) -> datetime:
        return self.event.end

    @property
    def calendar_id(self) -> str:
        return self.event.calendar_id

    def cells(self) -> range:
        return range(self.start_cell, self.start_cell + self.span)


def _sort_key(clipped: ClippedSpan) -> Tuple[int, datetime]:
    return -clipped.span, instant_key(clipped.event.start)


def assign_rows(clipped_events: Iterable[ClippedSpan]) -> List[ProcessedEvent]:
    ordered = sorted(clipped_events, key=_sort_key)
    occupied: Dict[Tuple[int, int], str] = {}
    processed: List[ProcessedEvent] = []

    for clipped in ordered:
        cells = range(clipped.start_cell, clipped.start_cell + clipped.span)
        row = 0
        while any((cell, row) in occupied for cell in cells):
            row += 1
        for cell in cells:
            occupied[(cell, row)] = clipped.event.id
        processed.append(
            ProcessedEvent(event=clipped.event, start_cell=clipped.start_cell, span=clipped.span, row=row)
        )

    if processed:
        logger.debug(
            "Packed %d events into %d rows",
            len(processed),
            max(item.row for item in processed) + 1,
        )
    return processed
