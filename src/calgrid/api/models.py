from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import LayoutSettings
from ..domain import CalendarEvent
from ..layout import MonthGrid, MonthLayout, PositionedEvent, WeekEvents, weekday_labels


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    start: str
    end: str
    calendar_id: str = Field(alias="calendarId")
    state: str
    location: Optional[str] = Field(default=None)
    employee: Optional[str] = Field(default=None)
    client_name: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventPayload":
        return cls(
            id=event.id,
            title=event.title,
            start=event.start.isoformat(),
            end=event.end.isoformat(),
            calendar_id=event.calendar_id,
            state=event.state.value,
            location=event.location,
            employee=event.employee,
            client_name=event.client_name,
        )


class PositionedEventPayload(BaseModel):
    event: EventPayload
    start_cell: int
    span: int
    row: int
    offset_in_week: int
    visible_span_in_week: int
    continues_before: bool
    continues_after: bool
    left_percent: float
    width_percent: float
    top_px: int
    color: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(
        cls,
        item: PositionedEvent,
        settings: LayoutSettings,
        color: Optional[str] = None,
    ) -> "PositionedEventPayload":
        return cls(
            event=EventPayload.from_domain(item.event.event),
            start_cell=item.event.start_cell,
            span=item.event.span,
            row=item.row,
            offset_in_week=item.offset_in_week,
            visible_span_in_week=item.visible_span_in_week,
            continues_before=item.continues_before,
            continues_after=item.continues_after,
            left_percent=round(item.left_percent, 4),
            width_percent=round(item.width_percent, 4),
            top_px=settings.bar_top_px(item.row),
            color=color,
        )


class WeekPayload(BaseModel):
    week_index: int
    week_start: int
    days: List[Optional[int]]
    max_row: int
    row_count: int
    reserved_height_px: int
    hidden_count: int
    events: List[PositionedEventPayload] = Field(default_factory=list)


class GridPayload(BaseModel):
    year: int
    month: int
    title: str
    leading_offset: int
    days_in_month: int
    weekday_labels: List[str]
    cells: List[Optional[int]]

    @classmethod
    def from_domain(cls, grid: MonthGrid, *, short_labels: bool = True) -> "GridPayload":
        return cls(
            year=grid.year,
            month=grid.month,
            title=grid.title,
            leading_offset=grid.leading_offset,
            days_in_month=grid.days_in_month,
            weekday_labels=list(weekday_labels(short=short_labels)),
            cells=list(grid.cells),
        )


class MonthLayoutPayload(BaseModel):
    grid: GridPayload
    weeks: List[WeekPayload]


def week_payload(
    week: WeekEvents,
    grid: MonthGrid,
    settings: LayoutSettings,
    colors: Optional[dict] = None,
) -> WeekPayload:
    colors = colors or {}
    return WeekPayload(
        week_index=week.week_index,
        week_start=week.week_start,
        days=list(grid.week_cells(week.week_index)),
        max_row=week.max_row,
        row_count=week.row_count,
        reserved_height_px=week.reserved_height(settings.row_height_px),
        hidden_count=week.hidden_count(settings.max_visible_rows),
        events=[
            PositionedEventPayload.from_domain(item, settings, colors.get(item.event.calendar_id))
            for item in week.events
        ],
    )


def month_layout_payload(
    layout: MonthLayout,
    settings: LayoutSettings,
    colors: Optional[dict] = None,
) -> MonthLayoutPayload:
    return MonthLayoutPayload(
        grid=GridPayload.from_domain(layout.grid),
        weeks=[week_payload(week, layout.grid, settings, colors) for week in layout.weeks],
    )
