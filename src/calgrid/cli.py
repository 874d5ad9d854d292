from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

import orjson

from .api.serializers import serialize_grid, serialize_layout
from .bootstrap import configure_logging
from .config import get_settings
from .data import SnapshotError, load_snapshot
from .domain import InvalidDateError
from .layout import DAYS_PER_WEEK, GRID_WEEKS, MonthLayout, WeekEvents, build_grid, weekday_labels
from .services import CalendarService, ServiceContext

logger = logging.getLogger(__name__)

CELL_WIDTH = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Month-grid event layout for booking calendars.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    layout_parser = subparsers.add_parser("layout", help="Lay out the events of a snapshot file on a month grid.")
    layout_parser.add_argument("snapshot", help="JSON file with 'calendars' and 'events'.")
    layout_parser.add_argument("--month", help="Month to display (YYYY-MM or any ISO date). Defaults to today.")
    layout_parser.add_argument("--json", action="store_true", help="Print the layout as JSON.")
    layout_parser.add_argument(
        "--all-calendars",
        action="store_true",
        help="Include events of calendars marked unavailable.",
    )

    grid_parser = subparsers.add_parser("grid", help="Print the 42-cell grid of a month.")
    grid_parser.add_argument("--month", help="Month to display (YYYY-MM or any ISO date). Defaults to today.")
    grid_parser.add_argument("--json", action="store_true", help="Print the grid as JSON.")

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the layout functions.")
    api_parser.add_argument("--host", default=None)
    api_parser.add_argument("--port", type=int, default=None)

    return parser


def _format_days(days: List[Optional[int]]) -> str:
    return "".join((str(day) if day else "").ljust(CELL_WIDTH) for day in days)


def format_week(week: WeekEvents, days: List[Optional[int]]) -> List[str]:
    lines = []
    for row in range(week.row_count):
        line = [" " * CELL_WIDTH] * DAYS_PER_WEEK
        for item in week.events:
            if item.row != row:
                continue
            width = item.visible_span_in_week * CELL_WIDTH
            label = ("<" if item.continues_before else "[") + item.event.title
            bar = label[: width - 1].ljust(width - 1, "-") + (">" if item.continues_after else "]")
            line[item.offset_in_week] = bar
            for column in range(item.offset_in_week + 1, item.offset_in_week + item.visible_span_in_week):
                line[column] = ""
        lines.append("".join(line).rstrip())
    lines.append(_format_days(days).rstrip())
    return lines


def format_layout(layout: MonthLayout) -> str:
    lines = [layout.grid.title, "".join(label.ljust(CELL_WIDTH) for label in weekday_labels(short=True)).rstrip()]
    for week in layout.weeks:
        lines.extend(format_week(week, list(layout.grid.week_cells(week.week_index))))
    return "\n".join(lines)


def _print_json(payload: dict) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")


def _run_layout(args: argparse.Namespace) -> int:
    context = ServiceContext()
    context.load(load_snapshot(args.snapshot))
    service = CalendarService(context)
    if args.month:
        service.go_to(args.month)
    layout = service.month_layout(only_available=False if args.all_calendars else None)
    if args.json:
        _print_json(serialize_layout(layout, context.settings.layout, context.calendars.values()))
    else:
        print(format_layout(layout))
    return 0


def _run_grid(args: argparse.Namespace) -> int:
    grid = build_grid(args.month or date.today())
    if args.json:
        _print_json(serialize_grid(grid))
        return 0
    print(grid.title)
    print("".join(label.ljust(CELL_WIDTH) for label in weekday_labels(short=True)).rstrip())
    for week_index in range(GRID_WEEKS):
        print(_format_days(list(grid.week_cells(week_index))).rstrip())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.debug("%s CLI running %s", get_settings().ui.app_name, args.command)

    try:
        if args.command == "layout":
            return _run_layout(args)
        if args.command == "grid":
            return _run_grid(args)
        if args.command == "api":
            from .services.http import run_local_server

            run_local_server(host=args.host, port=args.port)
            return 0
    except (InvalidDateError, SnapshotError) as exc:
        logger.error("%s", exc)
        return 2
    parser.print_help()  # pragma: no cover - argparse enforces choices
    return 1


if __name__ == "__main__":
    sys.exit(main())
