"""AIRAC Explorer - AIRAC cycle calculator.

Command line entry point. Generates the cycle catalog, runs queries
against it and exports results.

Typical usage:
    airac-explorer current
    airac-explorer list --year 2026 --status upcoming --page 2
    airac-explorer show 2501
    airac-explorer export --format ical --year 2026 --output ~/calendars
    airac-explorer --date 2025-02-15 stats
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import date

from airac_explorer.core.config import AppConfig, get_app_config
from airac_explorer.core.errors import AiracError
from airac_explorer.core.logging_system import get_logger, initialize_logging
from airac_explorer.cycles.catalog import find_by_identifier
from airac_explorer.cycles.models import Cycle
from airac_explorer.cycles.status import today
from airac_explorer.export.exporters import ExportFormat, export_cycles
from airac_explorer.query.cache import CatalogCache
from airac_explorer.query.engine import apply_filters, parse_year_filter, run_query, sort_cycles
from airac_explorer.query.formatting import (
    describe_cycle,
    format_date_range,
    format_display_date,
    format_relative,
    status_label,
)
from airac_explorer.query.models import QueryState, SortOrder, StatusFilter
from airac_explorer.settings.preferences import UserPreferences, get_preferences
from airac_explorer.version import get_version

logger = get_logger(__name__)


def _parse_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {text!r} (expected YYYY-MM-DD)") from e


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from e
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _filter_parser() -> argparse.ArgumentParser:
    """Parent parser holding the filter and sort options."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--search", default="", help="Case-insensitive search term")
    parser.add_argument(
        "--year",
        default="all",
        help="Year to show (e.g., 2026) or 'all'",
    )
    parser.add_argument(
        "--status",
        default=StatusFilter.ALL.value,
        choices=[s.value for s in StatusFilter],
        help="Cycle status to show",
    )
    parser.add_argument(
        "--sort",
        default=None,
        choices=[s.value for s in SortOrder],
        help="Sort order (defaults to the saved preference)",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="airac-explorer",
        description="AIRAC Explorer - AIRAC cycle calculator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument(
        "--date",
        type=_parse_date,
        help="Evaluate cycle status on this day instead of today (YYYY-MM-DD)",
    )
    parser.add_argument("--log-config", help="Logging configuration YAML file")
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write logs to the platform log directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    filters = _filter_parser()

    commands.add_parser("current", help="Show the cycle in effect")

    list_parser = commands.add_parser("list", parents=[filters], help="List cycles")
    list_parser.add_argument("--page", type=int, default=1, help="Page number (1-based)")
    list_parser.add_argument("--page-size", type=_positive_int, help="Cycles per page")

    show_parser = commands.add_parser("show", help="Show one cycle")
    show_parser.add_argument("identifier", help="Cycle identifier (e.g., 2501 or 2025-01)")

    commands.add_parser("stats", help="Show catalog statistics")

    export_parser = commands.add_parser("export", parents=[filters], help="Export cycles")
    export_parser.add_argument(
        "--format",
        dest="export_format",
        default=ExportFormat.CSV.value,
        choices=[f.value for f in ExportFormat],
        help="Output format",
    )
    export_parser.add_argument("--output", help="Output directory")
    export_parser.add_argument("--filename", help="Output filename")

    bookmark_parser = commands.add_parser("bookmark", help="Toggle a cycle bookmark")
    bookmark_parser.add_argument("identifier", help="Cycle identifier (e.g., 2501)")

    commands.add_parser("bookmarks", help="List bookmarked cycles")

    return parser.parse_args(argv)


def _build_state(args: argparse.Namespace, prefs: UserPreferences, config: AppConfig) -> QueryState:
    """Translate filter arguments and saved preferences into a QueryState."""
    try:
        sort = SortOrder(args.sort or prefs.sort_by)
    except ValueError:
        logger.warning("Ignoring invalid saved sort order: %s", prefs.sort_by)
        sort = SortOrder.DATE_ASC

    # Command line, then saved preference, then the app config default
    page_size = getattr(args, "page_size", None) or prefs.items_per_page or config.default_page_size
    year = parse_year_filter(args.year)

    return QueryState(
        search=args.search,
        year=year,
        status=StatusFilter(args.status),
        sort=sort,
        page=getattr(args, "page", 1),
        page_size=page_size,
    )


def _print_cycle_details(cycle: Cycle, now: date) -> None:
    print(f"AIRAC {cycle.identifier} ({cycle.composite_key})")
    print(f"  Cycle:    {cycle.cycle_number} of {cycle.year}")
    print(f"  Period:   {format_date_range(cycle.start_date, cycle.end_date)}")
    print(f"  Starts:   {format_relative(cycle.start_date, now)}")
    print(f"  Ends:     {format_relative(cycle.end_date, now)}")
    print(f"  Status:   {status_label(cycle)}")
    if cycle.is_current:
        print(f"  Elapsed:  {cycle.days_since_start} days")
        print(f"  Remaining: {cycle.days_until_end} days")


def _command_current(cache: CatalogCache, now: date) -> int:
    statistics = cache.statistics(now)
    if statistics.current_cycle is None:
        print(f"No AIRAC cycle in effect on {format_display_date(now)}")
    else:
        _print_cycle_details(statistics.current_cycle, now)

    if statistics.upcoming_cycles:
        print("Upcoming:")
        for cycle in statistics.upcoming_cycles:
            print(f"  {describe_cycle(cycle)}")
    return 0


def _command_list(
    cache: CatalogCache,
    now: date,
    state: QueryState,
) -> int:
    result = run_query(cache.get(now), state, statistics=cache.statistics(now))
    page = result.page

    if not result.has_results:
        print("No cycles match the current filters")
        return 0

    for cycle in page.items:
        print(describe_cycle(cycle))

    if page.is_empty:
        print(f"Page {page.page} is out of range")
    print(
        f"Page {page.page} of {page.total_pages} "
        f"({result.total_results} of {result.statistics.total_cycles} cycles)"
    )
    return 0


def _command_show(cache: CatalogCache, now: date, identifier: str, prefs: UserPreferences) -> int:
    cycle = find_by_identifier(cache.get(now), identifier)
    if cycle is None:
        print(f"Cycle {identifier} is outside the supported range", file=sys.stderr)
        return 1

    _print_cycle_details(cycle, now)
    prefs.add_recently_viewed(cycle.identifier)
    prefs.save()
    return 0


def _command_stats(cache: CatalogCache, now: date) -> int:
    statistics = cache.statistics(now)
    years = sorted(statistics.cycles_by_year)

    print(f"Total cycles:     {statistics.total_cycles}")
    if years:
        print(f"Years:            {years[0]}-{years[-1]} ({len(years)} years)")
    print(f"Average duration: {statistics.average_cycle_duration:g} days")
    print(
        f"Duration range:   {statistics.min_cycle_duration}-"
        f"{statistics.max_cycle_duration} days"
    )
    current = statistics.current_cycle
    print(f"Current cycle:    {current.identifier if current else 'none'}")
    upcoming = ", ".join(cycle.identifier for cycle in statistics.upcoming_cycles)
    print(f"Upcoming cycles:  {upcoming or 'none'}")
    return 0


def _command_export(
    cache: CatalogCache,
    now: date,
    state: QueryState,
    args: argparse.Namespace,
    config: AppConfig,
) -> int:
    cycles = sort_cycles(apply_filters(cache.get(now), state), state.sort)
    path = export_cycles(
        cycles,
        args.export_format,
        directory=args.output or config.export_dir,
        filename=args.filename,
        calendar_name=config.calendar_name,
    )
    print(f"Exported {len(cycles)} cycles to {path}")
    return 0


def _command_bookmark(
    cache: CatalogCache, now: date, identifier: str, prefs: UserPreferences
) -> int:
    cycle = find_by_identifier(cache.get(now), identifier)
    if cycle is None:
        print(f"Cycle {identifier} is outside the supported range", file=sys.stderr)
        return 1

    added = prefs.toggle_bookmark(cycle.identifier)
    prefs.save()
    print(f"{'Bookmarked' if added else 'Removed bookmark for'} {cycle.identifier}")
    return 0


def _command_bookmarks(cache: CatalogCache, now: date, prefs: UserPreferences) -> int:
    if not prefs.bookmarked_cycles:
        print("No bookmarked cycles")
        return 0

    catalog = cache.get(now)
    for identifier in prefs.bookmarked_cycles:
        try:
            cycle = find_by_identifier(catalog, identifier)
        except AiracError:
            cycle = None
        if cycle is None:
            logger.warning("Skipping unknown bookmarked cycle: %s", identifier)
            continue
        print(describe_cycle(cycle))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, 1 on error).
    """
    args = parse_args(argv)

    initialize_logging(
        args.log_config,
        use_platform_dir=args.log_file,
        level=logging.DEBUG if args.verbose else None,
    )

    now = args.date or today()
    config = get_app_config()
    prefs = get_preferences()
    cache = CatalogCache(upcoming_count=config.upcoming_count)
    logger.debug("Running %s for %s", args.command, now)

    try:
        if args.command == "current":
            return _command_current(cache, now)
        if args.command == "list":
            return _command_list(cache, now, _build_state(args, prefs, config))
        if args.command == "show":
            return _command_show(cache, now, args.identifier, prefs)
        if args.command == "stats":
            return _command_stats(cache, now)
        if args.command == "export":
            return _command_export(cache, now, _build_state(args, prefs, config), args, config)
        if args.command == "bookmark":
            return _command_bookmark(cache, now, args.identifier, prefs)
        if args.command == "bookmarks":
            return _command_bookmarks(cache, now, prefs)
    except AiracError as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # Malformed --year values
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.error("Unknown command: %s", args.command)
    return 1


if __name__ == "__main__":
    sys.exit(main())
