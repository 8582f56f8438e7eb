"""Query engine over the cycle catalog.

Every function is pure: inputs are never mutated and new lists are
returned. Search, year and status filters are independent predicates and
commute; sorting happens after filtering and pagination after sorting.

Typical usage:
    from airac_explorer.query.engine import run_query
    from airac_explorer.query.models import QueryState

    result = run_query(catalog, QueryState(search="jan", page_size=20))
    for cycle in result.page.items:
        ...
"""

import math
from collections.abc import Sequence

from airac_explorer.core.logging_system import get_logger
from airac_explorer.cycles.catalog import DEFAULT_UPCOMING_COUNT, find_current, find_upcoming
from airac_explorer.cycles.models import Cycle
from airac_explorer.query.formatting import searchable_text
from airac_explorer.query.models import (
    ALL_YEARS,
    CatalogStatistics,
    Page,
    QueryResult,
    QueryState,
    SortOrder,
    StatusFilter,
    YearFilter,
)

logger = get_logger(__name__)


def search(cycles: Sequence[Cycle], term: str) -> Sequence[Cycle]:
    """Case-insensitive substring search.

    Matches the identifier, the year, and the formatted start and end dates
    (e.g., "Jan 23, 2025").

    Args:
        cycles: Cycles to search.
        term: Search term.

    Returns:
        The input itself when the term is blank, otherwise a new list of
        matching cycles.
    """
    if not term.strip():
        return cycles

    # Surrounding whitespace is ignored so " jan" and "jan" match the same cycles
    needle = term.strip().lower()
    return [cycle for cycle in cycles if any(needle in text for text in searchable_text(cycle))]


def parse_year_filter(value: YearFilter | str) -> YearFilter:
    """Normalize a year selector ("all", an int, or a numeric string).

    Raises:
        ValueError: If the value is neither "all" nor an integer.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == ALL_YEARS:
        return ALL_YEARS
    return int(text)


def filter_by_year(cycles: Sequence[Cycle], year: YearFilter | str) -> list[Cycle]:
    """Keep cycles of one year, or all cycles for "all"."""
    selected = parse_year_filter(year)
    if selected == ALL_YEARS:
        return list(cycles)
    return [cycle for cycle in cycles if cycle.year == selected]


def filter_by_status(cycles: Sequence[Cycle], status: StatusFilter | str) -> list[Cycle]:
    """Keep cycles matching a status selector.

    Args:
        cycles: Cycles to filter.
        status: StatusFilter or its value ("all", "active", "upcoming", "past").

    Returns:
        Matching cycles.
    """
    selected = StatusFilter(status)
    if selected is StatusFilter.ALL:
        return list(cycles)
    if selected is StatusFilter.ACTIVE:
        return [cycle for cycle in cycles if cycle.is_current]
    if selected is StatusFilter.UPCOMING:
        return [cycle for cycle in cycles if cycle.is_upcoming]
    return [cycle for cycle in cycles if cycle.is_past]


def sort_cycles(cycles: Sequence[Cycle], order: SortOrder | str) -> list[Cycle]:
    """Sort cycles.

    Identifier ordering is lexicographic on the YYcc string, which matches
    chronological order within the 2025-2099 range.

    Args:
        cycles: Cycles to sort.
        order: SortOrder or its value (e.g., "date-desc").

    Returns:
        New sorted list.
    """
    selected = SortOrder(order)
    if selected in (SortOrder.DATE_ASC, SortOrder.DATE_DESC):
        return sorted(
            cycles,
            key=lambda cycle: cycle.start_date,
            reverse=selected is SortOrder.DATE_DESC,
        )
    return sorted(
        cycles,
        key=lambda cycle: cycle.identifier,
        reverse=selected is SortOrder.IDENTIFIER_DESC,
    )


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for count items."""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(count / page_size)


def paginate(cycles: Sequence[Cycle], page: int, page_size: int) -> Page:
    """Slice one page out of a result list.

    Args:
        cycles: Sorted cycles.
        page: 1-based page number. Pages outside [1, total_pages] are empty.
        page_size: Items per page.

    Returns:
        Page with its items and totals.

    Raises:
        ValueError: If page_size is not positive.
    """
    count = len(cycles)
    pages = total_pages(count, page_size)

    items: list[Cycle] = []
    if 1 <= page <= pages:
        start = (page - 1) * page_size
        items = list(cycles[start : start + page_size])
    elif count:
        logger.debug("Page %d out of range (1-%d)", page, pages)

    return Page(
        items=items,
        page=page,
        page_size=page_size,
        total_items=count,
        total_pages=pages,
    )


def page_containing(cycles: Sequence[Cycle], identifier: str, page_size: int) -> int | None:
    """Find the 1-based page holding a cycle.

    Args:
        cycles: Sorted cycles.
        identifier: Cycle identifier ("YYcc") or composite key ("YYYY-cc").
        page_size: Items per page.

    Returns:
        Page number, or None if the cycle is not in the list.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    for index, cycle in enumerate(cycles):
        if identifier in (cycle.identifier, cycle.composite_key):
            return index // page_size + 1
    return None


def compute_statistics(
    cycles: Sequence[Cycle],
    upcoming_count: int = DEFAULT_UPCOMING_COUNT,
) -> CatalogStatistics:
    """Aggregate statistics over a complete catalog.

    Args:
        cycles: Full catalog (not a filtered view).
        upcoming_count: Maximum number of upcoming cycles to report.

    Returns:
        CatalogStatistics.
    """
    by_year: dict[int, int] = {}
    for cycle in cycles:
        by_year[cycle.year] = by_year.get(cycle.year, 0) + 1

    durations = [cycle.duration_days for cycle in cycles]

    return CatalogStatistics(
        total_cycles=len(cycles),
        cycles_by_year=by_year,
        average_cycle_duration=sum(durations) / len(durations) if durations else 0.0,
        min_cycle_duration=min(durations, default=0),
        max_cycle_duration=max(durations, default=0),
        current_cycle=find_current(cycles),
        upcoming_cycles=find_upcoming(cycles, upcoming_count),
    )


def apply_filters(cycles: Sequence[Cycle], state: QueryState) -> Sequence[Cycle]:
    """Apply the search, year and status filters of a query state."""
    filtered = search(cycles, state.search)
    if state.year != ALL_YEARS:
        filtered = filter_by_year(filtered, state.year)
    if state.status is not StatusFilter.ALL:
        filtered = filter_by_status(filtered, state.status)
    return filtered


def run_query(
    catalog: Sequence[Cycle],
    state: QueryState,
    statistics: CatalogStatistics | None = None,
    upcoming_count: int = DEFAULT_UPCOMING_COUNT,
) -> QueryResult:
    """Filter, sort and paginate the catalog.

    Args:
        catalog: Full catalog.
        state: Query criteria.
        statistics: Precomputed full-catalog statistics (computed if None).
        upcoming_count: Upcoming cycles to include when computing statistics.

    Returns:
        QueryResult for the requested page.
    """
    filtered = apply_filters(catalog, state)
    ordered = sort_cycles(filtered, state.sort)
    page = paginate(ordered, state.page, state.page_size)

    if statistics is None:
        statistics = compute_statistics(catalog, upcoming_count)

    logger.debug(
        "Query %s matched %d of %d cycles",
        state,
        page.total_items,
        statistics.total_cycles,
    )
    return QueryResult(page=page, statistics=statistics, is_filtered=state.is_filtered)
