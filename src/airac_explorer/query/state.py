"""Reducer functions for QueryState.

Each function takes a state and returns a new one; the input is never
modified. Changing a filter or the page size sends the user back to page 1.

Typical usage:
    state = QueryState()
    state = update_filters(state, search="2501")
    state = set_sort(state, SortOrder.DATE_DESC)
    result = run_query(catalog, state)
"""

from collections.abc import Sequence
from dataclasses import replace

from airac_explorer.core.logging_system import get_logger
from airac_explorer.cycles.catalog import find_current
from airac_explorer.cycles.models import Cycle
from airac_explorer.query.engine import page_containing, parse_year_filter, sort_cycles
from airac_explorer.query.models import ALL_YEARS, QueryState, SortOrder, StatusFilter, YearFilter

logger = get_logger(__name__)


def update_filters(
    state: QueryState,
    search: str | None = None,
    year: YearFilter | str | None = None,
    status: StatusFilter | str | None = None,
) -> QueryState:
    """Change one or more filters and return to the first page.

    Arguments left as None keep their current value; pass "" to clear the
    search term.

    Args:
        state: Current state.
        search: New search term.
        year: New year selector ("all" or a year).
        status: New status selector.

    Returns:
        New state.
    """
    return replace(
        state,
        search=state.search if search is None else search,
        year=state.year if year is None else parse_year_filter(year),
        status=state.status if status is None else StatusFilter(status),
        page=1,
    )


def set_sort(state: QueryState, order: SortOrder | str) -> QueryState:
    """Change the sort order (page is kept)."""
    return replace(state, sort=SortOrder(order))


def set_page(state: QueryState, page: int) -> QueryState:
    """Move to another page. Out-of-range pages are allowed and render empty."""
    return replace(state, page=page)


def set_page_size(state: QueryState, page_size: int) -> QueryState:
    """Change the page size and return to the first page.

    Raises:
        ValueError: If page_size is not positive.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return replace(state, page_size=page_size, page=1)


def next_page(state: QueryState) -> QueryState:
    """Advance one page."""
    return replace(state, page=state.page + 1)


def previous_page(state: QueryState) -> QueryState:
    """Go back one page, never below page 1."""
    return replace(state, page=max(1, state.page - 1))


def reset_filters(state: QueryState) -> QueryState:
    """Clear search, year and status filters (sort and page size kept)."""
    return replace(state, search="", year=ALL_YEARS, status=StatusFilter.ALL, page=1)


def go_to_current(state: QueryState, catalog: Sequence[Cycle]) -> QueryState:
    """Clear filters and jump to the page holding the current cycle.

    Args:
        state: Current state.
        catalog: Full catalog.

    Returns:
        New state, or the unchanged state when no cycle is current.
    """
    current = find_current(catalog)
    if current is None:
        logger.info("No current cycle in catalog; staying on page %d", state.page)
        return state

    cleared = reset_filters(state)
    page = page_containing(sort_cycles(catalog, cleared.sort), current.identifier, cleared.page_size)
    return replace(cleared, page=page or 1)
