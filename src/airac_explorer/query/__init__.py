"""Search, filtering, sorting, pagination and statistics over the catalog."""

from airac_explorer.query.cache import CatalogCache
from airac_explorer.query.engine import (
    apply_filters,
    compute_statistics,
    filter_by_status,
    filter_by_year,
    page_containing,
    paginate,
    parse_year_filter,
    run_query,
    search,
    sort_cycles,
    total_pages,
)
from airac_explorer.query.models import (
    ALL_YEARS,
    CatalogStatistics,
    Page,
    QueryResult,
    QueryState,
    SortOrder,
    StatusFilter,
)
from airac_explorer.query.state import (
    go_to_current,
    next_page,
    previous_page,
    reset_filters,
    set_page,
    set_page_size,
    set_sort,
    update_filters,
)

__all__ = [
    "ALL_YEARS",
    "CatalogCache",
    "CatalogStatistics",
    "Page",
    "QueryResult",
    "QueryState",
    "SortOrder",
    "StatusFilter",
    "apply_filters",
    "compute_statistics",
    "filter_by_status",
    "filter_by_year",
    "go_to_current",
    "next_page",
    "page_containing",
    "paginate",
    "parse_year_filter",
    "previous_page",
    "reset_filters",
    "run_query",
    "search",
    "set_page",
    "set_page_size",
    "set_sort",
    "sort_cycles",
    "total_pages",
    "update_filters",
]
