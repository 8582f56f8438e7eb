"""AIRAC Explorer - AIRAC cycle calculator and query engine.

Computes 28-day AIRAC cycles from the 2025-01-23 epoch, classifies them
relative to a given day, and filters, sorts and paginates the catalog.

Typical usage:
    from datetime import date

    from airac_explorer import QueryState, find_current, generate_catalog, run_query

    catalog = generate_catalog(now=date(2025, 2, 15))
    find_current(catalog).identifier  # "2501"
    result = run_query(catalog, QueryState(year=2026, page_size=20))
"""

from airac_explorer.cycles import (
    Cycle,
    CycleStatus,
    classify,
    end_date_for,
    find_current,
    generate_catalog,
    identifier_for,
    start_date_for,
)
from airac_explorer.query import (
    CatalogCache,
    CatalogStatistics,
    QueryState,
    SortOrder,
    StatusFilter,
    compute_statistics,
    filter_by_status,
    filter_by_year,
    paginate,
    run_query,
    search,
    sort_cycles,
)
from airac_explorer.version import __version__

__all__ = [
    "CatalogCache",
    "CatalogStatistics",
    "Cycle",
    "CycleStatus",
    "QueryState",
    "SortOrder",
    "StatusFilter",
    "__version__",
    "classify",
    "compute_statistics",
    "end_date_for",
    "filter_by_status",
    "filter_by_year",
    "find_current",
    "generate_catalog",
    "identifier_for",
    "paginate",
    "run_query",
    "search",
    "sort_cycles",
    "start_date_for",
]
