"""Query engine data models.

Query state is an immutable value: consumers replace it through the
reducer functions in airac_explorer.query.state instead of mutating it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from airac_explorer.cycles.models import Cycle

ALL_YEARS = "all"

YearFilter = int | Literal["all"]


class StatusFilter(Enum):
    """Status selector for filtering."""

    ALL = "all"
    ACTIVE = "active"  # Maps to Cycle.is_current
    UPCOMING = "upcoming"
    PAST = "past"


class SortOrder(Enum):
    """Result ordering."""

    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"
    IDENTIFIER_ASC = "identifier-asc"
    IDENTIFIER_DESC = "identifier-desc"

    @classmethod
    def _missing_(cls, value: object) -> "SortOrder | None":
        # Accept the older "cycle-asc" / "cycle-desc" spellings
        aliases = {
            "cycle-asc": cls.IDENTIFIER_ASC,
            "cycle-desc": cls.IDENTIFIER_DESC,
        }
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None


@dataclass(frozen=True)
class QueryState:
    """Filter, sort and pagination criteria for one query.

    Attributes:
        search: Free-text search term (blank = no search).
        year: Year to keep, or "all".
        status: Status selector.
        sort: Result ordering.
        page: 1-based page number.
        page_size: Items per page.
    """

    search: str = ""
    year: YearFilter = ALL_YEARS
    status: StatusFilter = StatusFilter.ALL
    sort: SortOrder = SortOrder.DATE_ASC
    page: int = 1
    page_size: int = 24

    @property
    def is_filtered(self) -> bool:
        """Check if any filter narrows the catalog."""
        return (
            bool(self.search.strip())
            or self.year != ALL_YEARS
            or self.status is not StatusFilter.ALL
        )


@dataclass(frozen=True)
class Page:
    """One page of query results.

    Attributes:
        items: Cycles on this page (empty when the page is out of range).
        page: Requested 1-based page number.
        page_size: Items per page.
        total_items: Number of items across all pages.
        total_pages: Number of pages (0 when there are no items).
    """

    items: list[Cycle]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        """Check if a previous page exists."""
        return self.page > 1 and self.total_pages > 0

    @property
    def has_next(self) -> bool:
        """Check if a next page exists."""
        return 1 <= self.page < self.total_pages

    @property
    def is_empty(self) -> bool:
        """Check if the page holds no items."""
        return not self.items


@dataclass(frozen=True)
class CatalogStatistics:
    """Aggregates computed over the complete catalog.

    Attributes:
        total_cycles: Number of cycles.
        cycles_by_year: Year -> cycle count.
        average_cycle_duration: Mean cycle length in days.
        min_cycle_duration: Shortest cycle length in days.
        max_cycle_duration: Longest cycle length in days.
        current_cycle: Cycle in effect, if any.
        upcoming_cycles: Next upcoming cycles (bounded count).
    """

    total_cycles: int
    cycles_by_year: dict[int, int]
    average_cycle_duration: float
    min_cycle_duration: int
    max_cycle_duration: int
    current_cycle: Cycle | None = None
    upcoming_cycles: list[Cycle] = field(default_factory=list)


@dataclass(frozen=True)
class QueryResult:
    """Display-ready output of run_query().

    Attributes:
        page: Requested page of filtered, sorted cycles.
        statistics: Full-catalog statistics (independent of filters).
        is_filtered: Whether any filter was active.
    """

    page: Page
    statistics: CatalogStatistics
    is_filtered: bool

    @property
    def total_results(self) -> int:
        """Number of cycles matching the filters."""
        return self.page.total_items

    @property
    def has_results(self) -> bool:
        """Check if any cycle matched the filters."""
        return self.page.total_items > 0
