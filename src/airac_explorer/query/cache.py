"""Per-day catalog cache.

Cycle dates never change, but status flags depend on the evaluation day.
The cache generates the catalog once and, when the day advances,
re-classifies the existing records instead of regenerating them. Full
catalog statistics are memoized for the same day.
"""

from datetime import date, datetime
from typing import Any

from airac_explorer.core.logging_system import get_logger
from airac_explorer.cycles.catalog import DEFAULT_UPCOMING_COUNT, generate_catalog, reclassify
from airac_explorer.cycles.models import Cycle
from airac_explorer.cycles.status import as_date, today
from airac_explorer.query.engine import compute_statistics
from airac_explorer.query.models import CatalogStatistics

logger = get_logger(__name__)


class CatalogCache:
    """Catalog and statistics memoized by evaluation day.

    Attributes:
        upcoming_count: Upcoming cycles reported in statistics.
    """

    def __init__(self, upcoming_count: int = DEFAULT_UPCOMING_COUNT):
        """Initialize an empty cache.

        Args:
            upcoming_count: Upcoming cycles reported in statistics.
        """
        self.upcoming_count = upcoming_count

        self._catalog: list[Cycle] | None = None
        self._day: date | None = None
        self._statistics: CatalogStatistics | None = None
        self._generations = 0
        self._reclassifications = 0

    def get(self, now: date | datetime | None = None) -> list[Cycle]:
        """Get the catalog classified for a day.

        Args:
            now: Evaluation day. Defaults to today.

        Returns:
            Catalog (the same list object for repeated calls on one day).
        """
        day = as_date(now) if now is not None else today()

        if self._catalog is None:
            self._catalog = generate_catalog(day)
            self._generations += 1
            logger.info("Generated catalog of %d cycles for %s", len(self._catalog), day)
        elif day != self._day:
            self._catalog = reclassify(self._catalog, day)
            self._reclassifications += 1
            logger.info("Re-classified catalog for %s (was %s)", day, self._day)
        else:
            return self._catalog

        self._day = day
        self._statistics = None
        return self._catalog

    def statistics(self, now: date | datetime | None = None) -> CatalogStatistics:
        """Get full-catalog statistics for a day.

        Args:
            now: Evaluation day. Defaults to today.

        Returns:
            Memoized CatalogStatistics.
        """
        catalog = self.get(now)
        if self._statistics is None:
            self._statistics = compute_statistics(catalog, self.upcoming_count)
        return self._statistics

    def invalidate(self) -> None:
        """Drop the cached catalog and statistics."""
        self._catalog = None
        self._day = None
        self._statistics = None
        logger.debug("Cleared catalog cache")

    def get_cache_info(self) -> dict[str, Any]:
        """Get information about the cached catalog.

        Returns:
            Dictionary with cache statistics.
        """
        return {
            "day": self._day,
            "count": len(self._catalog) if self._catalog is not None else 0,
            "has_statistics": self._statistics is not None,
            "generations": self._generations,
            "reclassifications": self._reclassifications,
        }
