"""AIRAC cycle catalog generation.

The catalog holds every cycle from 2025 through 2099 (75 years x 13 cycles
= 975 records) in ascending order. It is a pure function of the evaluation
day; callers should generate it once and re-classify when the day changes
(see airac_explorer.query.cache.CatalogCache) rather than on every query.

Typical usage:
    from airac_explorer.cycles.catalog import find_current, generate_catalog

    cycles = generate_catalog(now=date(2025, 2, 15))
    current = find_current(cycles)  # cycle 2501
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta

from airac_explorer.core.errors import CatalogGenerationError
from airac_explorer.core.logging_system import get_logger
from airac_explorer.cycles.cycle_math import (
    CYCLE_LENGTH_DAYS,
    CYCLES_PER_YEAR,
    FIRST_YEAR,
    LAST_YEAR,
    composite_key_for,
    end_date_for,
    identifier_for,
    parse_identifier,
    start_date_for,
)
from airac_explorer.cycles.models import Cycle
from airac_explorer.cycles.status import as_date, classify, today

logger = get_logger(__name__)

DEFAULT_UPCOMING_COUNT = 3


def generate_cycle(year: int, cycle_number: int, now: date | datetime) -> Cycle:
    """Generate a single cycle classified against now.

    Args:
        year: Four-digit year.
        cycle_number: Cycle number within the year (1-13).
        now: Evaluation day.

    Returns:
        Cycle record.
    """
    start = start_date_for(year, cycle_number)
    end = end_date_for(start)
    info = classify(start, end, now)
    return Cycle(
        identifier=identifier_for(year, cycle_number),
        composite_key=composite_key_for(year, cycle_number),
        year=year,
        cycle_number=cycle_number,
        start_date=start,
        end_date=end,
        status=info.status,
        days_since_start=info.days_since_start,
        days_until_end=info.days_until_end,
    )


def generate_year(year: int, now: date | datetime) -> list[Cycle]:
    """Generate the 13 cycles of a year."""
    return [generate_cycle(year, number, now) for number in range(1, CYCLES_PER_YEAR + 1)]


def generate_catalog(
    now: date | datetime | None = None,
    first_year: int = FIRST_YEAR,
    last_year: int = LAST_YEAR,
) -> list[Cycle]:
    """Generate every cycle of the supported year range.

    Args:
        now: Evaluation day. Defaults to today.
        first_year: First year to include.
        last_year: Last year to include.

    Returns:
        Cycles in ascending chronological order.

    Raises:
        CatalogGenerationError: If generation fails or the result breaks the
            catalog invariants. Never returns partial data.
    """
    day = as_date(now) if now is not None else today()

    try:
        cycles = [
            cycle for year in range(first_year, last_year + 1) for cycle in generate_year(year, day)
        ]
    except Exception as e:
        logger.critical("Failed to generate AIRAC cycles: %s", e)
        raise CatalogGenerationError(f"Failed to generate AIRAC cycles: {e}") from e

    validate_catalog(cycles)
    logger.debug(
        "Generated %d cycles for %d-%d evaluated at %s",
        len(cycles),
        first_year,
        last_year,
        day,
    )
    return cycles


def validate_catalog(cycles: Sequence[Cycle]) -> None:
    """Check catalog invariants.

    Every year must hold 13 cycles, each cycle must span 28 days, and
    consecutive cycles must be contiguous.

    Args:
        cycles: Catalog in chronological order.

    Raises:
        CatalogGenerationError: On the first violated invariant.
    """
    per_year: dict[int, int] = {}
    previous: Cycle | None = None

    for cycle in cycles:
        per_year[cycle.year] = per_year.get(cycle.year, 0) + 1

        if cycle.duration_days != CYCLE_LENGTH_DAYS:
            raise CatalogGenerationError(
                f"Cycle {cycle.identifier} spans {cycle.duration_days} days"
            )
        if previous is not None and cycle.start_date != previous.end_date + timedelta(days=1):
            raise CatalogGenerationError(
                f"Cycle {cycle.identifier} does not follow {previous.identifier}"
            )
        previous = cycle

    for year, count in per_year.items():
        if count != CYCLES_PER_YEAR:
            raise CatalogGenerationError(f"Year {year} has {count} cycles")


def reclassify(cycles: Iterable[Cycle], now: date | datetime) -> list[Cycle]:
    """Recompute status fields against a new day, keeping all dates.

    Args:
        cycles: Previously generated cycles.
        now: New evaluation day.

    Returns:
        New list of cycles.
    """
    day = as_date(now)
    return [cycle.with_status(classify(cycle.start_date, cycle.end_date, day)) for cycle in cycles]


def find_current(cycles: Iterable[Cycle]) -> Cycle | None:
    """Find the cycle in effect.

    There is no fallback: when the evaluation day lies outside the catalog
    range, no cycle is current.

    Returns:
        Current cycle, or None.
    """
    return next((cycle for cycle in cycles if cycle.is_current), None)


def find_upcoming(cycles: Iterable[Cycle], count: int = DEFAULT_UPCOMING_COUNT) -> list[Cycle]:
    """Get the first `count` upcoming cycles in input order."""
    upcoming = []
    for cycle in cycles:
        if len(upcoming) >= count:
            break
        if cycle.is_upcoming:
            upcoming.append(cycle)
    return upcoming


def find_by_identifier(cycles: Iterable[Cycle], identifier: str) -> Cycle | None:
    """Look up a cycle by "YYcc" identifier or "YYYY-cc" composite key.

    Args:
        cycles: Cycles to search.
        identifier: Identifier text.

    Returns:
        Matching cycle, or None if absent.

    Raises:
        InvalidCycleIdentifierError: If the identifier is malformed.
    """
    year, cycle_number = parse_identifier(identifier)
    key = composite_key_for(year, cycle_number)
    return next((cycle for cycle in cycles if cycle.composite_key == key), None)


def find_by_date(cycles: Iterable[Cycle], day: date | datetime) -> Cycle | None:
    """Find the cycle containing a calendar day."""
    target = as_date(day)
    return next((cycle for cycle in cycles if cycle.contains(target)), None)


def available_years(cycles: Iterable[Cycle]) -> list[int]:
    """Sorted list of distinct years present in the cycles."""
    return sorted({cycle.year for cycle in cycles})
