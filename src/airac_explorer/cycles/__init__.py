"""AIRAC cycle math, status classification and catalog generation.

Typical usage:
    from airac_explorer.cycles import generate_catalog, find_current

    cycles = generate_catalog()
    current = find_current(cycles)
"""

from airac_explorer.cycles.catalog import (
    available_years,
    find_by_date,
    find_by_identifier,
    find_current,
    find_upcoming,
    generate_catalog,
    generate_cycle,
    generate_year,
    reclassify,
    validate_catalog,
)
from airac_explorer.cycles.cycle_math import (
    AIRAC_EPOCH,
    CYCLE_LENGTH_DAYS,
    CYCLES_PER_YEAR,
    FIRST_YEAR,
    LAST_YEAR,
    composite_key_for,
    cycle_for_date,
    end_date_for,
    identifier_for,
    is_cycle_start,
    parse_identifier,
    start_date_for,
)
from airac_explorer.cycles.models import Cycle, CycleStatus, StatusInfo
from airac_explorer.cycles.status import as_date, classify

__all__ = [
    "AIRAC_EPOCH",
    "CYCLE_LENGTH_DAYS",
    "CYCLES_PER_YEAR",
    "Cycle",
    "CycleStatus",
    "FIRST_YEAR",
    "LAST_YEAR",
    "StatusInfo",
    "as_date",
    "available_years",
    "classify",
    "composite_key_for",
    "cycle_for_date",
    "end_date_for",
    "find_by_date",
    "find_by_identifier",
    "find_current",
    "find_upcoming",
    "generate_catalog",
    "generate_cycle",
    "generate_year",
    "identifier_for",
    "is_cycle_start",
    "parse_identifier",
    "reclassify",
    "start_date_for",
    "validate_catalog",
]
