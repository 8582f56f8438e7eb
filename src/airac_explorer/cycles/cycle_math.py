"""AIRAC cycle date arithmetic.

AIRAC cycles are modelled as a pure 28-day progression from a fixed epoch:
cycle 2501 starts on 2025-01-23 and every year holds exactly 13 cycles, so
cycle 1 of year Y+1 starts 364 days after cycle 1 of year Y.

All arithmetic works on calendar days (datetime.date); there are no
timezones involved.

Typical usage:
    from airac_explorer.cycles.cycle_math import identifier_for, start_date_for

    identifier_for(2025, 1)   # "2501"
    start_date_for(2025, 2)   # date(2025, 2, 20)
"""

import re
from datetime import date, timedelta

from airac_explorer.core.errors import InvalidCycleIdentifierError

AIRAC_EPOCH = date(2025, 1, 23)
EPOCH_YEAR = 2025
CYCLE_LENGTH_DAYS = 28
CYCLES_PER_YEAR = 13

# Supported catalog range (inclusive)
FIRST_YEAR = 2025
LAST_YEAR = 2099

_SHORT_IDENTIFIER = re.compile(r"^(\d{2})(\d{2})$")
_COMPOSITE_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def identifier_for(year: int, cycle_number: int) -> str:
    """Build the YYcc identifier of a cycle.

    Callers must pass a cycle number in [1, 13]; nothing is validated here.

    Args:
        year: Four-digit year.
        cycle_number: Cycle number within the year (1-13).

    Returns:
        Identifier such as "2501".
    """
    return f"{year % 100:02d}{cycle_number:02d}"


def composite_key_for(year: int, cycle_number: int) -> str:
    """Build the YYYY-cc lookup key of a cycle (e.g., "2025-01")."""
    return f"{year:04d}-{cycle_number:02d}"


def cycle_index_for(year: int, cycle_number: int) -> int:
    """Number of whole cycles between the epoch cycle and this one."""
    return (year - EPOCH_YEAR) * CYCLES_PER_YEAR + (cycle_number - 1)


def start_date_for(year: int, cycle_number: int) -> date:
    """Calculate the first day of a cycle.

    Args:
        year: Four-digit year.
        cycle_number: Cycle number within the year (1-13).

    Returns:
        Start date (inclusive).
    """
    return AIRAC_EPOCH + timedelta(days=cycle_index_for(year, cycle_number) * CYCLE_LENGTH_DAYS)


def end_date_for(start_date: date) -> date:
    """Calculate the last day of a cycle (inclusive, start + 27 days)."""
    return start_date + timedelta(days=CYCLE_LENGTH_DAYS - 1)


def cycle_for_date(day: date) -> tuple[int, int] | None:
    """Find the cycle that contains a calendar day.

    Args:
        day: Calendar day.

    Returns:
        (year, cycle_number) tuple, or None if the day precedes the epoch.
    """
    offset = (day - AIRAC_EPOCH).days
    if offset < 0:
        return None
    index = offset // CYCLE_LENGTH_DAYS
    return EPOCH_YEAR + index // CYCLES_PER_YEAR, index % CYCLES_PER_YEAR + 1


def is_cycle_start(day: date) -> bool:
    """Check if a day is the first day of a cycle."""
    offset = (day - AIRAC_EPOCH).days
    return offset >= 0 and offset % CYCLE_LENGTH_DAYS == 0


def parse_identifier(text: str) -> tuple[int, int]:
    """Parse a user-supplied cycle identifier.

    Accepts the short "YYcc" form (interpreted as 20YY) and the "YYYY-cc"
    composite key.

    Args:
        text: Identifier text, surrounding whitespace ignored.

    Returns:
        (year, cycle_number) tuple.

    Raises:
        InvalidCycleIdentifierError: If the text is malformed or the cycle
            number is outside 1-13.
    """
    value = text.strip()
    match = _COMPOSITE_KEY.match(value)
    if match:
        year = int(match.group(1))
    else:
        match = _SHORT_IDENTIFIER.match(value)
        if not match:
            raise InvalidCycleIdentifierError(
                f"Invalid cycle identifier: {text!r} (expected YYcc or YYYY-cc)"
            )
        year = 2000 + int(match.group(1))

    cycle_number = int(match.group(2))
    if not 1 <= cycle_number <= CYCLES_PER_YEAR:
        raise InvalidCycleIdentifierError(
            f"Invalid cycle number {cycle_number} in {text!r} (must be 1-{CYCLES_PER_YEAR})"
        )
    return year, cycle_number
