"""Cycle status classification.

Classification compares calendar days only: a cycle never flips state in
the middle of a day because of the time component of "now".
"""

from datetime import date, datetime

from airac_explorer.cycles.models import CycleStatus, StatusInfo


def as_date(value: date | datetime) -> date:
    """Normalize a date or datetime to a calendar day.

    Aware datetimes keep their own local date; no conversion to UTC happens.

    Args:
        value: Date or datetime.

    Returns:
        Calendar day.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def today() -> date:
    """Current local calendar day."""
    return date.today()


def classify(
    start_date: date,
    end_date: date,
    now: date | datetime | None = None,
) -> StatusInfo:
    """Classify a date range relative to an evaluation day.

    Args:
        start_date: First day of the range (inclusive).
        end_date: Last day of the range (inclusive).
        now: Evaluation day. Defaults to today.

    Returns:
        StatusInfo with the status and signed day offsets.
    """
    day = as_date(now) if now is not None else today()

    if day < start_date:
        status = CycleStatus.UPCOMING
    elif day > end_date:
        status = CycleStatus.PAST
    else:
        status = CycleStatus.CURRENT

    return StatusInfo(
        status=status,
        days_since_start=(day - start_date).days,
        days_until_end=(end_date - day).days,
    )
