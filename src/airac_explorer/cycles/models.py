"""AIRAC cycle data models."""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum


class CycleStatus(Enum):
    """Position of a cycle relative to the evaluation day."""

    UPCOMING = "upcoming"  # Starts after today
    CURRENT = "current"  # Today falls within the cycle
    PAST = "past"  # Ended before today


@dataclass(frozen=True)
class StatusInfo:
    """Classification of a date range relative to an evaluation day.

    Attributes:
        status: Three-way cycle status.
        days_since_start: Days from the start date to now (negative if upcoming).
        days_until_end: Days from now to the end date (negative if past).
    """

    status: CycleStatus
    days_since_start: int
    days_until_end: int

    @property
    def is_upcoming(self) -> bool:
        """Check if the range starts after the evaluation day."""
        return self.status is CycleStatus.UPCOMING

    @property
    def is_current(self) -> bool:
        """Check if the evaluation day falls within the range."""
        return self.status is CycleStatus.CURRENT

    @property
    def is_active(self) -> bool:
        """Alias of is_current."""
        return self.is_current

    @property
    def is_past(self) -> bool:
        """Check if the range ended before the evaluation day."""
        return self.status is CycleStatus.PAST


@dataclass(frozen=True)
class Cycle:
    """A single AIRAC cycle evaluated at a given day.

    Dates never change for a given (year, cycle_number); the status fields
    are only valid for the day the cycle was classified on.

    Attributes:
        identifier: Two-digit year plus two-digit cycle number (e.g., "2501").
        composite_key: Four-digit year and cycle number (e.g., "2025-01").
        year: Four-digit year.
        cycle_number: Cycle number within the year (1-13).
        start_date: First day of the cycle (inclusive).
        end_date: Last day of the cycle (inclusive).
        status: Status relative to the evaluation day.
        days_since_start: Signed days since the start date.
        days_until_end: Signed days until the end date.
    """

    identifier: str
    composite_key: str
    year: int
    cycle_number: int
    start_date: date
    end_date: date
    status: CycleStatus
    days_since_start: int
    days_until_end: int

    @property
    def is_upcoming(self) -> bool:
        """Check if the cycle has not started yet."""
        return self.status is CycleStatus.UPCOMING

    @property
    def is_current(self) -> bool:
        """Check if the cycle is in effect."""
        return self.status is CycleStatus.CURRENT

    @property
    def is_active(self) -> bool:
        """Alias of is_current."""
        return self.is_current

    @property
    def is_past(self) -> bool:
        """Check if the cycle has ended."""
        return self.status is CycleStatus.PAST

    @property
    def duration_days(self) -> int:
        """Length of the cycle in days, both ends included."""
        return (self.end_date - self.start_date).days + 1

    def with_status(self, info: StatusInfo) -> "Cycle":
        """Return a copy carrying a new classification (dates unchanged)."""
        return replace(
            self,
            status=info.status,
            days_since_start=info.days_since_start,
            days_until_end=info.days_until_end,
        )

    def contains(self, day: date) -> bool:
        """Check if a calendar day falls within the cycle."""
        return self.start_date <= day <= self.end_date
