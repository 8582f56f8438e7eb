"""Display formatting for cycle dates.

Month names are fixed English abbreviations so output (and therefore
search matching) does not depend on the process locale.
"""

from datetime import date

from airac_explorer.cycles.models import Cycle

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Relative formatting switches to absolute dates beyond this many days
RELATIVE_WINDOW_DAYS = 7


def format_display_date(day: date) -> str:
    """Format a day for display (e.g., "Jan 23, 2025")."""
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day:02d}, {day.year}"


def format_short_date(day: date) -> str:
    """Format a day without the year (e.g., "Jan 23")."""
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day:02d}"


def format_input_date(day: date) -> str:
    """Format a day as ISO 8601 (e.g., "2025-01-23")."""
    return day.isoformat()


def format_date_range(start: date, end: date) -> str:
    """Format a range (e.g., "Jan 23 - Feb 19, 2025")."""
    return f"{format_short_date(start)} - {format_display_date(end)}"


def format_relative(day: date, now: date) -> str:
    """Describe a day relative to now.

    Args:
        day: Day to describe.
        now: Evaluation day.

    Returns:
        "Today", "Tomorrow", "Yesterday", "In N days", "N days ago", or the
        display date when more than a week away.
    """
    delta = (day - now).days
    if delta == 0:
        return "Today"
    if delta == 1:
        return "Tomorrow"
    if delta == -1:
        return "Yesterday"
    if 0 < delta <= RELATIVE_WINDOW_DAYS:
        return f"In {delta} days"
    if -RELATIVE_WINDOW_DAYS <= delta < 0:
        return f"{-delta} days ago"
    return format_display_date(day)


def status_label(cycle: Cycle) -> str:
    """Lowercase status name ("current", "upcoming" or "past")."""
    return cycle.status.value


def describe_cycle(cycle: Cycle) -> str:
    """One-line summary used by the CLI listing.

    Example: "2501  2025-01  Jan 23 - Feb 19, 2025  current"
    """
    return (
        f"{cycle.identifier}  {cycle.composite_key}  "
        f"{format_date_range(cycle.start_date, cycle.end_date):<24}  {status_label(cycle)}"
    )


def searchable_text(cycle: Cycle) -> tuple[str, ...]:
    """Lowercased fields matched by free-text search."""
    return (
        cycle.identifier.lower(),
        str(cycle.year),
        format_display_date(cycle.start_date).lower(),
        format_display_date(cycle.end_date).lower(),
    )
