"""Cycle export to CSV, JSON and iCalendar.

Typical usage:
    from airac_explorer.export import ExportFormat, export_cycles

    path = export_cycles(result.page.items, ExportFormat.ICAL, directory=Path("out"))
"""

import csv
import io
import json
from collections.abc import Sequence
from datetime import UTC, date, datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any

from airac_explorer.core.errors import ExportError
from airac_explorer.core.logging_system import get_logger
from airac_explorer.cycles.models import Cycle
from airac_explorer.query.formatting import status_label

logger = get_logger(__name__)

CSV_HEADERS = [
    "cycle",
    "year",
    "cycleNumber",
    "startDate",
    "endDate",
    "status",
    "daysSinceStart",
    "daysUntilEnd",
]

DEFAULT_CALENDAR_NAME = "AIRAC Cycles"
ICAL_PRODID = "-//AIRAC Explorer//EN"
ICAL_UID_DOMAIN = "airac-explorer"


class ExportFormat(Enum):
    """Supported export formats."""

    CSV = "csv"
    JSON = "json"
    ICAL = "ical"

    @property
    def extension(self) -> str:
        """File extension without the dot."""
        return "ics" if self is ExportFormat.ICAL else self.value

    @property
    def mime_type(self) -> str:
        """MIME type of the exported content."""
        return {
            ExportFormat.CSV: "text/csv",
            ExportFormat.JSON: "application/json",
            ExportFormat.ICAL: "text/calendar",
        }[self]


def cycle_to_dict(cycle: Cycle) -> dict[str, Any]:
    """Convert a cycle to a JSON-serializable dictionary."""
    return {
        "id": cycle.composite_key,
        "cycle": cycle.identifier,
        "year": cycle.year,
        "cycleNumber": cycle.cycle_number,
        "startDate": cycle.start_date.isoformat(),
        "endDate": cycle.end_date.isoformat(),
        "status": status_label(cycle),
        "isCurrent": cycle.is_current,
        "isUpcoming": cycle.is_upcoming,
        "isPast": cycle.is_past,
        "daysSinceStart": cycle.days_since_start,
        "daysUntilEnd": cycle.days_until_end,
    }


def to_csv(cycles: Sequence[Cycle]) -> str:
    """Render cycles as CSV with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for cycle in cycles:
        writer.writerow(
            [
                cycle.identifier,
                cycle.year,
                cycle.cycle_number,
                cycle.start_date.isoformat(),
                cycle.end_date.isoformat(),
                status_label(cycle),
                cycle.days_since_start,
                cycle.days_until_end,
            ]
        )
    return buffer.getvalue()


def to_json(cycles: Sequence[Cycle], exported_at: datetime | None = None) -> str:
    """Render cycles as a JSON document.

    Args:
        cycles: Cycles to export.
        exported_at: Export timestamp. Defaults to now (UTC).

    Returns:
        JSON text with exportDate, totalCycles and cycles keys.
    """
    exported_at = exported_at or datetime.now(UTC)
    payload = {
        "exportDate": exported_at.isoformat(),
        "totalCycles": len(cycles),
        "cycles": [cycle_to_dict(cycle) for cycle in cycles],
    }
    return json.dumps(payload, indent=2)


def _ical_date(day: date) -> str:
    return day.strftime("%Y%m%d")


def _ical_escape(text: str) -> str:
    """Escape TEXT values per RFC 5545 section 3.3.11."""
    return (
        text.replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,").replace("\n", "\\n")
    )


def to_ical(
    cycles: Sequence[Cycle],
    title: str = DEFAULT_CALENDAR_NAME,
    exported_at: datetime | None = None,
) -> str:
    """Render cycles as an iCalendar document.

    Each cycle becomes an all-day event. DTEND is exclusive, so it is the
    day after the cycle's last day.

    Args:
        cycles: Cycles to export.
        title: Calendar name.
        exported_at: Timestamp used for DTSTAMP. Defaults to now (UTC).

    Returns:
        iCalendar text with CRLF line endings.
    """
    stamp = (exported_at or datetime.now(UTC)).astimezone(UTC).strftime("%Y%m%dT%H%M%SZ")

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{ICAL_PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"X-WR-CALNAME:{_ical_escape(title)}",
        "X-WR-TIMEZONE:UTC",
        "X-WR-CALDESC:AIRAC cycle dates and information",
    ]

    for cycle in cycles:
        description = (
            f"AIRAC Cycle {cycle.identifier} - Cycle {cycle.cycle_number} of {cycle.year}\n"
            f"Status: {status_label(cycle).capitalize()}\n"
            f"Duration: {cycle.duration_days} days"
        )
        lines.extend(
            [
                "BEGIN:VEVENT",
                f"UID:airac-{cycle.identifier}@{ICAL_UID_DOMAIN}",
                f"DTSTAMP:{stamp}",
                f"DTSTART;VALUE=DATE:{_ical_date(cycle.start_date)}",
                f"DTEND;VALUE=DATE:{_ical_date(cycle.end_date + timedelta(days=1))}",
                f"SUMMARY:AIRAC Cycle {cycle.identifier}",
                f"DESCRIPTION:{_ical_escape(description)}",
                "CATEGORIES:AIRAC,Aviation",
                "TRANSP:TRANSPARENT",
                "END:VEVENT",
            ]
        )

    lines.append("END:VCALENDAR")
    return "\r\n".join(lines) + "\r\n"


def render(
    cycles: Sequence[Cycle],
    fmt: ExportFormat | str,
    exported_at: datetime | None = None,
    calendar_name: str = DEFAULT_CALENDAR_NAME,
) -> str:
    """Render cycles in the requested format.

    Raises:
        ExportError: If the format is unknown.
    """
    try:
        selected = ExportFormat(fmt)
    except ValueError as e:
        raise ExportError(f"Unknown export format: {fmt!r}") from e

    if selected is ExportFormat.CSV:
        return to_csv(cycles)
    if selected is ExportFormat.JSON:
        return to_json(cycles, exported_at)
    return to_ical(cycles, calendar_name, exported_at)


def default_filename(fmt: ExportFormat, exported_at: datetime) -> str:
    """Build the default export filename (e.g., "airac-cycles-2025-02-15.csv")."""
    return f"airac-cycles-{exported_at.date().isoformat()}.{fmt.extension}"


def export_cycles(
    cycles: Sequence[Cycle],
    fmt: ExportFormat | str,
    directory: Path | str | None = None,
    filename: str | None = None,
    exported_at: datetime | None = None,
    calendar_name: str = DEFAULT_CALENDAR_NAME,
) -> Path:
    """Write cycles to a file.

    Args:
        cycles: Cycles to export.
        fmt: Export format.
        directory: Output directory (created if missing). Defaults to the
            current directory.
        filename: Output filename. Defaults to airac-cycles-<date>.<ext>.
        exported_at: Export timestamp. Defaults to now (UTC).
        calendar_name: Calendar title for iCalendar exports.

    Returns:
        Path of the written file.

    Raises:
        ExportError: If the format is unknown or the file cannot be written.
    """
    exported_at = exported_at or datetime.now(UTC)
    content = render(cycles, fmt, exported_at, calendar_name)
    selected = ExportFormat(fmt)

    path = Path(directory or ".") / (filename or default_filename(selected, exported_at))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the CRLF line endings of iCalendar output intact
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error("Failed to export cycles to %s: %s", path, e)
        raise ExportError(f"Failed to write {path}: {e}") from e

    logger.info("Exported %d cycles as %s to %s", len(cycles), selected.value, path)
    return path
