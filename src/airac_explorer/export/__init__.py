"""Cycle export to CSV, JSON and iCalendar text formats."""

from airac_explorer.export.exporters import (
    ExportFormat,
    cycle_to_dict,
    export_cycles,
    render,
    to_csv,
    to_ical,
    to_json,
)

__all__ = [
    "ExportFormat",
    "cycle_to_dict",
    "export_cycles",
    "render",
    "to_csv",
    "to_ical",
    "to_json",
]
