# backend/ufv_timesheet/timesheet/mapper.py

"""
Conversion layer between Notion rows and the PDF form.

- Notion page -> TimesheetEntry
- Notion pages -> TimesheetData
- TimesheetData + template field names -> {field name: value}
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .errors import TimesheetMappingError
from .schemas import MAX_ENTRIES, TimesheetData, TimesheetEntry

logger = logging.getLogger(__name__)

DATE_PROPERTY = "start and end"
HOURS_PROPERTY = "Billable Hours"

MONTH_DAY_FIELD = "Month Day"
START_TIME_FIELD = "Start Time"
FINISH_TIME_FIELD = "Finish Time"
PAID_HOURS_FIELD = "Hours to be Paid"
TOTAL_HOURS_FIELD = "Total hours"


def _parse_datetime(value: Any, label: str) -> datetime:
    """
    Parse a Notion ISO 8601 datetime (with offset or `Z`, optional
    fractional seconds). Date-only values are rejected since the form
    needs clock times.
    """
    if not isinstance(value, str) or "T" not in value:
        raise TimesheetMappingError(f"Invalid {label} date format '{value}'")

    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise TimesheetMappingError(f"Invalid {label} date format '{value}': {exc}") from exc


def _extract_date_range(prop: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return the `date` object of a Notion date property.
    """
    date = prop.get("date") if isinstance(prop, dict) else None
    if not isinstance(date, dict):
        raise TimesheetMappingError(f"Missing '{DATE_PROPERTY}' property")
    return date


def _extract_formula_number(prop: Dict[str, Any]) -> Optional[float]:
    """
    Return the number of a Notion formula property, or None.
    """
    formula = prop.get("formula") if isinstance(prop, dict) else None
    if not isinstance(formula, dict):
        return None

    value = formula.get("number")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return None


def format_hours(value: float) -> str:
    """Render hours the way they are written on the form: 4 -> "4", 2.5 -> "2.5"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def entry_from_page(page: Dict[str, Any]) -> TimesheetEntry:
    """
    Build a TimesheetEntry from one raw Notion page.

    Times are rendered in the offset Notion reports for the row.
    """
    properties: Dict[str, Any] = page.get("properties", {}) or {}
    date_range = _extract_date_range(properties.get(DATE_PROPERTY, {}))

    start = _parse_datetime(date_range.get("start"), "start")

    end_raw = date_range.get("end")
    if end_raw is None:
        raise TimesheetMappingError("Missing end time")
    end = _parse_datetime(end_raw, "end")

    paid_hours = _extract_formula_number(properties.get(HOURS_PROPERTY, {}))
    if paid_hours is None:
        raise TimesheetMappingError("Missing Hours property")

    return TimesheetEntry(
        month=start.month,
        day=start.day,
        start=start.strftime("%H:%M"),
        end=end.strftime("%H:%M"),
        paid_hours=paid_hours,
    )


def timesheet_from_entries(entries: Iterable[TimesheetEntry]) -> TimesheetData:
    """
    Aggregate entries into a TimesheetData, enforcing the form's row limit.
    """
    entries = list(entries)
    if len(entries) > MAX_ENTRIES:
        raise TimesheetMappingError(f"Exceeds max entry length {MAX_ENTRIES}")

    total_hours = round(sum(entry.paid_hours for entry in entries), 2)
    return TimesheetData(entries=entries, total_hours=total_hours)


def timesheet_from_pages(pages: Sequence[Dict[str, Any]]) -> TimesheetData:
    """
    Convert the raw pages of a database query into TimesheetData.
    """
    if len(pages) > MAX_ENTRIES:
        raise TimesheetMappingError(f"Exceeds max entry length {MAX_ENTRIES}")

    data = timesheet_from_entries(entry_from_page(page) for page in pages)
    logger.info(
        "Successfully parsed timesheet data with %d entries (%s hours)",
        len(data.entries),
        format_hours(data.total_hours),
    )
    return data


def build_field_values(data: TimesheetData, field_names: Sequence[str]) -> Dict[str, str]:
    """
    Assign timesheet values to the form fields of the template.

    The template lists one group of row fields per shift (month, day, start,
    finish, hours), in order. Fields are walked in template order with a row
    cursor that advances after each `Hours to be Paid` field. The
    `Total hours` field receives the sum and ends the walk. Row fields past
    the last entry stay empty.
    """
    values: Dict[str, str] = {}
    cursor = 0
    entries: List[TimesheetEntry] = data.entries

    for name in field_names:
        if name.startswith(TOTAL_HOURS_FIELD):
            values[name] = format_hours(data.total_hours)
            break

        if cursor >= len(entries):
            continue

        entry = entries[cursor]

        if name.startswith(MONTH_DAY_FIELD):
            values[name] = str(entry.day) if name.endswith("_2") else str(entry.month)
        elif name.startswith(START_TIME_FIELD):
            values[name] = entry.start
        elif name.startswith(FINISH_TIME_FIELD):
            values[name] = entry.end
        elif name.startswith(PAID_HOURS_FIELD):
            values[name] = format_hours(entry.paid_hours)
            cursor += 1

    return values
