# backend/ufv_timesheet/notion/filters.py

"""
Query bodies for the timesheet database.
"""

from __future__ import annotations

from typing import Any, Dict

from ufv_timesheet.timesheet.period import PayPeriod

DATE_PROPERTY = "start and end"
NOTES_PROPERTY = "notes"
# Rows whose notes carry this marker are always included, whatever their date.
TODO_MARKER = "\\ TODO"


def build_timesheet_query(period: PayPeriod) -> Dict[str, Any]:
    """
    Build the database query for one pay period.

    Selects rows dated inside the period, plus rows flagged with the TODO
    marker in their notes, sorted by date ascending.
    """
    return {
        "filter": {
            "or": [
                {
                    "property": NOTES_PROPERTY,
                    "rich_text": {"contains": TODO_MARKER},
                },
                {
                    "and": [
                        {
                            "property": DATE_PROPERTY,
                            "date": {"on_or_after": period.start.isoformat()},
                        },
                        {
                            "property": DATE_PROPERTY,
                            "date": {"on_or_before": period.end.isoformat()},
                        },
                    ]
                },
            ]
        },
        "sorts": [{"property": DATE_PROPERTY, "direction": "ascending"}],
    }
