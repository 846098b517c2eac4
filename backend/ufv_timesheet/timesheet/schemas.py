# backend/ufv_timesheet/timesheet/schemas.py

"""
Internal timesheet models and the HTTP response models of the timesheet routes.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

MAX_ENTRIES = 16


class TimesheetEntry(BaseModel):
    """
    One worked shift, read from one row of the Notion database.
    """

    month: int = Field(..., ge=1, le=12, description="Month of the shift start")
    day: int = Field(..., ge=1, le=31, description="Day of month of the shift start")
    start: str = Field(..., description="Start time, HH:MM")
    end: str = Field(..., description="Finish time, HH:MM")
    paid_hours: float = Field(..., description="Billable hours for the shift")


class TimesheetData(BaseModel):
    """
    All shifts of one pay period, in the order they go on the form.
    """

    entries: List[TimesheetEntry] = Field(default_factory=list, max_length=MAX_ENTRIES)
    total_hours: float = 0.0


class TimesheetProcessResponse(BaseModel):
    """
    Response of /timesheet-webhook and /timesheet-test.

    - status=ok: the timesheet was emailed, email_id is the Resend id
    - status=ignored: the webhook came from another automation
    """

    status: str
    email_id: Optional[str] = None
    detail: Optional[str] = None
