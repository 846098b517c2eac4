# backend/ufv_timesheet/timesheet/config.py

"""
Static configuration of the timesheet service.
"""

from dataclasses import dataclass
from functools import lru_cache

from ufv_timesheet.utils.config import get_env


@dataclass(frozen=True)
class TimesheetConfig:
    """Timesheet settings, fixed for the lifetime of the process."""

    db_id: str
    automation_id: str
    template_path: str = "templates/sasi.pdf"
    employee_name: str = "Arnav Mehta"


@lru_cache()
def get_timesheet_config() -> TimesheetConfig:
    """
    Load the timesheet settings from the environment.

    Required:
      - NOTION_DATABASE_ID
      - NOTION_AUTOMATION_ID

    Optional:
      - TIMESHEET_TEMPLATE_PATH (default: templates/sasi.pdf)
      - TIMESHEET_EMPLOYEE_NAME (default: Arnav Mehta)
    """
    return TimesheetConfig(
        db_id=get_env("NOTION_DATABASE_ID"),
        automation_id=get_env("NOTION_AUTOMATION_ID"),
        template_path=get_env(
            "TIMESHEET_TEMPLATE_PATH",
            default="templates/sasi.pdf",
            required=False,
        ),
        employee_name=get_env(
            "TIMESHEET_EMPLOYEE_NAME",
            default="Arnav Mehta",
            required=False,
        ),
    )
