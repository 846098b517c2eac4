# backend/ufv_timesheet/notifications/config.py

"""
Settings for the Resend email API and the recipients of each email kind.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from ufv_timesheet.utils.config import get_env, get_env_float, get_env_list


@dataclass(frozen=True)
class EmailConfig:
    """Resend credentials plus sender and recipient addresses."""

    api_key: str
    api_base_url: str = "https://api.resend.com"
    sender: str = "devnull03 <dev@dvnl.work>"
    default_recipients: List[str] = field(default_factory=lambda: ["arnav@dvnl.work"])
    timesheet_recipients: List[str] = field(
        default_factory=lambda: ["arnav.mehta@student.ufv.ca", "arnav@dvnl.work"]
    )
    error_recipients: List[str] = field(default_factory=lambda: ["dev@dvnl.work"])
    timeout_seconds: float = 10.0


@lru_cache()
def get_email_config() -> EmailConfig:
    """
    Load the email settings from the environment.

    Required:
      - RESEND_API_KEY

    Optional:
      - RESEND_API_BASE_URL (default: https://api.resend.com)
      - EMAIL_FROM
      - EMAIL_DEFAULT_TO, TIMESHEET_EMAIL_TO, ERROR_EMAIL_TO (comma-separated)
      - RESEND_TIMEOUT_SECONDS (default: 10)
    """
    return EmailConfig(
        api_key=get_env("RESEND_API_KEY"),
        api_base_url=get_env(
            "RESEND_API_BASE_URL",
            default="https://api.resend.com",
            required=False,
        ).rstrip("/"),
        sender=get_env("EMAIL_FROM", default="devnull03 <dev@dvnl.work>", required=False),
        default_recipients=get_env_list("EMAIL_DEFAULT_TO", default="arnav@dvnl.work"),
        timesheet_recipients=get_env_list(
            "TIMESHEET_EMAIL_TO",
            default="arnav.mehta@student.ufv.ca,arnav@dvnl.work",
        ),
        error_recipients=get_env_list("ERROR_EMAIL_TO", default="dev@dvnl.work"),
        timeout_seconds=get_env_float("RESEND_TIMEOUT_SECONDS", default=10.0),
    )
