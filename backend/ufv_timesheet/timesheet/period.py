# backend/ufv_timesheet/timesheet/period.py

"""
Semi-monthly pay period calculation.

Pay periods run from the 9th to the 23rd, and from the 24th to the 8th of
the following month.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

PERIOD_WINDOW: Tuple[int, int] = (9, 23)


@dataclass(frozen=True)
class PayPeriod:
    """Inclusive date range of one pay period."""

    start: date
    end: date

    def short_label(self) -> str:
        """`M/D to M/D`, as used in the email subject."""
        return (
            f"{self.start.month}/{self.start.day} to "
            f"{self.end.month}/{self.end.day}"
        )


def _shift_month(day: date, months: int, day_of_month: int) -> date:
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, day_of_month)


def get_current_pay_period(today: Optional[date] = None) -> PayPeriod:
    """
    Return the pay period containing `today` (default: local date).

    - day <= 9:  24th of the previous month .. 8th of this month
    - day >= 23: 24th of this month .. 8th of next month
    - otherwise: 9th .. 23rd of this month
    """
    today = today or date.today()
    first_day, last_day = PERIOD_WINDOW

    logger.info("Calculating pay period for current date: %s", today)

    if today.day <= first_day:
        period = PayPeriod(
            start=_shift_month(today, -1, last_day + 1),
            end=today.replace(day=first_day - 1),
        )
    elif today.day >= last_day:
        period = PayPeriod(
            start=today.replace(day=last_day + 1),
            end=_shift_month(today, 1, first_day - 1),
        )
    else:
        period = PayPeriod(
            start=today.replace(day=first_day),
            end=today.replace(day=last_day),
        )

    logger.info("Pay period calculated: %s to %s", period.start, period.end)
    return period
