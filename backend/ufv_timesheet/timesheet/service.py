# backend/ufv_timesheet/timesheet/service.py

"""
The timesheet pipeline.

Notion query -> TimesheetData -> filled PDF -> email. Any failure is
reported by email to the error recipients and re-raised as
TimesheetProcessingError. There are no retries.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from ufv_timesheet.notifications.service import CompositeNotificationService, EmailService
from ufv_timesheet.notion.client import NotionClient
from ufv_timesheet.notion.filters import build_timesheet_query

from .config import TimesheetConfig
from .errors import TimesheetProcessingError
from .mapper import timesheet_from_pages
from .pdf import PdfFormTemplate, create_timesheet_pdf
from .period import PayPeriod, get_current_pay_period
from .schemas import TimesheetData

logger = logging.getLogger(__name__)


class TimesheetService:
    """
    Runs one timesheet delivery per call.

    Collaborators are injected so tests can replace any of them.
    """

    def __init__(
        self,
        config: TimesheetConfig,
        notion_client: NotionClient,
        email_service: EmailService,
        notifier: CompositeNotificationService,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        logger.info("Creating new TimesheetService instance")
        self.config = config
        self.notion_client = notion_client
        self.email_service = email_service
        self.notifier = notifier
        self._today = today or date.today

    def _abort(self, stage: str, exc: Exception) -> TimesheetProcessingError:
        error_msg = f"{stage}: {exc}"
        logger.error(error_msg)
        self.notifier.report_error(error_msg)
        return TimesheetProcessingError(error_msg)

    def fetch_pages(self, period: PayPeriod) -> List[Dict[str, Any]]:
        """
        Query the timesheet database for the rows of `period`.
        """
        logger.info("Processing timesheet for database: %s", self.config.db_id)
        return self.notion_client.query_database(
            self.config.db_id,
            build_timesheet_query(period),
        )

    def process_timesheet(self) -> str:
        """
        Fetch, fill and email the timesheet.

        :return: the id of the sent email
        :raises TimesheetProcessingError: any stage failed (already reported)
        """
        period = get_current_pay_period(self._today())

        try:
            pages = self.fetch_pages(period)
        except Exception as exc:  # noqa: BLE001
            raise self._abort("Error fetching your linked database", exc) from exc

        try:
            data: TimesheetData = timesheet_from_pages(pages)
        except Exception as exc:  # noqa: BLE001
            raise self._abort("Error with parsing your linked database", exc) from exc

        try:
            template = PdfFormTemplate.from_path(self.config.template_path)
            timesheet_pdf = create_timesheet_pdf(data, template)
        except Exception as exc:  # noqa: BLE001
            raise self._abort("Error creating timesheet PDF", exc) from exc

        logger.info("Successfully created timesheet PDF, size: %d bytes", len(timesheet_pdf))

        try:
            response = self.email_service.send_timesheet_email(
                timesheet_pdf,
                employee_name=self.config.employee_name,
                period=period,
            )
        except Exception as exc:  # noqa: BLE001
            raise self._abort("Error sending email", exc) from exc

        logger.info("Timesheet email sent successfully with ID: %s", response.id)
        return response.id

    def database_info(self) -> Dict[str, Any]:
        """
        Return the timesheet database object as Notion reports it.
        """
        logger.info("Retrieving database structure for: %s", self.config.db_id)
        return self.notion_client.retrieve_database(self.config.db_id)
