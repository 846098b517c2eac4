# backend/ufv_timesheet/notifications/service.py

"""
Email sending and error notification.

- EmailService: plain emails and the timesheet email (errors propagate)
- NotificationSender interface with a log sender and an email sender
- CompositeNotificationService: fans an error report out to every sender,
  a failing sender never interrupts the caller
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Sequence

from ufv_timesheet.timesheet.period import PayPeriod, get_current_pay_period

from .client import ResendClient
from .schemas import (
    EmailAttachment,
    EmailMessage,
    EmailSendResponse,
    NotificationMessage,
)

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "Email sent from webhooks server"
ERROR_SUBJECT = "Error from UFV timesheet service"
TIMESHEET_FILENAME = "Timesheet.pdf"


class EmailService:
    """
    Builds emails from the configured addresses and sends them via Resend.
    """

    def __init__(self, client: Optional[ResendClient] = None) -> None:
        self.client = client or ResendClient()

    @property
    def config(self):
        return self.client.config

    def send_email(
        self,
        text: str,
        subject: Optional[str] = None,
        attachment: Optional[EmailAttachment] = None,
        to: Optional[Sequence[str]] = None,
    ) -> EmailSendResponse:
        """
        Send a plain text email, to the default recipients unless `to` is given.
        """
        message = EmailMessage(
            sender=self.config.sender,
            to=list(to or self.config.default_recipients),
            subject=subject or DEFAULT_SUBJECT,
            text=text,
            attachments=[attachment] if attachment else [],
        )
        return self.client.send(message)

    def send_timesheet_email(
        self,
        timesheet: bytes,
        employee_name: str,
        period: Optional[PayPeriod] = None,
    ) -> EmailSendResponse:
        """
        Send the filled timesheet PDF to the timesheet recipients.

        Subject and body: `Timesheet M/D to M/D - <employee name>` for
        `period` (default: the current pay period).
        """
        period = period or get_current_pay_period()
        subject = f"Timesheet {period.short_label()} - {employee_name}"

        logger.info("Sending timesheet for pay period: %s to %s", period.start, period.end)
        logger.info("Timesheet attachment size: %d bytes", len(timesheet))

        return self.send_email(
            text=subject,
            subject=subject,
            attachment=EmailAttachment(filename=TIMESHEET_FILENAME, content=timesheet),
            to=self.config.timesheet_recipients,
        )

    def send_error_info(self, error_info: str) -> EmailSendResponse:
        """
        Send an error report to the error recipients.
        """
        logger.info("Sending error information email")
        return self.send_email(
            text=error_info,
            subject=ERROR_SUBJECT,
            to=self.config.error_recipients,
        )


class NotificationSender(Protocol):
    """
    Minimal notification interface.

    Implementations:
    - LoggingNotificationSender: writes to the log
    - EmailNotificationSender: emails the error recipients
    """

    def send(self, message: NotificationMessage) -> None:  # pragma: no cover - Protocol
        ...


class LoggingNotificationSender:
    """
    Writes NotificationMessage to a Python logger.
    """

    def __init__(self, logger_: logging.Logger | None = None) -> None:
        self._logger = logger_ or logger

    def send(self, message: NotificationMessage) -> None:
        """
        Log the report at ERROR level.
        """
        self._logger.error("%s: %s", message.title, message.body)


class EmailNotificationSender:
    """
    Emails NotificationMessage to the error recipients.
    """

    def __init__(self, email_service: EmailService) -> None:
        self._email_service = email_service

    def send(self, message: NotificationMessage) -> None:
        self._email_service.send_error_info(message.body)


class CompositeNotificationService:
    """
    Fans a notification out to several NotificationSender instances.
    """

    def __init__(self, senders: Iterable[NotificationSender]) -> None:
        self._senders: List[NotificationSender] = list(senders)

    def send(self, message: NotificationMessage) -> None:
        """
        Send the message to every sender.
        """
        for sender in self._senders:
            try:
                sender.send(message)
            except Exception:  # noqa: BLE001 - notifications never stop the caller
                logger.exception("Notification sender failed. Continuing with others.")

    def report_error(self, error_info: str) -> None:
        """
        Best-effort error report by email (and log).
        """
        self.send(
            NotificationMessage(
                title=ERROR_SUBJECT,
                body=error_info,
            )
        )
