# backend/ufv_timesheet/notifications/factory.py

"""
Factories for the process-wide email and notification services.

- get_email_service(): EmailService bound to the Resend config
- get_notification_service(): log sender + email sender
"""

from __future__ import annotations

from typing import Optional

from .schemas import NotificationMessage
from .service import (
    CompositeNotificationService,
    EmailNotificationSender,
    EmailService,
    LoggingNotificationSender,
)

_email_service: Optional[EmailService] = None
_notification_service: Optional[CompositeNotificationService] = None


def get_email_service() -> EmailService:
    """
    Return the shared EmailService, creating it on first use.
    """
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service


def get_notification_service() -> CompositeNotificationService:
    """
    Return the shared CompositeNotificationService.

    Created on the first call only; later calls return the same instance.
    """
    global _notification_service
    if _notification_service is None:
        _notification_service = CompositeNotificationService(
            [
                LoggingNotificationSender(),
                EmailNotificationSender(get_email_service()),
            ]
        )
    return _notification_service


__all__ = [
    "NotificationMessage",
    "CompositeNotificationService",
    "EmailNotificationSender",
    "EmailService",
    "LoggingNotificationSender",
    "get_email_service",
    "get_notification_service",
]
