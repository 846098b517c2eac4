# backend/ufv_timesheet/notifications/schemas.py

"""
Shared schemas of the notification layer.

- NotificationMessage: error report handed to every notification sender
- EmailMessage / EmailAttachment: what is posted to the Resend API
- EmailSendResponse: what Resend answers

NotificationMessage must not carry API keys or other secrets; its body ends
up in log files and mailboxes.
"""

from __future__ import annotations

import base64
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class NotificationMessage(BaseModel):
    """
    One error report.

    body is plain text.
    """

    title: str = Field(
        ...,
        description="Short title (email subject, first log line).",
    )
    body: str = Field(
        ...,
        description="Plain text body.",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation time (UTC).",
    )


class EmailAttachment(BaseModel):
    """A file attached to an email."""

    filename: str
    content: bytes
    content_type: str = "application/pdf"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "filename": self.filename,
            "content": base64.b64encode(self.content).decode("ascii"),
            "content_type": self.content_type,
        }


class EmailMessage(BaseModel):
    """A plain text email as accepted by POST /emails."""

    sender: str
    to: List[str] = Field(..., min_length=1)
    subject: str
    text: str
    attachments: List[EmailAttachment] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "text": self.text,
        }
        if self.attachments:
            payload["attachments"] = [a.to_payload() for a in self.attachments]
        return payload


class EmailSendResponse(BaseModel):
    """Resend's answer to a successful send."""

    id: str
    raw: Optional[Dict[str, Any]] = None
