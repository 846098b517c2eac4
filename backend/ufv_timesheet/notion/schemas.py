# backend/ufv_timesheet/notion/schemas.py

"""
Schemas for payloads Notion sends to this service.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class AutomationSource(BaseModel):
    """
    The `source` block of a Notion automation webhook.

    Only automation_id is checked; the rest is kept for logging.
    """

    type: str = Field(..., description="Source type, e.g. 'automation'")
    automation_id: str = Field(..., description="Id of the automation that fired")
    action_id: str = Field(..., description="Id of the webhook action")
    event_id: Optional[str] = Field(None, description="Id of the triggering event")
    user_id: Optional[str] = Field(None, description="User who triggered the automation")
    attempt: Optional[int] = Field(None, description="Delivery attempt number")


class WebhookAutomationEvent(BaseModel):
    """
    Body of POST /timesheet-webhook.

    `data` holds the page that triggered the automation; the pipeline
    re-queries the database instead of reading it.
    """

    source: AutomationSource
    data: Any = Field(None, description="Triggering page as sent by Notion")
