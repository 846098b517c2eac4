# backend/ufv_timesheet/timesheet/router.py

"""
FastAPI routes of the timesheet service.

- POST /timesheet-webhook: Notion automation webhook
- GET  /timesheet-test: manual trigger
- GET  /timesheet-db-info: database schema as Notion reports it
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from ufv_timesheet.notifications.factory import get_email_service, get_notification_service
from ufv_timesheet.notion.client import NotionClient, NotionClientError
from ufv_timesheet.notion.schemas import WebhookAutomationEvent

from .config import get_timesheet_config
from .errors import TimesheetProcessingError
from .schemas import TimesheetProcessResponse
from .service import TimesheetService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["timesheet"])

AUTOMATION_MISMATCH_DETAIL = "not the automation you are looking for"


@lru_cache()
def get_timesheet_service() -> TimesheetService:
    """
    Shared TimesheetService built from the environment.

    Tests replace it through app.dependency_overrides.
    """
    return TimesheetService(
        config=get_timesheet_config(),
        notion_client=NotionClient(),
        email_service=get_email_service(),
        notifier=get_notification_service(),
    )


def _run_pipeline(service: TimesheetService) -> TimesheetProcessResponse:
    try:
        email_id = service.process_timesheet()
    except TimesheetProcessingError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error processing timesheet: {exc}",
        ) from exc

    return TimesheetProcessResponse(status="ok", email_id=email_id)


@router.post(
    "/timesheet-webhook",
    response_model=TimesheetProcessResponse,
    summary="Notion automation webhook",
    description="Builds and emails the timesheet when the configured Notion automation fires.",
)
def timesheet_webhook(
    payload: WebhookAutomationEvent,
    service: TimesheetService = Depends(get_timesheet_service),
) -> TimesheetProcessResponse:
    """
    Webhooks from other automations are acknowledged and ignored.
    """
    logger.info("Received timesheet webhook from Notion")

    if payload.source.automation_id != service.config.automation_id:
        logger.info(
            "Automation ID mismatch. Received: %s, Expected: %s",
            payload.source.automation_id,
            service.config.automation_id,
        )
        return TimesheetProcessResponse(status="ignored", detail=AUTOMATION_MISMATCH_DETAIL)

    result = _run_pipeline(service)
    logger.info("Timesheet processed successfully, email ID: %s", result.email_id)
    return result


@router.get(
    "/timesheet-test",
    response_model=TimesheetProcessResponse,
    summary="Manual timesheet trigger",
)
def timesheet_test(
    service: TimesheetService = Depends(get_timesheet_service),
) -> TimesheetProcessResponse:
    logger.info("Processing test timesheet request")
    return _run_pipeline(service)


@router.get(
    "/timesheet-db-info",
    summary="Timesheet database schema",
    description="Returns the Notion database object (properties and their types) unmodified.",
)
def timesheet_db_info(
    service: TimesheetService = Depends(get_timesheet_service),
) -> Dict[str, Any]:
    try:
        return service.database_info()
    except NotionClientError as exc:
        logger.error("Failed to retrieve database info: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error retrieving database info: {exc}",
        ) from exc
