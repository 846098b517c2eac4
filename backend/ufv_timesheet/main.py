# backend/ufv_timesheet/main.py

"""
Entry point of the timesheet service.

Routes:
- /timesheet-webhook, /timesheet-test, /timesheet-db-info
  (under TIMESHEET_ROUTE_PREFIX when set)
- /health
"""

from fastapi import FastAPI

from ufv_timesheet.timesheet.router import router as timesheet_router
from ufv_timesheet.utils.config import get_env
from ufv_timesheet.utils.logging_setup import configure_logging


def create_app() -> FastAPI:
    """
    FastAPI application factory.

    - timesheet endpoints
    - health check endpoint (/health)
    """
    configure_logging()

    app = FastAPI(title="UFV Timesheet Service")

    prefix = get_env("TIMESHEET_ROUTE_PREFIX", default="", required=False).rstrip("/")
    app.include_router(timesheet_router, prefix=prefix)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        Liveness check.
        """
        return {"status": "ok"}

    return app


# entry point for `uvicorn ufv_timesheet.main:app`
app = create_app()
