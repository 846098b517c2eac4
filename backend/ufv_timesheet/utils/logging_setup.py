# backend/ufv_timesheet/utils/logging_setup.py

"""
Process-wide logging setup.
"""

import logging

from .config import get_env

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """
    Configure the root logger from LOG_LEVEL (default INFO).

    Called once from the application factory. Handlers that are already
    installed (uvicorn, pytest caplog) are left alone.
    """
    level_name = get_env("LOG_LEVEL", default="INFO", required=False).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("ufv_timesheet").setLevel(level)
