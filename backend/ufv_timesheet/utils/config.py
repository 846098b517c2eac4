# backend/ufv_timesheet/utils/config.py

"""
Helpers for reading environment variables.
Shared by the Notion, email and timesheet configuration modules.
"""

import os
from typing import List, Optional


class EnvVarMissingError(RuntimeError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> str:
    """
    Read an environment variable.

    :param name: variable name
    :param default: fallback value (only used when required=False)
    :param required: raise EnvVarMissingError when the variable is unset
    :return: the string value
    """
    value = os.getenv(name)

    if value is None or value == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value


def get_env_float(name: str, default: float) -> float:
    """
    Read a numeric environment variable.

    - Unset or unparsable values fall back to default.
    """
    raw = get_env(name, default=None, required=False)
    if raw is None:
        return default

    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


def get_env_list(name: str, default: str) -> List[str]:
    """
    Read a comma-separated environment variable as a list of stripped items.
    """
    raw = get_env(name, default=default, required=False)
    return [item.strip() for item in raw.split(",") if item.strip()]
