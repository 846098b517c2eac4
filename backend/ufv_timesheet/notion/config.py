# backend/ufv_timesheet/notion/config.py

"""
Settings needed to talk to the Notion API.
"""

from dataclasses import dataclass
from functools import lru_cache

from ufv_timesheet.utils.config import get_env, get_env_float


@dataclass(frozen=True)
class NotionConfig:
    """Container for Notion API settings."""

    api_key: str
    api_base_url: str
    api_version: str
    timeout_seconds: float = 10.0


@lru_cache()
def get_notion_config() -> NotionConfig:
    """
    Load the Notion settings from the environment.

    Required:
      - NOTION_API_KEY

    Optional:
      - NOTION_API_BASE_URL    (default: https://api.notion.com/v1)
      - NOTION_API_VERSION     (default: 2022-06-28)
      - NOTION_TIMEOUT_SECONDS (default: 10)
    """
    api_key = get_env("NOTION_API_KEY")

    api_base_url = get_env(
        "NOTION_API_BASE_URL",
        default="https://api.notion.com/v1",
        required=False,
    )
    api_version = get_env(
        "NOTION_API_VERSION",
        default="2022-06-28",
        required=False,
    )

    return NotionConfig(
        api_key=api_key,
        api_base_url=api_base_url.rstrip("/"),
        api_version=api_version,
        timeout_seconds=get_env_float("NOTION_TIMEOUT_SECONDS", default=10.0),
    )
