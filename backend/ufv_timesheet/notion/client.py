# backend/ufv_timesheet/notion/client.py

"""
Client module responsible for talking to the Notion API.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import NotionConfig, get_notion_config

logger = logging.getLogger(__name__)


class NotionClientError(RuntimeError):
    """Base error for the Notion client."""


class NotionAuthError(NotionClientError):
    """Authentication or permission errors."""


class NotionNotFoundError(NotionClientError):
    """The database does not exist or is not shared with the integration."""


class NotionAPIError(NotionClientError):
    """Any other error returned by the Notion API."""


class NotionClient:
    """
    Thin wrapper around the Notion REST API.

    - database query (timesheet rows)
    - database retrieval (schema introspection)
    """

    def __init__(self, config: Optional[NotionConfig] = None) -> None:
        self.config = config or get_notion_config()

    @property
    def timeout(self) -> float:
        return self.config.timeout_seconds

    def _build_headers(self) -> Dict[str, str]:
        """
        Build the headers every Notion API call needs.
        """
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Notion-Version": self.config.api_version,
            "Content-Type": "application/json",
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        """
        Map the HTTP status code onto the matching exception.
        """
        if response.status_code == 401:
            raise NotionAuthError("Unauthorized. Check NOTION_API_KEY.")
        if response.status_code == 403:
            raise NotionAuthError("Forbidden. Check Notion integration permissions.")
        if response.status_code == 404:
            raise NotionNotFoundError(
                "Database not found. Check the database id and that it is shared "
                "with the integration."
            )
        if response.status_code >= 400:
            logger.error(
                "Notion API returned error status %s: %s",
                response.status_code,
                response.text,
            )
            raise NotionAPIError(
                f"Notion API returned status {response.status_code}: {response.text}"
            )

    def query_database(
        self,
        database_id: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Query a database and return the raw page objects.

        :param database_id: Notion database id
        :param payload: query body (filter / sorts), see notion.filters
        :raises NotionClientError: transport failure or bad response
        """
        url = f"{self.config.api_base_url}/databases/{database_id}/query"
        logger.info("Fetching data from Notion database: %s", database_id)

        try:
            response = httpx.post(
                url,
                headers=self._build_headers(),
                json=payload or {},
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:
            logger.error("Failed to send request to Notion API: %s", exc)
            raise NotionClientError(f"Failed to call Notion API: {exc}") from exc

        self._raise_for_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Failed to parse Notion response: %s", response.text)
            raise NotionAPIError("Notion API returned a non-JSON response.") from exc

        results = data.get("results", [])
        if not isinstance(results, list):
            raise NotionAPIError("Unexpected Notion API response format: 'results' is not a list.")

        logger.info("Successfully parsed Notion response with %d results", len(results))
        return results

    def retrieve_database(self, database_id: str) -> Dict[str, Any]:
        """
        Return the database object (title, properties and their types)
        exactly as Notion reports it.
        """
        url = f"{self.config.api_base_url}/databases/{database_id}"
        logger.info("Retrieving database structure from: %s", url)

        try:
            response = httpx.get(
                url,
                headers=self._build_headers(),
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:
            logger.error("Failed to send request to Notion API: %s", exc)
            raise NotionClientError(f"Failed to call Notion API: {exc}") from exc

        self._raise_for_status(response)

        try:
            database = response.json()
        except ValueError as exc:
            raise NotionAPIError("Notion API returned a non-JSON response.") from exc

        logger.info(
            "Successfully retrieved database structure with %d properties",
            len(database.get("properties", {}) or {}),
        )
        return database
