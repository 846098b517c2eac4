# backend/tests/test_notion_client.py

import httpx
import pytest

from ufv_timesheet.notion.client import (
    NotionAPIError,
    NotionAuthError,
    NotionClient,
    NotionClientError,
    NotionNotFoundError,
)
from ufv_timesheet.notion.config import NotionConfig


def _client() -> NotionClient:
    return NotionClient(
        NotionConfig(
            api_key="dummy-key",
            api_base_url="https://api.notion.test/v1",
            api_version="2022-06-28",
        )
    )


def test_query_database_success(monkeypatch):
    client = _client()
    captured = {}

    fake_response_data = {
        "object": "list",
        "results": [{"id": "page-1", "properties": {}}],
        "next_cursor": None,
        "has_more": False,
    }

    def fake_post(url, **kwargs):
        captured["url"] = url
        captured.update(kwargs)
        return httpx.Response(status_code=200, json=fake_response_data)

    monkeypatch.setattr(httpx, "post", fake_post)

    results = client.query_database("db-123", {"filter": {"or": []}})

    assert results == [{"id": "page-1", "properties": {}}]
    assert captured["url"] == "https://api.notion.test/v1/databases/db-123/query"
    assert captured["json"] == {"filter": {"or": []}}
    assert captured["headers"]["Authorization"] == "Bearer dummy-key"
    assert captured["headers"]["Notion-Version"] == "2022-06-28"


@pytest.mark.parametrize(
    "status_code, error_type",
    [
        (401, NotionAuthError),
        (403, NotionAuthError),
        (404, NotionNotFoundError),
        (500, NotionAPIError),
    ],
)
def test_query_database_error_status(monkeypatch, status_code, error_type):
    client = _client()

    def fake_post(*args, **kwargs):
        return httpx.Response(status_code=status_code, content=b"boom")

    monkeypatch.setattr(httpx, "post", fake_post)

    with pytest.raises(error_type):
        client.query_database("db-123")


def test_query_database_network_error(monkeypatch):
    client = _client()

    def fake_post(*args, **kwargs):
        raise httpx.ConnectError("network error")

    monkeypatch.setattr(httpx, "post", fake_post)

    with pytest.raises(NotionClientError):
        client.query_database("db-123")


def test_query_database_rejects_malformed_results(monkeypatch):
    client = _client()

    def fake_post(*args, **kwargs):
        return httpx.Response(status_code=200, json={"results": {"id": "page-1"}})

    monkeypatch.setattr(httpx, "post", fake_post)

    with pytest.raises(NotionAPIError):
        client.query_database("db-123")


def test_query_database_rejects_non_json_body(monkeypatch):
    client = _client()

    def fake_post(*args, **kwargs):
        return httpx.Response(status_code=200, content=b"<html>Bad Gateway</html>")

    monkeypatch.setattr(httpx, "post", fake_post)

    with pytest.raises(NotionAPIError, match="non-JSON"):
        client.query_database("db-123")

def test_retrieve_database_returns_notion_object_unmodified(monkeypatch):
    client = _client()
    database = {
        "object": "database",
        "id": "db-123",
        "properties": {
            "start and end": {"id": "a", "name": "start and end", "type": "date", "date": {}},
            "Billable Hours": {"id": "b", "name": "Billable Hours", "type": "formula"},
        },
    }
    captured = {}

    def fake_get(url, **kwargs):
        captured["url"] = url
        return httpx.Response(status_code=200, json=database)

    monkeypatch.setattr(httpx, "get", fake_get)

    assert client.retrieve_database("db-123") == database
    assert captured["url"] == "https://api.notion.test/v1/databases/db-123"


def test_retrieve_database_not_found(monkeypatch):
    client = _client()

    def fake_get(*args, **kwargs):
        return httpx.Response(status_code=404, json={"code": "object_not_found"})

    monkeypatch.setattr(httpx, "get", fake_get)

    with pytest.raises(NotionNotFoundError):
        client.retrieve_database("db-123")
