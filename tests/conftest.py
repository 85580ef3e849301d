"""Pytest fixtures for supermemory_mcp tests."""

import json

import httpx
import pytest

from supermemory_mcp.client import SupermemoryClient
from supermemory_mcp.config import SupermemoryConfig
from supermemory_mcp.debug import clear_request_id, disable_debug
from supermemory_mcp.server import create_supermemory_server


class FakeSupermemoryAPI:
    """In-memory stand-in for the Supermemory REST API.

    Records every request and answers list/add/search calls from the
    configured attributes.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.memory_count = 0
        self.report_total = True
        self.search_results: list[list[str]] = []
        self.fail_with: int | None = None
        self.raise_error: Exception | None = None

    def calls_to(self, path: str) -> list[dict]:
        """Return the JSON bodies of all requests made to a path."""
        return [json.loads(r.content) for r in self.requests if r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"error": "boom"})

        path = request.url.path
        if path == "/v3/memories/list":
            returned = min(self.memory_count, 10)
            body = {
                "memories": [
                    {"id": f"m{i}", "content": f"memory {i}"} for i in range(returned)
                ]
            }
            if self.report_total:
                body["pagination"] = {
                    "currentPage": 1,
                    "limit": 10,
                    "totalItems": self.memory_count,
                    "totalPages": max(1, -(-self.memory_count // 10)),
                }
            return httpx.Response(200, json=body)
        if path == "/v3/memories":
            return httpx.Response(200, json={"id": "m_new", "status": "queued"})
        if path == "/v3/search":
            results = [
                {
                    "documentId": f"d{i}",
                    "score": 0.9,
                    "chunks": [
                        {"content": c, "isRelevant": True, "score": 0.9} for c in chunks
                    ],
                }
                for i, chunks in enumerate(self.search_results)
            ]
            return httpx.Response(
                200, json={"results": results, "total": len(results), "timing": 12}
            )
        return httpx.Response(404, json={"error": "not found"})


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and config files."""
    for var in (
        "SUPERMEMORY_API_KEY",
        "SUPERMEMORY_USER_ID",
        "SUPERMEMORY_BASE_URL",
        "SUPERMEMORY_MCP_DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    disable_debug()
    clear_request_id()
    yield
    disable_debug()


@pytest.fixture
def api():
    return FakeSupermemoryAPI()


@pytest.fixture
def client(api):
    return SupermemoryClient(
        api_key="test-key",
        base_url="https://api.example.com",
        transport=httpx.MockTransport(api.handler),
    )


@pytest.fixture
def config():
    return SupermemoryConfig(api_key="test-key", base_url="https://api.example.com")


@pytest.fixture
def server(config, client):
    return create_supermemory_server(config=config, client=client)
