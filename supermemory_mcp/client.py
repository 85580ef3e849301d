"""Async HTTP client for the Supermemory API.

Only the three calls the MCP tools need are implemented: list (used for the
memory count), add and search. Each request opens its own
``httpx.AsyncClient``, so one instance can be shared by concurrent tool calls.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from supermemory_mcp.config import DEFAULT_BASE_URL, SupermemoryConfig
from supermemory_mcp.models import (
    MemoryAddResult,
    MemoryList,
    SearchResponse,
)

logger = logging.getLogger(__name__)

MEMORIES_PATH = "/v3/memories"
MEMORIES_LIST_PATH = "/v3/memories/list"
SEARCH_PATH = "/v3/search"


class SupermemoryAPIError(Exception):
    """Raised when a Supermemory API request fails.

    ``status_code`` is set when the server answered with an error status and
    is None for transport failures (DNS, connection refused, timeouts).
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SupermemoryClient:
    """Thin wrapper over the Supermemory REST endpoints."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # Tests inject httpx.MockTransport here
        self._transport = transport

    @classmethod
    def from_config(cls, config: SupermemoryConfig) -> "SupermemoryClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, path: str, payload: dict[str, Any], model: type[BaseModel]):
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(path, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                raise SupermemoryAPIError(
                    f"POST {path} returned {status}: {e.response.text[:200]}",
                    status_code=status,
                ) from e
            except httpx.HTTPError as e:
                raise SupermemoryAPIError(
                    f"POST {path} failed: {type(e).__name__}: {e}"
                ) from e

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise SupermemoryAPIError(
                f"POST {path} returned an unexpected body: {e}",
                status_code=response.status_code,
            ) from e

    async def list_memories(self, container_tags: list[str]) -> MemoryList:
        """List memories carrying all of the given container tags."""
        return await self._post(
            MEMORIES_LIST_PATH, {"containerTags": container_tags}, MemoryList
        )

    async def count_memories(self, container_tags: list[str]) -> int:
        memories = await self.list_memories(container_tags)
        logger.debug(
            "Found %d memories for container tags %s", memories.count, container_tags
        )
        return memories.count

    async def add_memory(
        self, content: str, container_tags: list[str]
    ) -> MemoryAddResult:
        """Store a new memory scoped to the given container tags."""
        return await self._post(
            MEMORIES_PATH,
            {"content": content, "containerTags": container_tags},
            MemoryAddResult,
        )

    async def search(self, query: str, container_tags: list[str]) -> SearchResponse:
        """Run a semantic search filtered by container tags."""
        return await self._post(
            SEARCH_PATH, {"q": query, "containerTags": container_tags}, SearchResponse
        )
