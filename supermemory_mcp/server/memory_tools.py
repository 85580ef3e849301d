"""Memory tools for Supermemory MCP server."""

# ruff: noqa: E501, N803

import logging
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.types import TextContent
from pydantic import Field

from supermemory_mcp.client import SupermemoryAPIError, SupermemoryClient

from .instructions import ADD_MEMORY_DESCRIPTION, SEARCH_DESCRIPTION
from .utils import _format_search_results, _text, container_tags

logger = logging.getLogger(__name__)

# Soft per-user cap, checked before every add. Not transactional: concurrent
# adds for the same user can both pass the check.
MEMORY_LIMIT = 2000

MEMORY_ADDED = "Memory added successfully"
MEMORY_LIMIT_EXCEEDED = f"Memory limit of {MEMORY_LIMIT} memories exceeded"
NO_MEMORIES_FOUND = "No memories found matching your query."


def _api_error(action: str, error: SupermemoryAPIError) -> ToolError:
    logger.warning("Supermemory API request failed while %s: %s", action, error)
    return ToolError(f"Supermemory API request failed: {error}")


def register_memory_tools(
    mcp: FastMCP, client: SupermemoryClient, user_id: str
) -> None:
    """Register addMemory and search with the MCP server."""

    @mcp.tool(name="addMemory", description=ADD_MEMORY_DESCRIPTION)
    async def add_memory(
        thingToRemember: Annotated[
            str, Field(description="The information to remember", min_length=1)
        ],
        projectId: Annotated[
            str | None,
            Field(description="Optional project ID to associate with the memory"),
        ] = None,
    ) -> TextContent:
        tags = container_tags(user_id, projectId)

        # The limit applies to everything the user has stored, across projects
        try:
            existing = await client.count_memories([user_id])
        except SupermemoryAPIError as e:
            raise _api_error("counting memories", e) from e

        if existing > MEMORY_LIMIT:
            logger.info(
                "Refusing to add memory for %s: %d memories stored", user_id, existing
            )
            raise ToolError(MEMORY_LIMIT_EXCEEDED)

        try:
            await client.add_memory(thingToRemember, tags)
        except SupermemoryAPIError as e:
            raise _api_error("adding a memory", e) from e

        logger.info("Added memory with container tags %s", tags)
        return _text(MEMORY_ADDED)

    @mcp.tool(name="search", description=SEARCH_DESCRIPTION)
    async def search(
        informationToGet: Annotated[
            str, Field(description="The information to search for", min_length=1)
        ],
        projectId: Annotated[
            str | None,
            Field(description="Optional project ID to filter search results"),
        ] = None,
    ) -> TextContent:
        tags = container_tags(user_id, projectId)
        try:
            response = await client.search(informationToGet, tags)
        except SupermemoryAPIError as e:
            raise _api_error("searching memories", e) from e

        logger.debug(
            "Search with container tags %s returned %d results",
            tags,
            len(response.results),
        )
        return _text(_format_search_results(response) or NO_MEMORIES_FOUND)
