"""Utility functions for Supermemory MCP server tools."""

from mcp.types import TextContent

from supermemory_mcp.models import SearchResponse

CHUNK_SEPARATOR = "\n\n"
RESULT_SEPARATOR = "\n\n---\n\n"


def _text(text: str) -> TextContent:
    """Wrap text in TextContent for MCP response."""
    return TextContent(type="text", text=text)


def container_tags(user_id: str, project_id: str | None = None) -> list[str]:
    """Build the identity scope for a call.

    The user ID always comes first; a non-empty project ID is appended.
    """
    if project_id:
        return [user_id, project_id]
    return [user_id]


def _format_search_results(response: SearchResponse) -> str:
    """Flatten search results into a single text block.

    Chunks of one result are joined by a blank line, results by a rule.
    """
    return RESULT_SEPARATOR.join(
        CHUNK_SEPARATOR.join(chunk.content for chunk in result.chunks)
        for result in response.results
    )
