"""User and project tools for Supermemory MCP server."""

from fastmcp import FastMCP
from mcp.types import TextContent

from .instructions import GET_PROJECTS_DESCRIPTION, WHO_AM_I_DESCRIPTION
from .utils import _text

PROJECTS_NOT_CONFIGURED = (
    "Projects feature requires additional configuration. "
    "Please use the default user context."
)


def register_user_tools(mcp: FastMCP, user_id: str) -> None:
    """Register getProjects and whoAmI with the MCP server.

    Neither tool talks to the Supermemory API.
    """

    @mcp.tool(name="getProjects", description=GET_PROJECTS_DESCRIPTION)
    def get_projects() -> TextContent:
        return _text(PROJECTS_NOT_CONFIGURED)

    @mcp.tool(name="whoAmI", description=WHO_AM_I_DESCRIPTION)
    def who_am_i() -> TextContent:
        return _text(f"Current user ID: {user_id}")
