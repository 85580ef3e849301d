"""Core MCP server creation function for Supermemory.

Provides the main entry point for creating an MCP server with memory tools.
"""

from fastmcp import FastMCP

from supermemory_mcp.client import SupermemoryClient
from supermemory_mcp.config import SupermemoryConfig
from supermemory_mcp.debug import instrument_client

from .instructions import PROMPT_DESCRIPTION, SERVER_INSTRUCTIONS, SUPERMEMORY_PROMPT
from .memory_tools import register_memory_tools
from .user_tools import register_user_tools


def create_supermemory_server(
    config: SupermemoryConfig,
    name: str = "Supermemory MCP",
    client: SupermemoryClient | None = None,
) -> FastMCP:
    """Create an MCP server with Supermemory tools.

    Args:
        config: Loaded configuration (API key, user ID, base URL)
        name: Name for the MCP server
        client: Optional pre-built API client (for testing)
    """
    if client is None:
        client = SupermemoryClient.from_config(config)
    instrument_client(client)

    mcp = FastMCP(name, instructions=SERVER_INSTRUCTIONS)

    register_memory_tools(mcp, client, config.user_id)
    register_user_tools(mcp, config.user_id)

    @mcp.prompt(name="supermemory-prompt", description=PROMPT_DESCRIPTION)
    def supermemory_prompt() -> str:
        return SUPERMEMORY_PROMPT

    return mcp
