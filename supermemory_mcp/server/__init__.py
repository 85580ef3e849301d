"""MCP Server package for Supermemory.

Provides memory tools (addMemory, search), user tools (getProjects, whoAmI)
and the supermemory-prompt prompt.
"""

from .core import create_supermemory_server
from .instructions import SERVER_INSTRUCTIONS, SUPERMEMORY_PROMPT

__all__ = [
    "create_supermemory_server",
    "SERVER_INSTRUCTIONS",
    "SUPERMEMORY_PROMPT",
]
