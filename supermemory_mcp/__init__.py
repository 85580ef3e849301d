"""Supermemory MCP - user memory tools backed by the Supermemory API."""

from supermemory_mcp.client import SupermemoryAPIError, SupermemoryClient
from supermemory_mcp.config import ConfigError, SupermemoryConfig, load_config
from supermemory_mcp.models import (
    MemoryAddResult,
    MemoryList,
    MemoryRecord,
    SearchChunk,
    SearchResponse,
    SearchResult,
)
from supermemory_mcp.server import create_supermemory_server

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "MemoryAddResult",
    "MemoryList",
    "MemoryRecord",
    "SearchChunk",
    "SearchResponse",
    "SearchResult",
    "SupermemoryAPIError",
    "SupermemoryClient",
    "SupermemoryConfig",
    "create_supermemory_server",
    "load_config",
]
