"""Data models for the Supermemory API.

These mirror the JSON bodies of the hosted API. Unknown fields are ignored so
that additions on the server side don't break parsing.
"""

from pydantic import BaseModel, ConfigDict, Field


class _APIModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MemoryRecord(_APIModel):
    """A stored memory as returned by the list endpoint."""

    id: str | None = None
    content: str | None = None
    container_tags: list[str] = Field(default_factory=list, alias="containerTags")
    status: str | None = None


class Pagination(_APIModel):
    current_page: int | None = Field(default=None, alias="currentPage")
    limit: int | None = None
    total_items: int | None = Field(default=None, alias="totalItems")
    total_pages: int | None = Field(default=None, alias="totalPages")


class MemoryList(_APIModel):
    """One page of memories for a set of container tags."""

    memories: list[MemoryRecord] = Field(default_factory=list)
    pagination: Pagination | None = None

    @property
    def count(self) -> int:
        """Total number of memories in scope.

        Prefers the server-reported total, since the page itself is limited.
        """
        if self.pagination and self.pagination.total_items is not None:
            return self.pagination.total_items
        return len(self.memories)


class MemoryAddResult(_APIModel):
    id: str | None = None
    status: str | None = None


class SearchChunk(_APIModel):
    content: str = ""
    score: float | None = None
    is_relevant: bool | None = Field(default=None, alias="isRelevant")


class SearchResult(_APIModel):
    """A single search match made of one or more chunks."""

    document_id: str | None = Field(default=None, alias="documentId")
    title: str | None = None
    score: float | None = None
    chunks: list[SearchChunk] = Field(default_factory=list)


class SearchResponse(_APIModel):
    results: list[SearchResult] = Field(default_factory=list)
    total: int | None = None
    timing: float | None = None
