"""Tests for supermemory_mcp data models."""

from supermemory_mcp.models import MemoryList, SearchResponse


class TestMemoryList:
    def test_count_prefers_total_items(self):
        memories = MemoryList.model_validate(
            {
                "memories": [{"id": "a"}, {"id": "b"}],
                "pagination": {"currentPage": 1, "limit": 2, "totalItems": 40},
            }
        )
        assert memories.count == 40

    def test_count_falls_back_to_records(self):
        memories = MemoryList.model_validate({"memories": [{"id": "a"}, {"id": "b"}]})
        assert memories.count == 2

    def test_count_with_pagination_but_no_total(self):
        memories = MemoryList.model_validate(
            {"memories": [{"id": "a"}], "pagination": {"currentPage": 1}}
        )
        assert memories.count == 1

    def test_container_tags_alias(self):
        memories = MemoryList.model_validate(
            {"memories": [{"id": "a", "containerTags": ["u", "p"]}]}
        )
        assert memories.memories[0].container_tags == ["u", "p"]

    def test_empty_body(self):
        assert MemoryList.model_validate({}).count == 0


class TestSearchResponse:
    def test_unknown_fields_ignored(self):
        response = SearchResponse.model_validate(
            {
                "results": [
                    {
                        "documentId": "d1",
                        "metadata": {"source": "chat"},
                        "chunks": [{"content": "uses vim", "position": 3}],
                    }
                ],
                "total": 1,
            }
        )
        assert response.results[0].document_id == "d1"
        assert response.results[0].chunks[0].content == "uses vim"

    def test_missing_chunks(self):
        response = SearchResponse.model_validate({"results": [{"documentId": "d1"}]})
        assert response.results[0].chunks == []
