import json

import httpx
import pytest

from core.exceptions import StorageError
from domain.rag.retrieval.search_client import format_vector
from storage.memory_vector_store import InMemoryVectorStore
from storage.supabase_vector_store import SupabaseVectorStore


def _memory_store():
    return InMemoryVectorStore(records=[
        {"id": "exact", "content": "exact", "embedding": [1.0, 0.0, 0.0], "scope_id": "kb-1"},
        {"id": "close", "content": "close", "embedding": [0.9, 0.43589, 0.0], "scope_id": "kb-2"},
        {"id": "medium", "content": "medium", "embedding": [0.8, 0.6, 0.0], "scope_id": "kb-1"},
        {"id": "far", "content": "far", "embedding": [0.0, 0.0, 1.0], "scope_id": "kb-1"},
        {"id": "zero", "content": "zero", "embedding": [0.0, 0.0, 0.0]},
    ])


class TestInMemoryVectorStore:

    @pytest.mark.asyncio
    async def test_orders_by_similarity_and_applies_threshold(self):
        rows = await _memory_store().match_documents(format_vector([1.0, 0.0, 0.0]), 0.7, 10)
        assert [r["id"] for r in rows] == ["exact", "close", "medium"]
        assert rows[0]["similarity"] == pytest.approx(1.0)
        assert all(r["similarity"] >= 0.7 for r in rows)

    @pytest.mark.asyncio
    async def test_limits_to_match_count(self):
        rows = await _memory_store().match_documents(format_vector([1.0, 0.0, 0.0]), 0.0, 2)
        assert [r["id"] for r in rows] == ["exact", "close"]

    @pytest.mark.asyncio
    async def test_scope_filter(self):
        rows = await _memory_store().match_documents(format_vector([1.0, 0.0, 0.0]), 0.5, 10, "kb-1")
        assert [r["id"] for r in rows] == ["exact", "medium"]

    @pytest.mark.asyncio
    async def test_zero_query_vector_matches_nothing_above_zero(self):
        rows = await _memory_store().match_documents(format_vector([0.0, 0.0, 0.0]), 0.1, 10)
        assert rows == []

    @pytest.mark.asyncio
    async def test_dimension_mismatch_raises_storage_error(self):
        with pytest.raises(StorageError):
            await _memory_store().match_documents(format_vector([1.0, 0.0]), 0.5, 10)

    @pytest.mark.asyncio
    async def test_invalid_vector_text_raises_storage_error(self):
        with pytest.raises(StorageError):
            await _memory_store().match_documents("not a vector", 0.5, 10)

    def test_records_need_id_and_embedding(self):
        with pytest.raises(StorageError):
            InMemoryVectorStore(records=[{"content": "missing"}])


def _supabase_store(handler, **kwargs):
    return SupabaseVectorStore(
        url="https://project.supabase.test/",
        service_key="service-role-secret",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestSupabaseVectorStore:

    @pytest.mark.asyncio
    async def test_posts_rpc_payload(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=[{"id": "1", "content": "c", "similarity": 0.9, "metadata": {}}])

        store = _supabase_store(handler)
        rows = await store.match_documents("[0.1,0.2]", 0.7, 3, "kb-1")
        await store.close()

        assert rows == [{"id": "1", "content": "c", "similarity": 0.9, "metadata": {}}]
        assert seen["url"] == "https://project.supabase.test/rest/v1/rpc/match_documents"
        assert seen["headers"]["apikey"] == "service-role-secret"
        assert seen["headers"]["Authorization"] == "Bearer service-role-secret"
        assert seen["body"] == {
            "query_embedding": "[0.1,0.2]",
            "match_threshold": 0.7,
            "match_count": 3,
            "filter_scope_id": "kb-1",
        }

    @pytest.mark.asyncio
    async def test_scope_param_name_is_configurable(self):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=[])

        store = _supabase_store(handler, scope_param="filter_knowledge_base_id")
        await store.match_documents("[0.1]", 0.3, 5, None)
        assert seen["body"]["filter_knowledge_base_id"] is None
        assert "filter_scope_id" not in seen["body"]

    @pytest.mark.asyncio
    async def test_error_status_raises_with_postgrest_message(self):
        store = _supabase_store(
            lambda request: httpx.Response(400, json={"code": "22000", "message": "different vector dimensions"})
        )
        with pytest.raises(StorageError, match="different vector dimensions"):
            await store.match_documents("[0.1]", 0.7, 5)

    @pytest.mark.asyncio
    async def test_timeout_raises_storage_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(StorageError):
            await _supabase_store(handler).match_documents("[0.1]", 0.7, 5)

    @pytest.mark.asyncio
    async def test_null_body_means_no_rows(self):
        store = _supabase_store(lambda request: httpx.Response(200, content=b"null"))
        assert await store.match_documents("[0.1]", 0.7, 5) == []

    @pytest.mark.asyncio
    async def test_unexpected_payload_raises_storage_error(self):
        store = _supabase_store(lambda request: httpx.Response(200, json={"rows": []}))
        with pytest.raises(StorageError):
            await store.match_documents("[0.1]", 0.7, 5)

    def test_missing_credentials_rejected(self, monkeypatch):
        from core.config import settings

        monkeypatch.setattr(settings, "supabase_url", "")
        monkeypatch.setattr(settings, "supabase_service_role_key", "")
        with pytest.raises(StorageError):
            SupabaseVectorStore()
