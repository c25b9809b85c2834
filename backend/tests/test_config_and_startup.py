import pytest
from fastapi import FastAPI

from core.config import Settings, validate_settings
from core.exceptions import ConfigurationError
from core.logging_utils import truncate_query
from core.startup import create_vector_store, initialize_retrieval_system
from storage.memory_vector_store import InMemoryVectorStore
from storage.supabase_vector_store import SupabaseVectorStore


def test_missing_credentials_are_all_reported():
    config = Settings(embedding_api_key="", supabase_url="", supabase_service_role_key="",
                      vector_store_backend="supabase")
    with pytest.raises(ConfigurationError) as exc_info:
        validate_settings(config)
    message = str(exc_info.value)
    assert "EMBEDDING_API_KEY" in message
    assert "SUPABASE_URL" in message
    assert "SUPABASE_SERVICE_ROLE_KEY" in message


def test_complete_supabase_configuration_passes():
    validate_settings(Settings(
        embedding_api_key="key", supabase_url="https://x.supabase.test", supabase_service_role_key="secret",
        vector_store_backend="supabase",
    ))


def test_memory_backend_only_needs_embedding_key():
    validate_settings(Settings(embedding_api_key="key", vector_store_backend="memory",
                               supabase_url="", supabase_service_role_key=""))


def test_unknown_backend_rejected():
    with pytest.raises(ConfigurationError):
        validate_settings(Settings(embedding_api_key="key", vector_store_backend="faiss"))


def test_create_vector_store_picks_backend():
    memory = create_vector_store(Settings(vector_store_backend="memory"))
    supabase = create_vector_store(Settings(
        vector_store_backend="supabase", supabase_url="https://x.supabase.test",
        supabase_service_role_key="secret",
    ))
    assert isinstance(memory, InMemoryVectorStore)
    assert isinstance(supabase, SupabaseVectorStore)


@pytest.mark.asyncio
async def test_startup_fails_fast_without_credentials():
    app = FastAPI()
    with pytest.raises(ConfigurationError):
        await initialize_retrieval_system(app, config=Settings(embedding_api_key="", vector_store_backend="memory"))
    assert not hasattr(app.state, "retrieval_service")


def test_truncate_query():
    assert truncate_query("short", max_chars=10) == "short"
    assert truncate_query("x" * 150, max_chars=100) == "x" * 100 + "..."
    assert truncate_query(None) == ""
