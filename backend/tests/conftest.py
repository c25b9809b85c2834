"""
Shared fixtures for the test suite
"""

from contextlib import asynccontextmanager

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.exceptions import EmbeddingProviderError, StorageError
from core.startup import initialize_retrieval_system, cleanup_retrieval_system
from fakes import DIMENSIONS, FakeEmbeddingClient, RecordingVectorStore


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        embedding_api_key="test-embedding-key",
        vector_store_backend="memory",
        embedding_dimensions=DIMENSIONS,
        default_top_k=5,
        max_top_k=20,
        default_threshold=0.7,
    )


@pytest.fixture
def failing_provider() -> FakeEmbeddingClient:
    return FakeEmbeddingClient(error=EmbeddingProviderError("Embedding provider error: 503"))


@pytest.fixture
def failing_store() -> RecordingVectorStore:
    return RecordingVectorStore(
        error=StorageError('Vector store returned 400: relation "document_chunks" does not exist')
    )


@pytest.fixture
def make_client(test_settings):
    """Factory: TestClient for an app wired with the given provider client and store."""
    from main import create_app

    clients = []

    def _make(embedding_client, vector_store) -> TestClient:
        @asynccontextmanager
        async def lifespan(app):
            await initialize_retrieval_system(
                app,
                config=test_settings,
                vector_store=vector_store,
                embedding_client=embedding_client,
            )
            try:
                yield
            finally:
                await cleanup_retrieval_system(app)

        client = TestClient(create_app(lifespan_handler=lifespan))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
