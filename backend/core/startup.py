"""
Application startup and initialization logic
"""

import logging
from typing import Optional
from fastapi import FastAPI

from core.config import Settings, settings as default_settings, validate_settings
from storage import BaseVectorStore, InMemoryVectorStore, SupabaseVectorStore
from domain.rag.embedding.client import GatewayEmbeddingClient
from domain.rag.retrieval.search_client import SimilaritySearchClient
from services.embedding_service import EmbeddingService
from services.retrieval_service import RetrievalService

logger = logging.getLogger(__name__)


def create_vector_store(config: Settings) -> BaseVectorStore:
    """Instantiate the configured vector store backend."""
    if config.vector_store_backend == "memory":
        return InMemoryVectorStore()
    return SupabaseVectorStore(
        url=config.supabase_url,
        service_key=config.supabase_service_role_key,
        rpc_name=config.vector_store_rpc_name,
        scope_param=config.vector_store_scope_param,
        timeout=config.vector_store_timeout,
    )


async def initialize_retrieval_system(
    app: FastAPI,
    config: Optional[Settings] = None,
    vector_store: Optional[BaseVectorStore] = None,
    embedding_client: Optional[GatewayEmbeddingClient] = None,
):
    """
    Validate configuration and wire stores, clients and services into app.state.

    Raises:
        ConfigurationError: If a required credential is missing.
    """
    config = config or default_settings
    validate_settings(config)

    vector_store = vector_store or create_vector_store(config)
    embedding_client = embedding_client or GatewayEmbeddingClient(
        api_key=config.embedding_api_key,
        api_url=config.embedding_api_url,
        model=config.embedding_model,
        timeout=config.embedding_timeout,
        max_input_chars=config.embedding_max_input_chars,
    )

    embedding_service = EmbeddingService(
        embedding_client=embedding_client,
        dimensions=config.embedding_dimensions,
    )
    retrieval_service = RetrievalService(
        embedding_service=embedding_service,
        search_client=SimilaritySearchClient(vector_store),
        default_top_k=config.default_top_k,
        max_top_k=config.max_top_k,
        default_threshold=config.default_threshold,
    )

    app.state.vector_store = vector_store
    app.state.vector_store_backend = config.vector_store_backend
    app.state.embedding_service = embedding_service
    app.state.retrieval_service = retrieval_service
    logger.info(
        f"Retrieval system initialized (backend: {config.vector_store_backend}, "
        f"dimensions: {config.embedding_dimensions})"
    )


async def cleanup_retrieval_system(app: FastAPI):
    """Cleanup retrieval system resources (HTTP connections)."""
    if hasattr(app.state, 'embedding_service') and app.state.embedding_service:
        try:
            await app.state.embedding_service.close()
            logger.info("Embedding service cleaned up")
        except Exception as e:
            logger.error(f"Error during embedding service cleanup: {e}", exc_info=True)

    if hasattr(app.state, 'vector_store') and app.state.vector_store:
        try:
            await app.state.vector_store.close()
            logger.info("Vector store cleaned up")
        except Exception as e:
            logger.error(f"Error during vector store cleanup: {e}", exc_info=True)
