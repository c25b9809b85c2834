"""
FastAPI dependencies
"""

from fastapi import Request
from services.embedding_service import EmbeddingService
from services.retrieval_service import RetrievalService


def get_embedding_service(request: Request) -> EmbeddingService:
    return request.app.state.embedding_service


def get_retrieval_service(request: Request) -> RetrievalService:
    return request.app.state.retrieval_service
