"""
Service layer (business logic orchestration)
"""

from services.base import BaseService
from services.embedding_service import EmbeddingService
from services.retrieval_service import RetrievalService

__all__ = [
    "BaseService",
    "EmbeddingService",
    "RetrievalService",
]
