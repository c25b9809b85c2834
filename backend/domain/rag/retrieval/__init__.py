"""
Retrieval pipeline
"""

from domain.rag.retrieval.similarity import cosine_similarities
from domain.rag.retrieval.types import DocumentMatch, RetrievalRequest, RetrievalResponse
from domain.rag.retrieval.search_client import SimilaritySearchClient, format_vector

__all__ = [
    "DocumentMatch",
    "RetrievalRequest",
    "RetrievalResponse",
    "SimilaritySearchClient",
    "cosine_similarities",
    "format_vector",
]
