"""
Embedding generation pipeline
"""

from domain.rag.embedding.client import GatewayEmbeddingClient
from domain.rag.embedding.dimensions import normalize_dimensions
from domain.rag.embedding.hash_embedding import hash_embed
from domain.rag.embedding.parser import extract_embedding
from domain.rag.embedding.types import EmbeddingResult

__all__ = [
    "GatewayEmbeddingClient",
    "EmbeddingResult",
    "extract_embedding",
    "hash_embed",
    "normalize_dimensions",
]
