"""
Pydantic models for embedding endpoints
"""

from pydantic import BaseModel
from typing import List

from domain.rag.embedding.types import EmbeddingSource


class EmbedQueryResponse(BaseModel):
    """Response with query embedding"""
    query: str
    embedding: List[float]
    dimension: int
    source: EmbeddingSource
