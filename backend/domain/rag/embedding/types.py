"""
Embedding data types
"""

from typing import List, Literal
from pydantic import BaseModel

EmbeddingSource = Literal["provider", "fallback"]


class EmbeddingResult(BaseModel):
    """Normalized query embedding and where it came from"""
    embedding: List[float]
    source: EmbeddingSource

    @property
    def dimensions(self) -> int:
        return len(self.embedding)
