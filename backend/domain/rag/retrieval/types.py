"""
Retrieval data types
"""

from typing import Dict, Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class DocumentMatch(BaseModel):
    """
    Single document chunk returned by a similarity search.

    Serialized with camelCase keys (similarityScore, documentId, ...) to
    match the public response envelope.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    content: str = ""
    similarity_score: float = Field(alias="similarityScore")
    metadata: Dict[str, Any] = Field(default_factory=dict)
    document_id: Optional[str] = Field(default=None, alias="documentId")
    document_name: Optional[str] = Field(default=None, alias="documentName")
    chunk_index: Optional[int] = Field(default=None, alias="chunkIndex")

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "DocumentMatch":
        """Build from a vector store row (`similarity` or `similarityScore` key)."""
        score = row.get("similarity", row.get("similarityScore"))
        return cls(
            id=str(row["id"]),
            content=row.get("content") or "",
            similarity_score=score,
            metadata=row.get("metadata") or {},
            document_id=row.get("document_id"),
            document_name=row.get("document_name"),
            chunk_index=row.get("chunk_index"),
        )


class RetrievalRequest(BaseModel):
    """Validated retrieval request. Immutable once built."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str
    top_k: int = Field(alias="topK")
    threshold: float
    scope_id: Optional[str] = Field(default=None, alias="knowledgeBaseId")


class RetrievalResponse(BaseModel):
    """Documents matching a query, plus the echoed query"""
    model_config = ConfigDict(populate_by_name=True)

    documents: List[DocumentMatch]
    query: str
    embedding_dimensions: int = Field(alias="embeddingDimensions")
