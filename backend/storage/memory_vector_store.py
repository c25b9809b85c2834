"""
In-process vector store for local development and tests.
Mirrors the match_documents RPC semantics with numpy cosine similarity.
"""

import json
import logging
from typing import List, Dict, Any, Optional

from storage.base import BaseVectorStore
from domain.rag.retrieval.similarity import cosine_similarities
from core.exceptions import StorageError

logger = logging.getLogger(__name__)


class InMemoryVectorStore(BaseVectorStore):
    """
    Vector store holding records in a list.

    Each record is a dict with 'id', 'content', 'embedding' and optionally
    'scope_id', 'metadata', 'document_id', 'document_name', 'chunk_index'.
    """

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None):
        self.records: List[Dict[str, Any]] = []
        for record in records or []:
            self.add(record)
        logger.info(f"Initialized InMemoryVectorStore with {len(self.records)} records")

    def add(self, record: Dict[str, Any]) -> None:
        """Add a record to the store"""
        if "id" not in record or "embedding" not in record:
            raise StorageError("record must have 'id' and 'embedding' fields")
        self.records.append(record)

    @staticmethod
    def _parse_embedding(query_embedding: str) -> List[float]:
        try:
            vector = json.loads(query_embedding)
        except ValueError as e:
            raise StorageError(f"invalid input syntax for type vector: {e}")
        if not isinstance(vector, list):
            raise StorageError("invalid input syntax for type vector")
        return vector

    async def match_documents(
        self,
        query_embedding: str,
        match_threshold: float,
        match_count: int,
        filter_scope_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        query_vector = self._parse_embedding(query_embedding)

        candidates = [
            r for r in self.records
            if filter_scope_id is None or r.get("scope_id") == filter_scope_id
        ]
        for record in candidates:
            if len(record["embedding"]) != len(query_vector):
                raise StorageError(
                    f"different vector dimensions {len(record['embedding'])} and {len(query_vector)}"
                )

        scores = cosine_similarities(query_vector, [r["embedding"] for r in candidates])

        matches = []
        for record, score in zip(candidates, scores):
            if score >= match_threshold:
                matches.append({
                    "id": record["id"],
                    "content": record.get("content", ""),
                    "document_id": record.get("document_id"),
                    "document_name": record.get("document_name"),
                    "chunk_index": record.get("chunk_index"),
                    "similarity": float(score),
                    "metadata": record.get("metadata", {}),
                })

        # Sort by similarity (descending)
        matches.sort(key=lambda x: x["similarity"], reverse=True)
        return matches[:match_count]
