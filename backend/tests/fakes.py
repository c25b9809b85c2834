"""
Test doubles for the embedding provider and the vector store
"""

import json
from typing import Any, Dict, List, Optional

from storage.base import BaseVectorStore

DIMENSIONS = 1536


def padded(*head: float, dimensions: int = DIMENSIONS) -> List[float]:
    """Vector whose first components are `head` and the rest zeros."""
    return list(head) + [0.0] * (dimensions - len(head))


def completion_content(vector: List[float], prefix: str = "", suffix: str = "") -> str:
    return f"{prefix}{json.dumps(vector)}{suffix}"


class FakeEmbeddingClient:
    """Stands in for GatewayEmbeddingClient; returns canned content or raises."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    async def complete(self, text: str, dimensions: int) -> str:
        self.calls.append({"text": text, "dimensions": dimensions})
        if self.error:
            raise self.error
        return self.content

    async def close(self):
        self.closed = True


class RecordingVectorStore(BaseVectorStore):
    """Returns canned rows (or raises) and records every call."""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.rows = rows or []
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def match_documents(self, query_embedding, match_threshold, match_count, filter_scope_id=None):
        self.calls.append({
            "query_embedding": query_embedding,
            "match_threshold": match_threshold,
            "match_count": match_count,
            "filter_scope_id": filter_scope_id,
        })
        if self.error:
            raise self.error
        return self.rows
