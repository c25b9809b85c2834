"""
Similarity search client: formats a query vector and calls the vector store RPC
"""

import logging
from typing import List, Optional, Sequence

from domain.rag.retrieval.types import DocumentMatch
from storage.base import BaseVectorStore
from core.exceptions import SearchError, StorageError

logger = logging.getLogger(__name__)


def format_vector(vector: Sequence[float]) -> str:
    """Serialize a vector as the store's textual list format: [v0,v1,...,vN]"""
    return "[" + ",".join(repr(float(v)) for v in vector) + "]"


class SimilaritySearchClient:
    """Thresholded top-K search against a single vector store"""

    def __init__(self, vector_store: BaseVectorStore):
        self.vector_store = vector_store

    async def search(
        self,
        vector: Sequence[float],
        threshold: float,
        top_k: int,
        scope_id: Optional[str] = None,
    ) -> List[DocumentMatch]:
        """
        Run one similarity-search call. No retries.

        Args:
            vector: Normalized query embedding.
            threshold: Minimum similarity for a row to be included.
            top_k: Maximum number of rows.
            scope_id: Knowledge base to restrict the search to; None searches everything.

        Returns:
            Matches in the order the store returned them (descending similarity).

        Raises:
            SearchError: If the store call fails or returns unusable rows.
        """
        try:
            rows = await self.vector_store.match_documents(
                query_embedding=format_vector(vector),
                match_threshold=threshold,
                match_count=top_k,
                filter_scope_id=scope_id,
            )
        except StorageError as e:
            raise SearchError(f"Vector store search failed: {e}")
        except Exception as e:
            logger.error(f"Unexpected vector store error: {e}", exc_info=True)
            raise SearchError(f"Vector store search failed: {type(e).__name__}")

        try:
            matches = [DocumentMatch.from_row(row) for row in rows or []]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise SearchError(f"Vector store returned malformed rows: {e}")

        # Hold the threshold / top-K contract even if the store does not
        results = [m for m in matches if m.similarity_score >= threshold][:top_k]
        if len(results) != len(matches):
            logger.warning(
                f"Dropped {len(matches) - len(results)} rows outside threshold/top_k from vector store"
            )
        return results
