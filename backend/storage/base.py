"""
Abstract base classes for storage
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional


class BaseVectorStore(ABC):
    """
    Abstract base class for vector stores exposing a similarity-search RPC.

    The query embedding is passed in its textual bracketed-list form
    ("[0.1,0.2,...]") so every backend sees the same wire format.
    """

    @abstractmethod
    async def match_documents(
        self,
        query_embedding: str,
        match_threshold: float,
        match_count: int,
        filter_scope_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Run a thresholded top-K similarity search.

        Returns:
            Rows ordered by descending similarity, each with at least
            'id', 'content', 'similarity' and 'metadata'.

        Raises:
            StorageError: If the store call fails.
        """
        pass

    async def close(self) -> None:
        """Release any connections held by the store"""
        pass
