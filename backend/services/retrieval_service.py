"""
Retrieval service - orchestrates retrieval: validate → query embedding → similarity search
"""

import logging
from typing import Any, Dict, Optional
from domain.rag.retrieval.search_client import SimilaritySearchClient
from domain.rag.retrieval.types import RetrievalRequest, RetrievalResponse
from services.base import BaseService
from services.embedding_service import EmbeddingService
from core.config import settings
from core.exceptions import InvalidInput
from core.logging_utils import truncate_query

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class RetrievalService(BaseService):
    """
    Handles a retrieval request end to end.

    Embedding always completes (provider or fallback) before the single
    similarity search call. Nothing is kept between requests.
    """

    def __init__(
        self,
        embedding_service: EmbeddingService,
        search_client: SimilaritySearchClient,
        default_top_k: Optional[int] = None,
        max_top_k: Optional[int] = None,
        default_threshold: Optional[float] = None,
    ):
        self.embedding_service = embedding_service
        self.search_client = search_client
        self.default_top_k = default_top_k or settings.default_top_k
        self.max_top_k = max_top_k or settings.max_top_k
        self.default_threshold = (
            settings.default_threshold if default_threshold is None else default_threshold
        )

    def _parse_top_k(self, value: Any) -> int:
        if value is None:
            return self.default_top_k
        if not _is_number(value) or (isinstance(value, float) and not value.is_integer()):
            raise InvalidInput("topK must be an integer")
        top_k = int(value)
        if top_k < 1:
            raise InvalidInput("topK must be greater than 0")
        if top_k > self.max_top_k:
            logger.warning(f"topK {top_k} exceeds maximum, clamping to {self.max_top_k}")
            top_k = self.max_top_k
        return top_k

    def _parse_threshold(self, value: Any) -> float:
        if value is None:
            return self.default_threshold
        if not _is_number(value):
            raise InvalidInput("threshold must be a number")
        # NaN fails both comparisons
        if not 0.0 <= value <= 1.0:
            raise InvalidInput("threshold must be between 0 and 1")
        return float(value)

    @staticmethod
    def _parse_scope_id(payload: Dict[str, Any]) -> Optional[str]:
        scope_id = payload.get("knowledgeBaseId")
        if scope_id is None or scope_id == "":
            return None
        if not isinstance(scope_id, str):
            raise InvalidInput("knowledgeBaseId must be a string")
        return scope_id

    @staticmethod
    def parse_query(payload: Any) -> str:
        """Extract the required, non-empty `query` string from a JSON payload."""
        if not isinstance(payload, dict):
            raise InvalidInput("Request body must be a JSON object")

        query = payload.get("query")
        if not isinstance(query, str) or not query.strip():
            raise InvalidInput("query is required and must be a non-empty string")
        return query

    def parse_request(self, payload: Any) -> RetrievalRequest:
        """
        Validate a raw JSON payload and apply defaults.

        Raises:
            InvalidInput: If the payload shape is wrong. No I/O has happened yet.
        """
        return RetrievalRequest(
            query=self.parse_query(payload),
            top_k=self._parse_top_k(payload.get("topK")),
            threshold=self._parse_threshold(payload.get("threshold")),
            scope_id=self._parse_scope_id(payload),
        )

    async def retrieve(self, request: RetrievalRequest) -> RetrievalResponse:
        """
        Embed the query and run the similarity search.

        Returns:
            RetrievalResponse with at most top_k documents, all scoring >= threshold.

        Raises:
            SearchError: If the vector store call fails.
        """
        logger.info(
            "Retrieve documents request: "
            f"query='{truncate_query(request.query)}' topK={request.top_k} "
            f"threshold={request.threshold} scopeId={request.scope_id}"
        )

        embedding_result = await self.embedding_service.embed(request.query)
        logger.info(
            f"Generated {embedding_result.source} embedding with "
            f"{embedding_result.dimensions} dimensions"
        )

        documents = await self.search_client.search(
            vector=embedding_result.embedding,
            threshold=request.threshold,
            top_k=request.top_k,
            scope_id=request.scope_id,
        )
        logger.info(f"Found {len(documents)} matching documents")

        return RetrievalResponse(
            documents=documents,
            query=request.query,
            embedding_dimensions=embedding_result.dimensions,
        )
