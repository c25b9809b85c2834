"""
Embedding service - orchestrates query embedding generation
Primary path: chat-completion provider. Fallback: deterministic hash embedding.
"""

import logging
from typing import Optional
from domain.rag.embedding.client import GatewayEmbeddingClient
from domain.rag.embedding.dimensions import normalize_dimensions
from domain.rag.embedding.hash_embedding import hash_embed
from domain.rag.embedding.parser import extract_embedding
from domain.rag.embedding.types import EmbeddingResult
from services.base import BaseService
from core.config import settings
from core.exceptions import EmbeddingError
from core.logging_utils import truncate_query

logger = logging.getLogger(__name__)


class EmbeddingService(BaseService):
    """
    Produces fixed-width query embeddings.

    Provider failures (bad status, transport error, timeout), unparseable
    provider output and any other error on the provider path never reach the
    caller: they fall back to hash_embed on the original text. Every result
    is padded/truncated to `dimensions`.
    """

    def __init__(
        self,
        embedding_client: Optional[GatewayEmbeddingClient] = None,
        dimensions: Optional[int] = None,
    ):
        self.embedding_client = embedding_client or GatewayEmbeddingClient()
        self.dimensions = dimensions or settings.embedding_dimensions

    def embed_fallback(self, text: str) -> EmbeddingResult:
        """Deterministic local embedding, no I/O."""
        embedding = normalize_dimensions(hash_embed(text, self.dimensions), self.dimensions)
        return EmbeddingResult(embedding=embedding, source="fallback")

    async def embed(self, text: str) -> EmbeddingResult:
        """
        Generate an embedding for text.

        Args:
            text: Query text.

        Returns:
            EmbeddingResult with exactly `dimensions` components; `source`
            records whether the provider or the fallback produced it.
        """
        try:
            content = await self.embedding_client.complete(text, self.dimensions)
            vector = extract_embedding(content)
        except EmbeddingError as e:
            logger.warning(
                f"{e.kind} for query '{truncate_query(text)}', using hash fallback: {e}"
            )
            return self.embed_fallback(text)
        except Exception as e:
            logger.warning(
                f"Unexpected embedding error for query '{truncate_query(text)}', using hash fallback: {e}",
                exc_info=True,
            )
            return self.embed_fallback(text)

        if len(vector) != self.dimensions:
            logger.info(f"Provider returned {len(vector)} dimensions, normalizing to {self.dimensions}")

        return EmbeddingResult(
            embedding=normalize_dimensions(vector, self.dimensions),
            source="provider",
        )

    async def close(self):
        """Close embedding client"""
        if self.embedding_client:
            await self.embedding_client.close()
