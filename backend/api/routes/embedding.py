"""
Embedding endpoints
"""

import logging
from fastapi import APIRouter, Depends, Request

from api.dependencies import get_embedding_service
from api.errors import error_response, read_json_payload
from api.schemas.embedding import EmbedQueryResponse
from services.embedding_service import EmbeddingService
from services.retrieval_service import RetrievalService
from core.exceptions import InvalidInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/embedding", tags=["embedding"])


@router.post("/embed_query", response_model=EmbedQueryResponse)
async def embed_query(
    request: Request,
    embedding_service: EmbeddingService = Depends(get_embedding_service)
):
    """
    Embed a query with the same provider/fallback path used by /retrieve.

    Returns the normalized vector, its dimension, and whether the provider
    or the hash fallback produced it.
    """
    try:
        payload = await read_json_payload(request)
        query = RetrievalService.parse_query(payload)
        result = await embedding_service.embed(query)
        return EmbedQueryResponse(
            query=query,
            embedding=result.embedding,
            dimension=result.dimensions,
            source=result.source,
        )
    except InvalidInput as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Unexpected error embedding query: {e}", exc_info=True)
        return error_response(e)
