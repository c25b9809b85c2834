"""
Retrieval endpoints
"""

import logging
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from api.dependencies import get_retrieval_service
from api.errors import CORS_HEADERS, error_response, read_json_payload
from services.retrieval_service import RetrievalService
from core.exceptions import InvalidInput, RAGException
from core.logging_utils import truncate_query

logger = logging.getLogger(__name__)

router = APIRouter(tags=["retrieval"])


@router.options("/retrieve")
async def retrieve_preflight():
    """CORS preflight: empty body, permissive headers."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post("/retrieve")
async def retrieve_documents(
    request: Request,
    retrieval_service: RetrievalService = Depends(get_retrieval_service)
):
    """
    Retrieve the documents most similar to a natural-language query.

    Body:
        query: str - Required, non-empty
        topK: int - Maximum number of documents (default 5)
        threshold: float - Minimum similarity in [0, 1] (default 0.7)
        knowledgeBaseId: str - Optional knowledge base to search within

    Returns:
        200 with {documents, query, embeddingDimensions}
        400 with {kind: "InvalidInput", message} for a malformed request
        500 with {kind, message} for any unrecovered failure
    """
    query = None
    try:
        payload = await read_json_payload(request)
        retrieval_request = retrieval_service.parse_request(payload)
        query = retrieval_request.query

        result = await retrieval_service.retrieve(retrieval_request)
        return JSONResponse(content=result.model_dump(by_alias=True), headers=CORS_HEADERS)
    except InvalidInput as e:
        logger.info(f"Rejected retrieval request: {e}")
        return error_response(e)
    except RAGException as e:
        logger.error(f"{e.kind} for query '{truncate_query(query)}': {e}")
        return error_response(e)
    except Exception as e:
        logger.error(f"Unexpected error for query '{truncate_query(query)}': {e}", exc_info=True)
        return error_response(e)
