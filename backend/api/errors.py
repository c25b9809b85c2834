"""
Conversion of exceptions into structured JSON error responses
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from api.schemas.retrieval import RetrievalErrorBody
from core.exceptions import InvalidInput, RAGException, SearchError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def error_response(error: Exception) -> JSONResponse:
    """
    Build the `{kind, message}` body for an exception.

    Only InvalidInput keeps its own message; server-side failures get a
    summarized message so store or provider internals never reach the client.
    """
    if isinstance(error, InvalidInput):
        body = RetrievalErrorBody(kind=error.kind, message=str(error))
    elif isinstance(error, SearchError):
        body = RetrievalErrorBody(kind=error.kind, message="Similarity search failed")
    elif isinstance(error, RAGException):
        body = RetrievalErrorBody(kind=error.kind, message="Retrieval failed")
    else:
        body = RetrievalErrorBody(kind="InternalError", message="Unexpected server error")

    status_code = getattr(error, "status_code", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=CORS_HEADERS)


async def read_json_payload(request: Request) -> Any:
    """Decode the request body as JSON, rejecting anything unreadable as InvalidInput."""
    try:
        return await request.json()
    except ValueError:
        raise InvalidInput("Request body must be valid JSON")
