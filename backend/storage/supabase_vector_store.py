"""
Vector store backed by a Supabase (PostgREST) similarity-search RPC over pgvector.
"""

import logging
from typing import List, Dict, Any, Optional

import httpx

from storage.base import BaseVectorStore
from core.config import settings
from core.exceptions import StorageError

logger = logging.getLogger(__name__)


class SupabaseVectorStore(BaseVectorStore):
    """
    Calls `POST {supabase_url}/rest/v1/rpc/{rpc_name}` and returns its rows.

    The RPC (match_documents by default) owns thresholding, scoping, ordering
    and the row limit; this class only moves parameters and rows across HTTP.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        service_key: Optional[str] = None,
        rpc_name: Optional[str] = None,
        scope_param: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = (url or settings.supabase_url).rstrip("/")
        self.service_key = service_key or settings.supabase_service_role_key
        self.rpc_name = rpc_name or settings.vector_store_rpc_name
        self.scope_param = scope_param or settings.vector_store_scope_param
        self.timeout = timeout or settings.vector_store_timeout
        self._transport = transport

        if not self.url or not self.service_key:
            raise StorageError("Supabase URL and service role key are required")

        self._client: Optional[httpx.AsyncClient] = None
        logger.info(f"Initialized SupabaseVectorStore with rpc: {self.rpc_name}")

    @property
    def rpc_url(self) -> str:
        return f"{self.url}/rest/v1/rpc/{self.rpc_name}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "apikey": self.service_key,
                    "Authorization": f"Bearer {self.service_key}",
                    "Content-Type": "application/json",
                }
            )
        return self._client

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """PostgREST puts the reason in a JSON `message` field."""
        try:
            body = response.json()
        except ValueError:
            return response.text[:200]
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.text[:200]

    async def match_documents(
        self,
        query_embedding: str,
        match_threshold: float,
        match_count: int,
        filter_scope_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        payload = {
            "query_embedding": query_embedding,
            "match_threshold": match_threshold,
            "match_count": match_count,
            self.scope_param: filter_scope_id,
        }

        client = await self._get_client()
        try:
            response = await client.post(self.rpc_url, json=payload)
        except httpx.TimeoutException:
            raise StorageError(f"Vector store timed out after {self.timeout}s")
        except httpx.HTTPError as e:
            raise StorageError(f"Vector store request failed: {type(e).__name__}")

        if response.is_error:
            raise StorageError(
                f"Vector store returned {response.status_code}: {self._error_message(response)}"
            )

        try:
            rows = response.json()
        except ValueError:
            raise StorageError("Vector store returned a non-JSON body")

        if rows is None:
            return []
        if not isinstance(rows, list):
            raise StorageError("Vector store returned an unexpected payload")
        return rows

    async def close(self) -> None:
        """Close HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None
