"""
Async chat-completion gateway client used to request semantic embeddings
"""

import logging
from typing import Dict, Any, Optional
import httpx
from core.config import settings
from core.exceptions import EmbeddingProviderError, ParseError

logger = logging.getLogger(__name__)


SYSTEM_PROMPT_TEMPLATE = (
    "You are a text embedding generator. Given text, output ONLY a JSON array of "
    "{dimensions} floating point numbers between -1 and 1 that represent the semantic "
    "meaning of the text. No explanation, just the array."
)


class GatewayEmbeddingClient:
    """Async client for a chat-completion endpoint asked to emit an embedding array"""

    def __init__(
        self,
        api_key: str = None,
        api_url: str = None,
        model: str = None,
        timeout: float = None,
        max_input_chars: int = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or settings.embedding_api_key
        self.api_url = api_url or settings.embedding_api_url
        self.model = model or settings.embedding_model
        self.timeout = timeout or settings.embedding_timeout
        self.max_input_chars = max_input_chars or settings.embedding_max_input_chars
        self._transport = transport

        # Connection pool
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                }
            )
        return self._client

    def _build_payload(self, text: str, dimensions: int) -> Dict[str, Any]:
        """Build the chat-completion request body."""
        return {
            "model": self.model,
            "messages": [
                {
                    "role": "system",
                    "content": SYSTEM_PROMPT_TEMPLATE.format(dimensions=dimensions),
                },
                {
                    "role": "user",
                    "content": text[:self.max_input_chars],
                },
            ],
            "temperature": 0,
        }

    @staticmethod
    def _extract_content(data: Any) -> str:
        """Pull the first choice's message text out of a completion response."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise ParseError("Completion response has no message content")
        if not isinstance(content, str):
            raise ParseError("Completion message content is not text")
        return content

    async def complete(self, text: str, dimensions: int) -> str:
        """
        Ask the provider for an embedding of text.

        Returns:
            The raw message content (free-form text expected to hold an array).

        Raises:
            EmbeddingProviderError: non-success status, transport failure or timeout.
            ParseError: response body is not a usable completion.
        """
        if not self.api_key:
            raise EmbeddingProviderError("Embedding API key not configured")

        client = await self._get_client()
        logger.debug(f"Requesting {dimensions}-dim embedding from {self.model}")
        try:
            response = await client.post(self.api_url, json=self._build_payload(text, dimensions))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise EmbeddingProviderError(f"Embedding provider error: {e.response.status_code}")
        except httpx.TimeoutException:
            raise EmbeddingProviderError(f"Embedding provider timed out after {self.timeout}s")
        except httpx.HTTPError as e:
            raise EmbeddingProviderError(f"Embedding provider request failed: {type(e).__name__}")

        try:
            data = response.json()
        except ValueError:
            raise ParseError("Completion response is not JSON")
        return self._extract_content(data)

    async def close(self):
        """Close HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None
