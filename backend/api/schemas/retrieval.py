"""
Pydantic models for retrieval endpoints
"""

from pydantic import BaseModel


class RetrievalErrorBody(BaseModel):
    """Structured error body returned on any failure"""
    kind: str
    message: str
