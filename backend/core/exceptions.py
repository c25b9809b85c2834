"""
Custom exception hierarchy for the application
"""


class RAGException(Exception):
    """Base exception for RAG-related errors"""
    kind = "InternalError"
    status_code = 500


class InvalidInput(RAGException):
    """Request payload has the wrong shape (user-correctable)"""
    kind = "InvalidInput"
    status_code = 400


class ConfigurationError(RAGException):
    """Required configuration value is missing or invalid"""
    kind = "ConfigurationError"


class EmbeddingError(RAGException):
    """Error during embedding generation"""
    kind = "EmbeddingError"


class EmbeddingProviderError(EmbeddingError):
    """Embedding provider call failed (status, transport or timeout)"""
    kind = "EmbeddingProviderError"


class ParseError(EmbeddingError):
    """Provider output did not contain a usable numeric array"""
    kind = "ParseError"


class StorageError(RAGException):
    """Error during vector store operations"""
    kind = "StorageError"


class RetrievalError(RAGException):
    """Error during retrieval operations"""
    kind = "RetrievalError"


class SearchError(RetrievalError):
    """Similarity search against the vector store failed"""
    kind = "SearchError"
