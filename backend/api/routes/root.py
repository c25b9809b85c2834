"""
Root and health check endpoints
"""

from fastapi import APIRouter, Request

from core.config import settings

router = APIRouter(tags=["root"])


@router.get("/")
async def root():
    """API root endpoint - returns API information"""
    return {
        "name": "Semantic Retrieval API",
        "version": "0.1.0",
        "docs": "/docs",
        "endpoints": {
            "retrieve": "/retrieve",
            "embed_query": "/embedding/embed_query",
            "health": "/health",
        }
    }


@router.get("/health")
async def health(request: Request):
    """Liveness check; reports which vector store backend is wired in"""
    return {
        "status": "ok",
        "vector_store": getattr(request.app.state, "vector_store_backend", settings.vector_store_backend),
    }
