"""
App setup, middleware, lifespan
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from core.config import settings
from core.logging_utils import configure_logging
from core.startup import initialize_retrieval_system, cleanup_retrieval_system
from api.routes import root, retrieval, embedding

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic"""
    # Missing credentials raise ConfigurationError here and abort startup
    await initialize_retrieval_system(app)
    try:
        yield
    finally:
        await cleanup_retrieval_system(app)


def create_app(lifespan_handler=lifespan) -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(title="Semantic Retrieval API", lifespan=lifespan_handler)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allows all origins
        allow_methods=["*"],  # Allows all methods
        allow_headers=["*"],  # Allows all headers
    )

    # Include routes
    app.include_router(root.router)
    app.include_router(retrieval.router)
    app.include_router(embedding.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
