"""
Unified configuration and settings
"""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

from core.exceptions import ConfigurationError

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values can be set via:
    1. Environment variables (highest priority)
    2. .env file (loaded by load_dotenv())
    3. Default values below (lowest priority)
    """

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"
    log_query_max_chars: int = 100  # Query prefix length written to logs

    # ------------------------
    # Embedding: chat-completion gateway
    # ------------------------

    embedding_api_key: str = ""
    embedding_api_url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    embedding_model: str = "google/gemini-2.5-flash"
    embedding_dimensions: int = 1536
    embedding_timeout: float = 30.0
    embedding_max_input_chars: int = 1000

    # ------------------------
    # Vector Store
    # ------------------------

    vector_store_backend: str = "supabase"  # Options: "supabase", "memory"
    vector_store_rpc_name: str = "match_documents"
    vector_store_scope_param: str = "filter_scope_id"
    vector_store_timeout: float = 30.0

    # Prod: Supabase (PostgREST RPC over pgvector)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # ------------------------
    # Retrieval Parameters
    # ------------------------

    default_top_k: int = 5
    max_top_k: int = 100
    default_threshold: float = 0.7

    class Config:
        """
        Pydantic configuration for settings loading.

        - env_file: Which .env file to read
        - env_file_encoding: File encoding
        - extra: What to do with extra fields in .env that aren't in this class
        """
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def validate_settings(config: Settings) -> None:
    """
    Check that every required credential is present.

    Raises:
        ConfigurationError: listing all missing values at once.
    """
    missing = []
    if not config.embedding_api_key:
        missing.append("EMBEDDING_API_KEY")

    if config.vector_store_backend == "supabase":
        if not config.supabase_url:
            missing.append("SUPABASE_URL")
        if not config.supabase_service_role_key:
            missing.append("SUPABASE_SERVICE_ROLE_KEY")
    elif config.vector_store_backend != "memory":
        raise ConfigurationError(
            f"Unsupported vector store backend: {config.vector_store_backend}. "
            f"Supported: supabase, memory"
        )

    if missing:
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")


# Singleton settings instance
settings = Settings()
