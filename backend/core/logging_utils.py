"""
Logging helpers
"""

import logging
from typing import Optional

from core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def truncate_query(query: Optional[str], max_chars: Optional[int] = None) -> str:
    """Return a log-safe prefix of the query text."""
    if not query:
        return ""
    max_chars = settings.log_query_max_chars if max_chars is None else max_chars
    if len(query) <= max_chars:
        return query
    return query[:max_chars] + "..."
