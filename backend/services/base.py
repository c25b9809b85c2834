"""
Base service class
"""

from abc import ABC


class BaseService(ABC):
    """
    Base class for all services.

    Services orchestrate business logic between the API routes and the
    domain/storage layers.
    """
    pass
