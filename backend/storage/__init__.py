"""
Vector storage layer
"""

from storage.base import BaseVectorStore
from storage.memory_vector_store import InMemoryVectorStore
from storage.supabase_vector_store import SupabaseVectorStore

__all__ = [
    "BaseVectorStore",
    "InMemoryVectorStore",
    "SupabaseVectorStore",
]
