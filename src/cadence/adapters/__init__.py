"""Adapters - I/O implementations of ports."""

from .file_store import JsonFileStore, StoreError
from .file_rotation import FileRotationStore
from .supabase_api import SupabaseAdapter, AuthenticationError, BackendError

__all__ = [
    "JsonFileStore",
    "StoreError",
    "FileRotationStore",
    "SupabaseAdapter",
    "AuthenticationError",
    "BackendError",
]
