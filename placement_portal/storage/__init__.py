"""
Storage module - repository interface and its backends.

Usage:
    storage = get_storage()
    job = storage.get_job(job_id)
"""

from functools import lru_cache

from placement_portal.core.config import get_settings
from placement_portal.db.postgres import get_engine
from placement_portal.storage.base import PortalStorage
from placement_portal.storage.memory import MemoryStorage
from placement_portal.storage.sql import SqlStorage

__all__ = ["PortalStorage", "MemoryStorage", "SqlStorage", "get_storage"]


@lru_cache()
def get_storage() -> PortalStorage:
    """
    Get the configured storage backend (singleton).
    Also used as a FastAPI dependency, so tests can override it.
    """
    backend = get_settings().storage_backend.lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "sql":
        return SqlStorage(get_engine())
    raise ValueError(f"Unknown storage backend '{backend}'. Use 'sql' or 'memory'.")
