"""
Read-only conference data store
"""

from .loader import build_store, find_dangling_references, load_store
from .store import DataStore, StoreHolder

__all__ = ["DataStore", "StoreHolder", "build_store", "find_dangling_references", "load_store"]
