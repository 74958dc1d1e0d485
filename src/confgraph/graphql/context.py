"""
GraphQL execution context helpers
"""

from typing import Any

import strawberry

from ..store import DataStore


def build_context(store: DataStore, **extra: Any) -> dict[str, Any]:
    """Build the context passed to every resolver of one execution."""
    return {"store": store, **extra}


def get_store(info: strawberry.Info) -> DataStore:
    """Get the store snapshot captured for the current execution."""
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if store is None:
        raise RuntimeError("No data store in GraphQL context")
    return store
