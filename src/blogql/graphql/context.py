"""
Helpers for reading the shared GraphQL request context
"""

from typing import Any

import strawberry

from ..logging import get_logger
from ..store import InMemoryStore

logger = get_logger(__name__)


def build_context(store: InMemoryStore, **extra: Any) -> dict[str, Any]:
    """Build the context dict handed to every resolver."""
    return {"store": store, **extra}


def get_store_from_info(info: strawberry.Info) -> InMemoryStore:
    """
    Extract the store from the GraphQL info object.

    Raises RuntimeError when the context was built without one.
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Store not found in GraphQL context")
        raise RuntimeError("Store not configured for this request")
    return store
