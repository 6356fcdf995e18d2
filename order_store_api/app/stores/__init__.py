"""
Order storage backends.

Callers depend on ``OrderStore`` and its error classes only.
``build_order_store`` picks the backend named by the ``ORDER_STORE``
setting; the application calls it once and keeps the instance on
``app.state``.
"""

from __future__ import annotations

import logging

from order_store_api.app.core.config import Settings
from order_store_api.app.stores.base import (  # noqa: F401
    ItemIndexOutOfBounds,
    OrderNotFound,
    OrderStore,
    OrderStoreError,
    StoreUnavailable,
)
from order_store_api.app.stores.memory import InMemoryOrderStore


def build_order_store(settings: Settings) -> OrderStore:
    """Create the store configured in ``settings``.

    Raises
    ------
    ValueError
        If ``settings.order_store`` names an unknown backend.
    StoreUnavailable
        If the MongoDB URI cannot be used.
    """
    logger = logging.getLogger(__name__)
    backend = settings.order_store.strip().lower()
    if backend == "memory":
        logger.info("Using in-memory order store")
        return InMemoryOrderStore()
    if backend == "mongodb":
        # Imported lazily so the driver is only loaded when selected.
        from order_store_api.app.stores.mongodb import MongoOrderStore

        logger.info(
            "Using MongoDB order store %s.%s",
            settings.mongodb_database,
            settings.mongodb_collection,
        )
        return MongoOrderStore.from_uri(
            settings.mongodb_uri,
            database=settings.mongodb_database,
            collection=settings.mongodb_collection,
        )
    raise ValueError(f"Unknown ORDER_STORE backend: {settings.order_store!r}")
