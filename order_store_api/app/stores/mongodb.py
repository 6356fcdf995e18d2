"""
MongoDB‑backed order store.

Each order is one document in a collection::

    {
        "_id": UUID,            # order id
        "user_id": UUID,
        "items": [{"product_id": UUID, "quantity": int}, ...],
        "created_at": datetime,
    }

UUIDs are stored with the standard binary representation, so the
client must be created with ``uuidRepresentation="standard"``;
``MongoOrderStore.from_uri`` does that.  Every mutation is a single
``update_one`` so concurrent writers to the same order cannot lose
each other's items.  Any driver error is reported as
``StoreUnavailable``; the store does not retry.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from order_store_api.app.schemas.order import Item, Order
from order_store_api.app.stores.base import (
    ItemIndexOutOfBounds,
    OrderNotFound,
    OrderStore,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)

LIST_SORT = [("created_at", ASCENDING), ("_id", ASCENDING)]


@contextmanager
def _driver_errors(operation: str) -> Iterator[None]:
    """Translate driver failures into ``StoreUnavailable``."""
    try:
        yield
    except PyMongoError as exc:
        logger.error("MongoDB %s failed: %s", operation, exc)
        raise StoreUnavailable(str(exc)) from exc


def _document_to_order(document: Dict[str, Any]) -> Order:
    return Order(
        id=document["_id"],
        user_id=document["user_id"],
        items=[
            Item(product_id=item["product_id"], quantity=item["quantity"])
            for item in document.get("items", [])
        ],
    )


class MongoOrderStore(OrderStore):
    """Order store persisting orders in a MongoDB collection."""

    def __init__(self, collection: AsyncCollection, client: Optional[AsyncMongoClient] = None) -> None:
        """Wrap an existing collection.

        Parameters
        ----------
        collection : AsyncCollection
            Collection holding order documents.  Its client must use the
            standard UUID representation.
        client : Optional[AsyncMongoClient]
            Client owning ``collection``.  When given, ``close`` closes
            it; leave it out when the caller manages the client.
        """
        self._collection = collection
        self._client = client

    @classmethod
    def from_uri(
        cls,
        uri: str,
        database: str = "orders",
        collection: str = "orders",
        server_selection_timeout_ms: int = 5000,
    ) -> "MongoOrderStore":
        """Create a store with its own client connected to ``uri``.

        The driver connects lazily, so an unreachable server only shows
        up on the first operation (or on ``ping``).  A malformed URI is
        reported immediately as ``StoreUnavailable``.
        """
        try:
            client: AsyncMongoClient = AsyncMongoClient(
                uri,
                uuidRepresentation="standard",
                tz_aware=True,
                serverSelectionTimeoutMS=server_selection_timeout_ms,
            )
        except (PyMongoError, ValueError) as exc:
            logger.error("Invalid MongoDB configuration: %s", exc)
            raise StoreUnavailable(str(exc)) from exc
        return cls(client[database][collection], client=client)

    async def ping(self) -> None:
        """Check that the server answers; raise ``StoreUnavailable`` otherwise."""
        with _driver_errors("ping"):
            await self._collection.database.command("ping")

    async def ensure_indexes(self) -> None:
        """Create the index backing ``list_orders``."""
        with _driver_errors("create_index"):
            await self._collection.create_index([("user_id", ASCENDING), ("created_at", ASCENDING)])

    async def startup(self) -> None:
        await self.ping()
        await self.ensure_indexes()

    async def create_order(self, user_id: uuid.UUID) -> Order:
        order = Order.new(user_id)
        document = {
            "_id": order.id,
            "user_id": order.user_id,
            "items": [],
            "created_at": datetime.now(timezone.utc),
        }
        with _driver_errors("insert_one"):
            await self._collection.insert_one(document)
        return order

    async def get_order(self, order_id: uuid.UUID) -> Order:
        with _driver_errors("find_one"):
            document = await self._collection.find_one({"_id": order_id})
        if document is None:
            raise OrderNotFound(order_id)
        return _document_to_order(document)

    async def list_orders(self, user_id: uuid.UUID) -> List[Order]:
        with _driver_errors("find"):
            cursor = self._collection.find({"user_id": user_id}).sort(LIST_SORT)
            documents = await cursor.to_list(None)
        return [_document_to_order(document) for document in documents]

    async def add_item(self, order_id: uuid.UUID, product_id: uuid.UUID, quantity: int) -> None:
        with _driver_errors("update_one"):
            result = await self._collection.update_one(
                {"_id": order_id},
                {"$push": {"items": {"product_id": product_id, "quantity": quantity}}},
            )
        if result.matched_count == 0:
            raise OrderNotFound(order_id)

    async def delete_item(self, order_id: uuid.UUID, index: int) -> None:
        if index >= 0:
            with _driver_errors("update_one"):
                result = await self._collection.update_one(
                    {"_id": order_id, f"items.{index}": {"$exists": True}},
                    [{"$set": {"items": self._items_without(index)}}],
                )
            if result.matched_count:
                return
        with _driver_errors("find_one"):
            existing = await self._collection.find_one({"_id": order_id}, projection={"_id": 1})
        if existing is None:
            raise OrderNotFound(order_id)
        raise ItemIndexOutOfBounds(index)

    @staticmethod
    def _items_without(index: int) -> Dict[str, Any]:
        """Aggregation expression for ``items`` with position ``index`` removed."""
        tail = {"$slice": ["$items", index + 1, {"$size": "$items"}]}
        if index == 0:
            return tail
        return {"$concatArrays": [{"$slice": ["$items", index]}, tail]}

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
