"""
In‑memory order store.

All orders live in a single list owned by the store instance and
guarded by one reader/writer lock: ``get_order`` and ``list_orders``
take the read side, ``create_order``, ``add_item`` and ``delete_item``
take the write side.  Each operation holds the lock for its whole
duration, so no caller ever sees half of a write.

Lookups are linear scans.  The expected working set is small; an index
keyed by order id could replace the scan as long as reads keep
returning copies and items stay addressed by position.
"""

from __future__ import annotations

import logging
import uuid
from typing import List

from order_store_api.app.core.locks import ReadWriteLock
from order_store_api.app.schemas.order import Item, Order
from order_store_api.app.stores.base import ItemIndexOutOfBounds, OrderNotFound, OrderStore

logger = logging.getLogger(__name__)


class InMemoryOrderStore(OrderStore):
    """Order store keeping every order in process memory."""

    def __init__(self) -> None:
        self._orders: List[Order] = []
        self._lock = ReadWriteLock()

    async def create_order(self, user_id: uuid.UUID) -> Order:
        order = Order.new(user_id)
        async with self._lock.writer:
            self._orders.append(order)
            created = order.copy_out()
        logger.debug("Stored order %s for user %s", order.id, user_id)
        return created

    async def get_order(self, order_id: uuid.UUID) -> Order:
        async with self._lock.reader:
            for order in self._orders:
                if order.id == order_id:
                    return order.copy_out()
        raise OrderNotFound(order_id)

    async def list_orders(self, user_id: uuid.UUID) -> List[Order]:
        async with self._lock.reader:
            return [order.copy_out() for order in self._orders if order.user_id == user_id]

    async def add_item(self, order_id: uuid.UUID, product_id: uuid.UUID, quantity: int) -> None:
        async with self._lock.writer:
            for order in self._orders:
                if order.id == order_id:
                    order.items.append(Item(product_id=product_id, quantity=quantity))
                    return
        raise OrderNotFound(order_id)

    async def delete_item(self, order_id: uuid.UUID, index: int) -> None:
        async with self._lock.writer:
            for order in self._orders:
                if order.id == order_id:
                    # Negative positions never count from the end.
                    if 0 <= index < len(order.items):
                        del order.items[index]
                        return
                    raise ItemIndexOutOfBounds(index)
        raise OrderNotFound(order_id)
