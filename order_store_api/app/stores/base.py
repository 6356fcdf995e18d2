"""
Storage contract for orders.

``OrderStore`` defines the operations every backend provides.  Each
operation is a coroutine and is atomic with respect to a single order.
Reads return copies: mutating a returned ``Order`` never changes the
stored one, and later writes by other callers never change an order
already returned.

Failures are raised as subclasses of ``OrderStoreError``:

``StoreUnavailable``
    The backing storage cannot service the request.
``OrderNotFound``
    No order has the requested id; ``order_id`` carries it.
``ItemIndexOutOfBounds``
    The item position does not exist in the order; ``index`` carries it.

Stores never retry and never build user‑facing messages.  Mapping
these errors to HTTP responses is the job of the endpoint layer.
"""

from __future__ import annotations

import abc
import uuid
from typing import List

from order_store_api.app.schemas.order import Order


class OrderStoreError(Exception):
    """Base class for errors raised by an ``OrderStore``."""


class StoreUnavailable(OrderStoreError):
    """The store cannot be used to serve the request."""

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(f"StoreUnavailable: {reason}" if reason else "StoreUnavailable")


class OrderNotFound(OrderStoreError):
    """Provided order id was not found in the store."""

    def __init__(self, order_id: uuid.UUID) -> None:
        self.order_id = order_id
        super().__init__(f"OrderNotFound: {order_id}")


class ItemIndexOutOfBounds(OrderStoreError):
    """Provided item index is out of bounds for the order."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"ItemIndexOutOfBounds: {index}")


class OrderStore(abc.ABC):
    """Behaviour shared by every order storage backend."""

    @abc.abstractmethod
    async def create_order(self, user_id: uuid.UUID) -> Order:
        """Create an empty order for ``user_id`` and return a copy of it.

        Raises
        ------
        StoreUnavailable
            If the store cannot be used to create an order.
        """

    @abc.abstractmethod
    async def get_order(self, order_id: uuid.UUID) -> Order:
        """Return a copy of the order with id ``order_id``.

        Raises
        ------
        OrderNotFound
            If there is no order with that id.
        StoreUnavailable
            If the store cannot be read.
        """

    @abc.abstractmethod
    async def list_orders(self, user_id: uuid.UUID) -> List[Order]:
        """Return copies of every order owned by ``user_id``.

        A user without orders gets an empty list.  The order of the
        result is the same for the same store state.

        Raises
        ------
        StoreUnavailable
            If the store cannot be read.
        """

    @abc.abstractmethod
    async def add_item(self, order_id: uuid.UUID, product_id: uuid.UUID, quantity: int) -> None:
        """Append an item to the order with id ``order_id``.

        ``quantity`` is stored as given; zero and negative values are
        accepted.

        Raises
        ------
        OrderNotFound
            If there is no order with that id.
        StoreUnavailable
            If the store cannot be written.
        """

    @abc.abstractmethod
    async def delete_item(self, order_id: uuid.UUID, index: int) -> None:
        """Remove the item at position ``index`` from the order.

        Items after ``index`` move down by one position.

        Raises
        ------
        OrderNotFound
            If there is no order with that id.
        ItemIndexOutOfBounds
            If ``index`` is not a position in the order's items.
        StoreUnavailable
            If the store cannot be written.
        """

    async def startup(self) -> None:
        """Prepare the backend when the application starts.  Defaults to a no‑op.

        Raises
        ------
        StoreUnavailable
            If the backend cannot be reached.
        """
        return None

    async def close(self) -> None:
        """Release resources held by the store.  Defaults to a no‑op."""
        return None
