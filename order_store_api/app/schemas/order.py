"""
Pydantic schemas for orders and their items.

``Order`` and ``Item`` are the entities every store works with.  An
item has no identity of its own: it is addressed by its position in
``Order.items``, and positions shift down when an earlier item is
removed.  ``ItemCreate`` is the request body for adding an item over
HTTP.

Serialised orders use the field names ``id``, ``user_id``, ``items``,
``product_id`` and ``quantity``; UUIDs are rendered in their canonical
textual form.
"""

from __future__ import annotations

import uuid
from typing import List

from pydantic import BaseModel, Field

# Quantities travel as signed 32‑bit integers on the wire.
QUANTITY_MIN = -(2**31)
QUANTITY_MAX = 2**31 - 1


class Item(BaseModel):
    """A product and how many of it an order contains."""

    product_id: uuid.UUID = Field(..., description="Identifier of the product")
    quantity: int = Field(..., description="Number of units; sign is not checked")


class Order(BaseModel):
    """An order owned by a single user."""

    id: uuid.UUID = Field(..., description="Order identifier, assigned at creation")
    user_id: uuid.UUID = Field(..., description="Owner of the order")
    items: List[Item] = Field(default_factory=list, description="Items in insertion order")

    @classmethod
    def new(cls, user_id: uuid.UUID) -> "Order":
        """Build an empty order for ``user_id`` with a fresh random id."""
        return cls(id=uuid.uuid4(), user_id=user_id, items=[])

    def copy_out(self) -> "Order":
        """Return an independent deep copy safe to hand to callers."""
        return self.model_copy(deep=True)


class ItemCreate(BaseModel):
    """Schema for adding an item to an order."""

    product_id: uuid.UUID
    quantity: int = Field(..., ge=QUANTITY_MIN, le=QUANTITY_MAX)
