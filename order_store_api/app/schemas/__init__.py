"""
Pydantic schema definitions for orders and API payloads.
"""

from .order import Item, ItemCreate, Order  # noqa: F401
