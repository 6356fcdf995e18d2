"""
Shared fixtures for the order store test suite.
"""

import uuid
from dataclasses import dataclass

import pytest
import pytest_asyncio

from order_store_api.app.schemas.order import Order
from order_store_api.app.stores.memory import InMemoryOrderStore


@dataclass
class StoreContext:
    """A store holding two orders of ``user_id_1`` and one of ``user_id_2``."""

    store: InMemoryOrderStore
    user_id_1: uuid.UUID
    user_id_2: uuid.UUID
    order_1_user_1: Order


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest_asyncio.fixture
async def ctx(store: InMemoryOrderStore) -> StoreContext:
    user_id_1 = uuid.uuid4()
    user_id_2 = uuid.uuid4()
    order = await store.create_order(user_id_1)
    await store.create_order(user_id_2)
    await store.create_order(user_id_1)
    return StoreContext(store=store, user_id_1=user_id_1, user_id_2=user_id_2, order_1_user_1=order)
