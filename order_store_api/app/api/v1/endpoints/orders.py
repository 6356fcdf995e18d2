"""
Order endpoints for API v1.

These routes expose the order store over HTTP.  All orders are
created for and listed on behalf of the current caller (see
``get_current_user_id``).  Store errors are translated to status
codes here:

* ``OrderNotFound`` -> 404
* ``ItemIndexOutOfBounds``, ``StoreUnavailable`` and anything else raised
  by the store -> 500
"""

import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from order_store_api.app.core.dependencies import get_current_user_id, get_order_store
from order_store_api.app.core.routing import TimeoutRoute
from order_store_api.app.schemas.order import ItemCreate, Order
from order_store_api.app.stores.base import (
    OrderNotFound,
    OrderStore,
    OrderStoreError,
)

logger = logging.getLogger(__name__)

router = APIRouter(route_class=TimeoutRoute)


def _internal_error(action: str, exc: Exception) -> HTTPException:
    # Called from inside an except block, so the traceback is attached.
    logger.exception("Failed to %s: %s", action, exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action}")


@router.post("/", response_model=Order, status_code=status.HTTP_201_CREATED)
async def create_order(
    store: OrderStore = Depends(get_order_store),
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> Order:
    """Create an empty order for the current user."""
    logger.debug("Creating order")
    try:
        order = await store.create_order(user_id)
    except OrderStoreError as exc:
        raise _internal_error("create order", exc)
    logger.info("Created order %s", order.id)
    return order


@router.get("/", response_model=List[Order])
async def list_orders(
    store: OrderStore = Depends(get_order_store),
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> List[Order]:
    """Return all orders of the current user."""
    logger.debug("Listing orders")
    try:
        return await store.list_orders(user_id)
    except OrderStoreError as exc:
        raise _internal_error("list orders", exc)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: uuid.UUID, store: OrderStore = Depends(get_order_store)) -> Order:
    """Retrieve a single order by ID.

    Returns HTTP 404 if the order does not exist.
    """
    logger.debug("Get order id: %s", order_id)
    try:
        return await store.get_order(order_id)
    except OrderNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    except OrderStoreError as exc:
        raise _internal_error("get order", exc)


@router.post("/{order_id}/items", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def add_item(
    order_id: uuid.UUID,
    item_in: ItemCreate,
    store: OrderStore = Depends(get_order_store),
) -> Response:
    """Append an item to an order."""
    logger.debug(
        "Add item to order id: %s: product_id=%s quantity=%s",
        order_id,
        item_in.product_id,
        item_in.quantity,
    )
    try:
        await store.add_item(order_id, item_in.product_id, item_in.quantity)
    except OrderNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    except OrderStoreError as exc:
        raise _internal_error("add item", exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{order_id}/items/{index}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_item(
    order_id: uuid.UUID,
    index: int = Path(..., ge=0),
    store: OrderStore = Depends(get_order_store),
) -> Response:
    """Remove the item at ``index``; later items move down by one."""
    logger.debug("Delete item %s from order id: %s", index, order_id)
    try:
        await store.delete_item(order_id, index)
    except OrderNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    except OrderStoreError as exc:
        raise _internal_error("delete item", exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
