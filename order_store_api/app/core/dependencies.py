"""
FastAPI dependencies shared by the endpoints.

The order store and the settings are created once by ``create_app``
and kept on ``app.state``; handlers receive them through these
functions instead of importing a module‑level instance.
"""

import uuid

from fastapi import Request

from order_store_api.app.core.config import Settings
from order_store_api.app.stores.base import OrderStore


def get_order_store(request: Request) -> OrderStore:
    """Return the store owned by the running application."""
    return request.app.state.order_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user_id(request: Request) -> uuid.UUID:
    """Return the caller's user id.

    There is no authentication; every request acts as the user
    configured by ``DEFAULT_USER_ID``.
    """
    return request.app.state.settings.caller_id()
