"""
Main entrypoint for the Order Store API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` is the composition root:
it builds the order store selected by the settings and keeps it on
``app.state`` where the endpoint dependencies find it.  The app is
instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn order_store_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .stores import OrderStore, StoreUnavailable, build_order_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Check the store on startup and close it on shutdown."""
    order_store: OrderStore = app.state.order_store
    try:
        await order_store.startup()
    except StoreUnavailable as exc:
        # Keep serving; requests get 500 until the store is back.
        logger.warning("Order store is not reachable at startup: %s", exc)
    try:
        yield
    finally:
        await order_store.close()


def create_app(settings: Optional[Settings] = None, store: Optional[OrderStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[OrderStore]
        Order store to serve.  When omitted, the backend named by
        ``settings.order_store`` is built.  The application closes the
        store on shutdown either way.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so the store factory can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.order_store = store if store is not None else build_order_store(settings)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(StarletteHTTPException)
    async def unknown_route(request: Request, exc: StarletteHTTPException):
        # Routed requests carry an endpoint in their scope; only unmatched
        # paths reach here without one.
        if exc.status_code == 404 and "endpoint" not in request.scope:
            logger.error("No route for %s", request.url)
            return PlainTextResponse(f"No route for {request.url}", status_code=404)
        return await http_exception_handler(request, exc)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
