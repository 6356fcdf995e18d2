"""
Route class applying the request timeout.

Routers created with ``APIRouter(route_class=TimeoutRoute)`` answer
``408 Request Timeout`` when a handler (including its dependencies)
runs longer than ``settings.request_timeout_seconds``.  The handler is
cancelled; stores hold their locks for the full operation, so a
cancelled request leaves no partial write behind.
"""

import asyncio
import logging
from typing import Any, Callable, Coroutine

from fastapi import Request, Response, status
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute

logger = logging.getLogger(__name__)


class TimeoutRoute(APIRoute):
    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def timed_handler(request: Request) -> Response:
            timeout = request.app.state.settings.request_timeout_seconds
            try:
                return await asyncio.wait_for(handler(request), timeout=timeout)
            except asyncio.TimeoutError:
                logger.error("Request timed out after %ss: %s %s", timeout, request.method, request.url.path)
                return PlainTextResponse("Request timed out", status_code=status.HTTP_408_REQUEST_TIMEOUT)

        return timed_handler
