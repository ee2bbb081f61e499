"""Access logging middleware."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from authgate.logging import get_logger, sanitize_for_log

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response

access_logger = get_logger("api.access")


def level_for_status(status_code: int) -> int:
    """Map an HTTP status code to the log level of its access line."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with status, duration and client details."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        client_ip = request.client.host if request.client else "-"

        access_logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms ua=%r ip=%s",
            request.method,
            sanitize_for_log(path),
            response.status_code,
            duration_ms,
            request.headers.get("user-agent", "-"),
            client_ip,
        )
        return response
