"""Request/response logging middleware with timing and HTTP metrics."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from coop_lending.core.metrics import record_http_request

logger = structlog.get_logger(__name__)

UNTRACKED_PATHS = {"/metrics"}


def _endpoint_label(request: Request) -> str:
    """Route template rather than raw path, to keep metric cardinality bounded."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion, and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path in UNTRACKED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        log = logger.bind(method=method, path=path)

        log.info("request_started")

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            record_http_request(method, _endpoint_label(request), 500, duration)
            raise

        duration = time.perf_counter() - start_time
        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        record_http_request(method, _endpoint_label(request), response.status_code, duration)

        return response
