"""
Per-request access logging.

Binds the request ID, method and path into structlog contextvars, so
service events such as product_created or product_stock_set are
correlated with the HTTP call that caused them.
"""

import time
import uuid
from collections.abc import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from stockroom.config import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Polled by health checks every few seconds; logged at debug
HEALTH_PATHS = frozenset({"/health", "/api/health"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one event per request, with level chosen by response status."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception("request_failed", error=str(e), duration_ms=_elapsed_ms(started))
            raise
        else:
            duration_ms = _elapsed_ms(started)
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
            self._log_response(request, response.status_code, duration_ms)
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "method", "path")

    @staticmethod
    def _log_response(request: Request, status: int, duration_ms: float) -> None:
        if status >= 500:
            log = logger.error
        elif status >= 400:
            log = logger.warning
        elif request.url.path in HEALTH_PATHS:
            log = logger.debug
        else:
            log = logger.info
        log("request_completed", status=status, duration_ms=duration_ms)
