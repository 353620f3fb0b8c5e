"""Request logging for the registry API.

Every request runs under a correlation id taken from X-Correlation-ID
(or freshly generated) so that the registry_event lines written by the
audit sink can be joined back to the HTTP call that caused them. The id
is echoed on the response.

Refused calls (4xx) are logged at WARNING with the claimed caller, server
errors at ERROR; everything else at INFO.
"""

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from plantcert.api.auth.caller import CALLER_HEADER
from plantcert.infrastructure.observability.correlation import (
    generate_correlation_id,
    set_correlation_id,
)

CORRELATION_HEADER = "X-Correlation-ID"

_MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Binds the correlation id and logs one line per finished request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)

        claimed_caller = request.headers.get(CALLER_HEADER)
        log = structlog.get_logger().bind(
            component="api",
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
            caller=claimed_caller.strip().lower() if claimed_caller else None,
            mutating=request.method in _MUTATING_METHODS,
        )
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_crashed",
                duration_ms=_elapsed_ms(started),
                error_type=type(exc).__name__,
            )
            raise

        status = response.status_code
        if status >= 500:
            emit = log.error
        elif status >= 400:
            emit = log.warning
        else:
            emit = log.info
        emit("request_finished", status_code=status, duration_ms=_elapsed_ms(started))

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
