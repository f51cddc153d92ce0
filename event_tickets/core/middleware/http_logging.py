"""Per-request access logging and X-Request-ID correlation.

Only metadata is logged: method, route label, status and duration.
Raw paths, query strings, headers and bodies stay out of the logs.

Requests answered before routing get a fixed label instead of their path:
HTTPS redirects are "https-redirect", CORS preflights "cors-preflight" and
everything else the router did not match "unmatched".
"""

from __future__ import annotations

import logging
import re
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("event_tickets.http")

REQUEST_ID_HEADER = "X-Request-ID"
_SAFE_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,127}$")
_REDIRECT_STATUSES = frozenset({301, 302, 307, 308})


def get_or_create_request_id(*, request: Request) -> str:
    """Return the inbound X-Request-ID if it looks safe, else a fresh UUID4 hex."""

    candidate = request.headers.get(REQUEST_ID_HEADER)
    if candidate and _SAFE_REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex


def current_request_id(request: Request) -> str | None:
    """Request id assigned by HttpLoggingMiddleware, if it ran for this request."""

    return getattr(request.state, "request_id", None)


def is_cors_preflight(request: Request) -> bool:
    return (
        request.method == "OPTIONS"
        and "origin" in request.headers
        and "access-control-request-method" in request.headers
    )


def route_label(request: Request, response: Response | None = None) -> str:
    """Return a bounded label for the request: route template or a fixed value."""

    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if isinstance(path, str) and path:
        return path
    if is_cors_preflight(request):
        return "cors-preflight"
    if (
        response is not None
        and response.status_code in _REDIRECT_STATUSES
        and request.url.scheme == "http"
        and response.headers.get("location", "").startswith("https://")
    ):
        return "https-redirect"
    return "unmatched"


class HttpLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = get_or_create_request_id(request=request)
        started = time.perf_counter()
        # Exception handlers read it back through current_request_id().
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:  # noqa: BLE001 - logged with stack trace, then re-raised
            duration_ms = (time.perf_counter() - started) * 1000.0
            logger.exception(
                "Unhandled exception while processing request",
                extra={
                    "request_id": request_id,
                    "http_method": request.method,
                    "request_path": route_label(request),
                    "status_code": 500,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise

        duration_ms = (time.perf_counter() - started) * 1000.0
        response.headers[REQUEST_ID_HEADER] = request_id

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "http_method": request.method,
                "request_path": route_label(request, response),
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
