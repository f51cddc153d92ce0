from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from event_tickets.core.middleware.http_logging import (
    REQUEST_ID_HEADER,
    current_request_id,
    route_label,
)
from event_tickets.core.middleware.security_headers import append_security_headers

logger = logging.getLogger("event_tickets.routing")


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
        # 404/405 are routing misses, not faults; the response body stays the framework default.
        logger.info(
            "Request not routed" if exc.status_code in (404, 405) else "HTTP error response",
            extra={
                "request_id": current_request_id(request),
                "http_method": request.method,
                "request_path": route_label(request),
                "status_code": exc.status_code,
            },
        )
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        # Runs in ServerErrorMiddleware, outside every user middleware: nothing
        # else will add the hardening headers or the correlation id. The stack
        # trace is already logged by HttpLoggingMiddleware.
        response = JSONResponse(status_code=500, content={"detail": "Internal Server Error"})
        request_id = current_request_id(request)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return append_security_headers(response)
