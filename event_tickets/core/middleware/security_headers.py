from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; script-src 'self'; style-src 'self' 'unsafe-inline'; "
    "img-src 'self' data:; font-src 'self'; connect-src 'self';"
)

SECURITY_HEADERS: tuple[tuple[str, str], ...] = (
    ("X-Content-Type-Options", "nosniff"),
    ("X-Frame-Options", "DENY"),
    ("X-XSS-Protection", "1; mode=block"),
    ("Referrer-Policy", "no-referrer"),
    ("Content-Security-Policy", CONTENT_SECURITY_POLICY),
)


def append_security_headers(response: Response) -> Response:
    """Append the fixed browser-hardening headers.

    Values are appended, so a header already on the response keeps its value
    and gains a second one rather than being overwritten.
    """

    for name, value in SECURITY_HEADERS:
        response.headers.append(name, value)
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Hardening headers for every response produced inside the middleware stack.

    500s built by the server-error handler bypass user middleware; the
    application's `Exception` handler applies the same headers itself.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        return append_security_headers(response)
