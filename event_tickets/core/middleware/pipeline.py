"""HTTP ingress pipeline assembly.

Starlette wraps middleware in reverse registration order, so the list below
is registered innermost-first. Effective order for an inbound request:

    HttpLoggingMiddleware        request id + access log
    PrometheusMetricsMiddleware  (when enabled)
    SecurityHeadersMiddleware    fixed headers on every response
    HTTPSRedirectMiddleware      outside development only
    CORSMiddleware               origin allow-list
    router

Security headers sit outside the HTTPS redirect so that redirect responses
carry them as well.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from event_tickets.core.metrics import PrometheusMetricsMiddleware
from event_tickets.core.middleware.http_logging import HttpLoggingMiddleware
from event_tickets.core.middleware.security_headers import SecurityHeadersMiddleware
from event_tickets.core.settings import Settings


def install_ingress_middleware(app: FastAPI, *, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.enforce_https:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    if settings.metrics_enabled:
        app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)
