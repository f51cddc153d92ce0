"""API documentation exposure.

The machine-readable description and the interactive docs are mounted only
in development; every other environment gets no docs routes at all.

Docs pages must work under the service's own Content-Security-Policy
(`script-src 'self'`), so every script they load is served from this
origin: the Swagger UI / ReDoc bundles shipped by `fastapi-offline` and the
Swagger initializer in `event_tickets/static/`. Neither page contains an
inline script.
"""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Any

import fastapi_offline
from fastapi import FastAPI
from fastapi.openapi.docs import get_redoc_html
from fastapi.openapi.utils import get_openapi
from fastapi.responses import HTMLResponse
from starlette.staticfiles import StaticFiles

from event_tickets.core.settings import Settings

API_TITLE = "Event Ticket Manager API"
API_DESCRIPTION = "API for managing events, tickets, and payments"
API_DOC_VERSION = "v1"

API_KEY_HEADER = "X-API-Key"

OPENAPI_URL = "/openapi.json"
SWAGGER_URL = "/swagger"
REDOC_URL = "/docs"
VENDOR_STATIC_URL = "/static/vendor"
DOCS_STATIC_URL = "/static/docs"

OPENAPI_TAGS = [
    {
        "name": "System",
        "description": "Liveness and build/environment information.",
    },
]

_VENDOR_STATIC_DIR = Path(fastapi_offline.__file__).resolve().parent / "static"
_DOCS_STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def docs_routes(settings: Settings) -> dict[str, str | None]:
    """Return FastAPI's docs URL arguments for the running environment.

    FastAPI's built-in doc pages are always off; `install_docs` registers
    same-origin replacements.
    """

    return {
        "openapi_url": OPENAPI_URL if settings.is_development else None,
        "docs_url": None,
        "redoc_url": None,
    }


def swagger_ui_html(*, title: str, openapi_url: str) -> HTMLResponse:
    html = f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(title)} - Swagger UI</title>
<link rel="stylesheet" href="{VENDOR_STATIC_URL}/swagger-ui.css">
<link rel="shortcut icon" href="{VENDOR_STATIC_URL}/favicon.png">
</head>
<body>
<div id="swagger-ui" data-openapi-url="{escape(openapi_url)}"></div>
<script src="{VENDOR_STATIC_URL}/swagger-ui-bundle.js"></script>
<script src="{DOCS_STATIC_URL}/swagger-init.js"></script>
</body>
</html>
"""
    return HTMLResponse(html)


def install_docs(app: FastAPI, *, settings: Settings) -> None:
    """Mount the docs assets and pages; no-op outside development."""

    if not settings.is_development:
        return

    app.mount(VENDOR_STATIC_URL, StaticFiles(directory=str(_VENDOR_STATIC_DIR)), name="docs-vendor")
    app.mount(DOCS_STATIC_URL, StaticFiles(directory=str(_DOCS_STATIC_DIR)), name="docs-static")

    @app.get(SWAGGER_URL, include_in_schema=False)
    async def swagger_docs() -> HTMLResponse:
        return swagger_ui_html(title=app.title, openapi_url=OPENAPI_URL)

    @app.get(REDOC_URL, include_in_schema=False)
    async def redoc_docs() -> HTMLResponse:
        return get_redoc_html(
            openapi_url=OPENAPI_URL,
            title=f"{app.title} - ReDoc",
            redoc_js_url=f"{VENDOR_STATIC_URL}/redoc.standalone.js",
            redoc_favicon_url=f"{VENDOR_STATIC_URL}/favicon.png",
            with_google_fonts=False,
        )


def install_openapi_schema(app: FastAPI) -> None:
    """Replace `app.openapi` with a generator that declares the API key scheme."""

    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
            tags=app.openapi_tags,
        )
        components = schema.setdefault("components", {})
        components.setdefault("securitySchemes", {})["ApiKey"] = {
            "type": "apiKey",
            "in": "header",
            "name": API_KEY_HEADER,
            "description": "API Key authentication",
        }
        app.openapi_schema = schema
        return schema

    app.openapi = openapi  # type: ignore[method-assign]
