from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from event_tickets.api.exception_handlers import register_exception_handlers
from event_tickets.api.openapi import (
    API_DESCRIPTION,
    API_DOC_VERSION,
    API_TITLE,
    OPENAPI_TAGS,
    docs_routes,
    install_docs,
    install_openapi_schema,
)
from event_tickets.core.logging import setup_logging
from event_tickets.core.metrics import metrics_router
from event_tickets.core.middleware.pipeline import install_ingress_middleware
from event_tickets.core.settings import Settings, get_settings
from event_tickets.landing.router import router as landing_router
from event_tickets.system.router import router as system_router

logger = logging.getLogger("event_tickets.startup")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Application startup",
            extra={
                "environment": settings.app_env,
                "docs_enabled": settings.is_development,
                "https_redirect": settings.enforce_https,
            },
        )
        yield

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_DOC_VERSION,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
        **docs_routes(settings),
    )
    app.state.settings = settings

    install_ingress_middleware(app, settings=settings)
    register_exception_handlers(app)
    install_openapi_schema(app)
    install_docs(app, settings=settings)

    app.include_router(landing_router)
    app.include_router(system_router)
    if settings.metrics_enabled:
        app.include_router(metrics_router)
    return app


def serve() -> None:
    """Console entry point: run the API under uvicorn.

    The app is built by uvicorn through the `create_app` factory, so importing
    this module never reads settings or configures logging.
    """

    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "event_tickets.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips,
        log_config=None,
    )


if __name__ == "__main__":
    serve()
