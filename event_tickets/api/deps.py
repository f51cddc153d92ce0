from __future__ import annotations

from fastapi import Request

from event_tickets.core.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Dependency provider for the settings the running app was built with."""

    return request.app.state.settings
