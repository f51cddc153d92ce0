from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from event_tickets.core.settings import Settings
from event_tickets.system.schemas import ApiInfo, HealthStatus

API_NAME = "Event Ticket Manager API"
API_VERSION = "1.0.0"

HEALTHY = "healthy"


def utc_now() -> datetime:
    return datetime.now(UTC)


def build_health_status(*, clock: Callable[[], datetime] = utc_now) -> HealthStatus:
    return HealthStatus(status=HEALTHY, timestamp=clock())


def build_api_info(*, settings: Settings) -> ApiInfo:
    return ApiInfo(name=API_NAME, version=API_VERSION, environment=settings.app_env)
