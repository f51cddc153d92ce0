from __future__ import annotations

from fastapi import APIRouter, Depends

from event_tickets.api.deps import get_app_settings
from event_tickets.core.settings import Settings
from event_tickets.system.schemas import ApiInfo, HealthStatus
from event_tickets.system.service import build_api_info, build_health_status

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=HealthStatus,
    operation_id="HealthCheck",
    summary="Health check",
    description=(
        "Lightweight endpoint to verify the API process is running. "
        "It does not check downstream dependencies."
    ),
)
async def health() -> HealthStatus:
    return build_health_status()


@router.get(
    "/api/v1/info",
    response_model=ApiInfo,
    operation_id="GetApiInfo",
    summary="API information",
)
async def api_info(settings: Settings = Depends(get_app_settings)) -> ApiInfo:
    return build_api_info(settings=settings)
