from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """Health check response."""

    status: str = Field(
        description="Service status indicator. `healthy` means the API process is up and responding.",
        examples=["healthy"],
    )
    timestamp: datetime = Field(
        description="Server time (UTC) at which the check was answered.",
        examples=["2026-01-01T12:00:00Z"],
    )


class ApiInfo(BaseModel):
    """Static API metadata plus the running environment."""

    name: str = Field(examples=["Event Ticket Manager API"])
    version: str = Field(examples=["1.0.0"])
    environment: str = Field(
        description="Environment name the process was started with.",
        examples=["development", "production"],
    )
