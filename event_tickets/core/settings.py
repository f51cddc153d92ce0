from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_ORIGINS = "http://localhost:3000"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "ENVIRONMENT", "app_env"),
        description="Runtime environment name (e.g. development, staging, production).",
    )
    allowed_origins: str = Field(
        default=DEFAULT_ALLOWED_ORIGINS,
        validation_alias=AliasChoices("AllowedOrigins", "ALLOWED_ORIGINS", "allowed_origins"),
        description="Comma-separated list of origins allowed to make credentialed CORS requests.",
    )
    https_redirect: bool = Field(
        default=True,
        validation_alias=AliasChoices("HTTPS_REDIRECT", "https_redirect"),
        description=(
            "Redirect plain-HTTP requests to HTTPS outside development. "
            "Turn off when a TLS-terminating proxy already does it."
        ),
    )
    metrics_enabled: bool = Field(
        default=True,
        validation_alias=AliasChoices("METRICS_ENABLED", "metrics_enabled"),
        description="Expose Prometheus metrics at /metrics.",
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    # uvicorn
    host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("HOST", "host"))
    port: int = Field(default=8000, ge=1, le=65535, validation_alias=AliasChoices("PORT", "port"))
    forwarded_allow_ips: str = Field(
        default="127.0.0.1",
        validation_alias=AliasChoices("FORWARDED_ALLOW_IPS", "forwarded_allow_ips"),
        description="Proxy addresses trusted to set X-Forwarded-Proto / X-Forwarded-For.",
    )

    @field_validator("allowed_origins")
    @classmethod
    def _validate_allowed_origins(cls, value: str) -> str:
        origins = _split_origins(value)
        if not origins:
            raise ValueError("at least one allowed origin is required")
        # Credentialed CORS cannot be combined with a wildcard origin.
        if "*" in origins:
            raise ValueError("wildcard origin '*' is not allowed because credentials are enabled")
        return ",".join(origins)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def cors_origins(self) -> list[str]:
        return _split_origins(self.allowed_origins)

    @property
    def is_development(self) -> bool:
        return str(self.app_env).strip().lower() == "development"

    @property
    def enforce_https(self) -> bool:
        return self.https_redirect and not self.is_development


def _split_origins(raw: str) -> list[str]:
    # Browsers send Origin without a trailing slash; CORS matching is exact.
    origins = [item.strip().rstrip("/") for item in raw.split(",")]
    return [origin for origin in origins if origin]


def load_settings(**overrides: object) -> Settings:
    """Build settings from the environment, wrapping validation failures."""

    try:
        return Settings(**overrides)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


@lru_cache
def get_settings() -> Settings:
    return load_settings()
