from __future__ import annotations

from collections.abc import Iterator

import pytest

from event_tickets.core.settings import Settings
from tests._helpers import make_settings

_ENV_VARS = (
    "APP_ENV",
    "ENVIRONMENT",
    "AllowedOrigins",
    "ALLOWED_ORIGINS",
    "HTTPS_REDIRECT",
    "METRICS_ENABLED",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "FORWARDED_ALLOW_IPS",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Settings are cached via @lru_cache; clear so each test reads its own environment.
    from event_tickets.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dev_settings() -> Settings:
    return make_settings(app_env="development")


@pytest.fixture
def prod_settings() -> Settings:
    return make_settings(app_env="production")


@pytest.fixture
def client(dev_settings: Settings):
    from fastapi.testclient import TestClient

    from event_tickets.main import create_app

    app = create_app(dev_settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def prod_client(prod_settings: Settings):
    """Production app; requests default to HTTPS so they pass the redirect."""
    from fastapi.testclient import TestClient

    from event_tickets.main import create_app

    app = create_app(prod_settings)
    with TestClient(app, base_url="https://testserver") as c:
        yield c
