"""Unit tests for the HTTP logging middleware.

We assert structured log fields via `caplog` (not message strings) and verify:
- X-Request-ID is generated or propagated
- Successful requests emit exactly one INFO log entry with metadata only
- Unhandled exceptions emit an ERROR log entry with a stack trace and return 500
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from event_tickets.core.middleware.http_logging import HttpLoggingMiddleware


def _make_app() -> FastAPI:
    """Create a minimal app for middleware unit tests."""
    app = FastAPI()
    app.add_middleware(HttpLoggingMiddleware)

    @app.get("/events/{event_id}")
    async def event(event_id: str) -> dict[str, str]:
        return {"id": event_id}

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("boom")

    return app


def _get_http_log_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == "event_tickets.http"]


def test_successful_request_logs_route_template_not_raw_path(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="event_tickets.http")

    with TestClient(_make_app()) as client:
        res = client.get("/events/concert-42?promo=SECRET")

    assert res.status_code == 200
    assert res.headers["x-request-id"]

    info_records = [r for r in _get_http_log_records(caplog) if r.levelno == logging.INFO]
    assert len(info_records) == 1

    record = info_records[0]
    assert record.__dict__["request_id"] == res.headers["x-request-id"]
    assert record.__dict__["http_method"] == "GET"
    assert record.__dict__["request_path"] == "/events/{event_id}"
    assert record.__dict__["status_code"] == 200
    assert record.__dict__["duration_ms"] >= 0


def test_unmatched_request_is_labelled_unmatched(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="event_tickets.http")

    with TestClient(_make_app()) as client:
        res = client.get("/nowhere")

    assert res.status_code == 404
    (record,) = _get_http_log_records(caplog)
    assert record.__dict__["request_path"] == "unmatched"
    assert record.__dict__["status_code"] == 404


@pytest.mark.parametrize(
    ("inbound", "propagated"),
    [
        ("req_abc-123", True),
        ("bad id with spaces", False),
        ("-leading-dash", False),
    ],
)
def test_request_id_propagation(inbound: str, propagated: bool) -> None:
    with TestClient(_make_app()) as client:
        res = client.get("/events/1", headers={"X-Request-ID": inbound})

    assert (res.headers["x-request-id"] == inbound) is propagated
    if not propagated:
        assert len(res.headers["x-request-id"]) == 32


def test_unhandled_exception_returns_500_and_logs_error_with_request_id(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="event_tickets.http")

    with TestClient(_make_app(), raise_server_exceptions=False) as client:
        res = client.get("/boom", headers={"X-Request-ID": "req_err_001"})

    assert res.status_code == 500

    error_records = [r for r in _get_http_log_records(caplog) if r.levelno == logging.ERROR]
    assert len(error_records) == 1

    record = error_records[0]
    assert record.__dict__["request_id"] == "req_err_001"
    assert record.__dict__["request_path"] == "/boom"
    assert record.__dict__["status_code"] == 500
    assert record.exc_info


def test_https_redirect_and_preflight_get_fixed_labels(
    caplog: pytest.LogCaptureFixture,
) -> None:
    from event_tickets.main import create_app
    from tests._helpers import make_settings

    caplog.set_level(logging.INFO, logger="event_tickets.http")
    app = create_app(make_settings(app_env="production", allowed_origins="https://shop.example"))

    with TestClient(app) as client:
        redirected = client.get("/api/v1/info?event=42", follow_redirects=False)
    with TestClient(app, base_url="https://testserver") as client:
        preflight = client.options(
            "/api/v1/info",
            headers={"Origin": "https://shop.example", "Access-Control-Request-Method": "GET"},
        )

    assert redirected.status_code == 307
    assert preflight.status_code == 200

    labels = [r.__dict__["request_path"] for r in _get_http_log_records(caplog)]
    assert labels == ["https-redirect", "cors-preflight"]
