from __future__ import annotations

from datetime import UTC, datetime, timedelta


def test_health_ok(client) -> None:
    started = datetime.now(UTC)
    res = client.get("/health")
    assert res.status_code == 200

    body = res.json()
    assert set(body) == {"status", "timestamp"}
    assert body["status"] == "healthy"

    timestamp = datetime.fromisoformat(body["timestamp"])
    assert timestamp.utcoffset() == timedelta(0)
    # Same clock; allow for sub-microsecond rounding only.
    assert timestamp >= started - timedelta(microseconds=1)


def test_health_timestamp_does_not_go_backwards(client) -> None:
    first = datetime.fromisoformat(client.get("/health").json()["timestamp"])
    second = datetime.fromisoformat(client.get("/health").json()["timestamp"])
    assert second >= first


def test_health_ok_in_production(prod_client) -> None:
    res = prod_client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
