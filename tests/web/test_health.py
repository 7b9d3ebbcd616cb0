"""
tests.web.test_health

Purpose:
    Smoke tests for the service endpoints (health, info, version index).
"""

from __future__ import annotations

from prototype_kit.web.settings import Settings


def test_health_ok(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}
    assert r.headers.get("x-request-id")


def test_incoming_request_id_is_echoed(client) -> None:
    r = client.get("/health", headers={"X-Request-Id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"


def test_correlation_id_is_used_when_request_id_missing(client) -> None:
    r = client.get("/health", headers={"X-Correlation-Id": "corr-9"})
    assert r.headers["x-request-id"] == "corr-9"


def test_info_lists_versions(client) -> None:
    r = client.get("/info")
    assert r.status_code == 200

    data = r.json()
    assert data["versions"] == [
        {"name": "v1", "prefix": "/v1"},
        {"name": "v2", "prefix": "/v2"},
    ]
    assert data["redirect_status_code"] == 302
    assert "/nested/question-1" in data["question_paths"]


def test_index_links_every_version(client_factory) -> None:
    client = client_factory(Settings(versions=("v1", "v2"), service_name="Apply for a thing"))
    r = client.get("/")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert "Apply for a thing" in r.text
    assert 'href="/v1/"' in r.text
    assert 'href="/v2/"' in r.text


def test_unknown_route_uses_framework_404(client) -> None:
    r = client.get("/v9/question-1")
    assert r.status_code == 404
    assert r.json() == {"detail": "Not Found"}
