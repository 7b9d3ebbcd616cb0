"""
tests.web.test_redirect_middleware

Purpose:
    RedirectPrefixMiddleware behavior against hand-written handlers that
    redirect to every kind of target.
"""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.testclient import TestClient

from prototype_kit.web.middleware.redirect_prefix import (
    RedirectPrefixMiddleware,
    redirect_within_group,
)
from prototype_kit.web.settings import Settings


def _group_app(settings: Settings | None = None) -> FastAPI:
    group = FastAPI()
    if settings is not None:
        group.state.settings = settings
    group.add_middleware(RedirectPrefixMiddleware)

    @group.get("/bare")
    def bare():
        return RedirectResponse("/question-2", status_code=302)

    @group.get("/already")
    def already():
        return RedirectResponse("/v1/question-2", status_code=302)

    @group.get("/similar")
    def similar():
        return RedirectResponse("/v10/question-1", status_code=302)

    @group.get("/external")
    def external():
        return RedirectResponse("https://example.com/start", status_code=302)

    @group.get("/protocol-relative")
    def protocol_relative():
        return RedirectResponse("//example.com/start", status_code=302)

    @group.get("/relative")
    def relative():
        return RedirectResponse("question-2", status_code=302)

    @group.get("/explicit")
    def explicit(request: Request):
        return redirect_within_group(request, "/question-2")

    @group.get("/plain")
    def plain():
        return PlainTextResponse("ok", headers={"Location": "/question-2"})

    return group


@pytest.fixture()
def group_client() -> TestClient:
    app = FastAPI()
    app.mount("/v1", _group_app())
    return TestClient(app)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/v1/bare", "/v1/question-2"),
        ("/v1/already", "/v1/question-2"),
        ("/v1/similar", "/v1/v10/question-1"),
        ("/v1/external", "https://example.com/start"),
        ("/v1/protocol-relative", "//example.com/start"),
        ("/v1/relative", "question-2"),
        ("/v1/explicit", "/v1/question-2"),
    ],
)
def test_location_rewrite(group_client, path: str, expected: str) -> None:
    r = group_client.get(path, follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == expected


def test_non_redirect_responses_untouched(group_client) -> None:
    r = group_client.get("/v1/plain", follow_redirects=False)
    assert r.status_code == 200
    assert r.headers["location"] == "/question-2"


def test_unmounted_group_passes_redirects_through() -> None:
    client = TestClient(_group_app())
    r = client.get("/bare", follow_redirects=False)
    assert r.headers["location"] == "/question-2"
    assert "x-prototype-version-prefix" not in r.headers


def test_rewrite_is_logged(group_client, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="prototype_kit.web.middleware.redirect_prefix"):
        group_client.get("/v1/bare", follow_redirects=False)
    assert "redirect prefixed: /question-2 -> /v1/question-2" in caplog.text


def test_explicit_redirect_uses_configured_status() -> None:
    app = FastAPI()
    app.mount("/v1", _group_app(Settings(redirect_status_code=303)))
    client = TestClient(app)

    r = client.get("/v1/explicit", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/v1/question-2"


def test_explicit_redirect_defaults_to_302_without_settings(group_client) -> None:
    r = group_client.get("/v1/explicit", follow_redirects=False)
    assert r.status_code == 302


@pytest.fixture()
def outer_root_client() -> TestClient:
    # Served behind a proxy under /proto, as with `uvicorn --root-path /proto`.
    app = FastAPI()
    app.mount("/v1", _group_app())
    return TestClient(app, root_path="/proto")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/proto/v1/bare", "/proto/v1/question-2"),
        ("/proto/v1/already", "/proto/v1/question-2"),
        ("/proto/v1/explicit", "/proto/v1/question-2"),
    ],
)
def test_outer_root_path_is_not_doubled(outer_root_client, path: str, expected: str) -> None:
    r = outer_root_client.get(path, follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == expected
    assert r.headers["x-prototype-version-prefix"] == "/proto/v1"
