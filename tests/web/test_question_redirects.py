"""
tests.web.test_question_redirects

Purpose:
    End-to-end checks that question handlers, which redirect with bare paths,
    land the browser inside the version they were submitted from.
"""

from __future__ import annotations

import pytest

from prototype_kit.web.settings import Settings

FLOW = [
    ("/question-1", "/question-2"),
    ("/question-2", "/question-1"),
    ("/nested/question-1", "/nested/question-2"),
    ("/nested/question-2", "/nested/question-1"),
]


@pytest.mark.parametrize("version", ["v1", "v2"])
@pytest.mark.parametrize("path, next_path", FLOW)
def test_post_redirects_within_version(client, version: str, path: str, next_path: str) -> None:
    r = client.post(f"/{version}{path}", data={"answer": "yes"}, follow_redirects=False)
    assert r.status_code == 302, r.text
    assert r.headers["location"] == f"/{version}{next_path}"


def test_nested_redirect_keeps_prefix(client) -> None:
    r = client.post("/v1/nested/question-1", follow_redirects=False)
    assert r.headers["location"] == "/v1/nested/question-2"


def test_top_level_redirect_under_v2(client) -> None:
    r = client.post("/v2/question-2", follow_redirects=False)
    assert r.headers["location"] == "/v2/question-1"


def test_versions_never_cross_redirect(client) -> None:
    for path, _ in FLOW:
        r1 = client.post(f"/v1{path}", follow_redirects=False)
        r2 = client.post(f"/v2{path}", follow_redirects=False)
        assert r1.headers["location"].startswith("/v1/")
        assert r2.headers["location"].startswith("/v2/")


def test_following_redirect_renders_next_page(client) -> None:
    r = client.post("/v2/question-1")
    assert r.status_code == 200
    assert str(r.url).endswith("/v2/question-2")
    assert "Question 2 (revised)" in r.text


def test_redirect_status_is_configurable(client_factory) -> None:
    client = client_factory(Settings(redirect_status_code=303))
    r = client.post("/v1/question-1", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/v1/question-2"


def test_version_prefix_header_is_set(client) -> None:
    r = client.post("/v2/question-1", follow_redirects=False)
    assert r.headers["x-prototype-version-prefix"] == "/v2"
    assert r.headers.get("x-request-id")


def test_additional_versions_are_mounted(client_factory, tmp_path) -> None:
    (tmp_path / "v3").mkdir()
    client = client_factory(Settings(versions=("v3",), template_dir=tmp_path))
    r = client.post("/v3/nested/question-2", follow_redirects=False)
    assert r.headers["location"] == "/v3/nested/question-1"


def test_get_on_question_path_does_not_redirect(client) -> None:
    r = client.get("/v1/question-1", follow_redirects=False)
    assert r.status_code == 200


@pytest.mark.parametrize("method", ["post", "put", "delete"])
def test_unknown_submission_path_is_not_found(client, method: str) -> None:
    r = client.request(method.upper(), "/v1/no-such-question", follow_redirects=False)
    assert r.status_code == 404
    assert r.json() == {"detail": "Not Found"}
    assert "location" not in r.headers
