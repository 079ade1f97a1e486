"""
tests.api.test_greeting

Purpose:
    Content negotiation on /greeting and the Vary header that keeps caches honest.

Covers:
    - JSON vs HTML selection by Accept
    - 406 error envelope (still carries Vary)
    - Negotiation helper edge cases

Author:
    Kanir Pandya

Created:
    2026-03-02
"""

from __future__ import annotations

import pytest

from vary_middleware.routes.greeting import negotiate_media_type


def test_greeting_html_by_default(client) -> None:
    r = client.get("/greeting", headers={"Accept": "text/html"})
    assert r.status_code == 200, r.text
    assert r.headers["content-type"].startswith("text/html")
    assert "<h1>Hello</h1>" in r.text
    assert r.headers.get_list("vary") == ["Accept"]


def test_greeting_json_for_api_clients(client) -> None:
    r = client.get("/greeting", headers={"Accept": "application/json"})
    assert r.status_code == 200, r.text
    assert r.json() == {"message": "Hello"}
    assert r.headers.get_list("vary") == ["Accept"]


def test_greeting_not_acceptable_envelope_has_vary(client) -> None:
    r = client.get("/greeting", headers={"Accept": "image/png"})
    assert r.status_code == 406, r.text

    data = r.json()
    assert data["error_code"] == "NOT_ACCEPTABLE"
    assert data["details"] == {"available": ["text/html", "application/json"]}
    assert r.headers.get_list("vary") == ["Accept"]


@pytest.mark.parametrize(
    ("accept", "expected"),
    [
        (None, "text/html"),
        ("", "text/html"),
        ("*/*", "text/html"),
        ("application/json", "application/json"),
        ("text/html;q=0.5, application/json", "application/json"),
        ("application/*", "application/json"),
        ("text/*;q=0.9, */*;q=0.1", "text/html"),
        ("text/html;q=0, */*", "application/json"),
        ("image/png", None),
        ("application/json;q=0", None),
    ],
)
def test_negotiate_media_type(accept, expected) -> None:
    assert negotiate_media_type(accept) == expected
