"""Tests for the preview HTTP endpoint.

The app runs under the FastAPI TestClient (lifespan included, so the shared
fetcher is real) while ``respx`` intercepts its outbound ``httpx`` calls.
"""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from linkpreview.api.app import create_app
from linkpreview.errors import ParseFailure
from linkpreview.scraper.fetcher import Fetcher

_TARGET = "https://www.example.com/blog/post"

_PAGE = """\
<html><head>
  <title>Ignored</title>
  <meta property="og:title" content="Hello">
  <meta property="og:description" content="World">
  <meta property="og:image" content="img/cover.png">
  <meta property="og:url" content="https://example.com/blog/post">
  <meta property="og:site_name" content="Example">
  <meta property="og:type" content="article">
  <link rel="icon" href="/favicon.ico">
</head></html>
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestPreviewSuccess:
    def test_returns_all_fields(self, client) -> None:
        with respx.mock:
            respx.get(_TARGET).mock(return_value=httpx.Response(200, text=_PAGE))
            resp = client.get("/", params={"url": _TARGET})

        assert resp.status_code == 200
        assert resp.json() == {
            "title": "Hello",
            "description": "World",
            "domain": "example.com",
            "favicon": "https://www.example.com/favicon.ico",
            "image": "https://www.example.com/blog/img/cover.png",
            "og_url": "https://example.com/blog/post",
            "sitename": "Example",
            "type": "article",
        }

    def test_empty_page_returns_nulls(self, client) -> None:
        with respx.mock:
            respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, text="<html></html>")
            )
            resp = client.get("/", params={"url": "https://example.com/"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["domain"] == "example.com"
        assert all(body[key] is None for key in body if key != "domain")

    def test_user_agent_header_forwarded(self, client) -> None:
        with respx.mock:
            route = respx.get(_TARGET).mock(return_value=httpx.Response(200, text=_PAGE))
            client.get("/", params={"url": _TARGET}, headers={"User-Agent": "PreviewBot/2.0"})

        assert route.calls.last.request.headers["User-Agent"] == "PreviewBot/2.0"

    def test_latin1_user_agent_header_forwarded(self, client) -> None:
        with respx.mock:
            route = respx.get(_TARGET).mock(return_value=httpx.Response(200, text=_PAGE))
            resp = client.get(
                "/", params={"url": _TARGET}, headers={"User-Agent": "Bot\xe9/1.0".encode("latin-1")}
            )

        assert resp.status_code == 200
        raw = {name.lower(): value for name, value in route.calls.last.request.headers.raw}
        assert raw[b"user-agent"] == b"Bot\xe9/1.0"

    def test_shared_fetcher_created_by_lifespan(self, client) -> None:
        assert isinstance(client.app.state.fetcher, Fetcher)


class TestPreviewErrors:
    def test_missing_url_is_400(self, client) -> None:
        with respx.mock:
            resp = client.get("/")
            assert not respx.calls

        assert resp.status_code == 400
        assert "url" in resp.json()["detail"]

    @pytest.mark.parametrize("bad", ["not-a-url", "/relative", "ftp://example.com/x"])
    def test_malformed_url_is_400_without_network(self, client, bad: str) -> None:
        with respx.mock:
            resp = client.get("/", params={"url": bad})
            assert not respx.calls

        assert resp.status_code == 400

    def test_unreachable_target_is_502(self, client) -> None:
        with respx.mock:
            respx.get("https://nowhere.invalid/").mock(
                side_effect=httpx.ConnectError("DNS lookup failed")
            )
            resp = client.get("/", params={"url": "https://nowhere.invalid/"})

        assert resp.status_code == 502
        assert "nowhere.invalid" in resp.json()["detail"]

    @pytest.mark.parametrize("bad", ["http://example.com/a\x7fb", "http://\u2603.com/"])
    def test_url_rejected_by_http_client_is_400(self, client, bad: str) -> None:
        with respx.mock:
            resp = client.get("/", params={"url": bad})
            assert not respx.calls

        assert resp.status_code == 400

    def test_upstream_404_is_502(self, client) -> None:
        with respx.mock:
            respx.get(_TARGET).mock(return_value=httpx.Response(404))
            resp = client.get("/", params={"url": _TARGET})

        assert resp.status_code == 502

    def test_parse_failure_is_422(self, client) -> None:
        with respx.mock:
            respx.get(_TARGET).mock(return_value=httpx.Response(200, text=_PAGE))
            with patch(
                "linkpreview.service.parse_document", side_effect=ParseFailure("no tree")
            ):
                resp = client.get("/", params={"url": _TARGET})

        assert resp.status_code == 422

    def test_failure_does_not_affect_next_request(self, client) -> None:
        with respx.mock:
            respx.get("https://nowhere.invalid/").mock(side_effect=httpx.ConnectError("boom"))
            respx.get(_TARGET).mock(return_value=httpx.Response(200, text=_PAGE))

            first = client.get("/", params={"url": "https://nowhere.invalid/"})
            second = client.get("/", params={"url": _TARGET})

        assert first.status_code == 502
        assert second.status_code == 200
        assert second.json()["title"] == "Hello"


def test_health(client) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
