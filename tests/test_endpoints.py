"""
HTTP-level tests for the catch-all redirect endpoint.
"""

import asyncio
import logging

import pytest

from redirector.core.setting import settings
from redirector.main import app
from tests.fakes import FailingRedirectStore, RecordingRedirectStore, SAMPLE_REDIRECTS


@pytest.fixture(autouse=True)
def default_redirect_status_code(monkeypatch):
    """Run every test with REDIRECT_STATUS_CODE unset (0)."""
    monkeypatch.setattr(settings, "REDIRECT_STATUS_CODE", 0)


async def send_raw_get(raw_path: bytes):
    """
    Call the ASGI app directly with a raw request path.

    HTTP clients encode and normalize paths before sending them, so this is
    the only way to deliver an unencoded or dot-segment path to the app.
    """
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": raw_path.decode("utf-8"),
        "raw_path": raw_path,
        "query_string": b"",
        "root_path": "",
        "headers": [(b"host", b"testserver")],
        "client": ("127.0.0.1", 50000),
        "server": ("testserver", 80),
    }
    request_sent = False
    messages = []

    async def receive():
        nonlocal request_sent
        if not request_sent:
            request_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        # Client stays connected until the response is complete
        await asyncio.Event().wait()

    async def send(message):
        messages.append(message)

    await app(scope, receive, send)

    start = next(m for m in messages if m["type"] == "http.response.start")
    return start["status"], dict(start["headers"])


class TestRedirects:
    """Successful lookups."""

    def test_redirects_with_default_status_code(self, client):
        response = client.get("/old-page")
        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/new"

    def test_redirects_with_configured_status_code(self, make_client, sample_store):
        client = make_client(sample_store, redirect_status_code=301)
        response = client.get("/old-page")
        assert response.status_code == 301
        assert response.headers["location"] == "https://example.com/new"

    @pytest.mark.parametrize("configured, expected", [(0, 302), (None, 302), (308, 308)])
    def test_status_code_from_settings(self, client, monkeypatch, configured, expected):
        monkeypatch.setattr(settings, "REDIRECT_STATUS_CODE", configured)
        response = client.get("/old-page")
        assert response.status_code == expected

    def test_target_url_is_canonicalized(self, client):
        response = client.get("/bare-host")
        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/"

    def test_query_string_is_ignored(self, client):
        response = client.get("/old-page?utm_source=newsletter")
        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/new"

    def test_percent_encoded_path_is_used_verbatim(self, client):
        response = client.get("/caf%C3%A9")
        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com/cafe"


class TestNotFound:
    """Lookups that miss."""

    def test_missing_path_returns_404(self, client):
        response = client.get("/missing")
        assert response.status_code == 404
        assert "404 Not Found" in response.text
        assert response.headers["content-type"].startswith("text/html")

    @pytest.mark.parametrize("path", ["/old-page/", "/OLD-PAGE", "/old-page/extra", "/"])
    def test_paths_are_not_normalized(self, client, path):
        response = client.get(path)
        assert response.status_code == 404

    def test_missing_path_is_not_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="redirector"):
            client.get("/missing")
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


class TestMethodNotAllowed:
    """Non-GET requests are rejected before any lookup."""

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    def test_non_get_methods_return_405(self, client, method):
        response = client.request(method, "/old-page")
        assert response.status_code == 405
        assert "405 Method Not Allowed" in response.text
        assert "location" not in response.headers

    def test_head_returns_405(self, client):
        response = client.head("/old-page")
        assert response.status_code == 405

    def test_unrouted_method_returns_html_405(self, client):
        response = client.request("PROPFIND", "/old-page")
        assert response.status_code == 405
        assert response.headers["content-type"].startswith("text/html")
        assert "405 Method Not Allowed" in response.text

    def test_store_is_not_queried(self, make_client):
        store = RecordingRedirectStore(SAMPLE_REDIRECTS)
        client = make_client(store)
        client.post("/old-page")
        assert store.requested_keys == []


class TestServerErrors:
    """Store failures and malformed targets."""

    def test_invalid_target_returns_500(self, client):
        response = client.get("/bad-target")
        assert response.status_code == 500
        assert "500 Internal Server Error" in response.text
        assert "location" not in response.headers

    def test_empty_target_returns_500(self, client):
        response = client.get("/empty-target")
        assert response.status_code == 500

    def test_invalid_target_is_logged(self, client, caplog):
        with caplog.at_level(logging.ERROR, logger="redirector"):
            client.get("/bad-target")
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert any('"/bad-target"' in message for message in messages)

    def test_store_failure_returns_500(self, make_client):
        client = make_client(FailingRedirectStore())
        response = client.get("/old-page")
        assert response.status_code == 500
        assert "500 Internal Server Error" in response.text
        assert "location" not in response.headers

    def test_store_failure_does_not_leak_details(self, make_client):
        client = make_client(FailingRedirectStore())
        response = client.get("/old-page")
        assert "unreachable" not in response.text

    def test_store_failure_is_logged(self, make_client, caplog):
        client = make_client(FailingRedirectStore())
        with caplog.at_level(logging.ERROR, logger="redirector"):
            client.get("/old-page")
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert any('"/old-page"' in m and "unreachable" in m for m in messages)


class TestIdempotence:
    """Identical requests against identical mappings give identical responses."""

    @pytest.mark.parametrize("method, path", [
        ("GET", "/old-page"),
        ("GET", "/missing"),
        ("GET", "/bad-target"),
        ("POST", "/old-page"),
    ])
    def test_repeated_requests_are_byte_identical(self, client, method, path):
        first = client.request(method, path)
        second = client.request(method, path)
        assert first.status_code == second.status_code
        assert first.content == second.content
        assert dict(first.headers) == dict(second.headers)


class TestRawRequestPaths:
    """Request paths are keyed the way URL parsing normalizes them."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_path", ["/café".encode(), b"/caf%C3%A9"])
    async def test_non_ascii_path_matches_encoded_key(self, make_client, sample_store, raw_path):
        make_client(sample_store)
        status_code, headers = await send_raw_get(raw_path)
        assert status_code == 302
        assert headers[b"location"] == b"https://example.com/cafe"

    @pytest.mark.asyncio
    async def test_dot_segments_are_resolved(self, make_client, sample_store):
        make_client(sample_store)
        status_code, headers = await send_raw_get(b"/a/../old-page")
        assert status_code == 302
        assert headers[b"location"] == b"https://example.com/new"
