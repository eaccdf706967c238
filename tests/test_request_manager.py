"""Tests for SyncRequestManager.

Uses a real aiohttp server on a background thread, plus httpx's
MockTransport for status codes the server doesn't produce.
"""

import httpx
import pytest

from emojisheet.common.exceptions import (
    HTMLResponseAssumptionException,
    RequestFailedException,
    RequestTimeoutException,
)
from emojisheet.common.request_manager import SyncRequestManager
from emojisheet.extraction import parse
from tests.conftest import find_free_port


class TestSyncRequestManager:
    """Tests for downloading the cheat sheet."""

    def test_fetch_returns_body(self, server_url):
        """fetch() shall return the page text."""
        with SyncRequestManager(timeout=5.0) as manager:
            content = manager.fetch(f"{server_url}/")

        assert isinstance(content, str)
        assert '<div id="content">' in content

    def test_fetched_page_parses(self, server_url, expected_group_count):
        """The downloaded page shall feed straight into the parser."""
        url = f"{server_url}/"
        with SyncRequestManager(timeout=5.0) as manager:
            groups = parse(manager.fetch(url), source_url=url)

        assert len(groups) == expected_group_count

    def test_server_error_raises(self, server_url):
        """A 500 response shall raise HTMLResponseAssumptionException."""
        with SyncRequestManager(timeout=5.0) as manager:
            with pytest.raises(HTMLResponseAssumptionException) as exc_info:
                manager.fetch(f"{server_url}/error")

        assert exc_info.value.status_code == 500
        assert exc_info.value.expected_codes == [200]

    def test_timeout_raises(self, server_url):
        """A slow response shall raise RequestTimeoutException."""
        with SyncRequestManager(timeout=0.2) as manager:
            with pytest.raises(RequestTimeoutException) as exc_info:
                manager.fetch(f"{server_url}/slow")

        assert exc_info.value.timeout_seconds == 0.2

    def test_connection_refused_raises(self):
        """Nothing listening shall raise RequestFailedException."""
        url = f"http://127.0.0.1:{find_free_port()}/"

        with SyncRequestManager(timeout=2.0) as manager:
            with pytest.raises(RequestFailedException) as exc_info:
                manager.fetch(url)

        assert exc_info.value.url == url

    def test_non_200_success_code_raises(self):
        """Only 200 shall be accepted, not any 2xx."""
        transport = httpx.MockTransport(
            lambda request: httpx.Response(204)
        )

        with SyncRequestManager(transport=transport) as manager:
            with pytest.raises(HTMLResponseAssumptionException) as exc_info:
                manager.fetch("http://example.com/")

        assert exc_info.value.status_code == 204

    def test_not_found_raises(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(404, text="gone")
        )

        with SyncRequestManager(transport=transport) as manager:
            with pytest.raises(HTMLResponseAssumptionException):
                manager.fetch("http://example.com/")


UNDECLARED_PAGE = (
    "<html><body><div id=\"content\">"
    "<h2>Café \U0001f600</h2>"
    "<ul class=\"emojis\" id=\"food\">"
    "<li><div><span class=\"name\">piñata</span></div></li>"
    "</ul></div></body></html>"
)


class TestResponseDecoding:
    """Tests for decoding pages that carry no meta charset."""

    def serve(self, body: bytes, content_type: str) -> httpx.MockTransport:
        return httpx.MockTransport(
            lambda request: httpx.Response(
                200, content=body, headers={"content-type": content_type}
            )
        )

    def test_header_charset_utf8(self):
        """A UTF-8 header charset shall survive into the parsed names."""
        transport = self.serve(
            UNDECLARED_PAGE.encode("utf-8"), "text/html; charset=utf-8"
        )

        with SyncRequestManager(transport=transport) as manager:
            groups = parse(manager.fetch("http://example.com/"))

        assert groups[0].name == "Café \U0001f600"
        assert groups[0].emojis[0].name == "piñata"

    def test_header_charset_latin1(self):
        """A non-UTF-8 header charset shall be honoured."""
        page = UNDECLARED_PAGE.replace(" \U0001f600", "")
        transport = self.serve(
            page.encode("latin-1"), "text/html; charset=iso-8859-1"
        )

        with SyncRequestManager(transport=transport) as manager:
            groups = parse(manager.fetch("http://example.com/"))

        assert groups[0].name == "Café"
        assert groups[0].emojis[0].name == "piñata"

    def test_missing_header_charset_reads_utf8(self):
        """Without any charset the body shall be read as UTF-8."""
        transport = self.serve(UNDECLARED_PAGE.encode("utf-8"), "text/html")

        with SyncRequestManager(transport=transport) as manager:
            content = manager.fetch("http://example.com/")

        assert "Café \U0001f600" in content
