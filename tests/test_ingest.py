"""Tests for the ingestion module."""

from unittest.mock import patch

import httpx
import pytest

from aisum.errors import FetchError
from aisum.ingest.fetcher import fetch_page
from aisum.ingest.parser import trim_article_html


class TestTrimArticleHtml:
    """Tests for page markup reduction."""

    def test_keeps_article_element(self):
        """Should keep only the <article> subtree."""
        html = (
            "<html><body><nav>Menu</nav>"
            "<article><p>Story text</p></article>"
            "<footer>Footer</footer></body></html>"
        )
        trimmed = trim_article_html(html)
        assert "Story text" in trimmed
        assert "Menu" not in trimmed
        assert "Footer" not in trimmed

    def test_removes_scripts_and_comments(self):
        html = (
            "<html><body><script>alert('bad')</script><!-- tracking -->"
            "<p>Good</p></body></html>"
        )
        trimmed = trim_article_html(html)
        assert "alert" not in trimmed
        assert "tracking" not in trimmed
        assert "Good" in trimmed

    def test_picks_longest_article(self):
        """Pages with teaser cards should resolve to the main story."""
        html = (
            "<html><body>"
            "<article><p>Teaser</p></article>"
            "<article><p>The full story with many more words in it.</p></article>"
            "</body></html>"
        )
        trimmed = trim_article_html(html)
        assert "full story" in trimmed
        assert "Teaser" not in trimmed

    def test_falls_back_to_main(self):
        html = (
            "<html><body><aside>Related</aside>"
            "<main><p>Main content</p></main></body></html>"
        )
        trimmed = trim_article_html(html)
        assert trimmed.startswith("<main>")
        assert "Related" not in trimmed

    def test_drops_noise_attributes(self):
        html = (
            '<article><p class="css-1a2b3c" data-track="x" style="color:red">Text</p>'
            '<a href="https://example.com/more" onclick="go()">More</a></article>'
        )
        trimmed = trim_article_html(html)
        assert "class=" not in trimmed
        assert "data-track" not in trimmed
        assert "onclick" not in trimmed
        assert 'href="https://example.com/more"' in trimmed

    def test_caps_length(self):
        html = "<article><p>" + "x" * 5000 + "</p></article>"
        assert len(trim_article_html(html, max_chars=1000)) == 1000


class TestFetchPage:
    """Tests for article page fetching."""

    @patch("aisum.ingest.fetcher.httpx.get")
    def test_uses_httpx_with_timeout(self, mock_get):
        """fetch_page should use httpx.get with the timeout and follow redirects."""
        mock_get.return_value = httpx.Response(
            200,
            text="<html><body><p>Hi</p></body></html>",
            headers={"content-type": "text/html"},
            request=httpx.Request("GET", "https://example.com/final"),
        )

        page = fetch_page("https://example.com/story", timeout=15)

        mock_get.assert_called_once()
        call_kwargs = mock_get.call_args.kwargs
        assert call_kwargs["timeout"] == 15
        assert call_kwargs["follow_redirects"] is True
        assert page.status_code == 200
        assert page.final_url == "https://example.com/final"
        assert page.content_type == "text/html"
        assert "<p>Hi</p>" in page.html

    @pytest.mark.parametrize("status_code", [301, 403, 404, 500])
    @patch("aisum.ingest.fetcher.httpx.get")
    def test_non_success_status_raises(self, mock_get, status_code):
        mock_get.return_value = httpx.Response(
            status_code,
            request=httpx.Request("GET", "https://example.com/story"),
        )

        with pytest.raises(FetchError) as exc_info:
            fetch_page("https://example.com/story")

        assert exc_info.value.status_code == status_code
        assert f"HTTP {status_code}" in str(exc_info.value)

    @patch("aisum.ingest.fetcher.httpx.get")
    def test_timeout_raises_fetch_error(self, mock_get):
        """A timeout from httpx should become a FetchError, not a crash."""
        mock_get.side_effect = httpx.TimeoutException("timed out")

        with pytest.raises(FetchError, match="timed out"):
            fetch_page("https://example.com/slow", timeout=5)

    @patch("aisum.ingest.fetcher.httpx.get")
    def test_transport_error_raises_fetch_error(self, mock_get):
        mock_get.side_effect = httpx.ConnectError("name resolution failed")

        with pytest.raises(FetchError) as exc_info:
            fetch_page("https://example.invalid/story")

        assert exc_info.value.status_code is None
        assert exc_info.value.url == "https://example.invalid/story"
