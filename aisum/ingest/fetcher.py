"""
Article page fetching with error handling and timeout management.
"""

from time import perf_counter
from typing import NamedTuple

import httpx

from aisum.errors import FetchError
from aisum.logging_config import get_logger

logger = get_logger("fetcher")

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

DEFAULT_TIMEOUT = 30.0


class FetchedPage(NamedTuple):
    """Result of fetching an article page."""

    url: str
    final_url: str
    status_code: int
    content_type: str | None
    html: str
    response_time_ms: float


def fetch_page(url: str, timeout: float = DEFAULT_TIMEOUT) -> FetchedPage:
    """
    Fetch an article page with a single GET request.

    Args:
        url: Absolute URL of the article
        timeout: Request timeout in seconds

    Returns:
        FetchedPage with the decoded page markup

    Raises:
        FetchError: on transport failure, timeout, or any non-2xx status
    """
    logger.info(f"Fetching article: {url}")

    started = perf_counter()
    try:
        response = httpx.get(
            url,
            timeout=timeout,
            follow_redirects=True,
            headers=BROWSER_HEADERS,
        )
    except httpx.TimeoutException as e:
        logger.warning(f"Timeout fetching {url}: {e}")
        raise FetchError(f"Request timed out after {timeout}s: {url}", url=url) from e
    except httpx.HTTPError as e:
        logger.warning(f"HTTP error fetching {url}: {e}")
        raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e
    elapsed_ms = (perf_counter() - started) * 1000

    if not 200 <= response.status_code < 300:
        error_msg = _format_http_error(response)
        logger.warning(f"Article HTTP error: {error_msg}")
        raise FetchError(error_msg, url=url, status_code=response.status_code)

    logger.debug(f"Fetched {url} ({response.status_code}, {elapsed_ms:.0f}ms)")

    return FetchedPage(
        url=url,
        final_url=str(response.url),
        status_code=response.status_code,
        content_type=response.headers.get("content-type"),
        html=response.text,
        response_time_ms=elapsed_ms,
    )


def _format_http_error(response: httpx.Response) -> str:
    """Build a compact HTTP error message with diagnostics."""
    parts = [f"HTTP {response.status_code} for {response.url}"]
    if content_type := response.headers.get("content-type"):
        parts.append(f"content-type: {content_type}")
    return " | ".join(parts)
