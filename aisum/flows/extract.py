"""Article content extraction flow: fetch the page, then extract with the model."""

from aisum.config import get_settings
from aisum.ingest.fetcher import DEFAULT_TIMEOUT, fetch_page
from aisum.ingest.parser import DEFAULT_MAX_PAGE_CHARS, trim_article_html
from aisum.llm import LLMClient
from aisum.logging_config import get_logger
from aisum.models import ArticleFetchRequest, ArticleFetchResponse

from .base import PromptFlow
from .prompts import CONTENT_EXTRACTION_SYSTEM, render_content_extraction

logger = get_logger("extract")


class ArticleContentExtractor(PromptFlow[ArticleFetchRequest, ArticleFetchResponse]):
    """Fetches an article URL and asks the model for its main body text.

    The page is fetched here rather than by the model, so extraction only
    ever sees the markup that was actually served.
    """

    name = "get_article_content"
    input_model = ArticleFetchRequest
    output_model = ArticleFetchResponse
    system_prompt = CONTENT_EXTRACTION_SYSTEM

    def __init__(
        self,
        client: LLMClient | None = None,
        timeout: float | None = None,
        max_page_chars: int | None = None,
    ):
        if client is None:
            settings = get_settings()
            timeout = timeout or settings.fetch_timeout_seconds
            max_page_chars = max_page_chars or settings.max_page_chars
        super().__init__(client)
        self.timeout = timeout or DEFAULT_TIMEOUT
        self.max_page_chars = max_page_chars or DEFAULT_MAX_PAGE_CHARS

    def render(self, request: ArticleFetchRequest) -> str:
        """Fetch and trim the page; a failed fetch raises before any model call."""
        page = fetch_page(str(request.url), timeout=self.timeout)
        markup = trim_article_html(page.html, max_chars=self.max_page_chars)
        logger.info(f"Extracting content from {page.final_url} ({len(markup)} chars of markup)")
        return render_content_extraction(page.final_url, markup)
