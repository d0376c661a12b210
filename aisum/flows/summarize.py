"""Article summarization flow."""

from aisum.config import get_settings
from aisum.llm import LLMClient
from aisum.models import SummarizeRequest, SummarizeResponse

from .base import PromptFlow
from .prompts import ARTICLE_SUMMARY_SYSTEM, DEFAULT_MAX_ARTICLE_CHARS, render_article_summary


class ArticleSummarizer(PromptFlow[SummarizeRequest, SummarizeResponse]):
    """Summarizes pasted article text."""

    name = "summarize_article"
    input_model = SummarizeRequest
    output_model = SummarizeResponse
    system_prompt = ARTICLE_SUMMARY_SYSTEM

    def __init__(self, client: LLMClient | None = None, max_article_chars: int | None = None):
        # Settings are only consulted when the client comes from settings too
        if client is None:
            max_article_chars = max_article_chars or get_settings().max_article_chars
        super().__init__(client)
        self.max_article_chars = max_article_chars or DEFAULT_MAX_ARTICLE_CHARS

    def render(self, request: SummarizeRequest) -> str:
        return render_article_summary(request.article_content, self.max_article_chars)
