"""Prompt flows - the caller-facing operations.

Each function accepts a request model or a plain mapping and raises a
subclass of aisum.errors.FlowError on failure.
"""

from collections.abc import Mapping
from typing import Any

from aisum.llm import LLMClient
from aisum.models import (
    ArticleFetchRequest,
    ArticleFetchResponse,
    DigestRequest,
    DigestResponse,
    SummarizeRequest,
    SummarizeResponse,
)

from .base import PromptFlow, default_client
from .digest import DigestGenerator
from .extract import ArticleContentExtractor
from .summarize import ArticleSummarizer

__all__ = [
    "ArticleContentExtractor",
    "ArticleSummarizer",
    "DigestGenerator",
    "PromptFlow",
    "default_client",
    "generate_daily_digest",
    "get_article_content",
    "summarize_article",
]


def summarize_article(
    request: SummarizeRequest | Mapping[str, Any],
    client: LLMClient | None = None,
) -> SummarizeResponse:
    """Summarize pasted article text."""
    return ArticleSummarizer(client=client).invoke(request)


def get_article_content(
    request: ArticleFetchRequest | Mapping[str, Any],
    client: LLMClient | None = None,
    timeout: float | None = None,
) -> ArticleFetchResponse:
    """Fetch an article URL and extract its main body text."""
    return ArticleContentExtractor(client=client, timeout=timeout).invoke(request)


def generate_daily_digest(
    request: DigestRequest | Mapping[str, Any],
    client: LLMClient | None = None,
) -> DigestResponse:
    """Generate a daily digest for a list of interests."""
    return DigestGenerator(client=client).invoke(request)
