"""Ingestion module - fetching and trimming article pages."""

from .fetcher import FetchedPage, fetch_page
from .parser import trim_article_html

__all__ = ["FetchedPage", "fetch_page", "trim_article_html"]
