"""
HTML cleanup for article pages.

Pages are reduced to the element most likely to hold the article body
before the markup is handed to the model for extraction.
"""

import re

from bs4 import BeautifulSoup, Comment, FeatureNotFound

# Tags that never contain article body text
BOILERPLATE_TAGS = [
    "script",
    "style",
    "noscript",
    "svg",
    "iframe",
    "form",
    "nav",
    "header",
    "footer",
    "aside",
]

# Attributes worth keeping for the model; everything else is noise
KEPT_ATTRIBUTES = {"href", "alt", "title"}

DEFAULT_MAX_PAGE_CHARS = 60_000


def _make_soup(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "lxml")
    except FeatureNotFound:
        return BeautifulSoup(html, "html.parser")


def _strip_boilerplate(soup: BeautifulSoup) -> None:
    for comment in soup.find_all(string=lambda t: isinstance(t, Comment)):
        comment.extract()
    for tag in soup.find_all(BOILERPLATE_TAGS):
        tag.decompose()


def _main_element(soup: BeautifulSoup):
    """Pick the element that most likely wraps the article body."""
    articles = soup.find_all("article")
    if articles:
        return max(articles, key=lambda tag: len(tag.get_text(strip=True)))
    return soup.find("main") or soup.body or soup


def trim_article_html(raw_html: str, max_chars: int = DEFAULT_MAX_PAGE_CHARS) -> str:
    """Reduce page HTML to the article body markup.

    Removes scripts, styles, navigation, headers, footers and other
    chrome, keeps the <article> element (or <main>, or <body>), and
    drops attributes the model does not need.
    """
    soup = _make_soup(raw_html)
    _strip_boilerplate(soup)
    main = _main_element(soup)

    for tag in main.find_all(True):
        tag.attrs = {k: v for k, v in tag.attrs.items() if k in KEPT_ATTRIBUTES}

    trimmed = str(main)
    trimmed = re.sub(r"\n\s*\n+", "\n", trimmed)
    if len(trimmed) > max_chars:
        trimmed = trimmed[:max_chars]
    return trimmed.strip()