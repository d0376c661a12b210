"""
Prompt templates for the flows.

Each flow has a system prompt and a user template. Templates are filled with
str.format, so literal braces are doubled.
"""

ARTICLE_SUMMARY_SYSTEM = """You are a skilled news editor who writes concise,
accurate summaries of news articles. Your summaries help busy readers grasp
the essence of a story in under a minute.

Your summaries should:
- Capture the main event or argument
- Note who is involved and why it matters
- Stay faithful to the article; never add facts it does not contain
- Be written in clear, direct prose

Always respond with valid JSON matching the requested schema."""

ARTICLE_SUMMARY_USER = """Summarize the following news article.

<article>
{article_content}
</article>

Respond with JSON in this exact format:
{{
    "summary": "a concise summary of the article in one or two short paragraphs"
}}"""

CONTENT_EXTRACTION_SYSTEM = """You extract the main body text of news articles
from web page markup. You remove every piece of boilerplate: headers, footers,
navigation, ads, cookie notices, related links, share buttons and comments.
You never summarize, paraphrase or add text.

Always respond with valid JSON matching the requested schema."""

CONTENT_EXTRACTION_USER = """Extract the main text content of the article from
this page markup, removing all boilerplate like headers, footers, ads, and
navigation. Keep paragraph breaks.

Source URL: {url}

<markup>
{markup}
</markup>

Respond with JSON in this exact format:
{{
    "article_content": "the full article body as plain text"
}}"""

DAILY_DIGEST_SYSTEM = """You are an AI news aggregator that provides a daily
digest of AI-related news articles. You deliver the most impactful and
relevant information for the reader's interests.

Always respond with valid JSON matching the requested schema."""

DAILY_DIGEST_USER = """The user is interested in the following topics:
{interest_list}

Please provide a summary of the top {article_count} articles, and a list of
summarized article titles. Focus on delivering the most impactful and relevant
information to the user.

Respond with JSON in this exact format:
{{
    "summary": "a concise overview of the main AI news stories, tailored to the user's interests",
    "articles": ["title of article 1", "title of article 2"]
}}

List at most {article_count} article titles."""

TRUNCATION_MARKER = "\n\n[Content truncated...]"
DEFAULT_MAX_ARTICLE_CHARS = 30_000


def truncate_content(content: str, max_chars: int) -> str:
    """Cut article text to max_chars, marking the cut."""
    if len(content) <= max_chars:
        return content
    return content[:max_chars] + TRUNCATION_MARKER


def render_article_summary(article_content: str, max_chars: int) -> str:
    return ARTICLE_SUMMARY_USER.format(
        article_content=truncate_content(article_content, max_chars),
    )


def render_content_extraction(url: str, markup: str) -> str:
    return CONTENT_EXTRACTION_USER.format(url=url, markup=markup)


def render_daily_digest(interests: list[str], article_count: int) -> str:
    interest_list = "\n".join(f"- {interest}" for interest in interests)
    return DAILY_DIGEST_USER.format(
        interest_list=interest_list,
        article_count=article_count,
    )
