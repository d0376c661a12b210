"""
Request and response models for the prompt flows.

Using Pydantic for validation and serialization. Every record is transient:
built when a flow is invoked and dropped once the caller has the result.
"""

from pydantic import BaseModel, Field, HttpUrl, field_validator

MIN_ARTICLE_CHARS = 100
MAX_DIGEST_ARTICLES = 20


class SummarizeRequest(BaseModel):
    """Article text to summarize."""

    article_content: str = Field(
        ...,
        min_length=MIN_ARTICLE_CHARS,
        description="The full text content of the article to summarize",
    )

    @field_validator("article_content", mode="before")
    @classmethod
    def strip_content(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class SummarizeResponse(BaseModel):
    """Model-generated article summary."""

    summary: str = Field(..., min_length=1, description="A concise summary of the article")


class ArticleFetchRequest(BaseModel):
    """URL of an article whose main content should be extracted."""

    url: HttpUrl = Field(..., description="The URL of the article to fetch")


class ArticleFetchResponse(BaseModel):
    """Main body text of a fetched article."""

    article_content: str = Field(
        ...,
        min_length=1,
        description="The main text content of the article, without boilerplate",
    )


class DigestRequest(BaseModel):
    """Interests and article count for a daily digest."""

    interests: list[str] = Field(
        ...,
        min_length=1,
        description="Topics the user is interested in",
    )
    article_count: int = Field(
        default=5,
        ge=1,
        le=MAX_DIGEST_ARTICLES,
        description="The number of articles to include in the daily digest",
    )

    @field_validator("interests")
    @classmethod
    def clean_interests(cls, value: list[str]) -> list[str]:
        cleaned: list[str] = []
        for index, interest in enumerate(value):
            topic = interest.strip()
            if not topic:
                raise ValueError(f"interest at position {index} is empty")
            if topic not in cleaned:
                cleaned.append(topic)
        return cleaned


class DigestResponse(BaseModel):
    """Model-generated digest: one overview plus article titles."""

    summary: str = Field(
        ...,
        min_length=1,
        description="A summary of the top AI news articles, tailored to the user's interests",
    )
    articles: list[str] = Field(
        ...,
        description="A list of summarized article titles",
    )

    @field_validator("articles")
    @classmethod
    def reject_blank_titles(cls, value: list[str]) -> list[str]:
        if any(not title.strip() for title in value):
            raise ValueError("article titles must be non-empty")
        return [title.strip() for title in value]
