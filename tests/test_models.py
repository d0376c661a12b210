"""Tests for request and response models."""

import pytest
from pydantic import ValidationError

from aisum.models import (
    ArticleFetchRequest,
    DigestRequest,
    DigestResponse,
    SummarizeRequest,
)


class TestSummarizeRequest:
    def test_content_is_stripped_before_length_check(self) -> None:
        """Padding whitespace does not count toward the minimum length."""
        with pytest.raises(ValidationError):
            SummarizeRequest(article_content=" " * 200 + "short")

    def test_accepts_100_characters(self) -> None:
        request = SummarizeRequest(article_content="a" * 100)
        assert len(request.article_content) == 100


class TestArticleFetchRequest:
    def test_requires_absolute_url(self) -> None:
        with pytest.raises(ValidationError):
            ArticleFetchRequest(url="/relative/path")

    def test_rejects_non_http_scheme(self) -> None:
        with pytest.raises(ValidationError):
            ArticleFetchRequest(url="ftp://example.com/article")


class TestDigestRequest:
    def test_article_count_defaults_to_five(self) -> None:
        assert DigestRequest(interests=["robotics"]).article_count == 5

    def test_interests_cleaned_and_deduplicated(self) -> None:
        """Whitespace is trimmed and repeats dropped, keeping first-seen order."""
        request = DigestRequest(interests=[" robotics ", "ethical ai", "robotics"])
        assert request.interests == ["robotics", "ethical ai"]

    def test_blank_interest_rejected(self) -> None:
        with pytest.raises(ValidationError, match="position 1"):
            DigestRequest(interests=["robotics", "   "])

    def test_article_count_upper_bound(self) -> None:
        with pytest.raises(ValidationError):
            DigestRequest(interests=["robotics"], article_count=21)


class TestDigestResponse:
    def test_blank_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DigestResponse(summary="Overview", articles=["Real title", " "])

    def test_empty_article_list_allowed(self) -> None:
        assert DigestResponse(summary="Overview", articles=[]).articles == []
