"""
Daily digest flow.

There is no article corpus behind the digest: the model writes the overview
and fabricates plausible article titles for the requested interests.
"""

from aisum.errors import SchemaViolationError
from aisum.models import DigestRequest, DigestResponse

from .base import PromptFlow
from .prompts import DAILY_DIGEST_SYSTEM, render_daily_digest


class DigestGenerator(PromptFlow[DigestRequest, DigestResponse]):
    """Generates a daily digest tailored to a list of interests."""

    name = "generate_daily_digest"
    input_model = DigestRequest
    output_model = DigestResponse
    system_prompt = DAILY_DIGEST_SYSTEM

    def render(self, request: DigestRequest) -> str:
        return render_daily_digest(request.interests, request.article_count)

    def check(self, request: DigestRequest, response: DigestResponse) -> None:
        if len(response.articles) > request.article_count:
            raise SchemaViolationError(
                f"{self.name}: model returned {len(response.articles)} articles, "
                f"expected at most {request.article_count}"
            )
