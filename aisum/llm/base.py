"""Provider-agnostic LLM interface and shared types."""

import json
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import BaseModel


class LLMError(Exception):
    """Raised when an LLM provider call fails."""


class LLMResponseError(LLMError):
    """Raised when a provider answers but the body is not a JSON object."""


@dataclass
class LLMResponse:
    """Provider-agnostic response from an LLM call."""

    parsed: dict[str, Any]
    raw_text: str
    input_tokens: int
    output_tokens: int

    @property
    def tokens_used(self) -> int:
        return self.input_tokens + self.output_tokens


class LLMClient(Protocol):
    """Protocol that all LLM providers must implement."""

    def generate(
        self,
        prompt: str,
        system: str,
        response_schema: type[BaseModel],
    ) -> LLMResponse:
        """Generate a structured JSON response."""
        ...


def parse_json_object(raw_text: str, provider: str) -> dict[str, Any]:
    """Decode a provider's text body into a JSON object."""
    if not raw_text:
        return {}

    text = raw_text.strip()
    # Some models wrap JSON in a markdown fence despite instructions.
    if text.startswith("```"):
        text = text.strip("`")
        if text.startswith("json"):
            text = text[4:]

    try:
        parsed = json.loads(text)
    except ValueError as exc:
        raise LLMResponseError(f"{provider} response parsing failed: {exc}") from exc

    if not isinstance(parsed, dict):
        raise LLMResponseError(
            f"{provider} response parsing failed: expected a JSON object, "
            f"got {type(parsed).__name__}"
        )
    return parsed
