"""Shared prompt-flow contract: validate, render, call the model once, validate."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from aisum.config import get_settings
from aisum.errors import SchemaViolationError, UpstreamError, ValidationError
from aisum.llm import LLMClient, LLMError, LLMResponseError, create_client
from aisum.logging_config import get_logger

logger = get_logger("flows")

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


def default_client() -> LLMClient:
    """Build the LLM client described by application settings."""
    settings = get_settings()
    return create_client(
        provider=settings.llm_provider,
        api_key=settings.llm_api_key,
        model=settings.llm_model,
        timeout=settings.llm_timeout_seconds,
    )


class PromptFlow(ABC, Generic[RequestT, ResponseT]):
    """
    A single named operation mapping a typed request to a typed response.

    Subclasses declare the input and output models, a system prompt and a
    render() method. invoke() makes exactly one model call and never retries.
    """

    name: str
    input_model: type[RequestT]
    output_model: type[ResponseT]
    system_prompt: str

    def __init__(self, client: LLMClient | None = None):
        self.client = client if client is not None else default_client()

    @abstractmethod
    def render(self, request: RequestT) -> str:
        """Build the user prompt for a validated request."""

    def check(self, request: RequestT, response: ResponseT) -> None:
        """Extra output constraints that depend on the request."""

    def validate_request(self, request: RequestT | Mapping[str, Any]) -> RequestT:
        """Coerce a mapping (or model) into the input model."""
        try:
            return self.input_model.model_validate(request)
        except PydanticValidationError as exc:
            logger.warning(f"{self.name}: rejected request: {exc.error_count()} error(s)")
            raise ValidationError.from_pydantic(self.input_model.__name__, exc) from exc

    def invoke(self, request: RequestT | Mapping[str, Any]) -> ResponseT:
        """Validate the request, prompt the model and return validated output."""
        validated = self.validate_request(request)
        return self.run_prompt(validated, self.render(validated))

    def run_prompt(self, request: RequestT, prompt: str) -> ResponseT:
        """Send one prompt to the model and validate what comes back."""
        logger.debug(f"{self.name}: prompting model ({len(prompt)} chars)")

        try:
            response = self.client.generate(
                prompt=prompt,
                system=self.system_prompt,
                response_schema=self.output_model,
            )
        except LLMResponseError as exc:
            logger.warning(f"{self.name}: unparseable model output: {exc}")
            raise SchemaViolationError(f"{self.name}: {exc}") from exc
        except LLMError as exc:
            logger.warning(f"{self.name}: model call failed: {exc}")
            raise UpstreamError(f"{self.name}: {exc}") from exc
        except Exception as exc:
            logger.warning(f"{self.name}: model call failed: {exc}")
            raise UpstreamError(f"{self.name}: model call failed: {exc}") from exc

        try:
            output = self.output_model.model_validate(response.parsed)
        except PydanticValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
                for err in exc.errors()
            )
            logger.warning(f"{self.name}: output failed validation: {details}")
            raise SchemaViolationError(
                f"{self.name}: model output does not match "
                f"{self.output_model.__name__}: {details}"
            ) from exc

        self.check(request, output)

        logger.debug(
            f"{self.name}: done ({response.tokens_used} tokens)"
        )
        return output
