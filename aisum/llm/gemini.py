"""Google Gemini implementation of the LLM client interface."""

from google import genai
from google.genai import types
from pydantic import BaseModel

from .base import LLMError, LLMResponse, LLMResponseError, parse_json_object


class GeminiClient:
    """Google Gemini LLM provider."""

    def __init__(self, api_key: str, model: str, timeout: float = 30.0):
        self.client = genai.Client(api_key=api_key)
        self.model = model
        self.timeout = timeout

    def generate(
        self,
        prompt: str,
        system: str,
        response_schema: type[BaseModel],
    ) -> LLMResponse:
        """Generate JSON with Gemini and normalize the response."""
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system,
                    response_mime_type="application/json",
                    response_schema=response_schema,
                    http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
                ),
            )
        except Exception as exc:
            raise LLMError(f"Gemini API call failed: {exc}") from exc

        raw_text = getattr(response, "text", "") or ""

        parsed_obj = getattr(response, "parsed", None)
        if isinstance(parsed_obj, BaseModel):
            parsed = parsed_obj.model_dump()
        elif isinstance(parsed_obj, dict):
            parsed = parsed_obj
        elif parsed_obj is not None:
            raise LLMResponseError(
                f"Gemini response parsing failed: unexpected {type(parsed_obj).__name__}"
            )
        else:
            parsed = parse_json_object(raw_text, "Gemini")

        usage = getattr(response, "usage_metadata", None)
        input_tokens = int(getattr(usage, "prompt_token_count", 0) or 0) if usage else 0
        output_tokens = int(getattr(usage, "candidates_token_count", 0) or 0) if usage else 0

        return LLMResponse(
            parsed=parsed,
            raw_text=raw_text,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
