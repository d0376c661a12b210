"""Error types raised by the prompt flows."""

from pydantic import ValidationError as PydanticValidationError


class FlowError(Exception):
    """Base class for every failure a flow can raise."""


class ValidationError(FlowError, ValueError):
    """Raised when a request does not match its input schema."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []

    @classmethod
    def from_pydantic(cls, model_name: str, exc: PydanticValidationError) -> "ValidationError":
        """Build an error that names each offending field."""
        fields = [_format_loc(err["loc"]) for err in exc.errors()]
        details = "; ".join(
            f"{_format_loc(err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return cls(f"Invalid {model_name}: {details}", fields=fields)


class FetchError(FlowError):
    """Raised when a source URL cannot be fetched."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class UpstreamError(FlowError):
    """Raised when the model provider call fails or times out."""


class SchemaViolationError(FlowError):
    """Raised when model output cannot be coerced into the output schema."""


def _format_loc(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "<root>"
