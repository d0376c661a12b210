"""Configuration management using Pydantic Settings."""

from pathlib import Path
from typing import Literal, Self

import yaml
from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from aisum.llm import PROVIDER_DEFAULTS

# XDG config directory for user configuration
XDG_CONFIG_PATH = Path.home() / ".config" / "aisum"

DEFAULT_INTERESTS: dict[str, str] = {
    "machine learning": "Machine Learning",
    "neural networks": "Neural Networks",
    "computer vision": "Computer Vision",
    "natural language processing": "Natural Language Processing (NLP)",
    "robotics": "Robotics",
    "ethical ai": "Ethical AI",
    "generative ai": "Generative AI",
}


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=[
            XDG_CONFIG_PATH / "config.env",  # User config (lower priority)
            ".env",  # Project .env (higher priority)
        ],
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM
    llm_provider: Literal["gemini", "openai", "anthropic"] = Field(
        default="gemini",
        description="LLM provider to use",
    )
    llm_api_key: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("LLM_API_KEY", "GOOGLE_API_KEY"),
        description="API key for configured LLM provider",
    )
    llm_model: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LLM_MODEL", "GEMINI_MODEL"),
        description="Model name for configured LLM provider",
    )
    llm_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Timeout for a single model call"
    )

    # Fetching
    fetch_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Timeout for fetching an article URL"
    )

    # Processing
    max_article_chars: int = Field(
        default=30_000, ge=1000, description="Article text beyond this is truncated"
    )
    max_page_chars: int = Field(
        default=60_000, ge=1000, description="Max page markup sent for extraction"
    )
    digest_article_count: int = Field(
        default=5, ge=1, le=20, description="Default number of digest articles"
    )

    # Paths
    config_dir: Path = Field(default=Path("config"), description="Config directory")

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    @model_validator(mode="after")
    def apply_llm_defaults(self) -> Self:
        """Fill provider-specific model defaults when omitted."""
        provider = self.llm_provider

        # A legacy GEMINI_MODEL left in the environment must not leak into
        # another provider's requests.
        if (
            provider != "gemini"
            and self.llm_model
            and self.llm_model == PROVIDER_DEFAULTS["gemini"]
        ):
            self.llm_model = None

        if self.llm_model is None:
            self.llm_model = PROVIDER_DEFAULTS[provider]
        return self

    @property
    def interests_path(self) -> Path:
        return self.config_dir / "interests.yaml"


class InterestEntry(BaseModel):
    """Validated interest entry from interests.yaml."""

    id: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)

    @field_validator("id", "label", mode="before")
    @classmethod
    def strip_value(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class InterestConfig:
    """Catalog of selectable digest interests."""

    def __init__(self, config_path: Path):
        self.config_path = config_path
        self._interests: dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        """Load interests from YAML file, falling back to the built-in catalog."""
        if not self.config_path.exists():
            self._interests = dict(DEFAULT_INTERESTS)
            return

        with open(self.config_path) as file_handle:
            data = yaml.safe_load(file_handle) or {}

        if not isinstance(data, dict):
            raise ValueError("Invalid interests.yaml: top-level structure must be a mapping")

        raw_interests = data.get("interests", {})
        if raw_interests is None:
            self._interests = dict(DEFAULT_INTERESTS)
            return
        if not isinstance(raw_interests, dict):
            raise ValueError("Invalid interests.yaml: 'interests' must be a mapping")

        validated: dict[str, str] = {}
        validation_errors: list[str] = []

        for raw_id, raw_label in raw_interests.items():
            label = raw_id if raw_label is None else raw_label
            try:
                entry = InterestEntry.model_validate({"id": str(raw_id), "label": str(label)})
            except ValidationError as exc:
                details = "; ".join(
                    f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                    for err in exc.errors()
                )
                validation_errors.append(f"{raw_id!r}: {details}")
                continue

            key = entry.id.lower()
            if key in validated:
                validation_errors.append(f"Duplicate interest id: {entry.id}")
                continue
            validated[key] = entry.label

        if validation_errors:
            rendered = "\n  - ".join(validation_errors)
            raise ValueError(f"Invalid interests.yaml entries:\n  - {rendered}")

        self._interests = validated

    @property
    def interests(self) -> dict[str, str]:
        """Get all configured interests as {id: label}."""
        return self._interests

    def get_ids(self) -> list[str]:
        """Get interest ids in catalog order."""
        return list(self._interests)

    def resolve(self, values: list[str]) -> list[str]:
        """Map ids or labels to interest ids; unknown topics pass through."""
        by_label = {label.lower(): interest_id for interest_id, label in self._interests.items()}
        resolved: list[str] = []
        for value in values:
            key = value.strip().lower()
            if key in self._interests:
                resolved.append(key)
            elif key in by_label:
                resolved.append(by_label[key])
            else:
                resolved.append(value.strip())
        return resolved


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
