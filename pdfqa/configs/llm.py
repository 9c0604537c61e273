"""
LLM and embedding provider settings.

Selects the provider (Google Gemini or OpenAI), model identifiers, sampling
temperature, request timeout and retrieval depth.

Dependencies: pydantic, pydantic_settings
System role: Configuration for the embedding and chat model collaborators
"""

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import SettingsConfigDict

from pdfqa.configs.base import BaseSettings

DEFAULT_CHAT_MODELS = {
    "google": "gemini-2.0-flash",
    "openai": "gpt-3.5-turbo",
}
DEFAULT_EMBEDDING_MODELS = {
    "google": "models/gemini-embedding-001",
    "openai": "text-embedding-ada-002",
}


class LLMSettings(BaseSettings):
    """Embedding and chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    provider: Literal["google", "openai"] = Field(
        default="google",
        description="Model provider: 'google' (Gemini) or 'openai'",
    )
    chat_model: str | None = Field(
        default=None,
        description="Chat model identifier (provider default when unset)",
    )
    embedding_model: str | None = Field(
        default=None,
        description="Embedding model identifier (provider default when unset)",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature (0.0 for reproducible answers)",
    )
    request_timeout: float = Field(
        default=60.0,
        gt=0.0,
        description="Per-request timeout in seconds for model calls",
    )
    top_k: int = Field(
        default=4,
        ge=1,
        description="Number of chunks retrieved per question",
    )

    google_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY"),
        description="API key for Google Generative AI",
    )
    openai_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "LLM_OPENAI_API_KEY"),
        description="API key for OpenAI",
    )

    @model_validator(mode="after")
    def _apply_provider_defaults(self) -> "LLMSettings":
        if not self.chat_model:
            self.chat_model = DEFAULT_CHAT_MODELS[self.provider]
        if not self.embedding_model:
            self.embedding_model = DEFAULT_EMBEDDING_MODELS[self.provider]
        return self
