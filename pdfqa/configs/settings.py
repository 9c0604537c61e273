"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from pdfqa.configs.base import BaseSettings
from pdfqa.configs.llm import LLMSettings
from pdfqa.configs.pipeline import PipelineSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    llm: LLMSettings = Field(default_factory=LLMSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables and .env loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from pdfqa.configs import get_settings
        settings = get_settings()
        chunk_size = settings.pipeline.chunk_size
    """
    return Settings()
