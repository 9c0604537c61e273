"""
Configuration settings for the ingestion pipeline.

Provides environment-based configuration for chunking and REPL display.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from pdfqa.configs.base import BaseSettings


class PipelineSettings(BaseSettings):
    """Settings for document chunking and answer display."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Overlap between consecutive chunks",
    )
    separator: str = Field(
        default="\n",
        min_length=1,
        description="Separator the text is split on before regrouping",
    )
    oversized_policy: Literal["keep", "split"] = Field(
        default="keep",
        description=(
            "What to do with a single piece longer than chunk_size: "
            "'keep' emits it oversized, 'split' re-splits it recursively"
        ),
    )

    show_sources: bool = Field(
        default=False,
        description="Print a snippet of the top source chunk after each answer",
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "PipelineSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self
