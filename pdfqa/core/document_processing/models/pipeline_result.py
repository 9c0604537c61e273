"""
Ingestion result model.

Represents the outcome of loading, chunking and indexing a document.

Dependencies: pydantic
System role: Return type for IngestionPipeline.process()
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .pdf_document import PdfDocument


class IngestionResult(BaseModel):
    """Result of ingestion pipeline execution."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    document: PdfDocument = Field(description="The loaded document")
    chunk_count: int = Field(ge=0, description="Number of chunks generated")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
    index: Any = Field(default=None, exclude=True, description="Built FAISSIndex handle")
