"""
Chunk domain model for document processing pipeline.

Represents a contiguous slice of document text with a deterministic ID,
its position in chunk order, and metadata.

Dependencies: pydantic
System role: Unit of retrieval produced by the chunker
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Ordered document chunk."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic chunk identifier (content hash)")
    index: int = Field(ge=0, description="Position of the chunk in document order")
    content: str = Field(description="Chunk text content")
    metadata: dict = Field(default_factory=dict, description="Chunk metadata (source, start_index)")
