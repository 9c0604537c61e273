"""
Vector database schemas.

Pydantic models for retrieval results.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, ConfigDict, Field

from pdfqa.core.document_processing.models import Chunk


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    model_config = ConfigDict(frozen=True)

    chunk: Chunk = Field(description="Retrieved chunk")
    similarity_score: float = Field(description="Cosine similarity to the query (-1.0 to 1.0)")

    @property
    def content(self) -> str:
        """Text of the retrieved chunk."""
        return self.chunk.content
