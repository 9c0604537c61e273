"""
QA response schema.

Dependencies: pydantic, pdfqa.boundary.vdb
System role: Answer plus the chunks it was generated from
"""

from pydantic import BaseModel, Field

from pdfqa.boundary.vdb.vector_schemas import VectorSearchResult


class QAResponse(BaseModel):
    """Answer to a single question."""

    question: str = Field(description="The question as typed by the user")
    answer: str = Field(description="Completion text returned by the LLM")
    sources: list[VectorSearchResult] = Field(
        default_factory=list,
        description="Retrieved chunks used as context, in retrieval order",
    )

    @property
    def has_context(self) -> bool:
        """True when at least one chunk was retrieved for the question."""
        return bool(self.sources)
