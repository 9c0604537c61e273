"""
Loaded PDF document model.

Dependencies: pydantic
System role: Output of the parsing stage, input of the chunking stage
"""

from pydantic import BaseModel, ConfigDict, Field


class PdfDocument(BaseModel):
    """Raw text extracted from a single PDF file."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(description="Path the document was loaded from")
    text: str = Field(description="Extracted text, pages joined with newlines")
    page_count: int = Field(default=0, ge=0, description="Number of pages read")

    @property
    def is_empty(self) -> bool:
        """True when the PDF yielded no extractable text."""
        return not self.text.strip()
