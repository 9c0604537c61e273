"""
Pydantic models for the ingestion pipeline.

Exports: PdfDocument, Chunk, IngestionResult
"""

from .chunk import Chunk
from .pdf_document import PdfDocument
from .pipeline_result import IngestionResult

__all__ = ["Chunk", "PdfDocument", "IngestionResult"]
