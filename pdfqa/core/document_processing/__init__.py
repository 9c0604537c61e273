"""
Document ingestion: parse a PDF, chunk its text, index the chunks.

The pipeline coordinator lives in pdfqa.core.document_processing.entrypoint.
"""

from .models import Chunk, IngestionResult, PdfDocument

__all__ = ["Chunk", "IngestionResult", "PdfDocument"]
