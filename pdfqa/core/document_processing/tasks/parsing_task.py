"""
Document parsing task using LangChain PyPDFLoader.

Reads a PDF from disk and extracts its text as a single string.

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from pdfqa.core.document_processing.models import PdfDocument
from pdfqa.core.exceptions import DocumentLoadError
from pdfqa.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class ParsingTask:
    """Parse a PDF file into a PdfDocument."""

    def __init__(self, page_separator: str = "\n") -> None:
        """
        Initialize parsing task.

        Args:
            page_separator: String placed between the text of consecutive pages
        """
        self._page_separator = page_separator

    def parse(self, file_path: str) -> PdfDocument:
        """
        Extract the text of a PDF document.

        The path is not validated for format before reading; anything that
        the PDF reader rejects is reported as a load error.

        Args:
            file_path: Path to PDF document

        Returns:
            PdfDocument: Extracted text, possibly empty

        Raises:
            DocumentLoadError: When the file is missing, unreadable or unparseable
        """
        try:
            return self._parse(file_path)
        except DocumentLoadError as e:
            log_exception_with_context(logger, "Error reading PDF", e, file_path=file_path)
            raise

    def _parse(self, file_path: str) -> PdfDocument:
        path = Path(file_path)
        try:
            exists = path.is_file()
        except OSError as e:
            raise DocumentLoadError(f"Cannot access file: {e}", file_path) from e
        if not exists:
            raise DocumentLoadError(f"File not found: {file_path}", file_path)

        try:
            pages = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise DocumentLoadError(f"Failed to parse PDF: {e}", file_path) from e

        text = self._page_separator.join(page.page_content for page in pages)
        logger.info(
            f"{__name__}:parse - Loaded {file_path}: pages={len(pages)}, chars={len(text)}"
        )
        if not text.strip():
            logger.warning(f"{__name__}:parse - {file_path} contains no extractable text")

        return PdfDocument(source=file_path, text=text, page_count=len(pages))
