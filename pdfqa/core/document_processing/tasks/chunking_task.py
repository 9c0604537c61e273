"""
Text chunking task using CharacterTextSplitter.

Splits the document text on a separator and regroups the pieces into
bounded, overlapping chunks.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

import hashlib
import logging
from typing import Literal

from langchain_core.documents import Document
from langchain_text_splitters import CharacterTextSplitter, RecursiveCharacterTextSplitter

from pdfqa.core.document_processing.models import Chunk, PdfDocument

logger = logging.getLogger(__name__)

OversizedPolicy = Literal["keep", "split"]


class ChunkingTask:
    """
    Split a document into ordered, overlapping chunks.

    A single separator-delimited piece longer than chunk_size is handled by
    the oversized policy: "keep" emits it as one oversized chunk, "split"
    breaks it up with RecursiveCharacterTextSplitter. Text is never dropped.
    """

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        separator: str = "\n",
        oversized_policy: OversizedPolicy = "keep",
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Maximum overlap between consecutive chunks
            separator: Separator the text is split on
            oversized_policy: "keep" or "split"

        Raises:
            ValueError: When the policy is unknown or overlap >= size
        """
        if oversized_policy not in ("keep", "split"):
            raise ValueError(f"Unknown oversized_policy: {oversized_policy}")
        if chunk_overlap >= chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.oversized_policy = oversized_policy

        self._splitter = CharacterTextSplitter(
            separator=separator,
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
            length_function=len,
        )
        self._fallback_splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            length_function=len,
        )

    def chunk(self, document: PdfDocument) -> list[Chunk]:
        """
        Split a document into chunks.

        Args:
            document: Loaded PDF document

        Returns:
            list[Chunk]: Chunks in document order; empty for an empty document
        """
        if document.is_empty:
            return []

        pieces = self._splitter.create_documents(
            [document.text],
            metadatas=[{"source": document.source}],
        )

        oversized = [piece for piece in pieces if len(piece.page_content) > self.chunk_size]
        if oversized:
            if self.oversized_policy == "split":
                pieces = self._split_oversized(pieces)
            else:
                logger.warning(
                    f"{__name__}:chunk - Keeping {len(oversized)} oversized chunk(s), "
                    f"largest={max(len(p.page_content) for p in oversized)} chars, "
                    f"limit={self.chunk_size}"
                )

        chunks = [
            Chunk(
                id=self._generate_chunk_id(piece.page_content, piece.metadata),
                index=i,
                content=piece.page_content,
                metadata=dict(piece.metadata),
            )
            for i, piece in enumerate(pieces)
        ]
        logger.info(f"{__name__}:chunk - Split {document.source} into {len(chunks)} chunks")
        return chunks

    def _split_oversized(self, pieces: list[Document]) -> list[Document]:
        """Re-split chunks longer than chunk_size, keeping start offsets."""
        result: list[Document] = []
        for piece in pieces:
            if len(piece.page_content) <= self.chunk_size:
                result.append(piece)
                continue

            base = piece.metadata.get("start_index", 0)
            offset = 0
            for part in self._fallback_splitter.split_text(piece.page_content):
                found = piece.page_content.find(part, offset)
                if found >= 0:
                    offset = found
                metadata = {**piece.metadata, "start_index": base + offset}
                result.append(Document(page_content=part, metadata=metadata))
        return result

    def _generate_chunk_id(self, content: str, metadata: dict) -> str:
        """
        Generate deterministic chunk ID from content and metadata.

        Args:
            content: Chunk text content
            metadata: Chunk metadata

        Returns:
            str: SHA-256 hash prefix of content + source + start_index
        """
        source = metadata.get("source", "")
        start_index = metadata.get("start_index", 0)
        hash_input = f"{content}:{source}:{start_index}"
        return hashlib.sha256(hash_input.encode()).hexdigest()[:16]
