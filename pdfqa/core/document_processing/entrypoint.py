"""
Ingestion pipeline orchestrator.

Coordinates parsing, chunking and indexing of a single PDF.

Dependencies: All task modules, pdfqa.boundary.vdb, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from langchain_core.embeddings import Embeddings

from pdfqa.boundary.vdb.faiss_store import FAISSIndex
from pdfqa.configs.pipeline import PipelineSettings

from .models import IngestionResult
from .tasks import ChunkingTask, ParsingTask

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Orchestrate document ingestion: parse -> chunk -> embed+index."""

    def __init__(
        self,
        embeddings: Embeddings,
        settings: PipelineSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            embeddings: Embedding client used to build the index
            settings: Pipeline settings (uses defaults if None)
        """
        self._settings = settings or PipelineSettings()
        self._embeddings = embeddings

        self._parsing_task = ParsingTask()
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
            separator=self._settings.separator,
            oversized_policy=self._settings.oversized_policy,
        )

    def process(self, file_path: str) -> IngestionResult:
        """
        Process a document through the full pipeline.

        Args:
            file_path: Path to local PDF file

        Returns:
            IngestionResult: Loaded document, chunk count, timing and index

        Raises:
            DocumentLoadError: Document could not be read or parsed
            EmbeddingServiceError: Chunk embedding failed
        """
        start_time = time.perf_counter()

        document = self._parsing_task.parse(file_path)
        chunks = self._chunking_task.chunk(document)
        index = FAISSIndex.build(chunks, self._embeddings)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:process - {file_path}: chunks={len(chunks)}, "
            f"processing_time_ms={elapsed_ms:.1f}"
        )

        return IngestionResult(
            document=document,
            chunk_count=len(chunks),
            processing_time_ms=elapsed_ms,
            index=index,
        )
