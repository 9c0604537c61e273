"""
Interactive question loop.

Prompts for a PDF path once, ingests it, then answers questions until the
user types 'exit'.

Dependencies: pdfqa.core, pdfqa.cli.console
System role: REPL driver (top-level state machine)
"""

import logging
from collections.abc import Callable
from enum import Enum

from pdfqa.boundary.vdb.faiss_store import FAISSIndex
from pdfqa.cli.console import Console
from pdfqa.core.document_processing.entrypoint import IngestionPipeline
from pdfqa.core.document_processing.models import IngestionResult
from pdfqa.core.exceptions import (
    DocumentLoadError,
    EmbeddingServiceError,
    GenerationServiceError,
)
from pdfqa.core.qa.qa_chain import QAChain
from pdfqa.core.qa.qa_schema import QAResponse
from pdfqa.observability.log_utils import log_exception_with_context, safe_log_value

logger = logging.getLogger(__name__)

FILENAME_PROMPT = "Enter the name of the PDF file: "
QUESTION_PROMPT = "Ask a question about the PDF (or type 'exit' to quit): "
EXIT_SENTINEL = "exit"
SOURCE_SNIPPET_LENGTH = 300

EXIT_OK = 0
EXIT_LOAD_FAILURE = 1


class ReplState(str, Enum):
    """States of the REPL driver."""

    AWAITING_FILENAME = "awaiting_filename"
    LOADING = "loading"
    READY = "ready"
    AWAITING_QUESTION = "awaiting_question"
    ANSWERING = "answering"
    CLOSED = "closed"


def is_exit_command(text: str) -> bool:
    """True when text is the exit sentinel, ignoring case."""
    return text.lower() == EXIT_SENTINEL


class ReplDriver:
    """
    Drive a single interactive session.

    AWAITING_FILENAME -> LOADING -> READY -> AWAITING_QUESTION <-> ANSWERING
    -> CLOSED. A failed load goes straight to CLOSED; the question prompt is
    never shown in that case.
    """

    def __init__(
        self,
        console: Console,
        pipeline: IngestionPipeline,
        chain_factory: Callable[[FAISSIndex], QAChain],
        show_sources: bool = False,
    ) -> None:
        """
        Initialize driver.

        Args:
            console: Open console used for all prompts and output
            pipeline: Ingestion pipeline for the chosen PDF
            chain_factory: Builds the QA chain once the index exists
            show_sources: Print a snippet of the top source after each answer
        """
        self._console = console
        self._pipeline = pipeline
        self._chain_factory = chain_factory
        self._show_sources = show_sources
        self._state = ReplState.AWAITING_FILENAME

    @property
    def state(self) -> ReplState:
        return self._state

    def run(self) -> int:
        """
        Run the session to completion.

        Returns:
            int: Process exit code (0 on normal exit, 1 on load failure)
        """
        try:
            result = self._load()
            if result is None:
                return EXIT_LOAD_FAILURE
            self._question_loop(self._chain_factory(result.index))
            return EXIT_OK
        finally:
            self._state = ReplState.CLOSED

    def _load(self) -> IngestionResult | None:
        self._state = ReplState.AWAITING_FILENAME
        try:
            filename = self._console.ask(FILENAME_PROMPT).strip()
        except EOFError:
            self._console.print("No PDF file name was entered.")
            return None

        self._state = ReplState.LOADING
        try:
            result = self._pipeline.process(filename)
        except DocumentLoadError as e:
            self._console.print(f"Error reading PDF: {e.message}")
            return None
        except EmbeddingServiceError as e:
            log_exception_with_context(logger, "Failed to index PDF", e, file_path=filename)
            self._console.print(f"Error indexing PDF: {e.message}")
            return None

        if result.document.is_empty:
            self._console.print(f"No extractable text found in {filename}.")
            return None

        self._state = ReplState.READY
        self._console.print(
            f"Loaded {filename}: {result.document.page_count} page(s), "
            f"{result.chunk_count} chunk(s)."
        )
        return result

    def _question_loop(self, chain: QAChain) -> None:
        while True:
            self._state = ReplState.AWAITING_QUESTION
            try:
                question = self._console.ask(QUESTION_PROMPT)
            except EOFError:
                self._console.print()
                return

            if is_exit_command(question):
                return

            self._state = ReplState.ANSWERING
            try:
                response = chain.answer(question)
            except (EmbeddingServiceError, GenerationServiceError) as e:
                log_exception_with_context(
                    logger, "Failed to answer question", e, question=safe_log_value(question)
                )
                self._console.print(f"Error answering question: {e.message}")
                continue

            self._print_response(response)

    def _print_response(self, response: QAResponse) -> None:
        self._console.print(response.answer)
        if self._show_sources and response.sources:
            top = response.sources[0]
            self._console.print(
                f"[source chunk {top.chunk.index}, score {top.similarity_score:.3f}] "
                f"{top.content[:SOURCE_SNIPPET_LENGTH]}"
            )
