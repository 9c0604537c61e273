"""
pdfqa entry point.

Loads configuration, builds the model clients and runs one interactive
session on the terminal.

Dependencies: python-dotenv, pdfqa.configs, pdfqa.boundary, pdfqa.cli
System role: Application initialization and wiring
"""

import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from pdfqa.boundary.llm.model_factory import get_chat_model, get_embeddings
from pdfqa.boundary.vdb.faiss_store import FAISSIndex
from pdfqa.cli.console import open_console
from pdfqa.cli.repl import ReplDriver
from pdfqa.configs import get_settings
from pdfqa.core.document_processing.entrypoint import IngestionPipeline
from pdfqa.core.exceptions import ConfigurationError
from pdfqa.core.qa.qa_chain import QAChain
from pdfqa.observability.logger import configure_logging

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def main() -> int:
    """
    Run the application.

    Returns:
        int: Process exit code
    """
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(settings.log_level)
    logger.info(
        f"{__name__}:main - Starting (provider={settings.llm.provider}, "
        f"chat_model={settings.llm.chat_model}, embedding_model={settings.llm.embedding_model})"
    )

    try:
        embeddings = get_embeddings(settings.llm)
        llm = get_chat_model(settings.llm)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    pipeline = IngestionPipeline(embeddings, settings.pipeline)

    def build_chain(index: FAISSIndex) -> QAChain:
        return QAChain(
            index,
            llm,
            k=settings.llm.top_k,
            model_name=settings.llm.chat_model,
        )

    try:
        with open_console() as console:
            driver = ReplDriver(
                console,
                pipeline,
                build_chain,
                show_sources=settings.pipeline.show_sources,
            )
            return driver.run()
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return EXIT_INTERRUPTED


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
