"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic keyword embeddings, mock chat models, minimal PDF
files written to a temp directory, settings cache reset.
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import hashlib
import re
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.messages import AIMessage

from pdfqa.configs import get_settings

EMBEDDING_DIM = 128


class KeywordEmbeddings(Embeddings):
    """
    Bag-of-words embeddings hashed into a fixed number of buckets.

    Texts sharing words get similar vectors; the extra last component keeps
    vectors non-zero. Records every call for assertions.
    """

    def __init__(self) -> None:
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    @staticmethod
    def vectorize(text: str) -> list[float]:
        vector = [0.0] * (EMBEDDING_DIM + 1)
        for token in re.findall(r"[a-z0-9]+", text.lower()):
            bucket = int(hashlib.md5(token.encode()).hexdigest(), 16) % EMBEDDING_DIM
            vector[bucket] += 1.0
        vector[EMBEDDING_DIM] = 0.1
        return vector

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self.vectorize(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self.vectorize(text)


class FailingEmbeddings(Embeddings):
    """Embeddings whose every call raises, like an unreachable service."""

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        raise ConnectionError("embedding service unreachable")

    def embed_query(self, text: str) -> list[float]:
        raise ConnectionError("embedding service unreachable")


def build_pdf(lines: list[str]) -> bytes:
    """Build a one-page PDF that draws each line with Helvetica."""
    content = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
    for i, line in enumerate(lines):
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        content.append(f"({escaped}) Tj" if i == 0 else f"T* ({escaped}) Tj")
    content.append("ET")
    stream = "\n".join(content).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_offset,
    )
    return bytes(out)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings so environment changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Deterministic, offline embedding model."""
    return KeywordEmbeddings()


@pytest.fixture
def failing_embeddings() -> FailingEmbeddings:
    """Embedding model that always fails."""
    return FailingEmbeddings()


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    """
    Factory writing a minimal PDF to the temp directory.

    Returns:
        Callable: make_pdf(lines, name="doc.pdf") -> Path
    """

    def _make(lines: list[str], name: str = "doc.pdf") -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf(lines))
        return path

    return _make


@pytest.fixture
def mock_llm() -> MagicMock:
    """
    Chat model mock returning a fixed answer.

    Returns:
        MagicMock: invoke() returns AIMessage("stub answer")
    """
    llm = MagicMock()
    llm.invoke.return_value = AIMessage(content="stub answer")
    return llm
