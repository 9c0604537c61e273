"""
In-memory FAISS vector index.

Embeds document chunks once and answers nearest-neighbour queries over them.
Nothing is persisted; the index lives for the duration of the process.

Dependencies: langchain_community.vectorstores, langchain_core.embeddings
System role: Indexer (build once, read-only retrieval)
"""

import logging

from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings

from pdfqa.boundary.vdb.vector_schemas import VectorSearchResult
from pdfqa.core.document_processing.models import Chunk
from pdfqa.core.exceptions import EmbeddingServiceError

logger = logging.getLogger(__name__)


class FAISSIndex:
    """
    Read-only similarity index over a chunk sequence.

    Vectors are L2-normalised, so ranking is by cosine similarity. Every
    query scores all stored chunks and orders them by descending similarity,
    ties broken by chunk order, which keeps results deterministic.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        chunks: list[Chunk],
        store: FAISS | None,
    ) -> None:
        """
        Wrap an already built store. Use FAISSIndex.build() instead.

        Args:
            embeddings: Embedding client used for query embedding
            chunks: Indexed chunks, position i holds the chunk with index i
            store: LangChain FAISS store, None when there are no chunks
        """
        self._embeddings = embeddings
        self._chunks = chunks
        self._store = store

    @classmethod
    def build(cls, chunks: list[Chunk], embeddings: Embeddings) -> "FAISSIndex":
        """
        Embed chunks and load them into an in-memory FAISS index.

        Args:
            chunks: Chunks in document order (may be empty)
            embeddings: Embedding client

        Returns:
            FAISSIndex: Index with one entry per chunk

        Raises:
            EmbeddingServiceError: When the embedding service fails
        """
        ordered = sorted(chunks, key=lambda c: c.index)
        if not ordered:
            logger.info(f"{__name__}:build - No chunks, created empty index")
            return cls(embeddings, [], None)

        texts = [chunk.content for chunk in ordered]
        try:
            vectors = embeddings.embed_documents(texts)
        except Exception as e:
            raise EmbeddingServiceError(
                f"Failed to embed chunks: {e}",
                operation="embed_documents",
                details={"chunk_count": len(texts)},
            ) from e

        if len(vectors) != len(texts):
            raise EmbeddingServiceError(
                "Embedding service returned a wrong number of vectors",
                operation="embed_documents",
                details={"expected": len(texts), "received": len(vectors)},
            )

        store = FAISS.from_embeddings(
            text_embeddings=list(zip(texts, vectors)),
            embedding=embeddings,
            metadatas=[{"position": position} for position in range(len(ordered))],
            normalize_L2=True,
        )
        logger.info(f"{__name__}:build - Indexed {len(ordered)} chunks")
        return cls(embeddings, ordered, store)

    def __len__(self) -> int:
        return len(self._chunks)

    def retrieve(self, query_text: str, k: int = 4) -> list[VectorSearchResult]:
        """
        Return the k chunks most similar to the query text.

        Args:
            query_text: Text to embed and search for
            k: Number of results to return

        Returns:
            list[VectorSearchResult]: Results by descending similarity; empty
            when the index has no entries

        Raises:
            ValueError: When k < 1
            EmbeddingServiceError: When embedding the query fails
        """
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        if self._store is None:
            return []

        try:
            query_vector = self._embeddings.embed_query(query_text)
        except Exception as e:
            raise EmbeddingServiceError(
                f"Failed to embed query: {e}",
                operation="embed_query",
            ) from e

        # Flat index: score everything, then apply the deterministic ordering
        scored = self._store.similarity_search_with_score_by_vector(
            query_vector,
            k=len(self._chunks),
        )

        results = []
        for doc, distance in scored:
            chunk = self._chunks[doc.metadata["position"]]
            # Squared L2 distance between unit vectors is 2 - 2cos
            results.append(
                VectorSearchResult(chunk=chunk, similarity_score=1.0 - float(distance) / 2.0)
            )

        results.sort(key=lambda r: (-r.similarity_score, r.chunk.index))
        logger.debug(
            f"{__name__}:retrieve - k={k}, top="
            f"{[(r.chunk.index, round(r.similarity_score, 3)) for r in results[:k]]}"
        )
        return results[:k]
