"""
Vector database boundary layer.

Provides the in-memory FAISS index used for chunk retrieval.

Dependencies: langchain_community.vectorstores, faiss
System role: Vector store adapter for RAG retrieval
"""

from pdfqa.boundary.vdb.faiss_store import FAISSIndex
from pdfqa.boundary.vdb.vector_schemas import VectorSearchResult

__all__ = ["FAISSIndex", "VectorSearchResult"]
