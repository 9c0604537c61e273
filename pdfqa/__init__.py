"""
pdfqa: interactive question answering over a single PDF.

Loads a PDF, chunks its text, indexes the chunks in an in-memory FAISS
store and answers questions with a retrieval-augmented LLM call.
"""

__version__ = "0.1.0"
