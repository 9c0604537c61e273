"""
Task modules for the ingestion pipeline.

Exports: ParsingTask, ChunkingTask
"""

from .chunking_task import ChunkingTask
from .parsing_task import ParsingTask

__all__ = [
    "ParsingTask",
    "ChunkingTask",
]
