"""
Task modules for the indexing pipeline.

Exports: ParsingTask, ChunkingTask, EmbeddingTask, VectorStoreTask
"""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingTask
from .parsing_task import ParsingTask
from .vector_store_task import VectorStoreTask

__all__ = [
    "ParsingTask",
    "ChunkingTask",
    "EmbeddingTask",
    "VectorStoreTask",
]
