"""
Core indexer logic: chunking and the exception hierarchy.
"""

from .chunker import ChunkingConfig, TextChunker, chunk_pages
from .exceptions import (
    AuthError,
    ConfigurationError,
    DocumentProcessingError,
    EmbeddingError,
    IndexerError,
    IndexNotFoundError,
    ParsingError,
    RateLimitError,
    VectorStoreError,
)

__all__ = [
    "ChunkingConfig",
    "TextChunker",
    "chunk_pages",
    "IndexerError",
    "ConfigurationError",
    "DocumentProcessingError",
    "ParsingError",
    "EmbeddingError",
    "AuthError",
    "RateLimitError",
    "VectorStoreError",
    "IndexNotFoundError",
]
