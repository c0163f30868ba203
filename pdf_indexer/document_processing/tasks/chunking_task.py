"""
Text chunking task.

Splits loaded pages into overlapping, boundary-aligned chunks.

Dependencies: pdf_indexer.core.chunker
System role: Second stage of the indexing pipeline
"""

import logging

from pdf_indexer.core.chunker import ChunkingConfig, TextChunker
from pdf_indexer.models import Chunk, Page

logger = logging.getLogger(__name__)


class ChunkingTask:
    """Split pages into chunks using TextChunker."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        span_pages: bool = False,
    ) -> None:
        """
        Initialize chunking task with chunker configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            span_pages: Let chunks cross page boundaries

        Raises:
            ConfigurationError: When chunk_overlap >= chunk_size or chunk_size <= 0
        """
        self._chunker = TextChunker(
            ChunkingConfig(
                chunk_size=chunk_size,
                chunk_overlap=chunk_overlap,
                span_pages=span_pages,
            )
        )

    def chunk(self, pages: list[Page]) -> list[Chunk]:
        """
        Split pages into chunks.

        Args:
            pages: Pages to split

        Returns:
            list[Chunk]: Chunks with inherited page metadata

        Raises:
            ValueError: When pages list is empty
        """
        if not pages:
            raise ValueError("No pages to chunk")

        chunks = self._chunker.split_pages(pages)
        logger.info(
            f"{__name__}:chunk - Chunking complete: {len(chunks)} chunks created",
            extra={
                "page_count": len(pages),
                "chunk_count": len(chunks),
                "chunk_size": self._chunker.config.chunk_size,
                "chunk_overlap": self._chunker.config.chunk_overlap,
            },
        )
        return chunks
