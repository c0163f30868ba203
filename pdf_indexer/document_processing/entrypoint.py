"""
Indexing pipeline orchestrator.

Coordinates index check, PDF loading, chunking, embedding and Pinecone
upsert tasks.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import hashlib
import logging
import time
from pathlib import Path

from pdf_indexer.configs import IndexerSettings, get_settings
from pdf_indexer.core.exceptions import ConfigurationError
from pdf_indexer.models import PipelineResult
from .tasks import (
    ChunkingTask,
    EmbeddingTask,
    ParsingTask,
    VectorStoreTask,
)

logger = logging.getLogger(__name__)


class IndexingPipeline:
    """Orchestrate PDF indexing: parse -> chunk -> embed -> upsert."""

    def __init__(
        self,
        settings: IndexerSettings | None = None,
        parsing_task: ParsingTask | None = None,
        chunking_task: ChunkingTask | None = None,
        embedding_task: EmbeddingTask | None = None,
        vector_store_task: VectorStoreTask | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Chunking parameters are validated first so a bad size/overlap pair
        fails before any client is built.

        Args:
            settings: Indexer settings (loaded from environment if None)
            parsing_task: Override for the PDF loading task
            chunking_task: Override for the chunking task
            embedding_task: Override for the embedding task
            vector_store_task: Override for the Pinecone task

        Raises:
            ConfigurationError: Invalid chunking parameters or missing credentials
        """
        self._settings = settings or get_settings()

        self._chunking_task = chunking_task or ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
            span_pages=self._settings.span_pages,
        )
        self._parsing_task = parsing_task or ParsingTask()
        self._embedding_task = embedding_task or EmbeddingTask(
            api_key=self._settings.gemini_api_key,
            model=self._settings.embedding_model,
            batch_size=self._settings.embedding_batch_size,
            output_dimensionality=self._settings.embedding_dimension,
        )
        self._vector_store_task = vector_store_task or VectorStoreTask(
            api_key=self._settings.pinecone_api_key,
            index_name=self._settings.pinecone_index_name,
            namespace=self._settings.pinecone_namespace,
            batch_size=self._settings.upsert_batch_size,
            max_concurrency=self._settings.max_concurrency,
        )

    def process(
        self,
        pdf_path: str | None = None,
        document_id: str | None = None,
    ) -> PipelineResult:
        """
        Index one PDF.

        Args:
            pdf_path: PDF to index (falls back to settings.pdf_path)
            document_id: Document ID stored on vectors (file hash based if None)

        Returns:
            PipelineResult: Counts and timing for the run

        Raises:
            ConfigurationError: No PDF path given or configured
            ParsingError: PDF missing or unreadable
            AuthError: Embedding credential rejected
            RateLimitError: Embedding provider throttled
            EmbeddingError: Other embedding failure
            IndexNotFoundError: Target index does not exist
            VectorStoreError: Pinecone request failed
        """
        path = pdf_path or self._settings.pdf_path
        if not path:
            raise ConfigurationError("No PDF path provided (set PDF_PATH or pass a path)", field="pdf_path")

        start_time = time.perf_counter()
        logger.info(f"{__name__}:process - Starting PDF to Pinecone pipeline", extra={"pdf_path": path})

        self._vector_store_task.ensure_index()

        pages = self._parsing_task.parse(path)
        doc_id = document_id or document_id_for(path)

        chunks = self._chunking_task.chunk(pages)

        ids: list[str] = []
        if chunks:
            embedded = self._embedding_task.embed(chunks)
            ids = self._vector_store_task.upsert(embedded, doc_id)
        else:
            logger.warning(
                f"{__name__}:process - No text extracted, nothing to upload",
                extra={"pdf_path": path, "page_count": len(pages)},
            )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        result = PipelineResult(
            document_id=doc_id,
            pdf_path=path,
            page_count=len(pages),
            chunk_count=len(chunks),
            index_name=self._vector_store_task.index_name,
            upserted_count=len(ids),
            processing_time_ms=elapsed_ms,
        )
        logger.info(
            f"{__name__}:process - Data stored successfully in Pinecone",
            extra=result.model_dump(),
        )
        return result


def document_id_for(pdf_path: str) -> str:
    """Derive a stable document ID from the file's SHA-256."""
    sha256_hash = hashlib.sha256()
    with open(Path(pdf_path), "rb") as f:
        for block in iter(lambda: f.read(4096), b""):
            sha256_hash.update(block)
    return f"doc_{sha256_hash.hexdigest()[:16]}"
