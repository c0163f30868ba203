"""
Pinecone upsert task.

Writes embedded chunks to an existing Pinecone index with deterministic ids
and sanitized metadata. Batches are sent through the client's thread pool so
at most max_concurrency upsert requests are in flight.

Dependencies: pinecone
System role: Final stage of the indexing pipeline
"""

import hashlib
import logging
from typing import Any

from pinecone import Pinecone
from pinecone.exceptions import NotFoundException

from pdf_indexer.core.exceptions import (
    ConfigurationError,
    IndexNotFoundError,
    VectorStoreError,
)
from pdf_indexer.models import EmbeddedChunk

logger = logging.getLogger(__name__)

METADATA_SCALARS = (str, int, float, bool)


class VectorStoreTask:
    """Upsert embedded chunks into a Pinecone index."""

    def __init__(
        self,
        api_key: str,
        index_name: str,
        namespace: str = "",
        batch_size: int = 100,
        max_concurrency: int = 5,
        client: Pinecone | None = None,
    ) -> None:
        """
        Initialize vector store task.

        Args:
            api_key: Pinecone API key
            index_name: Existing index to write to
            namespace: Target namespace (default namespace if empty)
            batch_size: Vectors per upsert request
            max_concurrency: Maximum upsert requests in flight
            client: Prebuilt Pinecone client (skips client construction)

        Raises:
            ConfigurationError: When api_key or index_name is empty
        """
        if not index_name:
            raise ConfigurationError("Missing PINECONE_INDEX_NAME in environment", field="pinecone_index_name")
        if client is None and not api_key:
            raise ConfigurationError("Missing PINECONE_API_KEY in environment", field="pinecone_api_key")

        self.index_name = index_name
        self.namespace = namespace
        self.batch_size = batch_size
        self.max_concurrency = max_concurrency

        self._client = client or Pinecone(api_key=api_key)
        self._index = None

    def list_indexes(self) -> list[str]:
        """
        List index names visible to the API key.

        Raises:
            VectorStoreError: When Pinecone cannot be reached
        """
        try:
            return list(self._client.list_indexes().names())
        except Exception as e:
            raise VectorStoreError(
                f"Failed to list Pinecone indexes: {e}",
                operation="list_indexes",
            ) from e

    def ensure_index(self) -> None:
        """
        Verify the configured index exists.

        Raises:
            IndexNotFoundError: Index is not among the available indexes
            VectorStoreError: When Pinecone cannot be reached
        """
        names = self.list_indexes()
        logger.info(
            f"{__name__}:ensure_index - Available indexes: {names}",
            extra={"index": self.index_name},
        )
        if self.index_name not in names:
            raise IndexNotFoundError(self.index_name, details={"available": names})

    def _get_index(self):
        """Get or create the index handle with a bounded request pool."""
        if self._index is None:
            self._index = self._client.Index(self.index_name, pool_threads=self.max_concurrency)
            logger.info(f"{__name__}:_get_index - Pinecone index configured: {self.index_name}")
        return self._index

    def upsert(self, embedded_chunks: list[EmbeddedChunk], document_id: str) -> list[str]:
        """
        Upsert chunk vectors.

        Args:
            embedded_chunks: Chunks with embeddings, in document order
            document_id: Document identifier stored on every vector

        Returns:
            list[str]: Vector ids, in input order

        Raises:
            ValueError: When embedded_chunks is empty
            IndexNotFoundError: When the index disappears mid-run
            VectorStoreError: When an upsert request fails
        """
        if not embedded_chunks:
            raise ValueError("No chunks to upsert")

        records = [
            self._to_record(item, document_id, position)
            for position, item in enumerate(embedded_chunks)
        ]
        batches = [
            records[i : i + self.batch_size]
            for i in range(0, len(records), self.batch_size)
        ]

        try:
            index = self._get_index()
            pending = [
                index.upsert(vectors=batch, namespace=self.namespace, async_req=True)
                for batch in batches
            ]
            upserted = sum(_upserted_count(result.get()) for result in pending)
        except NotFoundException as e:
            raise IndexNotFoundError(self.index_name) from e
        except Exception as e:
            logger.exception(
                f"{__name__}:upsert - Failed to upsert to Pinecone",
                extra={"document_id": document_id, "index": self.index_name},
            )
            raise VectorStoreError(
                f"Failed to upsert to Pinecone: {e}",
                operation="upsert",
                details={
                    "document_id": document_id,
                    "index": self.index_name,
                    "chunk_count": len(records),
                },
            ) from e

        logger.info(
            f"{__name__}:upsert - Data stored in Pinecone",
            extra={
                "document_id": document_id,
                "index": self.index_name,
                "namespace": self.namespace,
                "batch_count": len(batches),
                "upserted_count": upserted,
            },
        )
        return [record["id"] for record in records]

    def _to_record(self, item: EmbeddedChunk, document_id: str, position: int) -> dict[str, Any]:
        chunk = item.chunk
        chunk_id = generate_chunk_id(
            chunk.text,
            str(chunk.metadata.get("source", "")),
            chunk.source_page_range[0],
            chunk.start_index,
        )
        return {
            "id": chunk_id,
            "values": item.embedding,
            "metadata": sanitize_metadata(
                chunk.metadata,
                text=chunk.text,
                document_id=document_id,
                chunk_index=position,
                page=chunk.source_page_range[0],
                page_end=chunk.source_page_range[1],
                start_index=chunk.start_index,
            ),
        }


def generate_chunk_id(content: str, source: str, page: int, start_index: int) -> str:
    """
    Generate deterministic chunk ID.

    Returns:
        str: SHA-256 hash prefix (16 chars) of content + source + page + offset
    """
    hash_input = f"{content}:{source}:{page}:{start_index}"
    return hashlib.sha256(hash_input.encode()).hexdigest()[:16]


def sanitize_metadata(metadata: dict[str, Any], **fields: Any) -> dict[str, Any]:
    """
    Reduce metadata to value types Pinecone accepts.

    Strings, numbers, booleans and lists of strings pass through; None is
    dropped; anything else is stringified. Keyword fields override page
    metadata.
    """
    sanitized: dict[str, Any] = {}
    for key, value in {**metadata, **fields}.items():
        if value is None:
            continue
        if isinstance(value, METADATA_SCALARS):
            sanitized[key] = value
        elif isinstance(value, (list, tuple)):
            sanitized[key] = [str(v) for v in value]
        else:
            sanitized[key] = str(value)
    return sanitized


def _upserted_count(response: Any) -> int:
    count = getattr(response, "upserted_count", None)
    if count is None and isinstance(response, dict):
        count = response.get("upserted_count")
    return int(count or 0)
