"""
Chunk domain models for the indexing pipeline.

Represents a bounded slice of page text and the same slice paired with
its embedding vector.

Dependencies: pydantic
System role: Data structures passed between chunking, embedding and upsert
"""

from typing import Any

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Overlapping text window cut from one or more pages."""

    text: str = Field(description="Chunk text content")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Metadata inherited from source page(s)")
    source_page_range: tuple[int, int] = Field(description="Inclusive (first_page, last_page) the chunk was drawn from")
    start_index: int = Field(default=0, ge=0, description="Character offset of the chunk in its source text")


class EmbeddedChunk(BaseModel):
    """Chunk with its embedding vector."""

    chunk: Chunk
    embedding: list[float] = Field(description="Embedding vector")
