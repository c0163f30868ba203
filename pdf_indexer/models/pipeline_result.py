"""
Pipeline result model for PDF indexing.

Represents the outcome of indexing one PDF through the pipeline.

Dependencies: pydantic
System role: Return type for IndexingPipeline.process()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Result of indexing pipeline execution."""

    document_id: str = Field(description="Document identifier stored on every vector")
    pdf_path: str = Field(description="Path of the indexed PDF")
    page_count: int = Field(description="Number of pages loaded")
    chunk_count: int = Field(description="Number of chunks generated")
    index_name: str = Field(description="Target vector index")
    upserted_count: int = Field(description="Number of vectors written")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
