"""
Indexer settings.

Credentials and target names are read from the variables the indexing
script has always used (GEMINI_API_KEY, PINECONE_API_KEY,
PINECONE_INDEX_NAME, PDF_PATH). Tuning knobs use the INDEXER_ prefix.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from pdf_indexer.configs.base import BaseSettings


class IndexerSettings(BaseSettings):
    """Settings for the PDF indexing pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="INDEXER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Source document
    pdf_path: str = Field(
        default="",
        validation_alias=AliasChoices("PDF_PATH", "INDEXER_PDF_PATH"),
        description="PDF file to index",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        description="Overlap between consecutive chunks",
    )
    span_pages: bool = Field(
        default=False,
        description="Let chunks cross page boundaries",
    )

    # Gemini embeddings
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
        description="Google Gemini API key",
    )
    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Google embedding model ID (768 dimensions)",
    )
    embedding_dimension: int | None = Field(
        default=None,
        description="Requested output dimensionality (model default if unset)",
    )
    embedding_batch_size: int = Field(
        default=100,
        gt=0,
        description="Texts per embedding request",
    )

    # Pinecone
    pinecone_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("PINECONE_API_KEY"),
        description="Pinecone API key",
    )
    pinecone_index_name: str = Field(
        default="",
        validation_alias=AliasChoices("PINECONE_INDEX_NAME"),
        description="Target Pinecone index",
    )
    pinecone_namespace: str = Field(
        default="",
        description="Pinecone namespace (default namespace if empty)",
    )
    upsert_batch_size: int = Field(
        default=100,
        gt=0,
        description="Vectors per upsert request",
    )
    max_concurrency: int = Field(
        default=5,
        gt=0,
        description="Maximum upsert requests in flight",
    )


@lru_cache
def get_settings() -> IndexerSettings:
    """
    Get cached settings instance.

    Returns:
        IndexerSettings: Singleton settings loaded from environment
    """
    return IndexerSettings()
