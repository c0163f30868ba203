"""
PDF indexing pipeline.

Loads a PDF, chunks its pages, embeds the chunks with Gemini and upserts
them into Pinecone.

Dependencies: langchain_community, langchain_google_genai, pinecone, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import IndexingPipeline

__all__ = ["IndexingPipeline"]
