"""
Models for the indexing pipeline.

Exports: Page, Chunk, EmbeddedChunk, PipelineResult
"""

from .chunk import Chunk, EmbeddedChunk
from .page import Page
from .pipeline_result import PipelineResult

__all__ = [
    "Page",
    "Chunk",
    "EmbeddedChunk",
    "PipelineResult",
]
