"""
Page domain model.

One page of extracted PDF text with the loader's source metadata.

Dependencies: pydantic
System role: Input record for the chunker
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Page(BaseModel):
    """Raw text of a single PDF page. Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(description="Zero-based page number assigned by the loader")
    text: str = Field(description="Raw extracted page text")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Source metadata (source, page, ...)")
