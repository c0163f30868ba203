"""
Shared test fixtures.

Provides: page factories, isolated settings, mocked Pinecone client
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from pdf_indexer.configs import IndexerSettings
from pdf_indexer.models import Chunk, EmbeddedChunk, Page


@pytest.fixture
def make_page():
    """Factory for Page records with loader-style metadata."""

    def _make(text: str, page_number: int = 0, **metadata) -> Page:
        meta = {"source": "dsa.pdf", "page": page_number}
        meta.update(metadata)
        return Page(page_number=page_number, text=text, metadata=meta)

    return _make


@pytest.fixture
def indexer_settings(tmp_path) -> IndexerSettings:
    """Settings isolated from the process environment and any .env file."""
    return IndexerSettings(
        _env_file=None,
        pdf_path=str(tmp_path / "dsa.pdf"),
        gemini_api_key="test-gemini-key",
        pinecone_api_key="test-pinecone-key",
        pinecone_index_name="dsa-index",
        chunk_size=100,
        chunk_overlap=20,
    )


@pytest.fixture
def pdf_file(tmp_path):
    """Small file with a .pdf suffix (content is never parsed by real pypdf)."""
    path = tmp_path / "dsa.pdf"
    path.write_bytes(b"%PDF-1.4\n%%EOF\n")
    return path


@pytest.fixture
def embedded_chunks() -> list[EmbeddedChunk]:
    """Five embedded chunks across two pages."""
    items = []
    for i in range(5):
        page = 0 if i < 3 else 1
        chunk = Chunk(
            text=f"chunk text {i}",
            metadata={"source": "dsa.pdf", "page": page, "author": None},
            source_page_range=(page, page),
            start_index=i * 80,
        )
        items.append(EmbeddedChunk(chunk=chunk, embedding=[0.1 * i, 0.2, 0.3]))
    return items


@pytest.fixture
def pinecone_client() -> MagicMock:
    """Mocked Pinecone client exposing a 'dsa-index' index."""
    client = MagicMock()
    client.list_indexes.return_value.names.return_value = ["other-index", "dsa-index"]
    index = client.Index.return_value

    def _upsert(vectors, namespace, async_req):
        result = MagicMock()
        result.get.return_value = SimpleNamespace(upserted_count=len(vectors))
        return result

    index.upsert.side_effect = _upsert
    return client
