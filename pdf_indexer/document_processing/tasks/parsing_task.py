"""
PDF loading task using LangChain PyPDFLoader.

Converts a PDF file into ordered Page records, one per PDF page.

Dependencies: langchain_community.document_loaders, pypdf
System role: First stage of the indexing pipeline
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from pdf_indexer.core.exceptions import ParsingError
from pdf_indexer.models import Page

logger = logging.getLogger(__name__)


class ParsingTask:
    """Load PDF pages with PyPDFLoader."""

    def parse(self, file_path: str) -> list[Page]:
        """
        Load a PDF document into pages.

        Args:
            file_path: Path to PDF document

        Returns:
            list[Page]: Pages in document order

        Raises:
            ParsingError: When the file is missing, not a PDF, or unreadable
        """
        path = Path(file_path)
        if not path.exists():
            raise ParsingError(f"File not found: {file_path}", file_path)

        if path.suffix.lower() != ".pdf":
            raise ParsingError(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                file_path,
            )

        try:
            documents = PyPDFLoader(file_path).load()
        except Exception as e:
            raise ParsingError(f"Failed to parse PDF: {e}", file_path) from e

        if not documents:
            raise ParsingError("PDF document contains no pages", file_path)

        pages = [self._to_page(doc, position) for position, doc in enumerate(documents)]
        logger.info(
            f"{__name__}:parse - PDF loaded: {len(pages)} pages",
            extra={"file_path": file_path, "page_count": len(pages)},
        )
        return pages

    @staticmethod
    def _to_page(document: Document, position: int) -> Page:
        """Convert a loader Document, falling back to load order for the page number."""
        metadata = dict(document.metadata)
        page_number = metadata.get("page", position)
        if not isinstance(page_number, int):
            page_number = position
        return Page(page_number=page_number, text=document.page_content, metadata=metadata)
