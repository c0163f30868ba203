"""
Exception hierarchy for the PDF indexer.

Provides layered exception structure for chunking, parsing, embedding
and vector store errors. All exceptions carry a details dict for logging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the indexer
"""

from typing import Any


class IndexerError(Exception):
    """Base exception for all indexer errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(IndexerError):
    """Raised when chunking parameters or required settings are invalid."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Setting name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentProcessingError(IndexerError):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when a PDF is missing, unreadable or not a PDF."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            file_path: Path of the file that failed to load
            details: Additional context
        """
        self.file_path = file_path
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, details=details)


class EmbeddingError(DocumentProcessingError):
    """Raised when embedding generation fails."""

    pass


class AuthError(EmbeddingError):
    """Raised when the embedding provider rejects the API credential."""

    pass


class RateLimitError(EmbeddingError):
    """Raised when the embedding provider throttles or exhausts quota."""

    pass


class VectorStoreError(IndexerError):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (list_indexes, upsert)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class IndexNotFoundError(VectorStoreError):
    """Raised when the configured vector index does not exist."""

    def __init__(self, index_name: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["index_name"] = index_name
        self.index_name = index_name
        super().__init__(f"Index not found: {index_name}", "describe_index", details)
