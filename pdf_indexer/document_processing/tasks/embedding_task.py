"""
Embedding generation task using Google Gemini embeddings.

Generates one vector per chunk and classifies provider failures into
authentication, rate limit and generic embedding errors. Throttled
calls are retried with exponential backoff.

Dependencies: langchain_google_genai (via embeddings_wrapper), tenacity
System role: Third stage of the indexing pipeline
"""

import logging

from langchain_core.embeddings import Embeddings
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from pdf_indexer.core.exceptions import (
    AuthError,
    ConfigurationError,
    EmbeddingError,
    RateLimitError,
)
from pdf_indexer.document_processing.embeddings_wrapper import FixedDimensionEmbeddings
from pdf_indexer.models import Chunk, EmbeddedChunk

logger = logging.getLogger(__name__)

AUTH_STATUS_CODES = {401, 403}
RATE_LIMIT_STATUS_CODES = {429}
AUTH_MARKERS = ("api key not valid", "api_key_invalid", "permission_denied", "unauthenticated")
RATE_LIMIT_MARKERS = ("resource_exhausted", "rate limit", "quota", "429")
MAX_ATTEMPTS = 5


class EmbeddingTask:
    """Generate embeddings for chunks with Gemini."""

    def __init__(
        self,
        api_key: str,
        model: str = "models/text-embedding-004",
        batch_size: int = 100,
        output_dimensionality: int | None = None,
        embeddings: Embeddings | None = None,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            api_key: Google Gemini API key
            model: Embedding model ID
            batch_size: Texts per embedding request
            output_dimensionality: Fixed vector dimension (model default if None)
            embeddings: Prebuilt LangChain embeddings (skips client construction)

        Raises:
            ConfigurationError: When api_key is empty and no embeddings given
        """
        self.model = model
        self.batch_size = batch_size

        if embeddings is not None:
            self._embeddings = embeddings
            return

        if not api_key:
            raise ConfigurationError("Missing GEMINI_API_KEY in environment", field="gemini_api_key")

        self._embeddings = FixedDimensionEmbeddings(
            model=model,
            output_dimensionality=output_dimensionality,
            batch_size=batch_size,
            google_api_key=api_key,
        )

    def embed(self, chunks: list[Chunk]) -> list[EmbeddedChunk]:
        """
        Generate embeddings for chunks.

        Args:
            chunks: Chunks to embed

        Returns:
            list[EmbeddedChunk]: Chunks paired with vectors, same order

        Raises:
            AuthError: Credential rejected by the provider
            RateLimitError: Provider still throttling after retries
            EmbeddingError: Any other embedding failure
        """
        if not chunks:
            return []

        texts = [chunk.text for chunk in chunks]
        vectors = self._embed_with_retry(texts)

        if len(vectors) != len(chunks):
            raise EmbeddingError(
                "Embedding provider returned a different number of vectors",
                details={"expected": len(chunks), "received": len(vectors)},
            )

        logger.info(
            f"{__name__}:embed - Generated {len(vectors)} embeddings",
            extra={"model": self.model, "dimension": len(vectors[0]) if vectors else 0},
        )
        return [
            EmbeddedChunk(chunk=chunk, embedding=list(vector))
            for chunk, vector in zip(chunks, vectors)
        ]

    @retry(
        retry=retry_if_exception_type(RateLimitError),
        stop=stop_after_attempt(MAX_ATTEMPTS),
        wait=wait_exponential_jitter(initial=1, max=30, jitter=5),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:embed - Retry {retry_state.attempt_number}/{MAX_ATTEMPTS} after throttling"
        ),
        reraise=True,
    )
    def _embed_with_retry(self, texts: list[str]) -> list[list[float]]:
        """Call the provider, retrying only when throttled."""
        try:
            return self._embeddings.embed_documents(texts)
        except Exception as e:
            raise classify_embedding_error(e, self.model) from e


def classify_embedding_error(error: Exception, model: str = "") -> EmbeddingError:
    """
    Map a provider exception chain to AuthError, RateLimitError or EmbeddingError.

    Args:
        error: Exception raised by the embeddings client
        model: Model ID for error context

    Returns:
        EmbeddingError: Classified error (not raised)
    """
    details = {"model": model, "error_type": type(error).__name__}
    message = f"Failed to generate embeddings: {error}"

    for exc in _exception_chain(error):
        status = _status_code(exc)
        text = str(exc).lower()
        if status in AUTH_STATUS_CODES or any(marker in text for marker in AUTH_MARKERS):
            return AuthError(message, details=details)
        if status in RATE_LIMIT_STATUS_CODES or any(marker in text for marker in RATE_LIMIT_MARKERS):
            return RateLimitError(message, details=details)

    return EmbeddingError(message, details=details)


def _exception_chain(error: BaseException):
    seen = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _status_code(error: BaseException) -> int | None:
    for attr in ("code", "status_code", "status"):
        value = getattr(error, attr, None)
        if callable(value):
            try:
                value = value()
            except TypeError:
                continue
        value = getattr(value, "value", value)
        if isinstance(value, int):
            return value
    return None
