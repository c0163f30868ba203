"""
Google Generative AI Embeddings wrapper with optional fixed dimensionality.

The base GoogleGenerativeAIEmbeddings class ignores output_dimensionality in
the constructor. This wrapper applies the configured dimension to every
embed call so all vectors match the Pinecone index dimension.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the vector index
"""

import logging
from typing import List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings that always requests the same dimension."""

    _output_dimensionality: int | None = None
    _batch_size: int = 100

    def __init__(
        self,
        model: str = "models/text-embedding-004",
        output_dimensionality: int | None = None,
        batch_size: int = 100,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings (model default if None)
            batch_size: Texts per API call
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings (google_api_key, ...)

        Note:
            text-embedding-004 supports at most 768 dimensions.
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        self._batch_size = batch_size
        logger.info(
            f"{__name__}:__init__ - Embedding model ready: model={model}, "
            f"output_dimensionality={output_dimensionality or 'default'}"
        )

    def embed_documents(
        self,
        texts: List[str],
        *,
        batch_size: int | None = None,
        task_type: str | None = None,
        titles: List[str] | None = None,
        output_dimensionality: int | None = None,
    ) -> List[List[float]]:
        """
        Embed documents with the configured output dimensionality.

        Args:
            texts: List of texts to embed
            batch_size: Batch size for API calls (uses configured if None)
            task_type: Optional task type for embedding
            titles: Optional titles for documents
            output_dimensionality: Override dimension (uses configured if None)

        Returns:
            List of embedding vectors
        """
        return super().embed_documents(
            texts,
            batch_size=batch_size or self._batch_size,
            task_type=task_type,
            titles=titles,
            output_dimensionality=output_dimensionality or self._output_dimensionality,
        )
