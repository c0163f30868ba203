"""
PDF vector indexer.

Splits a PDF into overlapping chunks, embeds them with Gemini and upserts
the vectors into Pinecone.
"""

__version__ = "0.1.0"
