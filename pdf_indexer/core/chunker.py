"""
Overlapping character-window chunker.

Splits page text into windows of at most chunk_size characters that
overlap by up to chunk_overlap characters. Window ends snap back to the
nearest paragraph, line, sentence or word boundary in the back half of the
window; without one the window is cut hard at chunk_size.

Chunks are exact slices of the source text, so dropping each chunk's
overlapping prefix and concatenating reproduces the input.

Dependencies: pdf_indexer.models, pdf_indexer.core.exceptions
System role: Text preparation ahead of embedding
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pdf_indexer.core.exceptions import ConfigurationError
from pdf_indexer.models import Chunk, Page

# Boundary tiers, most preferred first. Whitespace (word) boundaries are
# handled separately.
SEPARATOR_TIERS: tuple[tuple[str, ...], ...] = (
    ("\n\n",),
    ("\n",),
    (". ", "! ", "? ", "; "),
)

PAGE_JOINER = "\n\n"


@dataclass(frozen=True)
class ChunkingConfig:
    """Validated chunking parameters."""

    chunk_size: int = 1000
    chunk_overlap: int = 200
    span_pages: bool = False

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ConfigurationError(
                f"chunk_size must be positive, got {self.chunk_size}",
                field="chunk_size",
            )
        if self.chunk_overlap < 0:
            raise ConfigurationError(
                f"chunk_overlap must not be negative, got {self.chunk_overlap}",
                field="chunk_overlap",
            )
        if self.chunk_overlap >= self.chunk_size:
            raise ConfigurationError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})",
                field="chunk_overlap",
            )


class TextChunker:
    """Split pages into overlapping, boundary-aligned chunks."""

    def __init__(self, config: ChunkingConfig | None = None) -> None:
        """
        Initialize chunker.

        Args:
            config: Chunking parameters (defaults to 1000/200, per page)
        """
        self._config = config or ChunkingConfig()

    @property
    def config(self) -> ChunkingConfig:
        return self._config

    def split_text(self, text: str) -> list[tuple[int, str]]:
        """
        Split a single text into overlapping windows.

        Args:
            text: Source text

        Returns:
            list[tuple[int, str]]: (start offset, chunk text) pairs in order
        """
        if not text or not text.strip():
            return []

        size = self._config.chunk_size
        windows: list[tuple[int, str]] = []
        start = 0
        length = len(text)

        while True:
            if length - start <= size:
                self._append(windows, start, text[start:])
                return windows

            end = self._find_break(text, start)
            self._append(windows, start, text[start:end])
            start = self._next_start(text, start, end)

    def split_pages(self, pages: Sequence[Page]) -> list[Chunk]:
        """
        Split pages into chunks, keeping the link to their source pages.

        Args:
            pages: Pages in document order

        Returns:
            list[Chunk]: Chunks in document order
        """
        if self._config.span_pages:
            return self._split_joined(pages)

        chunks: list[Chunk] = []
        for page in pages:
            for offset, piece in self.split_text(page.text):
                chunks.append(
                    Chunk(
                        text=piece,
                        metadata=dict(page.metadata),
                        source_page_range=(page.page_number, page.page_number),
                        start_index=offset,
                    )
                )
        return chunks

    def _split_joined(self, pages: Sequence[Page]) -> list[Chunk]:
        """Join non-empty pages and let chunks cross page boundaries."""
        kept = [page for page in pages if page.text.strip()]
        spans: list[tuple[int, int, Page]] = []
        cursor = 0
        for page in kept:
            spans.append((cursor, cursor + len(page.text), page))
            cursor += len(page.text) + len(PAGE_JOINER)

        joined = PAGE_JOINER.join(page.text for page in kept)
        chunks: list[Chunk] = []
        for offset, piece in self.split_text(joined):
            end = offset + len(piece)
            covered = [page for (s, e, page) in spans if s < end and offset < e]
            if not covered:
                continue
            chunks.append(
                Chunk(
                    text=piece,
                    metadata=_merge_metadata(covered),
                    source_page_range=(covered[0].page_number, covered[-1].page_number),
                    start_index=offset,
                )
            )
        return chunks

    def _find_break(self, text: str, start: int) -> int:
        """Return the end offset of the window starting at start."""
        hi = start + self._config.chunk_size
        lo = start + self._config.chunk_size // 2

        for tier in SEPARATOR_TIERS:
            best = -1
            for separator in tier:
                idx = text.rfind(separator, lo, hi)
                if idx != -1:
                    best = max(best, idx + len(separator))
            if best != -1:
                return best

        for idx in range(hi - 1, lo - 1, -1):
            if text[idx].isspace():
                return idx + 1

        return hi

    def _next_start(self, text: str, start: int, end: int) -> int:
        """Return the start of the window following [start, end)."""
        overlap = self._config.chunk_overlap
        if overlap == 0:
            return end

        target = max(end - overlap, start + 1)
        for idx in range(target, end):
            if not text[idx].isspace() and (idx == 0 or text[idx - 1].isspace()):
                return idx
        return target

    @staticmethod
    def _append(windows: list[tuple[int, str]], offset: int, piece: str) -> None:
        if piece.strip():
            windows.append((offset, piece))


def _merge_metadata(pages: Iterable[Page]) -> dict:
    """First page's metadata wins; later pages only add missing keys."""
    merged: dict = {}
    for page in pages:
        for key, value in page.metadata.items():
            merged.setdefault(key, value)
    return merged


def chunk_pages(
    pages: Sequence[Page],
    chunk_size: int = 1000,
    chunk_overlap: int = 200,
    span_pages: bool = False,
) -> list[Chunk]:
    """
    Chunk pages with the given parameters.

    Raises:
        ConfigurationError: chunk_size <= 0 or chunk_overlap >= chunk_size
    """
    config = ChunkingConfig(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        span_pages=span_pages,
    )
    return TextChunker(config).split_pages(pages)
