"""
Command line entry point.

Runs the indexing pipeline once for a single PDF. Command line options
override environment settings.

Dependencies: typer, python-dotenv, pdf_indexer.document_processing
System role: Script entry point (pdf-indexer)
"""

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from pdf_indexer.configs import IndexerSettings
from pdf_indexer.core.exceptions import IndexerError
from pdf_indexer.document_processing import IndexingPipeline
from pdf_indexer.observability import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(help="Index a PDF into a Pinecone vector index.", add_completion=False)


@app.command()
def index(
    pdf_path: Optional[str] = typer.Argument(None, help="PDF file to index (defaults to PDF_PATH)"),
    index_name: Optional[str] = typer.Option(None, "--index", help="Pinecone index name"),
    chunk_size: Optional[int] = typer.Option(None, help="Maximum characters per chunk"),
    chunk_overlap: Optional[int] = typer.Option(None, help="Characters shared by consecutive chunks"),
    max_concurrency: Optional[int] = typer.Option(None, help="Maximum upsert requests in flight"),
    span_pages: Optional[bool] = typer.Option(None, "--span-pages/--per-page", help="Let chunks cross pages"),
    log_level: Optional[str] = typer.Option(None, help="Logging level"),
) -> None:
    """Load, chunk, embed and upsert one PDF."""
    overrides = {
        "pdf_path": pdf_path,
        "pinecone_index_name": index_name,
        "chunk_size": chunk_size,
        "chunk_overlap": chunk_overlap,
        "max_concurrency": max_concurrency,
        "span_pages": span_pages,
        "log_level": log_level,
    }
    settings = IndexerSettings(**{k: v for k, v in overrides.items() if v is not None})
    configure_logging(settings.log_level)

    try:
        result = IndexingPipeline(settings).process()
    except IndexerError as e:
        logger.error(f"{__name__}:index - Error during indexing process: {e}")
        raise typer.Exit(code=1)

    typer.echo(
        f"Indexed {result.pdf_path}: {result.page_count} pages, "
        f"{result.chunk_count} chunks, {result.upserted_count} vectors "
        f"-> {result.index_name} ({result.processing_time_ms:.0f} ms)"
    )


def main() -> None:
    load_dotenv()
    app()


if __name__ == "__main__":
    main()
