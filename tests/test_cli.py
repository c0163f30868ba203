"""Tests for the pdf-indexer command line entry point."""

import os
from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from pdf_indexer.cli import app
from pdf_indexer.core.exceptions import IndexNotFoundError
from pdf_indexer.models import PipelineResult

runner = CliRunner()

ENV = {
    "GEMINI_API_KEY": "test-gemini-key",
    "PINECONE_API_KEY": "test-pinecone-key",
    "PINECONE_INDEX_NAME": "dsa-index",
    "PDF_PATH": "/data/dsa.pdf",
}


@pytest.fixture
def pipeline_result() -> PipelineResult:
    return PipelineResult(
        document_id="doc_1",
        pdf_path="/data/dsa.pdf",
        page_count=4,
        chunk_count=9,
        index_name="dsa-index",
        upserted_count=9,
        processing_time_ms=321.0,
    )


class TestIndexCommand:
    """Test the index command."""

    @patch.dict(os.environ, ENV, clear=True)
    @patch("pdf_indexer.cli.configure_logging")
    @patch("pdf_indexer.cli.IndexingPipeline")
    def test_success_prints_summary(
        self,
        mock_pipeline_class: Mock,
        mock_configure_logging: Mock,
        pipeline_result: PipelineResult,
    ) -> None:
        """Should exit 0 and print counts."""
        mock_pipeline_class.return_value.process.return_value = pipeline_result

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Indexed /data/dsa.pdf: 4 pages, 9 chunks, 9 vectors -> dsa-index" in result.output
        mock_configure_logging.assert_called_once_with("INFO")
        settings = mock_pipeline_class.call_args.args[0]
        assert settings.pdf_path == "/data/dsa.pdf"
        assert settings.pinecone_index_name == "dsa-index"

    @patch.dict(os.environ, ENV, clear=True)
    @patch("pdf_indexer.cli.configure_logging")
    @patch("pdf_indexer.cli.IndexingPipeline")
    def test_options_override_environment(
        self,
        mock_pipeline_class: Mock,
        mock_configure_logging: Mock,
        pipeline_result: PipelineResult,
    ) -> None:
        """Should apply command line options over environment settings."""
        mock_pipeline_class.return_value.process.return_value = pipeline_result

        result = runner.invoke(
            app,
            [
                "notes.pdf",
                "--index",
                "notes-index",
                "--chunk-size",
                "500",
                "--chunk-overlap",
                "50",
                "--max-concurrency",
                "2",
                "--span-pages",
                "--log-level",
                "DEBUG",
            ],
        )

        assert result.exit_code == 0
        settings = mock_pipeline_class.call_args.args[0]
        assert settings.pdf_path == "notes.pdf"
        assert settings.pinecone_index_name == "notes-index"
        assert settings.chunk_size == 500
        assert settings.chunk_overlap == 50
        assert settings.max_concurrency == 2
        assert settings.span_pages is True
        mock_configure_logging.assert_called_once_with("DEBUG")

    @patch.dict(os.environ, ENV, clear=True)
    @patch("pdf_indexer.cli.configure_logging")
    @patch("pdf_indexer.cli.IndexingPipeline")
    def test_indexer_error_exits_non_zero(
        self,
        mock_pipeline_class: Mock,
        mock_configure_logging: Mock,
    ) -> None:
        """Should exit 1 when the pipeline fails."""
        mock_pipeline_class.return_value.process.side_effect = IndexNotFoundError("dsa-index")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Indexed" not in result.output
