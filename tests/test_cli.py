#!/usr/bin/env python3
"""
Tests for the command line interface
"""

from unittest.mock import AsyncMock, Mock, patch

import pytest
from typer.testing import CliRunner

from newsroom.cli.app import app
from newsroom.rag.models import IngestionReport, QueryResult
from newsroom.rag.pipeline import NO_MATCH_MESSAGE


runner = CliRunner()


def make_result():
    return QueryResult(
        identity="agenda-1-7-2025.pdf",
        source=None,
        category="agenda",
        date="01-07-2025",
        pages=4,
        word_count=120,
        summary="The council approved the budget.",
        context="the budget passed",
    )


def make_pipeline(answer):
    pipeline = Mock()
    pipeline.store = [object(), object()]
    pipeline.query = AsyncMock(return_value=answer)
    return pipeline


@pytest.mark.unit
class TestCLI:
    """Test CLI commands with the pipelines mocked out"""

    @pytest.fixture(autouse=True)
    def work_in_tmp(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

    def test_query(self):
        pipeline = make_pipeline([make_result()])
        with patch("newsroom.cli.app.create_query_pipeline", return_value=pipeline):
            result = runner.invoke(app, ["query", "budget"])

        assert result.exit_code == 0
        assert "agenda-1-7-2025.pdf" in result.output
        assert "The council approved the budget." in result.output
        pipeline.query.assert_awaited_once_with("budget", category=None)
        pipeline.cleanup.assert_called_once()

    def test_query_with_category(self):
        pipeline = make_pipeline(NO_MATCH_MESSAGE)
        with patch("newsroom.cli.app.create_query_pipeline", return_value=pipeline):
            result = runner.invoke(app, ["query", "budget", "--category", "community"])

        assert result.exit_code == 0
        assert NO_MATCH_MESSAGE in result.output
        pipeline.query.assert_awaited_once_with("budget", category="community")

    def test_interactive(self):
        pipeline = make_pipeline([make_result()])
        with patch("newsroom.cli.app.create_query_pipeline", return_value=pipeline):
            result = runner.invoke(app, ["interactive"], input="\nbudget\nexit\n")

        assert result.exit_code == 0
        assert "Goodbye!" in result.output
        pipeline.query.assert_awaited_once_with("budget")
        pipeline.cleanup.assert_called_once()

    def test_interactive_end_of_input(self):
        pipeline = make_pipeline(NO_MATCH_MESSAGE)
        with patch("newsroom.cli.app.create_query_pipeline", return_value=pipeline):
            result = runner.invoke(app, ["interactive"], input="")

        assert result.exit_code == 0
        pipeline.query.assert_not_awaited()

    def test_ingest(self):
        ingestion = Mock()
        ingestion.run = AsyncMock(return_value=IngestionReport(documents_processed=3, total_documents=3))
        with patch("newsroom.cli.app.IngestionPipeline", return_value=ingestion):
            result = runner.invoke(app, ["ingest", "--force-crawl"])

        assert result.exit_code == 0
        assert "Ingestion Summary" in result.output
        ingestion.run.assert_awaited_once_with(force_crawl=True, force_documents=False)

    def test_ingest_with_nothing_available(self):
        ingestion = Mock()
        ingestion.run = AsyncMock(return_value=IngestionReport())
        with patch("newsroom.cli.app.IngestionPipeline", return_value=ingestion):
            result = runner.invoke(app, ["ingest"])

        assert result.exit_code == 1

    def test_crawl_overrides(self):
        crawler = Mock()
        crawler.crawl = AsyncMock(return_value=([Mock()], {"totalPages": 1, "pagesByType": {"general": 1}}))
        with patch("newsroom.cli.app.WebCrawler", return_value=crawler) as crawler_cls:
            result = runner.invoke(app, ["crawl", "--max-pages", "5", "--delay", "0"])

        assert result.exit_code == 0
        config = crawler_cls.call_args[0][0]
        assert config.max_pages == 5
        assert config.delay == 0

    def test_report_missing(self):
        result = runner.invoke(app, ["report"])
        assert result.exit_code == 1
