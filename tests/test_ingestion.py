#!/usr/bin/env python3
"""
Tests for the ingestion pass
"""

import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from newsroom.crawl.config import CrawlConfig
from newsroom.crawl.content_manager import ContentManager
from newsroom.crawl.models import PageCategory, PageContent, PageRecord
from newsroom.rag.corpus_store import CorpusStore
from newsroom.rag.ingestion import IngestionPipeline
from newsroom.rag.models import AGENDA_PDF, WEB_SCRAPED, DocumentRecord


def make_page(url, error=None):
    return PageRecord(
        url=url,
        title="Page",
        category=PageCategory.GENERAL,
        scraped_at=datetime.now(timezone.utc).isoformat(),
        content=PageContent.placeholder(error) if error else PageContent(
            full_text="City page text", word_count=3,
        ),
        error=error,
    )


def make_agenda(filename, error=None):
    return DocumentRecord(
        filename=filename,
        content=f"Error processing PDF: {error}" if error else "Agenda text",
        error=error,
    )


@pytest.mark.unit
class TestIngestionPipeline:
    """Test IngestionPipeline with fake sources"""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.settings = Mock()
        self.settings.AGENDA_DIR = str(Path(self.temp_dir) / "agendas")
        self.settings.corpus_path = str(Path(self.temp_dir) / "processing_results.json")
        self.settings.DEDUP_WEB_DOCUMENTS = True

        self.crawl_config = CrawlConfig(data_dir=self.temp_dir, delay=0)
        self.store = CorpusStore(self.settings.corpus_path)

        self.processor = Mock()
        self.processor.process_directory.return_value = [
            make_agenda("agenda-1-7-2025.pdf"),
            make_agenda("agenda-2-4-2025.pdf", error="bad header"),
        ]

        self.crawler = Mock()
        self.crawler.crawl = AsyncMock(return_value=([
            make_page("https://www.longbeachny.gov"),
            make_page("https://www.longbeachny.gov/news", error="timed out"),
            make_page("https://www.longbeachny.gov/calendar"),
        ], {}))
        self.crawler_factory = Mock(return_value=self.crawler)

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def make_pipeline(self):
        return IngestionPipeline(
            settings=self.settings,
            store=self.store,
            processor=self.processor,
            crawl_config=self.crawl_config,
            crawler_factory=self.crawler_factory,
        )

    @pytest.mark.asyncio
    async def test_first_run_processes_everything(self):
        report = await self.make_pipeline().run()

        assert report.documents_processed == 1
        assert report.documents_failed == 1
        assert report.pages_crawled == 2
        assert report.pages_failed == 1
        assert report.web_documents_merged == 2
        assert report.total_documents == 4
        assert not report.produced_nothing

        self.crawler_factory.assert_called_once_with(self.crawl_config)
        self.crawler.crawl.assert_awaited_once_with(save=True)

        saved = CorpusStore(self.settings.corpus_path)
        saved.load()
        assert saved.count_by_type() == {AGENDA_PDF: 2, WEB_SCRAPED: 2}

    @pytest.mark.asyncio
    async def test_up_to_date_corpus_is_left_alone(self):
        self.store.documents = [make_agenda("agenda-1-7-2025.pdf")]
        self.store.save()
        ContentManager(config=self.crawl_config).save_scrape([make_page("https://www.longbeachny.gov")])
        self.store.documents.append(
            DocumentRecord.from_page(make_page("https://www.longbeachny.gov"), 1)
        )
        self.store.save()

        report = await self.make_pipeline().run()

        self.processor.process_directory.assert_not_called()
        self.crawler_factory.assert_not_called()
        assert report.total_documents == 2

    @pytest.mark.asyncio
    async def test_placeholders_trigger_reprocessing(self):
        self.store.documents = [DocumentRecord(filename="old.pdf", content="Placeholder content for old.pdf")]
        self.store.save()

        await self.make_pipeline().run()

        self.processor.process_directory.assert_called_once_with(self.settings.AGENDA_DIR)
        assert "old.pdf" not in [doc.filename for doc in self.store.documents]

    @pytest.mark.asyncio
    async def test_force_flags(self):
        self.store.documents = [make_agenda("agenda-1-7-2025.pdf")]
        self.store.save()
        ContentManager(config=self.crawl_config).save_scrape([make_page("https://www.longbeachny.gov")])

        await self.make_pipeline().run(force_crawl=True, force_documents=True)

        self.processor.process_directory.assert_called_once()
        self.crawler.crawl.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_fresh_scrape_converted_when_corpus_lacks_web_documents(self):
        ContentManager(config=self.crawl_config).save_scrape([
            make_page("https://www.longbeachny.gov"),
            make_page("https://www.longbeachny.gov/about"),
        ])

        report = await self.make_pipeline().run()

        self.crawler_factory.assert_not_called()
        assert report.web_documents_merged == 2
        assert self.store.has_type(WEB_SCRAPED)

    @pytest.mark.asyncio
    async def test_missing_agenda_directory_is_skipped(self):
        self.processor.process_directory.return_value = None

        report = await self.make_pipeline().run()

        assert "documents" in report.skipped_steps
        assert report.documents_processed == 0
        assert report.total_documents == 2

    @pytest.mark.asyncio
    async def test_repeated_runs_do_not_duplicate_web_documents(self):
        await self.make_pipeline().run()
        await self.make_pipeline().run(force_crawl=True)

        assert self.store.count_by_type()[WEB_SCRAPED] == 2

    @pytest.mark.asyncio
    async def test_nothing_available(self):
        self.processor.process_directory.return_value = None
        self.crawler.crawl = AsyncMock(return_value=([], {}))

        report = await self.make_pipeline().run()

        assert report.produced_nothing

    @pytest.mark.asyncio
    async def test_injected_empty_store_is_filled(self):
        store = CorpusStore(self.settings.corpus_path, dedup_by_key=False)
        pipeline = IngestionPipeline(
            settings=self.settings,
            store=store,
            processor=self.processor,
            crawl_config=self.crawl_config,
            crawler_factory=self.crawler_factory,
        )

        report = await pipeline.run()

        assert pipeline.store is store
        assert store.dedup_by_key is False
        assert len(store) == report.total_documents == 4
