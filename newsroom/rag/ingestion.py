"""
One ingestion pass: agenda PDFs and the city website into the corpus
"""

import logging
from typing import Callable, Optional

from ..config import Settings, settings as default_settings
from ..crawl.config import CrawlConfig
from ..crawl.content_manager import ContentManager
from ..crawl.crawler import WebCrawler
from .corpus_store import CorpusStore
from .document_processor import DocumentProcessor
from .models import AGENDA_PDF, WEB_SCRAPED, IngestionReport, web_documents

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Refreshes the corpus from whichever sources are missing, stale or forced"""

    def __init__(self, settings: Optional[Settings] = None,
                 store: Optional[CorpusStore] = None,
                 processor: Optional[DocumentProcessor] = None,
                 crawl_config: Optional[CrawlConfig] = None,
                 crawler_factory: Optional[Callable[[CrawlConfig], WebCrawler]] = None):
        self.settings = settings or default_settings
        self.crawl_config = crawl_config or CrawlConfig.from_settings(self.settings)
        self.store = store if store is not None else CorpusStore(self.settings.corpus_path,
                                                          dedup_by_key=self.settings.DEDUP_WEB_DOCUMENTS)
        self.processor = processor or DocumentProcessor()
        self.content_manager = ContentManager(config=self.crawl_config)
        self.crawler_factory = crawler_factory or (
            lambda config: WebCrawler(config, content_manager=self.content_manager)
        )

    async def run(self, force_crawl: bool = False, force_documents: bool = False) -> IngestionReport:
        report = IngestionReport()
        self.store.load()

        self._ingest_documents(report, force_documents)
        await self._ingest_web(report, force_crawl)

        try:
            self.store.save()
        except OSError as e:
            logger.error(f"Failed to save corpus: {e}")
            report.skipped_steps.append('save')

        report.total_documents = len(self.store)
        logger.info(f"Ingestion complete: {report.total_documents} documents available")
        return report

    def _ingest_documents(self, report: IngestionReport, force: bool):
        if force:
            logger.info("Reprocessing agenda documents (forced)")
        elif not self.store.has_type(AGENDA_PDF):
            logger.info("No agenda documents in corpus, processing agenda directory")
        elif self.store.has_placeholders():
            logger.info("Found placeholder content, processing actual PDFs")
        else:
            logger.info("Agenda documents are up to date")
            return

        records = self.processor.process_directory(self.settings.AGENDA_DIR)
        if records is None:
            report.skipped_steps.append('documents')
            return

        self.store.replace_documents(AGENDA_PDF, records)
        report.documents_failed = sum(1 for record in records if record.error)
        report.documents_processed = len(records) - report.documents_failed

    async def _ingest_web(self, report: IngestionReport, force: bool):
        if force or self.content_manager.is_stale():
            crawler = self.crawler_factory(self.crawl_config)
            try:
                pages, _ = await crawler.crawl(save=True)
            except OSError as e:
                logger.error(f"Web crawl could not be saved: {e}")
                report.skipped_steps.append('web')
                return
        elif not self.store.has_type(WEB_SCRAPED):
            logger.info("Corpus has no web documents, converting the existing scrape")
            pages = self.content_manager.load_scrape()
        else:
            return

        report.pages_failed = sum(1 for page in pages if not page.ok)
        report.pages_crawled = len(pages) - report.pages_failed

        documents = web_documents(pages)
        self.store.merge(documents)
        report.web_documents_merged = len(documents)
