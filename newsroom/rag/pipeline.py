"""
Query pipeline: keyword search, concurrent summaries, formatted results
"""

import asyncio
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Union
import logging

from ..config import Settings, settings as default_settings
from ..crawl.models import PageRecord
from .corpus_store import CorpusStore
from .keyword_search import KeywordSearchEngine, SearchHit
from .models import QueryResult
from .summarizer import Summarizer

logger = logging.getLogger(__name__)


NO_MATCH_MESSAGE = "No documents found matching your query."


class QueryPipeline:
    """Answers free-text queries against a loaded corpus"""

    def __init__(self, store: Optional[CorpusStore] = None,
                 search_engine: Optional[KeywordSearchEngine] = None,
                 summarizer: Optional[Summarizer] = None,
                 settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.store = store if store is not None else CorpusStore(self.settings.corpus_path,
                                                          dedup_by_key=self.settings.DEDUP_WEB_DOCUMENTS)
        self.search_engine = search_engine or KeywordSearchEngine(top_k=self.settings.TOP_K)
        self.summarizer = summarizer or Summarizer()

        # Performance metrics
        self.performance_metrics = {
            'total_queries': 0,
            'no_match_queries': 0,
            'avg_response_time': 0.0,
            'total_response_time': 0.0
        }

        # Thread pool for the blocking chat model calls
        self.thread_pool = ThreadPoolExecutor(max_workers=max(1, self.search_engine.top_k))

        logger.info("Query pipeline initialized")

    def load(self) -> int:
        return len(self.store.load())

    async def _summarize(self, hit: SearchHit, query: str) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self.thread_pool,
            self.summarizer.summarize,
            hit.view.searchable_text,
            query
        )

    async def query(self, text: str, category: Optional[str] = None) -> Union[List[QueryResult], str]:
        """
        Search the corpus and summarize the top matches

        Args:
            text: Free-text user query
            category: Optional category filter, compared case-insensitively

        Returns:
            Results in rank order, or the no-match message when nothing matched
        """
        start_time = time.time()
        self.performance_metrics['total_queries'] += 1

        try:
            hits = self.search_engine.search(text, self.store.documents, category=category)
            if not hits:
                self.performance_metrics['no_match_queries'] += 1
                return NO_MATCH_MESSAGE

            summaries = await asyncio.gather(*[self._summarize(hit, text) for hit in hits])
            return [self._to_result(hit, summary) for hit, summary in zip(hits, summaries)]
        finally:
            self._update_performance_metrics(time.time() - start_time)

    @staticmethod
    def _to_result(hit: SearchHit, summary: str) -> QueryResult:
        record = hit.record
        if isinstance(record, PageRecord):
            return QueryResult(
                identity=hit.view.identity,
                source=record.url,
                category=record.category.value,
                date=record.scraped_at[:10],
                pages=1,
                word_count=record.content.word_count,
                summary=summary,
                context=hit.context,
                contact_info=record.content.contact_info,
            )
        return QueryResult(
            identity=hit.view.identity,
            source=record.source,
            category=record.category,
            date=str(record.date),
            pages=record.pages,
            word_count=record.word_count,
            summary=summary,
            context=hit.context,
            contact_info=record.contact_info,
        )

    def _update_performance_metrics(self, response_time: float):
        self.performance_metrics['total_response_time'] += response_time
        self.performance_metrics['avg_response_time'] = (
            self.performance_metrics['total_response_time'] /
            self.performance_metrics['total_queries']
        )

    def get_performance_stats(self) -> Dict[str, Any]:
        """Get performance and corpus statistics"""
        return {
            "performance": self.performance_metrics.copy(),
            "corpus": {
                "total_documents": len(self.store),
                "by_type": self.store.count_by_type(),
                "by_category": self.store.count_by_category(),
            },
            "configuration": {
                "llm_model": self.summarizer.model,
                "top_k": self.search_engine.top_k,
                "corpus_path": str(self.store.path),
            }
        }

    def cleanup(self):
        """Cleanup resources"""
        self.thread_pool.shutdown(wait=True)
        logger.info("Query pipeline cleanup completed")


def create_query_pipeline(settings: Optional[Settings] = None) -> QueryPipeline:
    """Build a pipeline and load the corpus from disk"""
    pipeline = QueryPipeline(settings=settings)
    pipeline.load()
    return pipeline
