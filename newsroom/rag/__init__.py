"""
Document corpus and query module for Newsroom AI

Contains agenda PDF processing, the corpus store, keyword search,
AI summaries, the ingestion pass and the query pipeline.
"""

from .pipeline import QueryPipeline, create_query_pipeline, NO_MATCH_MESSAGE
from .ingestion import IngestionPipeline
from .corpus_store import CorpusStore
from .document_processor import DocumentProcessor
from .keyword_search import KeywordSearchEngine, SearchHit, STOP_WORDS
from .summarizer import Summarizer, FALLBACK_SUMMARY
from .models import DocumentRecord, DocumentDate, QueryResult, IngestionReport, web_documents

__all__ = [
    # Main pipeline
    'QueryPipeline',
    'create_query_pipeline',
    'NO_MATCH_MESSAGE',

    # Ingestion
    'IngestionPipeline',
    'DocumentProcessor',
    'CorpusStore',

    # Search and summaries
    'KeywordSearchEngine',
    'SearchHit',
    'STOP_WORDS',
    'Summarizer',
    'FALLBACK_SUMMARY',

    # Data models
    'DocumentRecord',
    'DocumentDate',
    'QueryResult',
    'IngestionReport',
    'web_documents'
]
