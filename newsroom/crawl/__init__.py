"""
Crawl module for Newsroom AI

Contains the sequential web crawler, URL filtering, content extraction
and raw scrape management.
"""

from .crawler import WebCrawler
from .config import CrawlConfig, DEFAULT_SECTION_PATHS
from .models import PageCategory, PageContent, PageRecord, CrawlState, ContactInfo
from .content_extractor import ContentExtractor
from .content_manager import ContentManager
from .url_filter import UrlFilter

__all__ = [
    # Main crawler
    'WebCrawler',

    # Configuration
    'CrawlConfig',
    'DEFAULT_SECTION_PATHS',

    # Data models
    'PageCategory',
    'PageContent',
    'PageRecord',
    'CrawlState',
    'ContactInfo',

    # Core components
    'ContentExtractor',
    'ContentManager',
    'UrlFilter'
]
