"""
Polite sequential crawler for the city website
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import requests
from bs4 import BeautifulSoup

from .config import CrawlConfig
from .models import CrawlState, PageContent, PageRecord
from .content_extractor import ContentExtractor
from .content_manager import ContentManager
from .url_filter import UrlFilter


class WebCrawler:
    """Discovers pages of one site and fetches them one at a time"""

    DISCOVERY_SELECTOR = (
        'nav a, .menu a, .navigation a, header a, footer a, '
        'main a, .content a, article a'
    )

    def __init__(self, config: CrawlConfig = None, session: Optional[requests.Session] = None,
                 content_manager: Optional[ContentManager] = None):
        self.config = config or CrawlConfig()

        # Initialize components
        self.url_filter = UrlFilter(self.config)
        self.extractor = ContentExtractor(self.config, self.url_filter)
        self.content_manager = content_manager or ContentManager(config=self.config)
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': self.config.user_agent})

        # URL management, rebuilt for every crawl run
        self.state = self.new_state()

        # Setup logging
        self.logger = logging.getLogger(__name__)

        # Statistics
        self.stats = {
            'pages_crawled': 0,
            'errors': 0,
        }

    def new_state(self) -> CrawlState:
        return CrawlState(max_pages=self.config.max_pages, delay=self.config.delay)

    def _fetch(self, url: str) -> BeautifulSoup:
        """Blocking GET; raises on network errors and non-2xx responses"""
        response = self.session.get(url, timeout=self.config.timeout)
        response.raise_for_status()
        return BeautifulSoup(response.content, 'html.parser')

    async def _fetch_async(self, url: str) -> BeautifulSoup:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._fetch, url)

    async def discover_pages(self) -> List[str]:
        """Seed the frontier with the root, the known sections and the root page's links"""
        self.logger.info("Discovering pages on the website...")
        base_url = self.config.base_url.rstrip('/')

        self.state.discover(base_url)
        for path in self.config.section_paths:
            self.state.discover(base_url + path)

        try:
            soup = await self._fetch_async(base_url)
        except Exception as e:
            self.logger.error(f"Error during page discovery: {e}")
            return self.state.discovered_urls
        finally:
            # the root is fetched again as the first crawl page
            await asyncio.sleep(self.state.delay)

        found = 0
        for anchor in soup.select(self.DISCOVERY_SELECTOR):
            url = self.url_filter.normalize(anchor.get('href'))
            if self.url_filter.validate(url) and self.state.discover(url):
                found += 1

        self.logger.info(f"Found {found} additional links on the home page")
        self.logger.info(f"Total pages to scrape: {len(self.state.discovered_urls)}")
        return self.state.discovered_urls

    async def crawl_page(self, url: str) -> PageRecord:
        """Fetch and extract a single page; failures become error records"""
        scraped_at = datetime.now(timezone.utc).isoformat()
        category = self.url_filter.categorize(url)

        try:
            soup = await self._fetch_async(url)
        except Exception as e:
            self.logger.error(f"Error scraping {url}: {e}")
            self.stats['errors'] += 1
            return PageRecord(
                url=url,
                title='',
                category=category,
                scraped_at=scraped_at,
                content=PageContent.placeholder(str(e)),
                error=str(e),
            )

        self.stats['pages_crawled'] += 1
        return PageRecord(
            url=url,
            title=self.extractor.extract_title(soup),
            category=category,
            scraped_at=scraped_at,
            content=self.extractor.extract(soup, url),
        )

    async def crawl_all_pages(self) -> List[PageRecord]:
        """Visit discovered URLs in discovery order until the page budget is spent"""
        self.logger.info("Scraping all discovered pages...")

        records: List[PageRecord] = []
        total = self.state.target_size

        for url in self.state.discovered_urls:
            if self.state.budget_exhausted:
                self.logger.info(f"Reached maximum page limit of {self.state.max_pages}")
                break

            if self.state.is_visited(url):
                continue

            self.logger.info(f"[{len(self.state.visited_urls) + 1}/{total}] Scraping: {url}")
            records.append(await self.crawl_page(url))
            self.state.mark_visited(url)

            await asyncio.sleep(self.state.delay)

        return records

    async def crawl(self, save: bool = True) -> Tuple[List[PageRecord], Dict]:
        """Run discovery and the crawl; optionally persist raw records and the report"""
        start_time = time.time()

        self.state = self.new_state()
        await self.discover_pages()
        records = await self.crawl_all_pages()

        report = self.content_manager.build_report(records)
        if save:
            self.content_manager.save_scrape(records)
            self.content_manager.save_report(report)

        duration = time.time() - start_time
        self.logger.info(
            f"Crawl finished in {duration:.2f}s: {len(records)} pages, "
            f"{report['pagesWithErrors']} with errors, {report['totalWords']} words"
        )
        return records, report
