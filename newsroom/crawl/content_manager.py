"""
Raw crawl persistence, freshness checks and the scrape report
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List, Optional

from .config import CrawlConfig
from .models import PageCategory, PageRecord


class ContentManager:
    """Owns the raw scrape file and the scrape report"""

    COVERAGE_KEYS = {
        PageCategory.GOVERNMENT: 'government',
        PageCategory.DEPARTMENT: 'departments',
        PageCategory.COMMUNITY: 'community',
        PageCategory.BUSINESS: 'business',
    }

    def __init__(self, data_dir: Optional[str] = None, config: CrawlConfig = None):
        self.config = config or CrawlConfig()
        self.data_dir = Path(data_dir or self.config.data_dir)

        self.logger = logging.getLogger(__name__)

        # File paths
        self.scrape_path = self.data_dir / self.config.scrape_filename
        self.report_path = self.data_dir / self.config.report_filename

    def save_scrape(self, records: List[PageRecord]) -> int:
        """Overwrite the raw scrape file with this run's records"""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.scrape_path, 'w', encoding='utf-8') as f:
            json.dump([record.to_dict() for record in records], f, ensure_ascii=False, indent=2)
        self.logger.info(f"Raw data saved to {self.scrape_path} ({len(records)} pages)")
        return len(records)

    def load_scrape(self) -> List[PageRecord]:
        """Load raw records from the last crawl; an unreadable file yields nothing"""
        if not self.scrape_path.exists():
            return []

        try:
            with open(self.scrape_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return [PageRecord.from_dict(item) for item in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            self.logger.warning(f"Failed to load raw scrape {self.scrape_path}: {e}")
            return []

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        """True when the raw scrape is missing, empty, unreadable or older than the freshness window"""
        if not self.scrape_path.exists():
            self.logger.info("No raw scrape found, web data is stale")
            return True

        records = self.load_scrape()
        if not records:
            self.logger.info("Raw scrape is empty or unreadable, web data is stale")
            return True

        timestamps = []
        for record in records:
            try:
                scraped_at = datetime.fromisoformat(record.scraped_at.replace('Z', '+00:00'))
            except ValueError:
                continue
            if scraped_at.tzinfo is None:
                scraped_at = scraped_at.replace(tzinfo=timezone.utc)
            timestamps.append(scraped_at)

        if not timestamps:
            self.logger.info("Raw scrape has no usable timestamps, web data is stale")
            return True

        now = now or datetime.now(timezone.utc)
        age = now - max(timestamps)
        stale = age > timedelta(hours=self.config.stale_after_hours)
        self.logger.info(
            f"Last web scrape is {age.total_seconds() / 3600:.1f} hours old, "
            f"{'refreshing' if stale else 'using existing data'}"
        )
        return stale

    def build_report(self, records: List[PageRecord]) -> Dict:
        """Summarize a crawl by category, word totals and failures"""
        report = {
            'totalPages': len(records),
            'pagesByType': {},
            'totalWords': 0,
            'pagesWithErrors': 0,
            'scrapingCompleted': datetime.now(timezone.utc).isoformat(),
            'coverage': {
                'government': 0,
                'departments': 0,
                'community': 0,
                'business': 0,
                'other': 0,
            },
        }

        for record in records:
            if not record.ok:
                report['pagesWithErrors'] += 1
                continue

            category = record.category.value
            report['pagesByType'][category] = report['pagesByType'].get(category, 0) + 1
            report['totalWords'] += record.content.word_count
            report['coverage'][self.COVERAGE_KEYS.get(record.category, 'other')] += 1

        return report

    def save_report(self, report: Dict):
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.report_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, ensure_ascii=False, indent=2)
        self.logger.info(f"Report saved to {self.report_path}")

    def load_report(self) -> Optional[Dict]:
        if not self.report_path.exists():
            return None
        try:
            with open(self.report_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Failed to load report {self.report_path}: {e}")
            return None

    @staticmethod
    def format_page(record: PageRecord) -> str:
        """Flatten a page into the plain-text layout used by the corpus"""
        content = record.content
        text = f"Title: {record.title}\n\n"

        text += 'Headings:\n' + '\n'.join(
            f"{heading.level.upper()}: {heading.text}" for heading in content.headings
        ) + '\n\n'

        text += 'Content:\n' + '\n\n'.join(content.paragraphs) + '\n\n'

        text += 'Lists:\n' + '\n\n'.join(
            '\n'.join(f"• {item}" for item in block.items) for block in content.lists
        ) + '\n\n'

        if content.contact_info.phones:
            text += f"Phone Numbers: {', '.join(content.contact_info.phones)}\n"
        if content.contact_info.emails:
            text += f"Email Addresses: {', '.join(content.contact_info.emails)}\n"

        if content.full_text:
            text += '\n\nFull Page Text:\n' + content.full_text

        return text
