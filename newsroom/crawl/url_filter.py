"""
URL normalization, validation and classification for the city website
"""

import re
from urllib.parse import urlparse
from typing import Optional

from .config import CrawlConfig
from .models import PageCategory


class UrlFilter:
    """Keeps the crawl on the target domain and away from binary documents"""

    # Checked in order, first match wins
    CATEGORY_PATTERNS = [
        ('/government/', PageCategory.GOVERNMENT),
        ('/departments/', PageCategory.DEPARTMENT),
        ('/community/', PageCategory.COMMUNITY),
        ('/business/', PageCategory.BUSINESS),
        ('/how-do-i/', PageCategory.HOW_TO),
        ('/explore/', PageCategory.EXPLORE),
        ('/quick-connect/', PageCategory.QUICK_CONNECT),
    ]

    PSEUDO_SCHEMES = ('mailto:', 'tel:', 'javascript:')

    def __init__(self, config: CrawlConfig = None):
        self.config = config or CrawlConfig()
        self._document_pattern = re.compile(
            r'\.(' + '|'.join(ext.lstrip('.') for ext in self.config.document_extensions) + r')(?![a-z0-9])',
            re.IGNORECASE
        )

    def normalize(self, href: Optional[str], base_url: Optional[str] = None) -> Optional[str]:
        """Turn an href into an absolute URL against the site root"""
        if href is None:
            return None

        href = href.strip()
        if not href:
            return None

        base = (base_url or self.config.base_url).rstrip('/')
        if href.startswith('http://') or href.startswith('https://'):
            return href
        if href.startswith('/'):
            return base + href
        return base + '/' + href

    def validate(self, url: Optional[str]) -> bool:
        """Check if URL belongs to the target domain and points at a crawlable page"""
        if not url:
            return False

        try:
            parsed = urlparse(url)
            hostname = parsed.hostname
        except ValueError:
            return False

        if not hostname:
            return False

        domain = self.config.target_domain.lower()
        if hostname != domain and not hostname.endswith('.' + domain):
            return False

        path = parsed.path.lower()
        if path.endswith(self.config.skip_extensions):
            return False

        if any(scheme in path for scheme in self.PSEUDO_SCHEMES):
            return False

        return True

    def categorize(self, url: str) -> PageCategory:
        """Classify a URL by its site section"""
        lowered = (url or '').lower()
        for pattern, category in self.CATEGORY_PATTERNS:
            if pattern in lowered:
                return category
        return PageCategory.GENERAL

    def document_type(self, href: Optional[str]) -> Optional[str]:
        """Return the document extension referenced by an href, if any"""
        if not href:
            return None
        match = self._document_pattern.search(href)
        return match.group(1).lower() if match else None
