"""
Data models for the crawler
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set


class PageCategory(str, Enum):
    """Site section a page belongs to"""
    GOVERNMENT = "government"
    DEPARTMENT = "department"
    COMMUNITY = "community"
    BUSINESS = "business"
    HOW_TO = "how-to"
    EXPLORE = "explore"
    QUICK_CONNECT = "quick-connect"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: Optional[str]) -> "PageCategory":
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL


@dataclass
class Heading:
    level: str
    text: str


@dataclass
class ListBlock:
    kind: str
    items: List[str] = field(default_factory=list)


@dataclass
class TableBlock:
    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


@dataclass
class FormField:
    name: Optional[str]
    type: str
    label: Optional[str]
    required: bool = False


@dataclass
class FormBlock:
    action: Optional[str]
    method: Optional[str]
    fields: List[FormField] = field(default_factory=list)


@dataclass
class ImageRef:
    src: str
    alt: str = ""


@dataclass
class LinkRef:
    url: Optional[str]
    text: str


@dataclass
class DocumentLink:
    url: Optional[str]
    text: str
    type: str


@dataclass
class ContactInfo:
    """Phone numbers and email addresses, de-duplicated in first-seen order"""
    phones: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.phones and not self.emails

    def to_dict(self) -> Dict:
        return {'phones': list(self.phones), 'emails': list(self.emails)}

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "ContactInfo":
        data = data or {}
        return cls(
            phones=list(data.get('phones') or []),
            emails=list(data.get('emails') or []),
        )


@dataclass
class PageContent:
    """Structured content of a single page; every collection is always present"""
    meta_description: str = ""
    meta_keywords: str = ""
    headings: List[Heading] = field(default_factory=list)
    paragraphs: List[str] = field(default_factory=list)
    lists: List[ListBlock] = field(default_factory=list)
    tables: List[TableBlock] = field(default_factory=list)
    forms: List[FormBlock] = field(default_factory=list)
    images: List[ImageRef] = field(default_factory=list)
    navigation_links: List[LinkRef] = field(default_factory=list)
    content_links: List[LinkRef] = field(default_factory=list)
    contact_info: ContactInfo = field(default_factory=ContactInfo)
    addresses: List[str] = field(default_factory=list)
    document_links: List[DocumentLink] = field(default_factory=list)
    full_text: str = ""
    word_count: int = 0
    link_count: int = 0
    image_count: int = 0

    @classmethod
    def placeholder(cls, message: str) -> "PageContent":
        """Degenerate body for a page that could not be fetched"""
        return cls(full_text=f"Error accessing page: {message}")

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        return {
            'metaDescription': self.meta_description,
            'metaKeywords': self.meta_keywords,
            'headings': [{'level': h.level, 'text': h.text} for h in self.headings],
            'paragraphs': list(self.paragraphs),
            'lists': [{'type': block.kind, 'items': list(block.items)} for block in self.lists],
            'tables': [{'headers': list(t.headers), 'rows': [list(r) for r in t.rows]} for t in self.tables],
            'forms': [
                {
                    'action': form.action,
                    'method': form.method,
                    'fields': [
                        {'name': f.name, 'type': f.type, 'label': f.label, 'required': f.required}
                        for f in form.fields
                    ],
                }
                for form in self.forms
            ],
            'images': [{'src': img.src, 'alt': img.alt} for img in self.images],
            'navigationLinks': [{'url': link.url, 'text': link.text} for link in self.navigation_links],
            'contentLinks': [{'url': link.url, 'text': link.text} for link in self.content_links],
            'contactInfo': self.contact_info.to_dict(),
            'addresses': list(self.addresses),
            'documentLinks': [
                {'url': doc.url, 'text': doc.text, 'type': doc.type} for doc in self.document_links
            ],
            'fullText': self.full_text,
            'wordCount': self.word_count,
            'linkCount': self.link_count,
            'imageCount': self.image_count,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> "PageContent":
        """Rebuild content from its JSON form; missing keys become empty collections"""
        data = data or {}
        return cls(
            meta_description=data.get('metaDescription') or "",
            meta_keywords=data.get('metaKeywords') or "",
            headings=[Heading(h.get('level', ''), h.get('text', '')) for h in data.get('headings') or []],
            paragraphs=list(data.get('paragraphs') or []),
            lists=[ListBlock(b.get('type', 'ul'), list(b.get('items') or [])) for b in data.get('lists') or []],
            tables=[
                TableBlock(list(t.get('headers') or []), [list(r) for r in t.get('rows') or []])
                for t in data.get('tables') or []
            ],
            forms=[
                FormBlock(
                    action=form.get('action'),
                    method=form.get('method'),
                    fields=[
                        FormField(f.get('name'), f.get('type', ''), f.get('label'), bool(f.get('required')))
                        for f in form.get('fields') or []
                    ],
                )
                for form in data.get('forms') or []
            ],
            images=[ImageRef(img.get('src', ''), img.get('alt') or '') for img in data.get('images') or []],
            navigation_links=[LinkRef(l.get('url'), l.get('text', '')) for l in data.get('navigationLinks') or []],
            content_links=[LinkRef(l.get('url'), l.get('text', '')) for l in data.get('contentLinks') or []],
            contact_info=ContactInfo.from_dict(data.get('contactInfo')),
            addresses=list(data.get('addresses') or []),
            document_links=[
                DocumentLink(d.get('url'), d.get('text', ''), d.get('type', ''))
                for d in data.get('documentLinks') or []
            ],
            full_text=data.get('fullText') or "",
            word_count=int(data.get('wordCount') or 0),
            link_count=int(data.get('linkCount') or 0),
            image_count=int(data.get('imageCount') or 0),
        )


@dataclass
class PageRecord:
    """One crawled page; `error` is set when the fetch failed"""
    url: str
    title: str
    category: PageCategory
    scraped_at: str
    content: PageContent = field(default_factory=PageContent)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        return {
            'url': self.url,
            'title': self.title,
            'type': self.category.value,
            'scrapedAt': self.scraped_at,
            'content': self.content.to_dict(),
            'error': self.error,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "PageRecord":
        return cls(
            url=data['url'],
            title=data.get('title') or "",
            category=PageCategory.parse(data.get('type')),
            scraped_at=data.get('scrapedAt') or "",
            content=PageContent.from_dict(data.get('content')),
            error=data.get('error'),
        )


class CrawlState:
    """Discovered and visited URL sets owned by a single crawl run"""

    def __init__(self, max_pages: int, delay: float):
        self.max_pages = max_pages
        self.delay = delay
        # dict keeps discovery order; values are unused
        self._discovered: Dict[str, None] = {}
        self.visited_urls: Set[str] = set()

    @property
    def discovered_urls(self) -> List[str]:
        return list(self._discovered)

    def discover(self, url: str) -> bool:
        """Add a URL to the frontier; returns False if it was already known"""
        if url in self._discovered:
            return False
        self._discovered[url] = None
        return True

    def is_discovered(self, url: str) -> bool:
        return url in self._discovered

    def mark_visited(self, url: str):
        if url not in self._discovered:
            raise ValueError(f"Cannot visit undiscovered URL: {url}")
        self.visited_urls.add(url)

    def is_visited(self, url: str) -> bool:
        return url in self.visited_urls

    def frontier(self) -> List[str]:
        """Discovered URLs not fetched yet, in discovery order"""
        return [url for url in self._discovered if url not in self.visited_urls]

    @property
    def budget_exhausted(self) -> bool:
        return len(self.visited_urls) >= self.max_pages

    @property
    def target_size(self) -> int:
        return min(len(self._discovered), self.max_pages)
