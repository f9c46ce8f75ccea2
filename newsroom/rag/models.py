"""
Data models for the document corpus and query results
"""

import re
from dataclasses import dataclass, field
from datetime import date as date_type
from typing import Dict, List, Optional

from ..crawl.content_manager import ContentManager
from ..crawl.models import ContactInfo, PageRecord


AGENDA_PDF = "agenda_pdf"
WEB_SCRAPED = "web_scraped"


@dataclass(frozen=True)
class DocumentDate:
    """A full date, a bare year, or unknown"""
    kind: str = "unknown"
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None

    FULL = "full"
    YEAR = "year"
    UNKNOWN = "unknown"

    @classmethod
    def full(cls, month: int, day: int, year: int) -> "DocumentDate":
        return cls(kind=cls.FULL, year=year, month=month, day=day)

    @classmethod
    def year_only(cls, year: int) -> "DocumentDate":
        return cls(kind=cls.YEAR, year=year)

    @classmethod
    def unknown(cls) -> "DocumentDate":
        return cls()

    @classmethod
    def today(cls) -> "DocumentDate":
        today = date_type.today()
        return cls.full(today.month, today.day, today.year)

    @classmethod
    def parse(cls, value: Optional[str]) -> "DocumentDate":
        """Read back a rendered date; accepts MM-DD-YYYY, YYYY-MM-DD and YYYY"""
        value = (value or "").strip()
        match = re.fullmatch(r'(\d{2})-(\d{2})-(\d{4})', value)
        if match:
            return cls.full(int(match.group(1)), int(match.group(2)), int(match.group(3)))
        match = re.fullmatch(r'(\d{4})-(\d{2})-(\d{2})', value)
        if match:
            return cls.full(int(match.group(2)), int(match.group(3)), int(match.group(1)))
        if re.fullmatch(r'\d{4}', value):
            return cls.year_only(int(value))
        return cls.unknown()

    def __str__(self) -> str:
        if self.kind == self.FULL:
            return f"{self.month:02d}-{self.day:02d}-{self.year}"
        if self.kind == self.YEAR:
            return str(self.year)
        return "unknown"


@dataclass
class DocumentRecord:
    """One searchable document: an agenda PDF or a converted web page"""
    filename: str
    content: str
    date: DocumentDate = field(default_factory=DocumentDate.unknown)
    pages: int = 0
    word_count: int = 0
    doc_type: str = AGENDA_PDF
    category: str = "agenda"
    source: Optional[str] = None
    title: str = ""
    contact_info: Optional[ContactInfo] = None
    error: Optional[str] = None

    @property
    def key(self) -> str:
        return self.source or self.filename

    @property
    def is_placeholder(self) -> bool:
        return 'Placeholder content' in self.content or self.error is not None

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        data = {
            'filename': self.filename,
            'content': self.content,
            'date': str(self.date),
            'source': self.source,
            'type': self.doc_type,
            'category': self.category,
            'title': self.title,
            'pages': self.pages,
            'wordCount': self.word_count,
        }
        if self.contact_info is not None:
            data['contactInfo'] = self.contact_info.to_dict()
        if self.error is not None:
            data['error'] = self.error
        return data

    @classmethod
    def from_dict(cls, data: Dict) -> "DocumentRecord":
        contact = data.get('contactInfo')
        return cls(
            filename=data.get('filename') or '',
            content=data.get('content') or '',
            date=DocumentDate.parse(data.get('date')),
            pages=int(data.get('pages') or 0),
            word_count=int(data.get('wordCount') or 0),
            doc_type=data.get('type') or AGENDA_PDF,
            category=data.get('category') or 'agenda',
            source=data.get('source'),
            title=data.get('title') or '',
            contact_info=ContactInfo.from_dict(contact) if contact is not None else None,
            error=data.get('error'),
        )

    @classmethod
    def from_page(cls, page: PageRecord, position: int,
                  date: Optional[DocumentDate] = None) -> "DocumentRecord":
        """Corpus document for a crawled page; position is its 1-based index in the crawl"""
        text = ContentManager.format_page(page)
        return cls(
            filename=f"web_{page.category.value}_page_{position}.txt",
            content=text,
            date=date or DocumentDate.today(),
            pages=1,
            word_count=page.content.word_count or len(text.split()),
            doc_type=WEB_SCRAPED,
            category=page.category.value,
            source=page.url,
            title=page.title,
            contact_info=page.content.contact_info,
        )


def web_documents(pages: List[PageRecord]) -> List[DocumentRecord]:
    """Convert a crawl into corpus documents; error pages are skipped"""
    today = DocumentDate.today()
    return [
        DocumentRecord.from_page(page, index + 1, today)
        for index, page in enumerate(pages)
        if page.ok
    ]


@dataclass
class QueryResult:
    """A ranked match with its summary and context window"""
    identity: str
    source: Optional[str]
    category: str
    date: str
    pages: int
    word_count: int
    summary: str
    context: str
    contact_info: Optional[ContactInfo] = None

    def to_dict(self) -> Dict:
        return {
            'identity': self.identity,
            'source': self.source,
            'category': self.category,
            'date': self.date,
            'pages': self.pages,
            'word_count': self.word_count,
            'summary': self.summary,
            'context': self.context,
            'contact_info': self.contact_info.to_dict() if self.contact_info else None,
        }


@dataclass
class IngestionReport:
    """Counts from one ingestion pass"""
    documents_processed: int = 0
    documents_failed: int = 0
    pages_crawled: int = 0
    pages_failed: int = 0
    web_documents_merged: int = 0
    total_documents: int = 0
    skipped_steps: List[str] = field(default_factory=list)

    @property
    def produced_nothing(self) -> bool:
        return self.total_documents == 0

    def to_dict(self) -> Dict:
        return {
            'documents_processed': self.documents_processed,
            'documents_failed': self.documents_failed,
            'pages_crawled': self.pages_crawled,
            'pages_failed': self.pages_failed,
            'web_documents_merged': self.web_documents_merged,
            'total_documents': self.total_documents,
            'skipped_steps': list(self.skipped_steps),
        }
