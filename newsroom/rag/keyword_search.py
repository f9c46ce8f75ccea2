"""
Keyword search over the corpus.
Scores documents by raw term frequency and cuts a context window around the first match.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Union

from ..crawl.models import PageRecord
from .models import DocumentRecord

logger = logging.getLogger(__name__)


STOP_WORDS: Set[str] = {
    'tell', 'me', 'about', 'what', 'is', 'are', 'the', 'a', 'an', 'and', 'or',
    'but', 'in', 'on', 'at', 'to', 'for', 'of', 'with', 'by', 'how', 'when',
    'where', 'why', 'who',
}

Searchable = Union[DocumentRecord, PageRecord]


@dataclass
class SearchView:
    """The fields search reads from a record, whatever its kind"""
    record: Searchable
    identity: str
    category: str
    searchable_text: str
    context_text: str
    identity_fields: List[str]

    @classmethod
    def of(cls, record: Searchable) -> "SearchView":
        if isinstance(record, PageRecord):
            content = record.content
            context_text = '\n\n'.join(content.paragraphs) if content.paragraphs else content.full_text
            return cls(
                record=record,
                identity=record.title or record.url,
                category=record.category.value,
                searchable_text=content.full_text,
                context_text=context_text,
                identity_fields=[record.url, record.title],
            )
        return cls(
            record=record,
            identity=record.title or record.filename,
            category=record.category,
            searchable_text=record.content,
            context_text=record.content,
            identity_fields=[record.filename, record.title, record.source or ''],
        )


@dataclass
class SearchHit:
    view: SearchView
    score: int
    context: str

    @property
    def record(self) -> Searchable:
        return self.view.record


class KeywordSearchEngine:
    """Term-frequency search with a stop-word filter"""

    PUNCTUATION_PATTERN = re.compile(r'[^\w\s]')

    def __init__(self, top_k: int = 3, context_radius: int = 100):
        self.top_k = top_k
        self.context_radius = context_radius

    def tokenize(self, query: str) -> List[str]:
        """
        Split a query into search terms.

        Tokens of two characters or fewer and stop-words are dropped. When
        nothing survives, the lowercased raw query is the only term.
        """
        query = query or ''
        cleaned = self.PUNCTUATION_PATTERN.sub('', query.lower())
        terms = [word for word in cleaned.split() if len(word) > 2 and word not in STOP_WORDS]
        return terms if terms else [query.lower()]

    def search(self, query: str, documents: Iterable[Searchable],
               category: Optional[str] = None) -> List[SearchHit]:
        terms = self.tokenize(query)
        logger.info(f"Searching for keywords: {', '.join(terms)}")

        views = [SearchView.of(doc) for doc in documents]
        if category:
            wanted = category.lower()
            views = [view for view in views if view.category.lower() == wanted]

        matches = [view for view in views if self._matches(view, terms)]
        if not matches:
            return []

        logger.info(f"Found {len(matches)} relevant documents")
        scored = [(view, self.score(view.searchable_text, terms)) for view in matches]
        # sorted() is stable, equal scores keep corpus order
        ranked = sorted(scored, key=lambda item: item[1], reverse=True)[:self.top_k]

        return [
            SearchHit(view=view, score=score, context=self.extract_context(view.context_text, terms))
            for view, score in ranked
        ]

    def _matches(self, view: SearchView, terms: List[str]) -> bool:
        text = view.searchable_text.lower()
        identities = [field.lower() for field in view.identity_fields if field]
        return any(
            term in text or any(term in identity for identity in identities)
            for term in terms
        )

    @staticmethod
    def score(text: str, terms: List[str]) -> int:
        lowered = text.lower()
        return sum(lowered.count(term) for term in terms)

    def extract_context(self, text: str, terms: List[str]) -> str:
        """Window of text around the first occurrence of the first matching term"""
        for term in terms:
            match = re.search(re.escape(term), text, re.IGNORECASE)
            if match:
                start = max(0, match.start() - self.context_radius)
                end = min(len(text), match.start() + self.context_radius)
                return text[start:end].strip()
        return ''
