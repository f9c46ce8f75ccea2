"""
Structured content extraction from parsed HTML pages
"""

import copy
import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from .config import CrawlConfig
from .models import (
    ContactInfo, DocumentLink, FormBlock, FormField, Heading, ImageRef,
    LinkRef, ListBlock, PageContent, TableBlock,
)
from .url_filter import UrlFilter


def _unique(items: List[str]) -> List[str]:
    """De-duplicate while keeping first-seen order"""
    return list(dict.fromkeys(items))


class ContentExtractor:
    """Turns a BeautifulSoup tree into a PageContent record"""

    PHONE_PATTERN = re.compile(r'\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}')
    EMAIL_PATTERN = re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}')
    ADDRESS_PATTERN = re.compile(
        r'\d+\s+[A-Za-z\s]+(?:Street|St|Avenue|Ave|Boulevard|Blvd|Drive|Dr|Road|Rd|Lane|Ln|Way|Court|Ct)'
        r'[^,\n]*,?\s*[A-Za-z\s]+,?\s*[A-Z]{2}\s*\d{5}'
    )
    WHITESPACE_PATTERN = re.compile(r'\s+')

    NAVIGATION_SELECTOR = 'nav a, .menu a, .navigation a'
    CONTENT_SELECTOR = 'main a, .content a, article a'
    HIDDEN_TAGS = ['script', 'style']
    BOILERPLATE_TAGS = ['script', 'style', 'nav', 'header', 'footer']

    def __init__(self, config: CrawlConfig = None, url_filter: UrlFilter = None):
        self.config = config or CrawlConfig()
        self.url_filter = url_filter or UrlFilter(self.config)
        self.logger = logging.getLogger(__name__)

    def extract_title(self, soup: BeautifulSoup) -> str:
        title = soup.find('title')
        return title.get_text().strip() if title else ''

    def extract(self, soup: BeautifulSoup, url: str) -> PageContent:
        """Extract every content block of a page; a failing rule yields an empty block"""
        content = PageContent(
            meta_description=self._safely(self._extract_meta, soup, 'description', default=''),
            meta_keywords=self._safely(self._extract_meta, soup, 'keywords', default=''),
            headings=self._safely(self.extract_headings, soup),
            paragraphs=self._safely(self.extract_paragraphs, soup),
            lists=self._safely(self.extract_lists, soup),
            tables=self._safely(self.extract_tables, soup),
            forms=self._safely(self.extract_forms, soup),
            images=self._safely(self.extract_images, soup),
            navigation_links=self._safely(self.extract_navigation_links, soup),
            content_links=self._safely(self.extract_content_links, soup),
            contact_info=self._safely(self.extract_contact_info, soup, default=ContactInfo()),
            addresses=self._safely(self.extract_addresses, soup),
            document_links=self._safely(self.extract_document_links, soup),
            full_text=self._safely(self.extract_full_text, soup, default=''),
        )
        content.word_count = len(content.full_text.split())
        content.link_count = len(soup.find_all('a'))
        content.image_count = len(soup.find_all('img'))
        return content

    def _safely(self, rule, soup: BeautifulSoup, *args, default=None):
        try:
            return rule(soup, *args)
        except Exception as e:
            self.logger.warning(f"Extraction rule {getattr(rule, '__name__', rule)} failed: {e}")
            return [] if default is None else default

    def _extract_meta(self, soup: BeautifulSoup, name: str) -> str:
        tag = soup.find('meta', attrs={'name': name})
        if tag is None:
            return ''
        return tag.get('content') or ''

    def extract_headings(self, soup: BeautifulSoup) -> List[Heading]:
        headings = []
        for element in soup.find_all(['h1', 'h2', 'h3', 'h4', 'h5', 'h6']):
            text = element.get_text().strip()
            if text:
                headings.append(Heading(level=element.name.lower(), text=text))
        return headings

    def extract_paragraphs(self, soup: BeautifulSoup) -> List[str]:
        paragraphs = []
        for element in soup.find_all('p'):
            text = element.get_text().strip()
            if len(text) > 20:
                paragraphs.append(text)
        return paragraphs

    def extract_lists(self, soup: BeautifulSoup) -> List[ListBlock]:
        lists = []
        for element in soup.find_all(['ul', 'ol']):
            items = [li.get_text().strip() for li in element.find_all('li')]
            items = [item for item in items if item]
            if items:
                lists.append(ListBlock(kind=element.name.lower(), items=items))
        return lists

    def extract_tables(self, soup: BeautifulSoup) -> List[TableBlock]:
        tables = []
        for element in soup.find_all('table'):
            headers = [th.get_text().strip() for th in element.find_all('th')]
            rows = []
            for tr in element.find_all('tr'):
                cells = [td.get_text().strip() for td in tr.find_all('td')]
                if cells:
                    rows.append(cells)
            if headers or rows:
                tables.append(TableBlock(headers=headers, rows=rows))
        return tables

    def extract_forms(self, soup: BeautifulSoup) -> List[FormBlock]:
        forms = []
        for element in soup.find_all('form'):
            fields = [self._form_field(field) for field in element.find_all(['input', 'select', 'textarea'])]
            if fields:
                forms.append(FormBlock(
                    action=element.get('action'),
                    method=element.get('method'),
                    fields=fields,
                ))
        return forms

    def _form_field(self, field: Tag) -> FormField:
        label = None
        previous = field.find_previous_sibling(True)
        if previous is not None and previous.name == 'label':
            label = previous.get_text().strip() or None
        return FormField(
            name=field.get('name'),
            type=field.get('type') or field.name.lower(),
            label=label or field.get('placeholder'),
            required=field.has_attr('required'),
        )

    def extract_images(self, soup: BeautifulSoup) -> List[ImageRef]:
        images = []
        for element in soup.find_all('img'):
            src = element.get('src')
            if not src:
                continue
            absolute = self.url_filter.normalize(src)
            if absolute:
                images.append(ImageRef(src=absolute, alt=element.get('alt') or ''))
        return images

    def _links(self, anchors) -> List[LinkRef]:
        links = []
        for anchor in anchors:
            href = anchor.get('href')
            text = anchor.get_text().strip()
            if href and text:
                links.append(LinkRef(url=self.url_filter.normalize(href), text=text))
        return links

    def extract_navigation_links(self, soup: BeautifulSoup) -> List[LinkRef]:
        return self._links(soup.select(self.NAVIGATION_SELECTOR))

    def extract_content_links(self, soup: BeautifulSoup) -> List[LinkRef]:
        anchors = [
            anchor for anchor in soup.select(self.CONTENT_SELECTOR)
            if anchor.find_parent('nav') is None and anchor.find_parent(class_='menu') is None
        ]
        return self._links(anchors)

    def _visible_text(self, soup: BeautifulSoup) -> str:
        working = copy.copy(soup)
        for element in working(self.HIDDEN_TAGS):
            element.decompose()
        return working.get_text(' ')

    def extract_contact_info(self, soup: BeautifulSoup) -> ContactInfo:
        text = self._visible_text(soup)
        return ContactInfo(
            phones=_unique(self.PHONE_PATTERN.findall(text)),
            emails=_unique(self.EMAIL_PATTERN.findall(text)),
        )

    def extract_addresses(self, soup: BeautifulSoup) -> List[str]:
        text = self._visible_text(soup)
        return _unique([match.strip() for match in self.ADDRESS_PATTERN.findall(text)])

    def extract_document_links(self, soup: BeautifulSoup) -> List[DocumentLink]:
        documents = []
        for anchor in soup.find_all('a', href=True):
            href = anchor['href']
            doc_type = self.url_filter.document_type(href)
            if doc_type:
                documents.append(DocumentLink(
                    url=self.url_filter.normalize(href),
                    text=anchor.get_text().strip(),
                    type=doc_type,
                ))
        return documents

    def extract_full_text(self, soup: BeautifulSoup) -> str:
        """Body text without scripts, styles and page chrome, whitespace collapsed"""
        working = copy.copy(soup)
        for element in working(self.BOILERPLATE_TAGS):
            element.decompose()
        root: Optional[Tag] = working.body or working
        return self.WHITESPACE_PATTERN.sub(' ', root.get_text(' ')).strip()
