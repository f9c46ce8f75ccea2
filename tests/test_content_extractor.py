#!/usr/bin/env python3
"""
Tests for structured content extraction
"""

import pytest
from bs4 import BeautifulSoup

from newsroom.crawl.config import CrawlConfig
from newsroom.crawl.content_extractor import ContentExtractor


SAMPLE_PAGE = """
<html>
<head>
  <title>  City Council Meetings | Long Beach NY </title>
  <meta name="description" content="Council meeting schedule">
  <meta name="keywords" content="council, agenda">
  <style>.hidden { color: red; }</style>
  <script>var contact = "555-000-1111 script@example.com";</script>
</head>
<body>
  <header><a href="/">Home</a></header>
  <nav class="main-nav">
    <a href="/government">Government</a>
    <a href="/departments">Departments</a>
  </nav>
  <main>
    <h1>City Council Meetings</h1>
    <h2>  </h2>
    <h3>Upcoming Sessions</h3>
    <p>Short text.</p>
    <p>The council approved the new budget for parks and recreation.</p>
    <ul><li>Agenda review</li><li>  </li><li>Public comment</li></ul>
    <ol><li> </li></ol>
    <table>
      <tr><th>Date</th><th>Time</th></tr>
      <tr><td>Jan 7</td><td>7 PM</td></tr>
    </table>
    <table><tr></tr></table>
    <form action="/subscribe" method="post">
      <label>Email address</label><input type="email" name="email" required>
      <select name="topic"></select>
      <textarea name="comment" placeholder="Your comment"></textarea>
    </form>
    <form action="/empty"></form>
    <img src="/images/hall.jpg" alt="City Hall">
    <img src="https://cdn.example.com/logo.png">
    <img alt="no source">
    <div class="content">
      <a href="/files/agenda-1-7-2025.pdf">January agenda</a>
      <a href="/community/beach">Beach info</a>
      <div class="menu"><a href="/menu-item">Menu item</a></div>
    </div>
    <p>Call (516) 431-1000 or 516.431.1000, email clerk@longbeachny.gov or clerk@longbeachny.gov.</p>
    <p>City Hall is at 1 West Chester Street, Long Beach, NY 11561 for all visitors.</p>
  </main>
  <footer>Footer text</footer>
</body>
</html>
"""


@pytest.mark.unit
class TestContentExtractor:
    """Test ContentExtractor rules"""

    def setup_method(self):
        self.extractor = ContentExtractor(CrawlConfig())
        self.soup = BeautifulSoup(SAMPLE_PAGE, "html.parser")
        self.content = self.extractor.extract(self.soup, "https://www.longbeachny.gov/government/city-council-meetings")

    def test_title(self):
        assert self.extractor.extract_title(self.soup) == "City Council Meetings | Long Beach NY"

    def test_meta(self):
        assert self.content.meta_description == "Council meeting schedule"
        assert self.content.meta_keywords == "council, agenda"

    def test_headings_skip_empty(self):
        assert [(h.level, h.text) for h in self.content.headings] == [
            ("h1", "City Council Meetings"),
            ("h3", "Upcoming Sessions"),
        ]

    def test_paragraphs_longer_than_twenty_chars(self):
        assert "Short text." not in self.content.paragraphs
        assert "The council approved the new budget for parks and recreation." in self.content.paragraphs
        assert all(len(p) > 20 for p in self.content.paragraphs)

    def test_lists_keep_non_empty_items(self):
        assert len(self.content.lists) == 1
        assert self.content.lists[0].kind == "ul"
        assert self.content.lists[0].items == ["Agenda review", "Public comment"]

    def test_tables(self):
        assert len(self.content.tables) == 1
        table = self.content.tables[0]
        assert table.headers == ["Date", "Time"]
        assert table.rows == [["Jan 7", "7 PM"]]

    def test_forms(self):
        assert len(self.content.forms) == 1
        form = self.content.forms[0]
        assert form.action == "/subscribe"
        assert form.method == "post"
        email, topic, comment = form.fields
        assert (email.name, email.type, email.label, email.required) == ("email", "email", "Email address", True)
        assert (topic.name, topic.type, topic.label, topic.required) == ("topic", "select", None, False)
        assert (comment.type, comment.label) == ("textarea", "Your comment")

    def test_images_made_absolute(self):
        assert [(img.src, img.alt) for img in self.content.images] == [
            ("https://www.longbeachny.gov/images/hall.jpg", "City Hall"),
            ("https://cdn.example.com/logo.png", ""),
        ]

    def test_navigation_links(self):
        urls = [link.url for link in self.content.navigation_links]
        assert "https://www.longbeachny.gov/government" in urls
        assert "https://www.longbeachny.gov/departments" in urls
        assert "https://www.longbeachny.gov/menu-item" in urls

    def test_content_links_exclude_menus(self):
        urls = [link.url for link in self.content.content_links]
        assert "https://www.longbeachny.gov/community/beach" in urls
        assert "https://www.longbeachny.gov/menu-item" not in urls

    def test_contact_info_deduplicated(self):
        assert self.content.contact_info.emails == ["clerk@longbeachny.gov"]
        assert "(516) 431-1000" in self.content.contact_info.phones
        assert "516.431.1000" in self.content.contact_info.phones
        assert len(self.content.contact_info.phones) == len(set(self.content.contact_info.phones))

    def test_contact_info_ignores_scripts(self):
        assert "script@example.com" not in self.content.contact_info.emails
        assert "555-000-1111" not in self.content.contact_info.phones

    def test_addresses(self):
        assert len(self.content.addresses) == 1
        assert "West Chester Street" in self.content.addresses[0]
        assert self.content.addresses[0].endswith("NY 11561")

    def test_document_links(self):
        assert len(self.content.document_links) == 1
        doc = self.content.document_links[0]
        assert doc.type == "pdf"
        assert doc.url == "https://www.longbeachny.gov/files/agenda-1-7-2025.pdf"
        assert doc.text == "January agenda"

    def test_full_text_drops_page_chrome(self):
        text = self.content.full_text
        assert "City Council Meetings" in text
        assert "Footer text" not in text
        assert "Government" not in text
        assert "var contact" not in text
        assert "  " not in text
        assert text == text.strip()

    def test_statistics(self):
        assert self.content.word_count == len(self.content.full_text.split())
        assert self.content.link_count == len(self.soup.find_all("a"))
        assert self.content.image_count == 3

    def test_caller_tree_not_mutated(self):
        assert self.soup.find("script") is not None
        assert self.soup.find("footer") is not None
        assert self.soup.find("nav") is not None


@pytest.mark.unit
class TestContentExtractorEdgeCases:
    """Test degenerate pages"""

    def setup_method(self):
        self.extractor = ContentExtractor(CrawlConfig())

    def test_empty_document(self):
        content = self.extractor.extract(BeautifulSoup("", "html.parser"), "https://www.longbeachny.gov/")
        assert content.headings == []
        assert content.paragraphs == []
        assert content.full_text == ""
        assert content.word_count == 0
        assert content.contact_info.phones == []
        assert self.extractor.extract_title(BeautifulSoup("", "html.parser")) == ""

    def test_malformed_markup(self):
        soup = BeautifulSoup("<p>This paragraph is never closed and long enough<div><h2>Heading", "html.parser")
        content = self.extractor.extract(soup, "https://www.longbeachny.gov/")
        assert content.headings[0].text == "Heading"
        assert content.word_count == len(content.full_text.split())

    def test_serialized_collections_always_present(self):
        content = self.extractor.extract(BeautifulSoup("<p>x</p>", "html.parser"), "https://www.longbeachny.gov/")
        data = content.to_dict()
        for key in ("headings", "paragraphs", "lists", "tables", "forms", "images",
                    "navigationLinks", "contentLinks", "addresses", "documentLinks"):
            assert data[key] == []
        assert data["contactInfo"] == {"phones": [], "emails": []}
