#!/usr/bin/env python3
"""
Tests for agenda PDF processing
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from newsroom.rag.document_processor import DocumentProcessor
from newsroom.rag.models import AGENDA_PDF, DocumentDate


@pytest.mark.unit
class TestDateFromFilename:
    """Test meeting dates read from agenda filenames"""

    @pytest.mark.parametrize("filename,expected", [
        ("agenda-1-7-2025.pdf", "01-07-2025"),
        ("City Council Agenda 12-16-2025.pdf", "12-16-2025"),
        ("agenda 3.4.25.pdf", "03-04-2025"),
        ("agenda 3.18.2025.pdf", "03-18-2025"),
        ("Budget Hearing 2025.pdf", "2025"),
        ("minutes_1998_final.pdf", "1998"),
        ("special-meeting.pdf", "unknown"),
        ("", "unknown"),
    ])
    def test_dates(self, filename, expected):
        assert str(DocumentProcessor.extract_date_from_filename(filename)) == expected

    def test_none_filename(self):
        assert DocumentProcessor.extract_date_from_filename(None) == DocumentDate.unknown()


@pytest.mark.unit
class TestProcessDirectory:
    """Test processing a directory of PDFs"""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.processor = DocumentProcessor()

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_missing_directory(self):
        assert self.processor.process_directory(str(Path(self.temp_dir) / "nope")) is None

    def test_empty_directory(self):
        assert self.processor.process_directory(self.temp_dir) == []

    def test_files_processed_in_name_order(self):
        for name in ("b-2-4-2025.pdf", "a-1-7-2025.PDF", "notes.txt"):
            (Path(self.temp_dir) / name).write_bytes(b"%PDF-1.4")

        with patch.object(DocumentProcessor, "extract_pdf", return_value=("Call to order. Budget vote.", 3)):
            records = self.processor.process_directory(self.temp_dir)

        assert [record.filename for record in records] == ["a-1-7-2025.PDF", "b-2-4-2025.pdf"]
        first = records[0]
        assert first.content == "Call to order. Budget vote."
        assert first.pages == 3
        assert first.word_count == 5
        assert first.doc_type == AGENDA_PDF
        assert first.category == "agenda"
        assert str(first.date) == "01-07-2025"
        assert first.error is None

    def test_unreadable_pdf_becomes_error_record(self):
        (Path(self.temp_dir) / "broken-1-7-2025.pdf").write_bytes(b"this is not a pdf at all")

        records = self.processor.process_directory(self.temp_dir)

        assert len(records) == 1
        record = records[0]
        assert record.content.startswith("Error processing PDF: ")
        assert record.pages == 0
        assert record.word_count == 0
        assert record.error
        assert record.is_placeholder
        assert str(record.date) == "01-07-2025"

    def test_falls_back_to_pdfplumber_on_empty_text(self):
        path = Path(self.temp_dir) / "scan.pdf"
        path.write_bytes(b"%PDF-1.4")

        with patch.object(DocumentProcessor, "_extract_with_pypdf2", return_value=("   ", 2)), \
                patch.object(DocumentProcessor, "_extract_with_pdfplumber", return_value=("Scanned text", 2)):
            assert self.processor.extract_pdf(path) == ("Scanned text", 2)

    def test_primary_error_raised_when_both_fail(self):
        path = Path(self.temp_dir) / "bad.pdf"
        path.write_bytes(b"")

        with patch.object(DocumentProcessor, "_extract_with_pypdf2", side_effect=ValueError("primary")), \
                patch.object(DocumentProcessor, "_extract_with_pdfplumber", side_effect=OSError("fallback")):
            with pytest.raises(ValueError, match="primary"):
                self.processor.extract_pdf(path)
