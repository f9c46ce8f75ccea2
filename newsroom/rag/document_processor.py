"""
Agenda PDF ingestion.
Text comes from PyPDF2 first, with pdfplumber as the fallback.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple

import PyPDF2
import pdfplumber

from .models import AGENDA_PDF, DocumentDate, DocumentRecord

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Turns a directory of agenda PDFs into corpus documents"""

    FULL_DATE_PATTERN = re.compile(r'(\d{1,2})-(\d{1,2})-(\d{4})')
    DOTTED_DATE_PATTERN = re.compile(r'(\d{1,2})\.(\d{1,2})\.(\d{2,4})')
    YEAR_PATTERN = re.compile(r'(?<!\d)((?:19|20)\d{2})(?!\d)')

    def process_directory(self, directory: str) -> Optional[List[DocumentRecord]]:
        """
        Process every PDF in a directory, in filename order.

        Returns None when the directory does not exist. Unreadable PDFs
        become error records instead of aborting the pass.
        """
        path = Path(directory)
        if not path.is_dir():
            logger.error(f"Agenda directory not found: {directory}")
            return None

        pdf_files = sorted(p for p in path.iterdir() if p.is_file() and p.suffix.lower() == '.pdf')
        logger.info(f"Processing {len(pdf_files)} PDF files...")

        records = []
        for index, pdf_path in enumerate(pdf_files, start=1):
            logger.info(f"Processing {index}/{len(pdf_files)}: {pdf_path.name}")
            records.append(self.process_file(pdf_path))

        logger.info(f"Processing complete! Processed {len(records)} documents")
        return records

    def process_file(self, pdf_path: Path) -> DocumentRecord:
        date = self.extract_date_from_filename(pdf_path.name)
        try:
            text, pages = self.extract_pdf(pdf_path)
        except Exception as e:
            logger.error(f"Error processing {pdf_path.name}: {e}")
            return DocumentRecord(
                filename=pdf_path.name,
                content=f"Error processing PDF: {e}",
                date=date,
                pages=0,
                word_count=0,
                doc_type=AGENDA_PDF,
                category='agenda',
                error=str(e),
            )

        logger.info(f"   Extracted {len(text)} characters, {pages} pages")
        return DocumentRecord(
            filename=pdf_path.name,
            content=text,
            date=date,
            pages=pages,
            word_count=len(text.split()),
            doc_type=AGENDA_PDF,
            category='agenda',
        )

    def extract_pdf(self, pdf_path: Path) -> Tuple[str, int]:
        """Return (text, page count); raises when neither extractor can read the file"""
        primary_error = None
        try:
            text, pages = self._extract_with_pypdf2(pdf_path)
            if text.strip():
                return text, pages
        except Exception as e:
            logger.debug(f"PyPDF2 failed on {pdf_path.name}: {e}")
            primary_error = e

        try:
            return self._extract_with_pdfplumber(pdf_path)
        except Exception as e:
            logger.debug(f"pdfplumber failed on {pdf_path.name}: {e}")
            raise primary_error or e

    def _extract_with_pypdf2(self, pdf_path: Path) -> Tuple[str, int]:
        with open(pdf_path, 'rb') as f:
            reader = PyPDF2.PdfReader(f)
            parts = [page.extract_text() or '' for page in reader.pages]
            return "\n".join(parts), len(reader.pages)

    def _extract_with_pdfplumber(self, pdf_path: Path) -> Tuple[str, int]:
        with pdfplumber.open(pdf_path) as pdf:
            parts = [page.extract_text() or '' for page in pdf.pages]
            return "\n".join(parts), len(pdf.pages)

    @classmethod
    def extract_date_from_filename(cls, filename: str) -> DocumentDate:
        """Best-effort meeting date from an agenda filename; never raises"""
        filename = filename or ''

        match = cls.FULL_DATE_PATTERN.search(filename)
        if match:
            return DocumentDate.full(int(match.group(1)), int(match.group(2)), int(match.group(3)))

        match = cls.DOTTED_DATE_PATTERN.search(filename)
        if match:
            year = match.group(3)
            if len(year) == 2:
                year = '20' + year
            return DocumentDate.full(int(match.group(1)), int(match.group(2)), int(year))

        match = cls.YEAR_PATTERN.search(filename)
        if match:
            return DocumentDate.year_only(int(match.group(1)))

        return DocumentDate.unknown()
