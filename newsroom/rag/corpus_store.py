"""
Flat JSON persistence of the searchable corpus
"""

import json
import logging
from pathlib import Path
from typing import Dict, List

from .models import DocumentRecord

logger = logging.getLogger(__name__)


class CorpusStore:
    """In-memory document list backed by processing_results.json"""

    def __init__(self, path: str, dedup_by_key: bool = True):
        self.path = Path(path)
        self.dedup_by_key = dedup_by_key
        self.documents: List[DocumentRecord] = []

    def __len__(self) -> int:
        return len(self.documents)

    def load(self) -> List[DocumentRecord]:
        """Read the corpus file; a missing or malformed file leaves the store empty"""
        self.documents = []
        if not self.path.exists():
            logger.info(f"No corpus file at {self.path}")
            return self.documents

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, list):
                raise ValueError("corpus file must contain a JSON array")
            self.documents = [DocumentRecord.from_dict(item) for item in data]
            logger.info(f"Loaded {len(self.documents)} documents from {self.path}")
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Failed to load corpus {self.path}: {e}")
            self.documents = []

        return self.documents

    def has_placeholders(self) -> bool:
        return any(doc.is_placeholder for doc in self.documents)

    def count_by_type(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for doc in self.documents:
            counts[doc.doc_type] = counts.get(doc.doc_type, 0) + 1
        return counts

    def count_by_category(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for doc in self.documents:
            counts[doc.category] = counts.get(doc.category, 0) + 1
        return counts

    def has_type(self, doc_type: str) -> bool:
        return any(doc.doc_type == doc_type for doc in self.documents)

    def replace_documents(self, doc_type: str, records: List[DocumentRecord]):
        """Swap out every record of one ingestion path, keeping the others in place"""
        kept = [doc for doc in self.documents if doc.doc_type != doc_type]
        self.documents = kept + list(records)
        logger.info(f"Replaced {doc_type} documents: {len(records)} records, {len(self.documents)} total")

    def merge(self, records: List[DocumentRecord]) -> int:
        """
        Append records to the corpus.

        With dedup_by_key a record whose key is already present replaces the
        existing record at its position; otherwise records accumulate.
        Returns the number of records that were appended.
        """
        if not self.dedup_by_key:
            self.documents.extend(records)
            return len(records)

        positions = {doc.key: index for index, doc in enumerate(self.documents)}
        appended = 0
        for record in records:
            index = positions.get(record.key)
            if index is None:
                positions[record.key] = len(self.documents)
                self.documents.append(record)
                appended += 1
            else:
                self.documents[index] = record
        return appended

    def save(self):
        """Write the whole corpus, replacing the previous file"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump([doc.to_dict() for doc in self.documents], f, ensure_ascii=False, indent=2)
        logger.info(f"Saved {len(self.documents)} documents to {self.path}")
