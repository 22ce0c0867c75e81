"""
Inverted index construction and management.

This module keeps the three structures that make up the searchable corpus:
the inverted index (word -> document id -> term frequency), the document
store (document id -> metadata) and the insertion-order registry of ids.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Set

from .document import DocumentData, DocumentStatus, compute_average_rating
from .exceptions import BadArgument, OutOfRange

logger = logging.getLogger(__name__)


class Indexer:
    """Handles inverted index construction and document bookkeeping."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self.word_to_document_freqs: Dict[str, Dict[int, float]] = {}
        self.document_to_word_freqs: Dict[int, Dict[str, float]] = {}
        self.documents: Dict[int, DocumentData] = {}
        self.document_ids: List[int] = []

    def check_new_document_id(self, document_id: int) -> None:
        """
        Validate an id before a document is added.

        Raises:
            BadArgument: If the id is negative or already present.
        """
        if document_id < 0:
            raise BadArgument(f"Document id {document_id} is negative")
        if self.has_document(document_id):
            raise BadArgument(f"Document id {document_id} already exists")

    def add_document(self, document_id: int, words: List[str], status: DocumentStatus,
                     ratings: List[int]) -> None:
        """
        Index the words of an already validated document.

        Each occurrence of a word adds 1/N to its term frequency, where N is
        the number of words. A document with no words is stored but adds
        nothing to the index.

        Args:
            document_id: Id of the new document.
            words: Document words with stop words removed.
            status: Document status.
            ratings: Document ratings.
        """
        word_freqs = defaultdict(float)
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                word_freqs[word] += inv_word_count

        for word, term_freq in word_freqs.items():
            self.word_to_document_freqs.setdefault(word, {})[document_id] = term_freq

        self.document_to_word_freqs[document_id] = dict(word_freqs)
        self.documents[document_id] = DocumentData(compute_average_rating(ratings), status)
        self.document_ids.append(document_id)
        logger.debug("Indexed document %d: %d words, %d distinct",
                     document_id, len(words), len(word_freqs))

    def get_posting_list(self, word: str) -> Dict[int, float]:
        """
        Get the posting list for a word.

        Args:
            word: Word to look up.

        Returns:
            Mapping of document id to term frequency; empty if the word is unknown.
        """
        return self.word_to_document_freqs.get(word, {})

    def get_document_frequency(self, word: str) -> int:
        """Number of documents containing the word."""
        return len(self.get_posting_list(word))

    def has_document(self, document_id: int) -> bool:
        """Return True if a document with this id was added."""
        return document_id in self.documents

    def contains(self, word: str, document_id: int) -> bool:
        """Return True if the document contains the word."""
        return document_id in self.get_posting_list(word)

    def get_documents_containing(self, words: Set[str]) -> Set[int]:
        """
        Get the set of documents containing any of the given words.

        Args:
            words: Words to search for.

        Returns:
            Set of document ids containing at least one of the words.
        """
        document_ids = set()
        for word in words:
            document_ids.update(self.get_posting_list(word))
        return document_ids

    def get_document_data(self, document_id: int) -> DocumentData:
        """Metadata of an added document; raises KeyError for unknown ids."""
        return self.documents[document_id]

    def get_word_frequencies(self, document_id: int) -> Dict[str, float]:
        """Term frequencies of one document; empty for unknown ids."""
        return dict(self.document_to_word_freqs.get(document_id, {}))

    def get_document_count(self) -> int:
        return len(self.documents)

    def get_document_id(self, index: int) -> int:
        """
        Get the id of the document added at the given position.

        Raises:
            OutOfRange: If index is negative or not less than the document count.
        """
        if 0 <= index < len(self.document_ids):
            return self.document_ids[index]
        raise OutOfRange(f"Document index {index} is out of range "
                         f"[0, {len(self.document_ids)})")

    def __iter__(self) -> Iterator[int]:
        return iter(list(self.document_ids))

    def get_vocabulary(self) -> Dict[str, int]:
        """Map every indexed word to its document frequency."""
        return {word: len(postings) for word, postings in self.word_to_document_freqs.items()}

    def summarize_index(self) -> Dict[str, float]:
        """
        Summarize the inverted index.

        Returns:
            Dictionary of index statistics.
        """
        num_words = len(self.word_to_document_freqs)
        total_postings = sum(len(postings) for postings in self.word_to_document_freqs.values())
        return {
            "num_documents": self.get_document_count(),
            "index_size": num_words,
            "total_postings": total_postings,
            "avg_postings_per_word": total_postings / num_words if num_words else 0.0,
        }
