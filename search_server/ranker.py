"""
Document ranking and scoring module.

This module computes TF-IDF relevance for parsed queries, applies the
caller's document predicate and minus-word exclusion, and returns the
top results.
"""

import logging
import math
from collections import defaultdict
from typing import Callable, Dict, List

from .document import Document, DocumentStatus
from .indexer import Indexer
from .query import Query

logger = logging.getLogger(__name__)

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


class Ranker:
    """Handles document ranking using TF-IDF."""

    def __init__(self, config, indexer: Indexer):
        """Initialize with configuration and the index to rank over."""
        self.config = config
        self.indexer = indexer

    def compute_word_inverse_document_freq(self, word: str) -> float:
        """
        Compute IDF for a word present in the index.

        IDF formula: idf = log(N / df), N being the total document count.

        Args:
            word: Indexed word.

        Returns:
            IDF score.
        """
        return math.log(self.indexer.get_document_count() / self.indexer.get_document_frequency(word))

    def find_all_documents(self, query: Query, document_predicate: DocumentPredicate) -> List[Document]:
        """
        Score every document matching the query.

        Args:
            query: Parsed query.
            document_predicate: Filter called as (id, status, rating).

        Returns:
            Unsorted list of results, in ascending id order.
        """
        document_to_relevance: Dict[int, float] = defaultdict(float)
        for word in sorted(query.plus_words):
            postings = self.indexer.get_posting_list(word)
            if not postings:
                continue
            inverse_document_freq = self.compute_word_inverse_document_freq(word)
            for document_id, term_freq in postings.items():
                document_data = self.indexer.get_document_data(document_id)
                if document_predicate(document_id, document_data.status, document_data.rating):
                    document_to_relevance[document_id] += term_freq * inverse_document_freq

        for word in query.minus_words:
            for document_id in self.indexer.get_posting_list(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self.indexer.get_document_data(document_id).rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def sort_documents(self, documents: List[Document]) -> List[Document]:
        """
        Sort results by relevance, then rating, both descending.

        Neighbouring relevances closer than EPSILON are grouped together and
        each group is ordered by rating, so near-equal relevances fall
        through to the rating.
        """
        epsilon = self.config.EPSILON
        by_relevance = sorted(documents, key=lambda doc: -doc.relevance)

        ranked: List[Document] = []
        group: List[Document] = []
        for doc in by_relevance:
            if group and group[-1].relevance - doc.relevance >= epsilon:
                ranked.extend(sorted(group, key=lambda d: -d.rating))
                group = []
            group.append(doc)
        ranked.extend(sorted(group, key=lambda d: -d.rating))
        return ranked

    def find_top_documents(self, query: Query, document_predicate: DocumentPredicate) -> List[Document]:
        """
        Rank documents for a parsed query.

        Args:
            query: Parsed query.
            document_predicate: Filter called as (id, status, rating).

        Returns:
            At most MAX_RESULT_DOCUMENT_COUNT results, best first.
        """
        if query.is_stop_only:
            return []

        ranked = self.sort_documents(self.find_all_documents(query, document_predicate))
        logger.debug("Ranked %d documents", len(ranked))
        return ranked[:self.config.MAX_RESULT_DOCUMENT_COUNT]
