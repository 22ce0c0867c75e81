"""
Main SearchServer class that exposes the search engine.

This module contains the SearchServer class that coordinates the
tokenizer, index, query parser and ranker behind a single interface for
adding documents and answering queries.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .autocorrect import AutoCorrect
from .document import Document, DocumentStatus
from .exceptions import BadArgument
from .indexer import Indexer
from .query import QueryParser
from .ranker import DocumentPredicate, Ranker
from .tokenizer import Tokenizer
import config

logger = logging.getLogger(__name__)


class SearchServer:
    """
    In-memory TF-IDF search engine with stop words and minus words.

    Documents are added once and never removed. Queries are pure reads.
    The server is not thread-safe; callers must serialise access.
    """

    def __init__(self, stop_words: Union[str, Iterable[str]] = (),
                 config_dict: Optional[Dict] = None):
        """
        Initialize the SearchServer.

        Args:
            stop_words: Stop words, either a space-separated string or an
                iterable of words. Empty strings are ignored.
            config_dict: Optional configuration dictionary to override defaults.

        Raises:
            BadArgument: If a stop word contains control characters.
        """
        self.config = self._load_config(config_dict)

        self.tokenizer = Tokenizer(self.config)
        self.stop_words = frozenset(self.tokenizer.make_unique_non_empty_strings(stop_words))
        self.indexer = Indexer(self.config)
        self.query_parser = QueryParser(self.tokenizer, self.stop_words)
        self.ranker = Ranker(self.config, self.indexer)
        self.auto_correct = AutoCorrect(self.config)
        logger.debug("Created search server with %d stop words", len(self.stop_words))

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module or provided dictionary."""
        if config_dict:
            # Create a simple config object, falling back to module defaults
            class Config:
                def __init__(self, config_dict):
                    for key in dir(config):
                        if key.isupper():
                            setattr(self, key, getattr(config, key))
                    for key, value in config_dict.items():
                        setattr(self, key, value)
            return Config(config_dict)
        return config

    def add_document(self, document_id: int, document: str, status: DocumentStatus,
                     ratings: List[int]) -> None:
        """
        Add a document to the index.

        All validation happens before the index is touched, so a failed call
        leaves the server unchanged.

        Args:
            document_id: Non-negative, unique document id.
            document: Document text.
            status: Document status.
            ratings: Integer ratings; their truncated mean is stored.

        Raises:
            BadArgument: For a negative or duplicate id, an unknown status,
                non-integer ratings or words with control characters.
        """
        if not isinstance(document_id, int):
            raise BadArgument(f"Document id {document_id!r} is not an integer")
        self.indexer.check_new_document_id(document_id)
        if not isinstance(status, DocumentStatus):
            raise BadArgument(f"Unknown document status {status!r}")
        ratings = list(ratings)
        if not all(isinstance(rating, int) for rating in ratings):
            raise BadArgument(f"Ratings of document {document_id} must be integers")

        words = self.tokenizer.split_into_words_no_stop(document, self.stop_words)
        self.indexer.add_document(document_id, words, status, ratings)

    def find_top_documents(self, raw_query: str,
                           document_predicate: Union[DocumentPredicate, DocumentStatus, None] = None
                           ) -> List[Document]:
        """
        Search for documents matching the given query.

        Args:
            raw_query: Query string; ``-word`` excludes documents with that word.
            document_predicate: Either a callable taking (id, status, rating),
                a DocumentStatus to filter by, or None for the default status.

        Returns:
            Up to MAX_RESULT_DOCUMENT_COUNT documents sorted by relevance,
            then rating.

        Raises:
            BadArgument: If the query is empty or malformed.
        """
        if document_predicate is None:
            document_predicate = DocumentStatus.from_name(self.config.DEFAULT_STATUS)
        if isinstance(document_predicate, DocumentStatus):
            document_predicate = self._status_predicate(document_predicate)

        query = self.query_parser.parse(raw_query)
        return self.ranker.find_top_documents(query, document_predicate)

    @staticmethod
    def _status_predicate(status: DocumentStatus) -> DocumentPredicate:
        return lambda document_id, document_status, rating: document_status == status

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Report which plus words of a query occur in a document.

        Args:
            raw_query: Query string.
            document_id: Id of an added document.

        Returns:
            Tuple of (matched words in sorted order, document status). The word
            list is empty if the document contains any minus word. A query of
            stop words alone yields ([], ACTUAL).

        Raises:
            BadArgument: If the document is unknown or the query is malformed.
        """
        if not self.indexer.has_document(document_id):
            raise BadArgument(f"Document id {document_id} does not exist")

        query = self.query_parser.parse(raw_query)
        if query.is_stop_only:
            return [], DocumentStatus.ACTUAL

        status = self.indexer.get_document_data(document_id).status
        if document_id in self.indexer.get_documents_containing(query.minus_words):
            return [], status

        matched_words = [word for word in sorted(query.plus_words)
                         if self.indexer.contains(word, document_id)]
        return matched_words, status

    def get_document_count(self) -> int:
        """Number of added documents."""
        return self.indexer.get_document_count()

    def get_document_id(self, index: int) -> int:
        """
        Get the id of the document added at position ``index``.

        Raises:
            OutOfRange: If index is outside [0, document count).
        """
        return self.indexer.get_document_id(index)

    def get_word_frequencies(self, document_id: int) -> Dict[str, float]:
        """Term frequencies of a document's words; empty for unknown ids."""
        return self.indexer.get_word_frequencies(document_id)

    def suggest_corrections(self, raw_query: str) -> Dict[str, List[str]]:
        """
        Suggest indexed words for plus words the index does not contain.

        Args:
            raw_query: Query string.

        Returns:
            Mapping of unknown plus word to suggested words.

        Raises:
            BadArgument: If the query is empty or malformed.
        """
        query = self.query_parser.parse(raw_query)
        return self.auto_correct.suggest_corrections(query.plus_words, self.indexer.get_vocabulary())

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the index.

        Returns:
            Dictionary containing various statistics.
        """
        stats = self.indexer.summarize_index()
        stats["num_stop_words"] = len(self.stop_words)
        return stats

    def __len__(self) -> int:
        return self.get_document_count()

    def __iter__(self) -> Iterator[int]:
        return iter(self.indexer)
