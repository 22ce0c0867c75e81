"""
Query parsing.

A raw query is split into words and each word is classified as a plus
word, a minus word (leading ``-``) or a stop word.
"""

import logging
from dataclasses import dataclass, field
from typing import Set

from .exceptions import BadArgument
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


@dataclass
class Query:
    """Parsed query: plus, minus and stop word sets."""

    plus_words: Set[str] = field(default_factory=set)
    minus_words: Set[str] = field(default_factory=set)
    stop_words: Set[str] = field(default_factory=set)

    @property
    def is_stop_only(self) -> bool:
        """True when the query consists of stop words alone."""
        return not self.plus_words and not self.minus_words and bool(self.stop_words)


@dataclass
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


class QueryParser:
    """Turns raw query strings into Query objects."""

    def __init__(self, tokenizer: Tokenizer, stop_words: Set[str]):
        self.tokenizer = tokenizer
        self.stop_words = stop_words

    def parse_query_word(self, text: str) -> QueryWord:
        """
        Classify a single query word.

        Args:
            text: Non-empty word from the query.

        Returns:
            QueryWord with the leading minus stripped.

        Raises:
            BadArgument: For a bare ``-``, a double minus or control characters.
        """
        is_minus = False
        if text.startswith("-"):
            is_minus = True
            text = text[1:]
        if not text or text.startswith("-") or not self.tokenizer.is_valid_word(text):
            raise BadArgument(f"Malformed query word {text!r}")
        return QueryWord(text, is_minus, text in self.stop_words)

    def parse(self, raw_query: str) -> Query:
        """
        Parse a raw query.

        Args:
            raw_query: Query text.

        Returns:
            Parsed Query.

        Raises:
            BadArgument: If the query is empty, contains control characters
                or has a malformed word.
        """
        if not self.tokenizer.is_valid_word(raw_query):
            raise BadArgument("Query contains invalid characters")
        if not raw_query:
            raise BadArgument("Query is empty")

        query = Query()
        for word in self.tokenizer.split_into_words(raw_query):
            query_word = self.parse_query_word(word)
            if query_word.is_stop:
                query.stop_words.add(query_word.data)
            elif query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)

        logger.debug("Parsed query %r: plus=%s minus=%s stop=%s", raw_query,
                     sorted(query.plus_words), sorted(query.minus_words),
                     sorted(query.stop_words))
        return query
