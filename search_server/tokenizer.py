"""
Whitespace tokenization and word validation.

This module splits raw text into words on the ASCII space character and
checks words for control characters. No other normalisation is applied:
words are case- and accent-sensitive.
"""

from typing import Iterable, List, Set

from .exceptions import BadArgument


class Tokenizer:
    """Handles word splitting and validation."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def split_into_words(self, text: str) -> List[str]:
        """
        Split text into non-empty words.

        Runs of the separator collapse; tabs and newlines are not separators.

        Args:
            text: Text to split.

        Returns:
            List of words in order of appearance.
        """
        return [word for word in text.split(self.config.WORD_SEPARATOR) if word]

    @staticmethod
    def is_valid_word(word: str) -> bool:
        """Return True if the word contains no control characters."""
        return not any(ord(c) < ord(" ") for c in word)

    def make_unique_non_empty_strings(self, strings: Iterable[str]) -> Set[str]:
        """
        Build the stop-word set from candidate strings.

        Args:
            strings: Candidate stop words; a single string is split into words.

        Returns:
            Set of distinct non-empty words.

        Raises:
            BadArgument: If a candidate contains control characters.
        """
        if isinstance(strings, str):
            strings = self.split_into_words(strings)

        non_empty_strings = set()
        for word in strings:
            if not word:
                continue
            if not self.is_valid_word(word):
                raise BadArgument(f"Stop word {word!r} contains invalid characters")
            non_empty_strings.add(word)
        return non_empty_strings

    def split_into_words_no_stop(self, text: str, stop_words: Set[str]) -> List[str]:
        """
        Split document text and drop stop words.

        Every word is validated, stop words included, before anything is
        returned.

        Args:
            text: Document text.
            stop_words: Words to exclude.

        Returns:
            Remaining words in order, duplicates kept.

        Raises:
            BadArgument: If any word contains control characters.
        """
        words = []
        for word in self.split_into_words(text):
            if not self.is_valid_word(word):
                raise BadArgument(f"Document word {word!r} contains invalid characters")
            if word not in stop_words:
                words.append(word)
        return words
