"""
Utility functions for reading documents and formatting results.

This module contains helpers for the line-oriented demo input format and
for printing ranked documents and match results.
"""

from typing import Dict, List, Optional, TextIO, Tuple

from .document import Document, DocumentStatus
from .exceptions import BadArgument


class DocumentReader:
    """
    Reads the line-oriented document format.

    Layout::

        <stop words>
        <document count N>
        <text of document 0>
        <k> <rating 1> ... <rating k>
        ... (N text/ratings pairs)

    Documents receive ids 0..N-1 and status ACTUAL.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream

    def read_line(self) -> str:
        return self.stream.readline().rstrip("\r\n")

    def read_line_with_number(self) -> int:
        line = self.read_line()
        try:
            return int(line.strip())
        except ValueError:
            raise BadArgument(f"Expected a number, got {line!r}") from None

    def read_ratings(self) -> List[int]:
        """Read a ratings line: a count followed by that many ratings."""
        line = self.read_line()
        try:
            values = [int(value) for value in line.split()]
        except ValueError:
            raise BadArgument(f"Malformed ratings line {line!r}") from None
        if not values or values[0] != len(values) - 1:
            raise BadArgument(f"Ratings line {line!r} does not match its count")
        return values[1:]

    def read(self) -> Tuple[str, List[Tuple[int, str, DocumentStatus, List[int]]]]:
        """
        Read stop words and documents from the stream.

        Returns:
            Tuple of (stop words line, list of (id, text, status, ratings)).
        """
        stop_words = self.read_line()
        document_count = self.read_line_with_number()
        documents = []
        for document_id in range(document_count):
            text = self.read_line()
            ratings = self.read_ratings()
            documents.append((document_id, text, DocumentStatus.ACTUAL, ratings))
        return stop_words, documents


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def format_document(self, document: Document) -> str:
        """
        Render a ranked document.

        Args:
            document: Result record.

        Returns:
            String like ``{ document_id = 4, relevance = 0.650672, rating = 6 }``.
        """
        precision = self.config.RELEVANCE_PRECISION
        return (f"{{ document_id = {document.id}, "
                f"relevance = {document.relevance:.{precision}f}, "
                f"rating = {document.rating} }}")

    def format_match_document_result(self, document_id: int, words: List[str],
                                     status: DocumentStatus) -> str:
        """Render a match result with its words and status."""
        joined = "".join(f" {word}" for word in words)
        return f"{{ document_id = {document_id}, status = {status.name}, words ={joined}}}"

    def format_suggestions(self, suggestions: Dict[str, List[str]]) -> Optional[str]:
        """Render suggestions as ``word -> a, b``; None if there are none."""
        if not suggestions:
            return None
        return "; ".join(f"{word} -> {', '.join(cands)}" for word, cands in suggestions.items())

    def print_results(self, documents: List[Document]) -> None:
        """
        Print ranked documents, one per line.

        Args:
            documents: Ranked results.
        """
        if not documents:
            print("No matching documents found.")
            return
        for document in documents:
            print(self.format_document(document))

    def print_match_document_result(self, document_id: int, words: List[str],
                                    status: DocumentStatus) -> None:
        print(self.format_match_document_result(document_id, words, status))
