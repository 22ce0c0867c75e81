"""
Error types raised by the search server.
"""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class BadArgument(SearchServerError, ValueError):
    """Malformed input: invalid word, bad query, negative or duplicate id."""


class OutOfRange(SearchServerError, IndexError):
    """Positional lookup outside the range of added documents."""
