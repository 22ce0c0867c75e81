"""
Document records and statuses.

This module defines the status enum attached to every document, the
per-document metadata kept by the index, and the result record returned
by ranking.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class DocumentStatus(Enum):
    """Status assigned to a document when it is added."""

    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"

    @classmethod
    def from_name(cls, name: str) -> "DocumentStatus":
        """Look up a status by its name, e.g. ``"BANNED"``."""
        return cls[name.upper()]


@dataclass
class Document:
    """A single ranked result."""

    id: int = 0
    relevance: float = 0.0
    rating: int = 0


@dataclass(frozen=True)
class DocumentData:
    """Metadata stored for every added document."""

    rating: int
    status: DocumentStatus


def compute_average_rating(ratings: List[int]) -> int:
    """
    Compute the integer mean of a rating list.

    The division truncates toward zero; an empty list yields zero.

    Args:
        ratings: List of integer ratings.

    Returns:
        Average rating.
    """
    if not ratings:
        return 0
    rating_sum = sum(ratings)
    average = abs(rating_sum) // len(ratings)
    return -average if rating_sum < 0 else average
