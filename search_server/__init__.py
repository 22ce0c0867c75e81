"""
Search Server

An in-memory text search engine with TF-IDF ranking, stop words,
minus words and document status filtering.

Main components:
- SearchServer: Main search engine class
- Tokenizer: Word splitting and validation
- Indexer: Inverted index and document bookkeeping
- QueryParser: Plus/minus/stop word classification
- Ranker: Document ranking using TF-IDF
- AutoCorrect: Suggestions for unknown query words
- Utils: Demo input reading and result formatting
"""

from .search_server import SearchServer
from .document import Document, DocumentData, DocumentStatus
from .exceptions import BadArgument, OutOfRange, SearchServerError
from .tokenizer import Tokenizer
from .indexer import Indexer
from .query import Query, QueryParser
from .ranker import Ranker
from .autocorrect import AutoCorrect
from .utils import DocumentReader, ResultFormatter

__version__ = "1.0.0"

__all__ = [
    "SearchServer",
    "Document",
    "DocumentData",
    "DocumentStatus",
    "BadArgument",
    "OutOfRange",
    "SearchServerError",
    "Tokenizer",
    "Indexer",
    "Query",
    "QueryParser",
    "Ranker",
    "AutoCorrect",
    "DocumentReader",
    "ResultFormatter",
]
