"""
docsearch - minimal in-memory document search with TF-IDF ranking.

Usage:
    from docsearch import SearchServer

    server = SearchServer(stop_words=["a", "the"])
    server.add_documents(["white cat", "fluffy cat fluffy tail"])
    results = server.find_top_documents("fluffy -dog")
"""

from .errors import (
    DuplicateDocumentIdError,
    IndexSealedError,
    InputFormatError,
    InvalidDocumentIdError,
    SearchError,
)
from .server import SearchServer, create_search_server
from .tfidf import InvertedIndex, Query, RelevanceEngine, ScoredDocument, StopWordFilter, parse_query, tokenize

__version__ = "0.1.0"

__all__ = [
    "SearchServer",
    "create_search_server",
    "InvertedIndex",
    "Query",
    "RelevanceEngine",
    "ScoredDocument",
    "StopWordFilter",
    "parse_query",
    "tokenize",
    "SearchError",
    "DuplicateDocumentIdError",
    "IndexSealedError",
    "InputFormatError",
    "InvalidDocumentIdError",
]
