"""
TF-IDF ranking engine for in-memory document search.

Components:
- tokenizer: Space-delimited tokenization
- stopwords: Immutable stop-word filter
- index: Inverted index of normalized term frequencies
- query: Plus/minus query parsing
- scorer: TF-IDF ranking with minus-term exclusion and top-K selection

Data flow:
    document text -> tokenize -> StopWordFilter -> InvertedIndex.add_document
    query text -> tokenize -> StopWordFilter -> parse_query -> RelevanceEngine
"""

from .tokenizer import tokenize
from .stopwords import StopWordFilter
from .index import InvertedIndex
from .query import Query, parse_query
from .scorer import MAX_RESULT_DOCUMENT_COUNT, RelevanceEngine, ScoredDocument, find_top_documents

__all__ = [
    "tokenize",
    "StopWordFilter",
    "InvertedIndex",
    "Query",
    "parse_query",
    "RelevanceEngine",
    "ScoredDocument",
    "find_top_documents",
    "MAX_RESULT_DOCUMENT_COUNT",
]
