"""
SearchServer - raw-text facade over the TF-IDF engine.

Owns one StopWordFilter, one InvertedIndex and one RelevanceEngine.
Documents are added as raw text during the build phase; the first query
seals the index, after which only queries are accepted.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from .config import get_settings
from .errors import InputFormatError
from .tfidf import InvertedIndex, RelevanceEngine, ScoredDocument, StopWordFilter, parse_query, tokenize

logger = logging.getLogger(__name__)


class SearchServer:
    """In-memory search server for a single corpus."""

    def __init__(self, stop_words: Iterable[str] = (), max_results: Optional[int] = None):
        """
        Args:
            stop_words: Words excluded from documents and queries
            max_results: Result cap per query (default: from settings)
        """
        if max_results is None:
            max_results = get_settings().max_result_document_count

        self._stop_words = StopWordFilter(stop_words)
        self._index = InvertedIndex()
        self._engine = RelevanceEngine(top_k=max_results)

    @classmethod
    def from_text(cls, stop_words_text: str, max_results: Optional[int] = None) -> "SearchServer":
        """Create a server from a space-separated stop-word line"""
        return cls(tokenize(stop_words_text), max_results=max_results)

    @property
    def stop_words(self) -> StopWordFilter:
        return self._stop_words

    @property
    def index(self) -> InvertedIndex:
        return self._index

    @property
    def max_results(self) -> int:
        return self._engine.top_k

    @property
    def document_count(self) -> int:
        return self._index.document_count

    def split_into_words_no_stop(self, text: str) -> List[str]:
        return self._stop_words.filter(tokenize(text))

    def add_document(self, document_id: int, text: str) -> None:
        """Tokenize, drop stop words and index one document"""
        self._index.add_document(document_id, self.split_into_words_no_stop(text))

    def add_documents(self, texts: Iterable[str]) -> List[int]:
        """
        Add documents with ids assigned sequentially from the current count.

        Returns:
            Assigned document ids
        """
        assigned = []
        for text in texts:
            document_id = self._index.document_count
            self.add_document(document_id, text)
            assigned.append(document_id)
        logger.info(f"Indexed {len(assigned)} documents ({self.document_count} total)")
        return assigned

    def find_top_documents(self, raw_query: str, top_k: Optional[int] = None) -> List[ScoredDocument]:
        """
        Answer a free-text query.

        Args:
            raw_query: Query text; "-word" excludes documents containing word
            top_k: Result cap for this query (default: max_results)

        Returns:
            Ranked documents, best first
        """
        self._index.seal()
        query = parse_query(self.split_into_words_no_stop(raw_query))
        results = self._engine.find_top_documents(query, self._index, top_k=top_k)
        logger.info(f"Query {raw_query!r}: {len(results)} results")
        return results


def create_search_server(lines: Iterable[str], max_results: Optional[int] = None) -> SearchServer:
    """
    Build a server from the console input protocol.

    Protocol:
        line 1: stop words, space separated (may be empty)
        line 2: number of documents N
        next N lines: one document per line, ids 0..N-1

    Remaining lines are left unread in the iterator.

    Raises:
        InputFormatError: Missing lines or a non-integer document count
    """
    line_iter: Iterator[str] = iter(lines)

    stop_words_line = _read_line(line_iter, "stop words")
    server = SearchServer.from_text(stop_words_line, max_results=max_results)

    count_line = _read_line(line_iter, "document count")
    try:
        document_count = int(count_line.strip())
    except ValueError:
        raise InputFormatError(f"Document count must be an integer, got {count_line!r}")
    if document_count < 0:
        raise InputFormatError(f"Document count must be non-negative, got {document_count}")

    for document_id in range(document_count):
        server.add_document(document_id, _read_line(line_iter, f"document {document_id}"))

    logger.info(f"Search server built: {document_count} documents, {len(server.stop_words)} stop words")
    return server


def _read_line(line_iter: Iterator[str], what: str) -> str:
    try:
        line = next(line_iter)
    except StopIteration:
        raise InputFormatError(f"Unexpected end of input while reading {what}")
    return line.rstrip("\r\n")
