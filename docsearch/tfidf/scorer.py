"""
TF-IDF relevance scoring with minus-term exclusion.

Formula:
    idf(term) = ln(N / df(term))
    score(doc) = Σ TF(term, doc) × idf(term)   over plus terms

Where:
    N = number of indexed documents (including empty ones)
    df = number of documents containing the term
    TF = normalized term frequency stored in the inverted index

Rules:
- A term that is both a plus and a minus term is skipped: it adds no score
  and does not exclude anything.
- Terms found in every document get idf 0; matching documents are still
  returned with relevance 0.0.
- After accumulation, any document containing a minus term is dropped.
- Results are ordered by relevance (descending), then document id
  (ascending), and truncated to top_k.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from .index import InvertedIndex
from .query import Query

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5


@dataclass(frozen=True)
class ScoredDocument:
    """Single ranked document"""
    document_id: int
    relevance: float


class RelevanceEngine:
    """
    TF-IDF ranker over an InvertedIndex.

    Stateless between calls: the same query against the same index always
    produces the same ranking.
    """

    def __init__(self, top_k: int = MAX_RESULT_DOCUMENT_COUNT):
        """
        Initialize ranker.

        Args:
            top_k: Default maximum number of results (must be >= 1)
        """
        _check_top_k(top_k)
        self.top_k = top_k

    def idf(self, term: str, index: InvertedIndex) -> Optional[float]:
        """
        Inverse document frequency of a term.

        Returns:
            ln(N / df), or None when no document contains the term
        """
        df = index.document_frequency(term)
        if df == 0:
            return None
        return math.log(index.document_count / df)

    def score_documents(self, query: Query, index: InvertedIndex) -> Dict[int, float]:
        """
        Accumulate relevance for every document matching a plus term.

        Minus terms are not applied here.

        Args:
            query: Parsed query
            index: Built inverted index

        Returns:
            {document_id: relevance}
        """
        scores: Dict[int, float] = {}
        if index.document_count == 0:
            return scores

        # Sorted iteration so float sums do not depend on set ordering
        for term in sorted(query.effective_plus_terms):
            idf = self.idf(term, index)
            if idf is None:
                continue
            for document_id, tf in sorted(index.postings_for(term).items()):
                scores[document_id] = scores.get(document_id, 0.0) + tf * idf

        return scores

    def excluded_documents(self, query: Query, index: InvertedIndex) -> Set[int]:
        """Ids of documents containing at least one effective minus term"""
        excluded: Set[int] = set()
        for term in query.effective_minus_terms:
            excluded.update(index.postings_for(term))
        return excluded

    def find_top_documents(
        self,
        query: Query,
        index: InvertedIndex,
        top_k: Optional[int] = None
    ) -> List[ScoredDocument]:
        """
        Rank documents for a parsed query.

        Args:
            query: Parsed query
            index: Built inverted index
            top_k: Maximum number of results (default: self.top_k)

        Returns:
            At most top_k ScoredDocument, best first

        Example:
            >>> from docsearch.tfidf.query import parse_query
            >>> index = InvertedIndex()
            >>> for doc_id, text in enumerate(["a b c", "a c", "b"]):
            ...     index.add_document(doc_id, text.split())
            >>> results = RelevanceEngine().find_top_documents(parse_query(["a", "-b"]), index)
            >>> [(doc.document_id, round(doc.relevance, 4)) for doc in results]
            [(1, 0.2027)]
        """
        if top_k is None:
            top_k = self.top_k
        _check_top_k(top_k)

        if query.is_empty():
            logger.debug("Empty query after stop-word filtering")
            return []

        scores = self.score_documents(query, index)

        # Veto is a final filter so exclusion never depends on term order
        excluded = self.excluded_documents(query, index)
        for document_id in excluded:
            scores.pop(document_id, None)

        ranked = sorted(
            (ScoredDocument(document_id, relevance) for document_id, relevance in scores.items()),
            key=lambda doc: (-doc.relevance, doc.document_id)
        )

        logger.debug(
            f"Ranked {len(ranked)} documents ({len(excluded)} excluded by minus terms), "
            f"returning top {min(top_k, len(ranked))}"
        )

        return ranked[:top_k]


def find_top_documents(
    query: Query,
    index: InvertedIndex,
    top_k: int = MAX_RESULT_DOCUMENT_COUNT
) -> List[ScoredDocument]:
    """Rank documents with a default RelevanceEngine"""
    return RelevanceEngine(top_k=top_k).find_top_documents(query, index)


def _check_top_k(top_k: int) -> None:
    if top_k < 1:
        raise ValueError(f"top_k must be >= 1, got {top_k}")
