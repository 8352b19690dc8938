"""
Inverted index builder - term -> {document id -> term frequency}.

Term frequencies are normalized by document length:

    TF(term, doc) = count(term in doc) / len(doc)

so the frequencies of one non-empty document sum to 1.0. Documents that
are empty after stop-word removal add no postings but still count towards
the corpus size used by IDF.

Lifecycle: documents are added during the build phase, then the index is
sealed and becomes read-only. Sealed indexes are safe to share between
readers without locking.
"""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Set

from ..errors import DuplicateDocumentIdError, IndexSealedError, InvalidDocumentIdError

logger = logging.getLogger(__name__)

_NO_POSTINGS: Mapping[int, float] = MappingProxyType({})


class InvertedIndex:
    """In-memory inverted index of normalized term frequencies."""

    def __init__(self):
        self._postings: Dict[str, Dict[int, float]] = {}
        self._document_ids: Set[int] = set()
        self._sealed = False

    def add_document(self, document_id: int, tokens: List[str]) -> None:
        """
        Index one document.

        Args:
            document_id: Unused non-negative id
            tokens: Document tokens, already stop-word filtered

        Raises:
            IndexSealedError: Index was sealed by a query
            InvalidDocumentIdError: Negative id
            DuplicateDocumentIdError: Id already indexed

        Example:
            >>> index = InvertedIndex()
            >>> index.add_document(0, ["cat", "dog", "cat", "bird"])
            >>> dict(index.postings_for("cat"))
            {0: 0.5}
        """
        if self._sealed:
            raise IndexSealedError(document_id)
        if document_id < 0:
            raise InvalidDocumentIdError(document_id)
        if document_id in self._document_ids:
            raise DuplicateDocumentIdError(document_id)

        self._document_ids.add(document_id)

        if not tokens:
            logger.debug(f"Indexed document {document_id}: empty after filtering")
            return

        # count / len rather than summing 1/len keeps the sum closer to 1.0
        token_count = len(tokens)
        for term, count in Counter(tokens).items():
            self._postings.setdefault(term, {})[document_id] = count / token_count

        logger.debug(f"Indexed document {document_id}: {token_count} tokens")

    @property
    def document_count(self) -> int:
        """Number of documents ever added, including empty ones"""
        return len(self._document_ids)

    def postings_for(self, term: str) -> Mapping[int, float]:
        """
        Get postings {document_id: term_frequency} for a term.

        Unknown terms yield an empty mapping. The returned mapping is a
        read-only view.
        """
        postings = self._postings.get(term)
        if postings is None:
            return _NO_POSTINGS
        return MappingProxyType(postings)

    def document_frequency(self, term: str) -> int:
        """Number of documents containing the term"""
        return len(self._postings.get(term, ()))

    def terms(self) -> Iterator[str]:
        return iter(self._postings)

    def seal(self) -> None:
        """Finish the build phase; further add_document calls fail"""
        if not self._sealed:
            self._sealed = True
            logger.debug(
                f"Index sealed: {self.document_count} documents, {len(self._postings)} terms"
            )

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __contains__(self, document_id: int) -> bool:
        return document_id in self._document_ids
