"""
Query parser: splits filtered query tokens into plus and minus terms.

Syntax:
    word     plus term (contributes to relevance)
    -word    minus term (documents containing it are excluded)
    -        ignored

The two sets may overlap; the scorer resolves overlaps in favour of
exclusion.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


@dataclass(frozen=True)
class Query:
    """Parsed query"""
    plus_terms: FrozenSet[str] = field(default_factory=frozenset)
    minus_terms: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def effective_plus_terms(self) -> FrozenSet[str]:
        """Plus terms not cancelled by the same minus term"""
        return self.plus_terms - self.minus_terms

    @property
    def effective_minus_terms(self) -> FrozenSet[str]:
        """Minus terms that veto documents (not also plus terms)"""
        return self.minus_terms - self.plus_terms

    def is_empty(self) -> bool:
        return not self.plus_terms and not self.minus_terms


def parse_query(tokens: Iterable[str]) -> Query:
    """
    Parse stop-word filtered query tokens.

    Args:
        tokens: Query tokens after stop-word removal

    Returns:
        Query with deduplicated plus and minus term sets

    Examples:
        >>> parse_query(["fluffy", "-cat", "-", "fluffy"])
        Query(plus_terms=frozenset({'fluffy'}), minus_terms=frozenset({'cat'}))
    """
    plus_terms = set()
    minus_terms = set()

    for token in tokens:
        if token.startswith(MINUS_PREFIX):
            term = token[len(MINUS_PREFIX):]
            if term:
                minus_terms.add(term)
        else:
            plus_terms.add(token)

    query = Query(plus_terms=frozenset(plus_terms), minus_terms=frozenset(minus_terms))
    logger.debug(f"Parsed query: plus={sorted(plus_terms)}, minus={sorted(minus_terms)}")
    return query
