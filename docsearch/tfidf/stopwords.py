"""Stop-word filtering applied to documents and queries before indexing."""

from typing import FrozenSet, Iterable, List

from .tokenizer import tokenize


class StopWordFilter:
    """
    Immutable stop-word set.

    Configured once, before indexing begins. Matching is exact and
    case-sensitive.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._words: FrozenSet[str] = frozenset(words)

    @classmethod
    def from_text(cls, text: str) -> "StopWordFilter":
        """Build a filter from a space-separated stop-word line"""
        return cls(tokenize(text))

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def filter(self, tokens: Iterable[str]) -> List[str]:
        """
        Drop stop words, keeping the remaining tokens in original order.

        Args:
            tokens: Tokenized document or query

        Returns:
            Tokens not present in the stop-word set
        """
        if not self._words:
            return list(tokens)
        return [token for token in tokens if token not in self._words]

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWordFilter({sorted(self._words)!r})"
