"""
Whitespace tokenizer for the TF-IDF engine.

Only the ASCII space character separates tokens. Runs of spaces never
produce empty tokens. Tabs, newlines and punctuation are ordinary
characters and stay inside tokens. No lowercasing, no stemming.
"""

from typing import List


def tokenize(text: str) -> List[str]:
    """
    Split text into space-delimited tokens.

    Args:
        text: Raw document, query or stop-word line

    Returns:
        Tokens in original order, without empty fragments

    Examples:
        >>> tokenize("white  cat and   fashionable collar")
        ['white', 'cat', 'and', 'fashionable', 'collar']

        >>> tokenize("tab\\tstays one-token")
        ['tab\\tstays', 'one-token']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    return [word for word in text.split(" ") if word]
