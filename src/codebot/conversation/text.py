"""
Text normalization and tokenization.

Every other conversation component works on normalized text: lower-case,
single-spaced, and restricted to ``[a-z0-9 ?!.]``.
"""

import re
from typing import List, Optional

STOP_WORDS = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
        "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
        "to", "was", "will", "with", "would", "could", "should", "can",
    }
)
"""Function words dropped by the tokenizer."""

_WHITESPACE = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9 ?!.]")


class TextNormalizer:
    """
    Case-fold, collapse whitespace and strip disallowed characters.

    Example:
        >>> TextNormalizer().normalize("  Hello,   World! ")
        'hello world!'
    """

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize raw user text.

        Args:
            text: Raw input (None is treated as empty)

        Returns:
            Normalized text, possibly empty
        """
        if text is None:
            return ""

        text = text.lower()
        text = _WHITESPACE.sub(" ", text).strip()
        text = _DISALLOWED.sub("", text)

        # Removing characters can leave doubled or edge spaces behind
        return _WHITESPACE.sub(" ", text).strip()

    def __repr__(self) -> str:
        return "TextNormalizer()"


class Tokenizer:
    """Split normalized text into stop-word-filtered tokens."""

    def __init__(self, stop_words: frozenset = STOP_WORDS, min_keyword_length: int = 4):
        self._stop_words = stop_words
        self._min_keyword_length = min_keyword_length

    def tokenize(self, normalized_text: str) -> List[str]:
        """
        Tokenize normalized text.

        Order is preserved and duplicates are kept.

        Args:
            normalized_text: Output of TextNormalizer.normalize

        Returns:
            Tokens not in the stop-word set
        """
        return [
            word
            for word in normalized_text.split()
            if word and word not in self._stop_words
        ]

    def extract_keywords(self, normalized_text: str) -> List[str]:
        """Tokens longer than three characters."""
        return [
            token
            for token in self.tokenize(normalized_text)
            if len(token) >= self._min_keyword_length
        ]

    @staticmethod
    def words(normalized_text: str) -> List[str]:
        """Whitespace-split words, stop words included."""
        return normalized_text.split()

    def __repr__(self) -> str:
        return f"Tokenizer(stop_words={len(self._stop_words)})"
