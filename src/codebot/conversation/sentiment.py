"""
Lexicon-based sentiment scoring.

Counts tokens found in fixed positive and negative word lists. This is a
heuristic signal for tone selection, not a sentiment model.
"""

from dataclasses import dataclass
from typing import Dict, Iterable

from codebot.config.constants import (
    NEUTRAL_NEGATIVE,
    NEUTRAL_NEUTRAL,
    NEUTRAL_POSITIVE,
)

POSITIVE_WORDS = frozenset(
    {
        "good", "great", "excellent", "amazing", "wonderful", "fantastic",
        "awesome", "perfect", "happy", "glad", "pleased", "satisfied", "love",
        "like", "enjoy", "appreciate", "beautiful", "nice", "cool", "fun",
        "exciting", "interesting", "helpful", "useful", "thank", "thanks",
        "brilliant", "outstanding", "superb", "marvelous", "delighted",
        "positive", "optimistic", "confident", "successful", "win", "victory",
        "achieve",
    }
)

NEGATIVE_WORDS = frozenset(
    {
        "bad", "terrible", "awful", "horrible", "disgusting", "hate", "dislike",
        "annoying", "sad", "angry", "mad", "upset", "disappointed", "frustrated",
        "worried", "concerned", "problem", "issue", "trouble", "difficult",
        "hard", "impossible", "wrong", "error", "fail", "failure", "lose",
        "lost", "broken", "damaged", "hurt", "pain", "suffer", "negative",
        "pessimistic", "depressed", "anxious", "fear", "scared", "boring",
        "dull",
    }
)


@dataclass(frozen=True)
class SentimentScore:
    """
    Positive/negative/neutral triple.

    When no lexicon word is found the score is (0.5, 0.5, 1.0), which does
    not sum to one. Otherwise positive + negative == 1 and
    neutral == 1 - max(positive, negative).
    """

    positive: float
    negative: float
    neutral: float

    @classmethod
    def neutral_default(cls) -> "SentimentScore":
        return cls(NEUTRAL_POSITIVE, NEUTRAL_NEGATIVE, NEUTRAL_NEUTRAL)

    @property
    def has_signal(self) -> bool:
        """False for the no-lexicon-hit default."""
        return self != SentimentScore.neutral_default()

    def as_dict(self) -> Dict[str, float]:
        return {
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
        }

    def __repr__(self) -> str:
        return (
            f"SentimentScore(pos={self.positive:.2f}, "
            f"neg={self.negative:.2f}, neu={self.neutral:.2f})"
        )


class SentimentScorer:
    """
    Score tokens against positive and negative lexicons.

    Pure: identical tokens always give identical scores.

    Example:
        >>> SentimentScorer().score(["great", "great", "bad"])
        SentimentScore(pos=0.67, neg=0.33, neu=0.33)
    """

    def __init__(
        self,
        positive_words: frozenset = POSITIVE_WORDS,
        negative_words: frozenset = NEGATIVE_WORDS,
    ):
        overlap = positive_words & negative_words
        if overlap:
            raise ValueError(f"Sentiment lexicons overlap: {sorted(overlap)}")
        self._positive = positive_words
        self._negative = negative_words

    def score(self, tokens: Iterable[str]) -> SentimentScore:
        """
        Score a token sequence.

        Args:
            tokens: Stop-word-filtered tokens

        Returns:
            SentimentScore for the tokens
        """
        positive_count = 0
        negative_count = 0
        for token in tokens:
            if token in self._positive:
                positive_count += 1
            elif token in self._negative:
                negative_count += 1

        total = positive_count + negative_count
        if total == 0:
            return SentimentScore.neutral_default()

        positive = positive_count / total
        negative = negative_count / total
        return SentimentScore(
            positive=positive,
            negative=negative,
            neutral=1.0 - max(positive, negative),
        )

    def __repr__(self) -> str:
        return f"SentimentScorer(positive={len(self._positive)}, negative={len(self._negative)})"
