"""
Intent classification using an ordered rule table.

A single input can satisfy the rules of several intents ("what time is it"
is both a question and a time request), so rule sets are evaluated in a
fixed priority order and the first intent with a matching rule wins.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Pattern, Sequence, Tuple

from codebot.config.constants import LONG_INPUT_WORD_COUNT


class Intent(Enum):
    """User intent categories."""

    GREETING = "greeting"
    FAREWELL = "farewell"
    QUESTION = "question"
    HELP = "help"
    PERSONAL = "personal"
    TIME = "time"
    WEATHER = "weather"
    TECHNOLOGY = "technology"
    EDUCATION = "education"
    ENTERTAINMENT = "entertainment"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class IntentRule:
    """All patterns that select one intent."""

    intent: Intent
    patterns: Tuple[Pattern, ...]

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)

    def __repr__(self) -> str:
        return f"IntentRule({self.intent.name}, patterns={len(self.patterns)})"


def _rule(intent: Intent, *patterns: str) -> IntentRule:
    return IntentRule(intent, tuple(re.compile(p) for p in patterns))


# Patterns run against normalized text, which has no apostrophes,
# so "i'm" arrives as "im" and "what's" as "whats".
INTENT_RULES: Tuple[IntentRule, ...] = (
    _rule(
        Intent.GREETING,
        r"\b(hello|hi|hey|good morning|good afternoon|good evening|greetings)\b",
        r"\bhow are you\b",
        r"\bwhat'?s up\b",
        r"\bnice to meet\b",
    ),
    _rule(
        Intent.FAREWELL,
        r"\b(bye|goodbye|see you|farewell|take care|later)\b",
        r"\bgood night\b",
        r"\btalk to you later\b",
        r"\bhave a good\b",
    ),
    _rule(
        Intent.HELP,
        r"\b(help|assist|support|guide)\b",
        r"\bi need help\b",
        r"\bcan you help\b",
        r"\bwhat can you do\b",
    ),
    _rule(
        Intent.TIME,
        r"\b(time|clock|hour|minute|date|today|now)\b",
        r"\bwhat time\b",
        r"\bcurrent time\b",
    ),
    _rule(
        Intent.TECHNOLOGY,
        r"\b(computer|software|program|code|java|python|ai|robot)\b",
        r"\b(technology|tech|internet|web|app)\b",
        r"\b(algorithm|machine learning|artificial intelligence)\b",
    ),
    _rule(
        Intent.EDUCATION,
        r"\b(school|study|learn|education|teacher|student)\b",
        r"\b(university|college|course|lesson|homework)\b",
        r"\b(book|read|knowledge|subject)\b",
    ),
    # Interrogative words are broad; every specific cue above pre-empts them
    _rule(
        Intent.QUESTION,
        r"\b(what|who|when|where|why|how|which)\b",
        r"\b(can you|could you|would you)\b",
        r"\b(do you know|tell me about|explain)\b",
        r"\bis it\b|\bare you\b",
    ),
    _rule(
        Intent.PERSONAL,
        r"\b(i am|i'?m|i feel|i think|i like|i love|i hate)\b",
        r"\bmy name is\b",
        r"\bi have\b",
        r"\btell me about yourself\b",
    ),
)


class IntentClassifier:
    """
    Rule-based intent classification.

    Deterministic: the same normalized text always maps to the same intent.

    Fallbacks when no rule matches:
    - a literal "?" gives QUESTION
    - more than LONG_INPUT_WORD_COUNT words gives PERSONAL
    - otherwise UNKNOWN

    Example:
        >>> classifier = IntentClassifier()
        >>> classifier.classify("what time is it")
        <Intent.TIME: 'time'>
    """

    def __init__(
        self,
        rules: Sequence[IntentRule] = INTENT_RULES,
        long_input_words: int = LONG_INPUT_WORD_COUNT,
    ):
        """
        Initialize classifier.

        Args:
            rules: Rule sets in priority order (first match wins)
            long_input_words: Word count above which unmatched input is PERSONAL
        """
        intents = [rule.intent for rule in rules]
        if len(intents) != len(set(intents)):
            raise ValueError("Each intent may appear only once in the rule table")
        self._rules = tuple(rules)
        self._long_input_words = long_input_words

    def classify(self, normalized_text: str) -> Intent:
        """
        Classify normalized text.

        Args:
            normalized_text: Output of TextNormalizer.normalize

        Returns:
            The selected Intent
        """
        rule = self.matching_rule(normalized_text)
        if rule is not None:
            return rule.intent

        if "?" in normalized_text:
            return Intent.QUESTION

        if len(normalized_text.split()) > self._long_input_words:
            return Intent.PERSONAL

        return Intent.UNKNOWN

    def matching_rule(self, normalized_text: str) -> Optional[IntentRule]:
        """First rule set with a matching pattern, if any."""
        for rule in self._rules:
            if rule.matches(normalized_text):
                return rule
        return None

    @property
    def priority(self) -> List[Intent]:
        """Intents in the order their rules are tried."""
        return [rule.intent for rule in self._rules]

    def __repr__(self) -> str:
        order = ", ".join(intent.name for intent in self.priority)
        return f"IntentClassifier([{order}])"
