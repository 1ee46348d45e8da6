"""
Conversation history and topic analytics.

The history is append-only for the lifetime of a session; the topic table
counts how many processed turns were classified under each intent.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterator, List, Tuple

from codebot.conversation.intent import Intent


class Speaker(Enum):
    """Who produced a turn."""

    USER = "USER"
    BOT = "BOT"


@dataclass(frozen=True)
class ConversationTurn:
    """A single turn in the conversation."""

    speaker: Speaker
    text: str
    timestamp: datetime = field(default_factory=datetime.now)

    def as_dict(self) -> Dict[str, str]:
        return {"speaker": self.speaker.value, "text": self.text}

    def __repr__(self) -> str:
        return f"Turn({self.speaker.value}: '{self.text[:20]}')"


class ConversationHistory:
    """
    Ordered, append-only record of turns.

    Turns are never reordered, edited or dropped during a session.

    Example:
        >>> history = ConversationHistory()
        >>> history.append(ConversationTurn(Speaker.USER, "hello"))
        >>> len(history)
        1
    """

    def __init__(self):
        self._turns: List[ConversationTurn] = []

    def append(self, turn: ConversationTurn) -> None:
        self._turns.append(turn)

    def snapshot(self) -> List[ConversationTurn]:
        """Copy of the turn list. Turns are immutable, so a shallow copy suffices."""
        return list(self._turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(list(self._turns))

    def __len__(self) -> int:
        return len(self._turns)

    def __repr__(self) -> str:
        return f"ConversationHistory(turns={len(self._turns)})"


class TopicFrequencyTable:
    """Per-intent turn counts, zero for every intent at session start."""

    def __init__(self):
        self._counts: Dict[Intent, int] = {intent: 0 for intent in Intent}

    def increment(self, intent: Intent) -> int:
        self._counts[intent] += 1
        return self._counts[intent]

    def count(self, intent: Intent) -> int:
        return self._counts[intent]

    def snapshot(self) -> Dict[Intent, int]:
        return dict(self._counts)

    def ranked(self) -> List[Tuple[Intent, int]]:
        """Intents by count descending; ties keep declaration order."""
        return sorted(self._counts.items(), key=lambda item: item[1], reverse=True)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def __repr__(self) -> str:
        return f"TopicFrequencyTable(total={self.total})"
