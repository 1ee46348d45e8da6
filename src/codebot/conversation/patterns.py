"""
Pattern memory: a key -> response table.

Seeded from a knowledge base (``key|response`` lines) and extended after
every turn with the reply given to the first three words of the input.
Lookup is opt-in; by default the table is only recorded, never consulted.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from codebot.config.constants import KNOWLEDGE_BASE_SEPARATOR, PATTERN_KEY_TOKENS

logger = logging.getLogger(__name__)

DEFAULT_KNOWLEDGE_BASE = """\
hello|Hello! How can I help you today?
hi|Hi there! What's on your mind?
good morning|Good morning! Hope you're having a great day!
how are you|I'm doing well, thank you for asking! How about you?
what is your name|I'm an AI chatbot created for the CodeAlpha project. You can call me CodeBot!
what can you do|I can chat with you, answer questions, and learn from our conversations!
thank you|You're very welcome! Happy to help!
bye|Goodbye! It was nice chatting with you!
help|I'm here to chat and answer your questions. Try asking me about technology, general topics, or just have a conversation!
what time is it|Let me check the current time for you.
tell me a joke|Why don't scientists trust atoms? Because they make up everything!
who created you|I was created as part of a CodeAlpha internship project using rule-based NLP techniques.
"""
"""Used when no knowledge base file is configured or it cannot be read."""


def parse_knowledge_base(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """
    Parse ``key|response`` lines.

    Lines without exactly one separator, or with an empty key or response
    after trimming, are skipped.

    Yields:
        (key, response) pairs; keys are lower-cased and trimmed
    """
    for line in lines:
        parts = line.split(KNOWLEDGE_BASE_SEPARATOR)
        if len(parts) != 2:
            continue
        key = parts[0].strip().lower()
        response = parts[1].strip()
        if key and response:
            yield key, response


class PatternMemory:
    """
    Per-session key -> response table.

    Later writes for the same key overwrite earlier ones.

    Example:
        >>> memory = PatternMemory.from_text("hello|Hi!")
        >>> memory.record("tell me something new", "Sure.")
        >>> memory.get("tell me something")
        'Sure.'
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self._entries: Dict[str, str] = dict(entries or {})

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> "PatternMemory":
        """Build memory from knowledge base text."""
        return cls(dict(parse_knowledge_base(text.splitlines())))

    @classmethod
    def load(cls, source: Union[str, Path, None] = None) -> "PatternMemory":
        """
        Load memory from a knowledge base file.

        Missing or unreadable files are not fatal: a warning is logged and
        the embedded DEFAULT_KNOWLEDGE_BASE is used instead.

        Args:
            source: Path to a ``key|response`` file, or None for the defaults

        Returns:
            Seeded PatternMemory
        """
        if source is None:
            return cls.from_text(DEFAULT_KNOWLEDGE_BASE)

        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                "Could not load knowledge base %s (%s); using embedded defaults", path, e
            )
            return cls.from_text(DEFAULT_KNOWLEDGE_BASE)

        memory = cls.from_text(text)
        logger.debug(f"Loaded {len(memory)} knowledge base entries from {path}")
        return memory

    # ------------------------------------------------------------------
    # Recording / lookup
    # ------------------------------------------------------------------

    @staticmethod
    def key_for(normalized_input: str) -> Optional[str]:
        """Key for an input with more than two words, else None."""
        words = normalized_input.lower().split()
        if len(words) < PATTERN_KEY_TOKENS:
            return None
        return " ".join(words[:PATTERN_KEY_TOKENS])

    def record(self, normalized_input: str, response: str) -> Optional[str]:
        """
        Store a response under the input's three-word key.

        Args:
            normalized_input: Normalized user text
            response: Reply given for it

        Returns:
            The key written, or None if the input was too short
        """
        key = self.key_for(normalized_input)
        if key is not None:
            self._entries[key] = response
        return key

    def lookup(self, normalized_input: str) -> Optional[str]:
        """
        Find a stored response for an input.

        An exact key match wins, then the entry under the three-word key.
        """
        text = normalized_input.strip().lower()
        if text in self._entries:
            return self._entries[text]
        key = self.key_for(text)
        if key is not None:
            return self._entries.get(key)
        return None

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def snapshot(self) -> Dict[str, str]:
        """Copy of all entries."""
        return dict(self._entries)

    def copy(self) -> "PatternMemory":
        return PatternMemory(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PatternMemory(entries={len(self._entries)})"
