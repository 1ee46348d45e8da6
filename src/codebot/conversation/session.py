"""
Conversation session orchestrating the response pipeline.

One session owns its history, topic counts, pattern memory and context.
Nothing is shared between sessions except read-only configuration
(templates, lexicons, rule table).

A session is not thread-safe: callers must serialize ``process_turn`` calls
for the same session.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from codebot.config.constants import EMPTY_INPUT_PROMPT
from codebot.conversation.generator import Clock, ResponseGenerator, SessionContext
from codebot.conversation.intent import Intent, IntentClassifier
from codebot.conversation.memory import (
    ConversationHistory,
    ConversationTurn,
    Speaker,
    TopicFrequencyTable,
)
from codebot.conversation.patterns import PatternMemory
from codebot.conversation.sentiment import SentimentScorer
from codebot.conversation.text import TextNormalizer, Tokenizer
from codebot.persistence.conversation_log import ConversationExportError, ConversationLogWriter

logger = logging.getLogger(__name__)


class ConversationSession:
    """
    A single conversation with the bot.

    Pipeline per turn: normalize -> classify intent -> score sentiment ->
    generate reply -> update history, topic counts and pattern memory.

    Attributes:
        _normalizer: TextNormalizer
        _tokenizer: Tokenizer
        _scorer: SentimentScorer
        _classifier: IntentClassifier
        _generator: ResponseGenerator
        _pattern_memory: Session-owned pattern memory
        _history: Append-only turn history
        _topics: Per-intent turn counts
        _context: Last intent and turn counter

    Example:
        >>> session = ChatbotContainer().create_session()
        >>> session.process_turn("My name is Alex")
        "Nice to meet you, Alex! I'm CodeBot, your AI assistant."
        >>> session.topic_analytics()["PERSONAL"]
        1
    """

    def __init__(
        self,
        normalizer: TextNormalizer,
        tokenizer: Tokenizer,
        scorer: SentimentScorer,
        classifier: IntentClassifier,
        generator: ResponseGenerator,
        pattern_memory: Optional[PatternMemory] = None,
        log_writer: Optional[ConversationLogWriter] = None,
        clock: Clock = datetime.now,
    ):
        """
        Initialize conversation session.

        Args:
            normalizer: Text normalization component
            tokenizer: Tokenization component
            scorer: Sentiment scoring component
            classifier: Intent classification component
            generator: Response generation component
            pattern_memory: Seeded pattern memory (empty if omitted)
            log_writer: Writer used by export_conversation
            clock: Source of turn timestamps and the export date
        """
        self._normalizer = normalizer
        self._tokenizer = tokenizer
        self._scorer = scorer
        self._classifier = classifier
        self._generator = generator
        self._pattern_memory = pattern_memory if pattern_memory is not None else PatternMemory()
        self._log_writer = log_writer or ConversationLogWriter()
        self._clock = clock

        self._history = ConversationHistory()
        self._topics = TopicFrequencyTable()
        self._context = SessionContext()

    def process_turn(self, raw_input: Optional[str]) -> str:
        """
        Respond to one user message.

        Empty or blank input returns a clarification prompt and leaves the
        session untouched.

        Args:
            raw_input: User's message

        Returns:
            Bot's reply
        """
        if raw_input is None or not raw_input.strip():
            return EMPTY_INPUT_PROMPT

        self._history.append(ConversationTurn(Speaker.USER, raw_input, self._clock()))

        normalized = self._normalizer.normalize(raw_input)
        intent = self._classifier.classify(normalized)
        self._topics.increment(intent)
        sentiment = self._scorer.score(self._tokenizer.tokenize(normalized))

        logger.debug(f"Turn {self._context.turn_counter + 1}: intent={intent.name} {sentiment!r}")

        response = self._generator.generate(
            intent,
            normalized,
            sentiment,
            self._context,
            pattern_memory=self._pattern_memory,
        )

        self._pattern_memory.record(normalized, response)
        self._history.append(ConversationTurn(Speaker.BOT, response, self._clock()))

        return response

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def topic_analytics(self) -> Dict[str, int]:
        """Copy of the topic counts keyed by intent name."""
        return {intent.name: count for intent, count in self._topics.snapshot().items()}

    def most_discussed(self, n: int = 3) -> List[Tuple[str, int]]:
        """Top-n intents by count; ties keep intent declaration order."""
        return [(intent.name, count) for intent, count in self._topics.ranked()[:n]]

    def history(self) -> List[ConversationTurn]:
        """Copy of the turn sequence."""
        return self._history.snapshot()

    def history_dicts(self) -> List[Dict[str, str]]:
        """History as ``{"speaker", "text"}`` dicts for presentation layers."""
        return [turn.as_dict() for turn in self._history]

    def keywords(self, text: str) -> List[str]:
        """Keywords (tokens longer than three characters) of raw text."""
        return self._tokenizer.extract_keywords(self._normalizer.normalize(text))

    def classify(self, text: str) -> Intent:
        """Intent of raw text, without recording a turn."""
        return self._classifier.classify(self._normalizer.normalize(text))

    @property
    def pattern_memory(self) -> PatternMemory:
        return self._pattern_memory

    @property
    def turn_count(self) -> int:
        """Number of processed (non-empty) user turns."""
        return self._topics.total

    @property
    def context(self) -> SessionContext:
        return self._context

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def render_conversation(self) -> str:
        """Conversation log text, as written by export_conversation."""
        return self._log_writer.render(
            self._history.snapshot(), self._topics.ranked(), self._clock()
        )

    def export_conversation(self, destination: Union[str, Path]) -> Path:
        """
        Write the conversation log to a file.

        Snapshots are taken before writing. A failed write leaves the session
        usable.

        Args:
            destination: File path to write

        Returns:
            Path written

        Raises:
            ConversationExportError: If the file cannot be written
        """
        turns = self._history.snapshot()
        ranked = self._topics.ranked()
        try:
            path = self._log_writer.write(destination, turns, ranked, self._clock())
        except ConversationExportError as e:
            logger.error(f"Conversation export failed: {e}")
            raise
        logger.info(f"Conversation exported to {path} ({len(turns)} turns)")
        return path

    def __repr__(self) -> str:
        return (
            f"ConversationSession(turns={self.turn_count}, "
            f"patterns={len(self._pattern_memory)})"
        )
