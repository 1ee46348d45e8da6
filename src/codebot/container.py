"""
Dependency Injection Container for CodeBot.

Holds the process-wide read-only configuration (templates, lexicons, rule
table, knowledge base) and builds isolated conversation sessions on top of
it.
"""

import random
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from codebot.config.settings import Settings
from codebot.conversation.generator import Clock, ResponseGenerator
from codebot.conversation.intent import IntentClassifier
from codebot.conversation.patterns import PatternMemory
from codebot.conversation.sentiment import SentimentScorer
from codebot.conversation.session import ConversationSession
from codebot.conversation.templates import ResponseTemplateStore
from codebot.conversation.text import TextNormalizer, Tokenizer
from codebot.persistence.conversation_log import ConversationLogWriter


class ChatbotContainer:
    """
    Dependency injection container for the chatbot.

    Manages shared read-only components and provides a factory for
    sessions. Every session gets its own history, topic table, context and
    a private copy of the seeded pattern memory.

    Attributes:
        _settings: Runtime settings
        _templates: Shared ResponseTemplateStore
        _classifier: Shared IntentClassifier
        _scorer: Shared SentimentScorer
        _knowledge_base: Pattern memory loaded once, copied per session

    Example:
        >>> container = ChatbotContainer()
        >>> alice = container.create_session()
        >>> bob = container.create_session()
        >>> # Separate histories, same templates and rules
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        knowledge_base_path: Union[str, Path, None] = None,
        clock: Clock = datetime.now,
    ):
        """
        Initialize container with shared dependencies.

        Args:
            settings: Runtime settings (defaults read from environment/.env)
            knowledge_base_path: Overrides settings.knowledge_base_path
            clock: Time source passed to every session
        """
        self._settings = settings if settings is not None else Settings()
        self._clock = clock

        self._normalizer = TextNormalizer()
        self._tokenizer = Tokenizer()
        self._scorer = SentimentScorer()
        self._classifier = IntentClassifier()
        self._templates = ResponseTemplateStore()

        source = knowledge_base_path or self._settings.knowledge_base_path
        self._knowledge_base = PatternMemory.load(source)

        # Sessions draw from one seeded stream so a seed reproduces a whole run
        self._rng = random.Random(self._settings.random_seed)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def templates(self) -> ResponseTemplateStore:
        return self._templates

    @property
    def classifier(self) -> IntentClassifier:
        return self._classifier

    @property
    def knowledge_base(self) -> PatternMemory:
        """Seed pattern memory (copied into each new session)."""
        return self._knowledge_base

    def create_generator(self, rng: Optional[random.Random] = None) -> ResponseGenerator:
        """
        Create a ResponseGenerator configured from settings.

        Args:
            rng: Random source (a child of the container's stream if omitted)
        """
        if rng is None:
            rng = random.Random(self._rng.getrandbits(64))
        return ResponseGenerator(
            templates=self._templates,
            rng=rng,
            bot_name=self._settings.bot_name,
            clock=self._clock,
            enthusiasm_threshold=self._settings.enthusiasm_threshold,
            empathy_threshold=self._settings.empathy_threshold,
            personal_threshold=self._settings.personal_sentiment_threshold,
            continuation_probability=self._settings.continuation_probability,
            use_pattern_memory=self._settings.use_pattern_memory,
        )

    def create_session(self, rng: Optional[random.Random] = None) -> ConversationSession:
        """
        Start a new conversation.

        Args:
            rng: Random source for this session's replies

        Returns:
            Fresh ConversationSession
        """
        return ConversationSession(
            normalizer=self._normalizer,
            tokenizer=self._tokenizer,
            scorer=self._scorer,
            classifier=self._classifier,
            generator=self.create_generator(rng),
            pattern_memory=self._knowledge_base.copy(),
            log_writer=ConversationLogWriter(),
            clock=self._clock,
        )

    def __repr__(self) -> str:
        return (
            f"ChatbotContainer(bot={self._settings.bot_name!r}, "
            f"knowledge_base={len(self._knowledge_base)})"
        )
