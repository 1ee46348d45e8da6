"""
Response generation from templates, specific patterns, tone and context.

Resolution order for one turn:
1. Specific-pattern overrides (introductions, jokes, questions about the bot)
2. Pattern memory reuse, only when enabled
3. Intent-specific dynamic replies (TIME, TECHNOLOGY, EDUCATION, PERSONAL, QUESTION)
4. A random template for the intent
Steps 3 and 4 then get a sentiment-driven tone marker and, when the intent
repeats, an occasional continuity connector.
"""

import logging
import random
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Optional

from codebot.config.constants import (
    CONTINUATION_CONNECTORS,
    CONTINUATION_PROBABILITY,
    DEFAULT_BOT_NAME,
    EMPATHETIC_MARKERS,
    EMPATHY_THRESHOLD,
    ENTHUSIASM_THRESHOLD,
    ENTHUSIASTIC_MARKERS,
    PERSONAL_SENTIMENT_THRESHOLD,
    TIME_FORMAT,
)
from codebot.conversation.intent import Intent
from codebot.conversation.patterns import PatternMemory
from codebot.conversation.sentiment import SentimentScore
from codebot.conversation.templates import ResponseTemplateStore, specific_reply

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_AI_WORD = re.compile(r"\bai\b")


@dataclass
class SessionContext:
    """Turn-to-turn state used for continuation phrasing."""

    last_intent: Intent = Intent.UNKNOWN
    turn_counter: int = 0


class ResponseGenerator:
    """
    Compose replies for classified input.

    All random decisions (template, joke, tone marker, connector) draw from
    the single ``rng`` passed in, so a seeded Random gives exact replies.

    Attributes:
        _templates: Shared read-only template store
        _rng: Random source for every choice
        _bot_name: Name used for {name} and introductions
        _clock: Callable returning the current datetime
        _use_pattern_memory: Whether recorded patterns may be replayed

    Example:
        >>> generator = ResponseGenerator(ResponseTemplateStore(), random.Random(7))
        >>> context = SessionContext()
        >>> reply = generator.generate(
        ...     Intent.GREETING, "hello", SentimentScore.neutral_default(), context
        ... )
        >>> context.turn_counter
        1
    """

    def __init__(
        self,
        templates: ResponseTemplateStore,
        rng: Optional[random.Random] = None,
        bot_name: str = DEFAULT_BOT_NAME,
        clock: Clock = datetime.now,
        enthusiasm_threshold: float = ENTHUSIASM_THRESHOLD,
        empathy_threshold: float = EMPATHY_THRESHOLD,
        personal_threshold: float = PERSONAL_SENTIMENT_THRESHOLD,
        continuation_probability: float = CONTINUATION_PROBABILITY,
        use_pattern_memory: bool = False,
    ):
        """
        Initialize response generator.

        Args:
            templates: Per-intent template store
            rng: Random source (a fresh unseeded Random if omitted)
            bot_name: Name substituted for {name}
            clock: Source of the current time
            enthusiasm_threshold: Positive score that adds an enthusiastic marker
            empathy_threshold: Negative score that adds an empathetic marker
            personal_threshold: Sentiment score that switches PERSONAL replies
            continuation_probability: Chance of a connector on a repeated intent
            use_pattern_memory: Replay pattern memory entries when they match
        """
        self._templates = templates
        self._rng = rng if rng is not None else random.Random()
        self._bot_name = bot_name
        self._clock = clock
        self._enthusiasm_threshold = enthusiasm_threshold
        self._empathy_threshold = empathy_threshold
        self._personal_threshold = personal_threshold
        self._continuation_probability = continuation_probability
        self._use_pattern_memory = use_pattern_memory

        self._dynamic: Dict[Intent, Callable[[str, SentimentScore], str]] = {
            Intent.TIME: self._time_reply,
            Intent.TECHNOLOGY: self._technology_reply,
            Intent.EDUCATION: self._education_reply,
            Intent.PERSONAL: self._personal_reply,
            Intent.QUESTION: self._question_reply,
        }

    def generate(
        self,
        intent: Intent,
        normalized_input: str,
        sentiment: SentimentScore,
        context: SessionContext,
        pattern_memory: Optional[PatternMemory] = None,
    ) -> str:
        """
        Generate a reply and advance the session context.

        Args:
            intent: Classified intent
            normalized_input: Normalized user text
            sentiment: Sentiment of the input
            context: Session context, updated in place
            pattern_memory: Consulted only when pattern memory reuse is enabled

        Returns:
            Non-empty reply text
        """
        context.turn_counter += 1
        previous_intent = context.last_intent
        context.last_intent = intent

        special = specific_reply(normalized_input, self._bot_name, self._rng)
        if special is not None:
            return special

        if self._use_pattern_memory and pattern_memory is not None:
            remembered = pattern_memory.lookup(normalized_input)
            if remembered:
                logger.debug(f"Replaying remembered reply for '{normalized_input}'")
                return remembered

        dynamic = self._dynamic.get(intent)
        if dynamic is not None:
            response = dynamic(normalized_input, sentiment)
        else:
            response = self._template_reply(intent, context.turn_counter)

        response = self._apply_tone(response, sentiment)
        return self._apply_continuation(response, intent, previous_intent)

    @property
    def bot_name(self) -> str:
        return self._bot_name

    @property
    def pattern_memory_enabled(self) -> bool:
        return self._use_pattern_memory

    def current_time(self) -> str:
        """Current time as HH:MM:SS."""
        return self._clock().strftime(TIME_FORMAT)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def _template_reply(self, intent: Intent, turn: int) -> str:
        template = self._templates.choose(intent, self._rng)
        return self._templates.render(
            template, name=self._bot_name, time=self.current_time(), turn=turn
        )

    # ------------------------------------------------------------------
    # Intent-specific replies
    # ------------------------------------------------------------------

    def _time_reply(self, text: str, sentiment: SentimentScore) -> str:
        return (
            f"The current time is {self.current_time()}. "
            "Is there anything else I can help you with?"
        )

    def _technology_reply(self, text: str, sentiment: SentimentScore) -> str:
        if "java" in text:
            return (
                "Java is a fantastic programming language! It's object-oriented, platform-independent, and "
                "widely used for enterprise applications. Are you learning Java programming?"
            )
        if _AI_WORD.search(text) or "artificial intelligence" in text:
            return (
                "Artificial Intelligence is fascinating! I'm a simple example of AI using NLP and rule-based "
                "responses. AI can be used for many things like chatbots, recommendation systems, and automation."
            )
        if "programming" in text or "code" in text:
            return (
                "Programming is an amazing skill! It allows you to create software, solve problems, and bring "
                "ideas to life. What programming languages are you interested in?"
            )
        return (
            "Technology is constantly evolving! Whether it's programming, AI, web development, or mobile apps, "
            "there's always something new to learn. What aspect of technology interests you most?"
        )

    def _education_reply(self, text: str, sentiment: SentimentScore) -> str:
        if "study" in text or "learning" in text:
            return (
                "Learning is a lifelong journey! Whether you're studying programming, mathematics, science, or "
                "any other subject, consistency and practice are key. What are you currently studying?"
            )
        if "school" in text or "university" in text:
            return (
                "Education opens doors to new opportunities! It's great that you're focused on learning. "
                "Remember, the most important thing is to stay curious and keep asking questions."
            )
        return (
            "Education is the foundation of personal growth. Whether formal or self-directed learning, "
            "every bit of knowledge you gain makes you more capable. What would you like to learn about?"
        )

    def _personal_reply(self, text: str, sentiment: SentimentScore) -> str:
        if sentiment.positive > self._personal_threshold:
            return (
                "That's wonderful to hear! I'm glad you're feeling positive. "
                "It's always great when people share good news or positive thoughts."
            )
        if sentiment.negative > self._personal_threshold:
            return (
                "I'm sorry to hear that you're going through a tough time. "
                "Remember that challenges are temporary, and talking about them can help. "
                "Is there anything specific I can help you with?"
            )
        return (
            "I appreciate you sharing that with me. Everyone has their own unique experiences and perspectives. "
            "Feel free to tell me more if you'd like to chat about it!"
        )

    def _question_reply(self, text: str, sentiment: SentimentScore) -> str:
        if "what" in text and "time" in text:
            return f"The current time is {self.current_time()}."
        if "how" in text and "are you" in text:
            return "I'm doing well, thank you for asking! I'm here and ready to chat. How are you doing today?"
        if "why" in text:
            return (
                "That's a thoughtful question! The 'why' behind things often reveals deeper understanding. "
                "Could you provide more context so I can give you a better answer?"
            )
        if "how" in text:
            return (
                "Great question! The 'how' of things is often just as important as the 'what'. "
                "Let me know more details and I'll do my best to help explain!"
            )
        return (
            "That's an interesting question! I'll do my best to help. Could you provide a bit more "
            "context or be more specific about what you'd like to know?"
        )

    # ------------------------------------------------------------------
    # Tone and context
    # ------------------------------------------------------------------

    def _apply_tone(self, response: str, sentiment: SentimentScore) -> str:
        if sentiment.positive > self._enthusiasm_threshold:
            return response + self._rng.choice(ENTHUSIASTIC_MARKERS)
        if sentiment.negative > self._empathy_threshold:
            return response + self._rng.choice(EMPATHETIC_MARKERS)
        return response

    def _apply_continuation(self, response: str, intent: Intent, previous: Intent) -> str:
        if intent != previous or intent == Intent.UNKNOWN:
            return response
        if self._rng.random() < self._continuation_probability:
            connector = self._rng.choice(CONTINUATION_CONNECTORS)
            return connector + response.lower()
        return response

    def __repr__(self) -> str:
        return (
            f"ResponseGenerator(bot={self._bot_name!r}, "
            f"pattern_memory={'on' if self._use_pattern_memory else 'off'})"
        )
