"""
Response templates and specific-pattern handlers.

Templates are grouped per intent and may contain the placeholders
``{name}``, ``{time}`` and ``{turn}``. Specific-pattern handlers answer a few
well-known requests (introductions, jokes, questions about the bot) before
any intent logic runs.
"""

import random
import re
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

from codebot.conversation.intent import Intent

DEFAULT_TEMPLATES: Dict[Intent, Tuple[str, ...]] = {
    Intent.GREETING: (
        "Hello! How can I help you today?",
        "Hi there! Nice to meet you!",
        "Greetings! I'm {name}, your AI assistant.",
        "Hey! What's on your mind?",
        "Good to see you! How are you doing?",
        "Welcome! I'm here to chat and help.",
    ),
    Intent.FAREWELL: (
        "Goodbye! It was great chatting with you!",
        "See you later! Have a wonderful day!",
        "Take care! Feel free to come back anytime!",
        "Farewell! Hope to chat with you again soon!",
        "Bye! Thanks for the conversation!",
        "Until next time! Stay awesome!",
    ),
    Intent.QUESTION: (
        "That's a great question! Let me think about that.",
        "Interesting question! I'll do my best to help.",
        "Good question! Could you be more specific?",
        "I'd be happy to help answer that!",
        "Let me see what I can tell you about that.",
        "That's something worth exploring!",
    ),
    Intent.HELP: (
        "I'm here to help! What do you need assistance with?",
        "Of course! I'd be glad to help you out.",
        "No problem! Tell me what you need help with.",
        "I'm ready to assist you! What's the issue?",
        "Help is on the way! What can I do for you?",
        "Absolutely! I'm here to support you.",
    ),
    Intent.PERSONAL: (
        "Thank you for sharing that with me!",
        "I appreciate you telling me about yourself.",
        "That's interesting! Tell me more.",
        "I enjoy getting to know you better.",
        "Thanks for opening up! I'm here to listen.",
        "It's nice to learn more about you!",
    ),
    Intent.TECHNOLOGY: (
        "Technology is fascinating! What aspect interests you?",
        "I love discussing tech topics! Tell me more.",
        "Technology is constantly evolving. What's your focus?",
        "Great topic! I enjoy talking about technology.",
        "Tech is amazing! What would you like to explore?",
        "Technology opens up so many possibilities!",
    ),
    Intent.EDUCATION: (
        "Learning is wonderful! What are you studying?",
        "Education is so important! Tell me more about your studies.",
        "I love discussing educational topics!",
        "Knowledge is power! What subject interests you?",
        "Learning never stops! What would you like to explore?",
        "Education opens doors to amazing opportunities!",
    ),
    Intent.TIME: (
        "Let me check the current time for you.",
        "Time flies! Let me get that information.",
        "Sure! I can tell you the current time.",
        "Of course! Here's the time information you requested.",
    ),
    Intent.WEATHER: (
        "I'd love to help with weather info, but I don't have access to current weather data.",
        "For accurate weather information, I'd recommend checking a weather app or website.",
        "Weather can change quickly! Check your local weather service for updates.",
        "I wish I could give you weather updates, but I don't have that capability yet.",
    ),
    Intent.ENTERTAINMENT: (
        "Entertainment is great for relaxation! What do you enjoy?",
        "I love talking about fun stuff! What entertains you?",
        "Entertainment comes in so many forms! Tell me your favorites.",
        "Fun topic! What kind of entertainment do you prefer?",
        "Everyone needs some entertainment! What's your go-to?",
    ),
    Intent.UNKNOWN: (
        "I'm not quite sure I understand. Could you rephrase that?",
        "That's interesting! Could you tell me more about what you mean?",
        "I'd like to help, but I need more context. Can you explain further?",
        "Hmm, I'm not following. Could you be more specific?",
        "I want to give you a good response, but I need more information.",
        "Could you help me understand what you're looking for?",
        "I'm here to chat! What would you like to talk about?",
        "Let's explore that topic together! Tell me more.",
    ),
}

JOKES: Tuple[str, ...] = (
    "Why don't scientists trust atoms? Because they make up everything!",
    "Why did the programmer quit his job? He didn't get arrays!",
    "How do you comfort a JavaScript bug? You console it!",
    "Why do Java developers wear glasses? Because they don't see sharp!",
    "What's a computer's favorite snack? Chips!",
    "Why was the computer cold? It left its Windows open!",
    "What do you call a programmer from Finland? Nerdic!",
    "Why don't programmers like nature? It has too many bugs!",
)

_PLACEHOLDER = re.compile(r"\{(name|time|turn)\}")


class ResponseTemplateStore:
    """
    Read-only per-intent template lists.

    Shared by every session; lookups never mutate the table.

    Example:
        >>> store = ResponseTemplateStore()
        >>> store.render("I'm {name}.", name="CodeBot", time="12:00:00", turn=1)
        "I'm CodeBot."
    """

    def __init__(self, templates: Optional[Mapping[Intent, Sequence[str]]] = None):
        """
        Initialize template store.

        Args:
            templates: Intent -> templates mapping (defaults to DEFAULT_TEMPLATES).
                Must contain a non-empty UNKNOWN list, used as the fallback.
        """
        source = DEFAULT_TEMPLATES if templates is None else templates
        self._templates: Dict[Intent, Tuple[str, ...]] = {
            intent: tuple(items) for intent, items in source.items() if items
        }
        if Intent.UNKNOWN not in self._templates:
            raise ValueError("Template table needs a non-empty UNKNOWN list")

    def templates_for(self, intent: Intent) -> Tuple[str, ...]:
        """Templates for an intent, or the UNKNOWN list when it has none."""
        return self._templates.get(intent, self._templates[Intent.UNKNOWN])

    def choose(self, intent: Intent, rng: random.Random) -> str:
        """Pick one template uniformly at random."""
        return rng.choice(self.templates_for(intent))

    @staticmethod
    def render(template: str, name: str, time: str, turn: int) -> str:
        """Substitute {name}, {time} and {turn}."""
        values = {"name": name, "time": time, "turn": str(turn)}
        return _PLACEHOLDER.sub(lambda match: values[match.group(1)], template)

    def __contains__(self, intent: Intent) -> bool:
        return intent in self._templates

    def __repr__(self) -> str:
        return f"ResponseTemplateStore(intents={len(self._templates)})"


# ==============================================================================
# Specific-pattern handlers
# ==============================================================================

SpecificHandler = Callable[[str, str, random.Random], Optional[str]]
"""(normalized_text, bot_name, rng) -> reply, or None when not applicable."""

_NAME_CUE = re.compile(r"\b(my name is|i am|i'?m)\b")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def introduction_reply(text: str, bot_name: str, rng: random.Random) -> Optional[str]:
    """Greet the user by name after "my name is", "i am" or "i'm"."""
    cues = list(_NAME_CUE.finditer(text))
    if not cues:
        return None

    for cue in cues:
        following = text[cue.end():].split()
        if following:
            name = following[0].strip("?!.")
            if name:
                return f"Nice to meet you, {_capitalize(name)}! I'm {bot_name}, your AI assistant."

    return f"Nice to meet you! I'm {bot_name}, your AI assistant."


def joke_reply(text: str, bot_name: str, rng: random.Random) -> Optional[str]:
    if "joke" in text or "funny" in text:
        return rng.choice(JOKES)
    return None


def identity_reply(text: str, bot_name: str, rng: random.Random) -> Optional[str]:
    if "who are you" in text or "what are you" in text:
        return (
            f"I'm {bot_name}, an AI chatbot created as part of a CodeAlpha internship project. "
            "I use rule-based NLP techniques to understand and respond to your messages!"
        )
    return None


def creator_reply(text: str, bot_name: str, rng: random.Random) -> Optional[str]:
    if "who created" in text or "who made" in text:
        return (
            "I was created by a talented intern as part of the CodeAlpha programming internship. "
            "The project showcases NLP, machine learning concepts, and conversational design!"
        )
    return None


def capabilities_reply(text: str, bot_name: str, rng: random.Random) -> Optional[str]:
    if "what can you do" in text or "your capabilities" in text:
        return (
            "I can chat with you, answer questions, tell jokes, provide information about various topics, "
            "analyze the sentiment of our conversation, and learn from our interactions. Try asking me about "
            "technology, education, or just have a casual conversation!"
        )
    return None


SPECIFIC_HANDLERS: Tuple[SpecificHandler, ...] = (
    introduction_reply,
    joke_reply,
    identity_reply,
    creator_reply,
    capabilities_reply,
)
"""Checked in order; the first non-None reply wins."""


def specific_reply(
    text: str,
    bot_name: str,
    rng: random.Random,
    handlers: Sequence[SpecificHandler] = SPECIFIC_HANDLERS,
) -> Optional[str]:
    """Run handlers in order and return the first reply."""
    for handler in handlers:
        reply = handler(text, bot_name, rng)
        if reply is not None:
            return reply
    return None
