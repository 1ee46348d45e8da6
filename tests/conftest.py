"""
Shared fixtures for chatbot tests.

Provides common test fixtures to avoid duplication across test files.
"""

import random
from datetime import datetime

import pytest

from codebot.config.settings import Settings
from codebot.container import ChatbotContainer
from codebot.conversation.generator import ResponseGenerator, SessionContext
from codebot.conversation.intent import IntentClassifier
from codebot.conversation.sentiment import SentimentScorer
from codebot.conversation.templates import ResponseTemplateStore
from codebot.conversation.text import TextNormalizer, Tokenizer


FIXED_NOW = datetime(2026, 1, 31, 14, 5, 9)


class FixedRandom(random.Random):
    """Random source that always picks the same index and draws the same value."""

    index = 0
    value = 0.0

    def choice(self, seq):
        return seq[self.index % len(seq)]

    def random(self):
        return self.value


def fixed_random(index: int = 0, value: float = 0.0) -> FixedRandom:
    rng = FixedRandom()
    rng.index = index
    rng.value = value
    return rng


# =============================================================================
# Clock / Random Fixtures
# =============================================================================

@pytest.fixture
def clock():
    """Clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def first_choice():
    """Always picks the first option; probability draws never fire."""
    return fixed_random(index=0, value=0.99)


@pytest.fixture
def make_rng():
    """Factory for FixedRandom sources."""
    return fixed_random


@pytest.fixture
def always_continue():
    """Always picks the first option; probability draws always fire."""
    return fixed_random(index=0, value=0.0)


# =============================================================================
# Component Fixtures
# =============================================================================

@pytest.fixture
def normalizer():
    return TextNormalizer()


@pytest.fixture
def tokenizer():
    return Tokenizer()


@pytest.fixture
def scorer():
    return SentimentScorer()


@pytest.fixture
def classifier():
    return IntentClassifier()


@pytest.fixture
def templates():
    return ResponseTemplateStore()


@pytest.fixture
def context():
    return SessionContext()


@pytest.fixture
def generator(templates, first_choice, clock):
    """Generator whose choices are all predictable."""
    return ResponseGenerator(templates, rng=first_choice, clock=clock)


# =============================================================================
# Container / Session Fixtures
# =============================================================================

@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, random_seed=1234)


@pytest.fixture
def container(settings, clock):
    return ChatbotContainer(settings=settings, clock=clock)


@pytest.fixture
def session(container):
    return container.create_session()


@pytest.fixture
def predictable_session(container, first_choice):
    """Session with a FixedRandom source."""
    return container.create_session(rng=first_choice)
