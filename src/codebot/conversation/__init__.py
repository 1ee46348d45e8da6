"""
Conversation package: rule-based conversational response engine.

This package implements the per-turn pipeline:
- Normalizes and tokenizes user text
- Classifies intent with an ordered rule table
- Scores sentiment against fixed lexicons
- Generates replies from templates, specific patterns, tone and context
- Records history, topic counts and pattern memory per session

Components:
    - TextNormalizer / Tokenizer: Text preparation
    - SentimentScorer: Lexicon sentiment
    - IntentClassifier: Ordered rule matching
    - ResponseTemplateStore: Per-intent templates
    - PatternMemory: key -> response table
    - ResponseGenerator: Reply composition
    - ConversationSession: Main orchestrator
"""

from codebot.conversation.text import TextNormalizer, Tokenizer, STOP_WORDS
from codebot.conversation.sentiment import SentimentScore, SentimentScorer
from codebot.conversation.intent import Intent, IntentClassifier, IntentRule, INTENT_RULES
from codebot.conversation.templates import ResponseTemplateStore, JOKES
from codebot.conversation.patterns import PatternMemory, DEFAULT_KNOWLEDGE_BASE
from codebot.conversation.memory import (
    ConversationHistory,
    ConversationTurn,
    Speaker,
    TopicFrequencyTable,
)
from codebot.conversation.generator import ResponseGenerator, SessionContext
from codebot.conversation.session import ConversationSession

__all__ = [
    # Text
    "TextNormalizer",
    "Tokenizer",
    "STOP_WORDS",
    # Sentiment
    "SentimentScore",
    "SentimentScorer",
    # Intent
    "Intent",
    "IntentClassifier",
    "IntentRule",
    "INTENT_RULES",
    # Templates
    "ResponseTemplateStore",
    "JOKES",
    # Patterns
    "PatternMemory",
    "DEFAULT_KNOWLEDGE_BASE",
    # Memory
    "ConversationHistory",
    "ConversationTurn",
    "Speaker",
    "TopicFrequencyTable",
    # Generation
    "ResponseGenerator",
    "SessionContext",
    # Main
    "ConversationSession",
]
