"""
CodeBot: Rule-Based Conversational Response Engine.

Given a line of user text, the engine classifies intent with an ordered
rule table, scores sentiment against fixed lexicons and builds a reply from
templates, specific-pattern overrides and light per-session learning
(topic counts and pattern memory).

The system includes:
- Text normalization, tokenization and sentiment scoring
- Intent classification and response generation
- Conversation sessions with history, analytics and export
- An interactive chat REPL (python -m codebot.chat)
"""

__version__ = "0.1.0"

# Core components
from codebot.container import ChatbotContainer
from codebot.config.settings import Settings

# Conversation pipeline
from codebot.conversation.session import ConversationSession
from codebot.conversation.intent import Intent, IntentClassifier
from codebot.conversation.sentiment import SentimentScore, SentimentScorer
from codebot.conversation.text import TextNormalizer, Tokenizer
from codebot.conversation.templates import ResponseTemplateStore
from codebot.conversation.patterns import PatternMemory
from codebot.conversation.generator import ResponseGenerator, SessionContext
from codebot.conversation.memory import ConversationTurn, Speaker

# Persistence
from codebot.persistence.conversation_log import ConversationExportError, ConversationLogWriter
from codebot.persistence.knowledge_base import KnowledgeBaseWriter


def __getattr__(name: str):
    """Lazy import so the chat shell (and its .env loading) stays out of the core."""
    if name == "ChatInterface":
        from codebot.chat.interface import ChatInterface
        return ChatInterface
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    # Core
    "ChatbotContainer",
    "ChatInterface",
    "Settings",
    # Conversation
    "ConversationSession",
    "Intent",
    "IntentClassifier",
    "SentimentScore",
    "SentimentScorer",
    "TextNormalizer",
    "Tokenizer",
    "ResponseTemplateStore",
    "PatternMemory",
    "ResponseGenerator",
    "SessionContext",
    "ConversationTurn",
    "Speaker",
    # Persistence
    "ConversationExportError",
    "ConversationLogWriter",
    "KnowledgeBaseWriter",
]
