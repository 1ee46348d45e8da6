"""Persistence layer for conversation logs and knowledge bases."""

from codebot.persistence.conversation_log import (
    ConversationExportError,
    ConversationLogWriter,
)
from codebot.persistence.knowledge_base import KnowledgeBaseWriter

__all__ = [
    "ConversationExportError",
    "ConversationLogWriter",
    "KnowledgeBaseWriter",
]
