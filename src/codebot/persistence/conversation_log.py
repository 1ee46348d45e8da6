"""
Plain-text conversation export.

File layout:
```
=== Chatbot Conversation Log ===
Date: 2026-01-31 14:05:09

USER: hello
BOT: Hi there! Nice to meet you!

=== Topic Analytics ===
GREETING: 1
FAREWELL: 0
...
```
Topics are listed by count, highest first.
"""

from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

from codebot.config.constants import EXPORT_DATE_FORMAT
from codebot.conversation.intent import Intent
from codebot.conversation.memory import ConversationTurn

LOG_HEADER = "=== Chatbot Conversation Log ==="
ANALYTICS_HEADER = "=== Topic Analytics ==="


class ConversationExportError(OSError):
    """Raised when a conversation log cannot be written."""


class ConversationLogWriter:
    """
    Render and write conversation logs.

    Works on snapshots, so no session state is held while writing.

    Example:
        >>> writer = ConversationLogWriter()
        >>> text = writer.render(turns, ranked_topics, datetime.now())
        >>> writer.write(Path("chat.txt"), turns, ranked_topics, datetime.now())
    """

    @staticmethod
    def render(
        turns: Iterable[ConversationTurn],
        ranked_topics: Sequence[Tuple[Intent, int]],
        exported_at: datetime,
    ) -> str:
        """
        Render a log as text.

        Args:
            turns: History snapshot in order
            ranked_topics: (intent, count) pairs, highest count first
            exported_at: Timestamp for the Date: line

        Returns:
            Full log text ending in a newline
        """
        lines: List[str] = [
            LOG_HEADER,
            f"Date: {exported_at.strftime(EXPORT_DATE_FORMAT)}",
            "",
        ]
        lines.extend(f"{turn.speaker.value}: {turn.text}" for turn in turns)
        lines.append("")
        lines.append(ANALYTICS_HEADER)
        lines.extend(f"{intent.name}: {count}" for intent, count in ranked_topics)
        return "\n".join(lines) + "\n"

    def write(
        self,
        destination: Union[str, Path],
        turns: Iterable[ConversationTurn],
        ranked_topics: Sequence[Tuple[Intent, int]],
        exported_at: datetime,
    ) -> Path:
        """
        Write a log file.

        Raises:
            ConversationExportError: If the destination cannot be written
        """
        path = Path(destination)
        text = self.render(turns, ranked_topics, exported_at)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise ConversationExportError(f"Could not write conversation log to {path}: {e}") from e
        return path
