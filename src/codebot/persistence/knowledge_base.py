"""
Knowledge base persistence.

Writes pattern memory back out as ``key|response`` lines that
``PatternMemory.load`` reads again.
"""

import logging
from pathlib import Path
from typing import Mapping, Union

from codebot.config.constants import KNOWLEDGE_BASE_SEPARATOR
from codebot.conversation.patterns import PatternMemory

logger = logging.getLogger(__name__)


class KnowledgeBaseWriter:
    """Serialize pattern memory to a knowledge base file."""

    @staticmethod
    def dumps(entries: Mapping[str, str]) -> str:
        """
        Render entries as knowledge base text.

        Entries that could not be read back (separator or line break in the
        key or response, or blank after trimming) are left out.
        """
        lines = []
        for key, response in entries.items():
            if not _storable(key) or not _storable(response):
                logger.debug(f"Skipping unstorable knowledge base entry: {key!r}")
                continue
            lines.append(f"{key.strip().lower()}{KNOWLEDGE_BASE_SEPARATOR}{response.strip()}")
        return "\n".join(lines) + "\n" if lines else ""

    def save(self, memory: PatternMemory, destination: Union[str, Path]) -> Path:
        """
        Save pattern memory.

        Raises:
            IOError: If unable to write to destination
        """
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dumps(memory.snapshot()), encoding="utf-8")
        logger.info(f"Saved {len(memory)} pattern memory entries to {path}")
        return path


def _storable(value: str) -> bool:
    return (
        bool(value.strip())
        and KNOWLEDGE_BASE_SEPARATOR not in value
        and "\n" not in value
        and "\r" not in value
    )
