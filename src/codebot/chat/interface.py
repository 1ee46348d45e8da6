#!/usr/bin/env python3
"""
Chat interface for CodeBot.

Provides an interactive REPL over a ConversationSession. Plain lines are
sent to the bot; slash commands inspect or save the session.
"""

from dotenv import load_dotenv
load_dotenv()  # Load .env file before other imports

from datetime import datetime
from pathlib import Path
from typing import Optional

from codebot.config.constants import DEFAULT_EXPORT_FILENAME
from codebot.config.settings import Settings
from codebot.container import ChatbotContainer
from codebot.persistence.conversation_log import ConversationExportError
from codebot.persistence.knowledge_base import KnowledgeBaseWriter


class ChatInterface:
    """
    Interactive chat interface for the rule-based chatbot.

    Commands:
    - /stats - Show topic analytics
    - /history - Show the conversation so far
    - /save [path] - Export the conversation log (timestamped name if omitted)
    - /memory [path] - Show pattern memory size, or save it as a knowledge base
    - /help - Show help
    - /exit - Exit

    Example session:
        > Hello!
        Hi there! Nice to meet you!

        > My name is Alex
        Nice to meet you, Alex! I'm CodeBot, your AI assistant.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        knowledge_base: Optional[str] = None,
    ):
        """
        Initialize chat interface.

        Args:
            settings: Runtime settings (environment/.env if omitted)
            knowledge_base: Optional key|response file seeding pattern memory
        """
        self.container = ChatbotContainer(settings=settings, knowledge_base_path=knowledge_base)
        self.session = self.container.create_session()
        self.kb_writer = KnowledgeBaseWriter()
        self._running = False

    def start(self) -> None:
        """Start interactive REPL."""
        bot_name = self.container.settings.bot_name
        print("=" * 60)
        print(f"  {bot_name}: Rule-Based Conversational Chatbot")
        if self.container.settings.use_pattern_memory:
            print("  [Pattern memory reuse: ON]")
        print("=" * 60)
        print()
        print(f"Hello! I'm {bot_name}. What would you like to talk about?")
        print("(Type naturally or use /help for commands)")
        print()

        self._running = True
        while self._running:
            try:
                user_input = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nGoodbye!")
                break

            if not user_input:
                continue

            if user_input.startswith("/"):
                self._handle_command(user_input)
            else:
                response = self.session.process_turn(user_input)
                print(f"\n{response}\n")

    def _handle_command(self, command: str) -> None:
        """Handle slash commands."""
        parts = command.split(maxsplit=1)
        cmd = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        if cmd == "/help":
            self._show_help()
        elif cmd == "/exit":
            print("Goodbye!")
            self._running = False
        elif cmd == "/stats":
            self._cmd_stats()
        elif cmd == "/history":
            self._cmd_history()
        elif cmd == "/save":
            self._cmd_save(args)
        elif cmd == "/memory":
            self._cmd_memory(args)
        else:
            print(f"Unknown command: {cmd}. Use /help for commands.")

    def _show_help(self) -> None:
        """Show help message."""
        print("""
Commands:
  /stats            Topic analytics for this conversation
  /history          Show the conversation so far
  /save [path]      Export the conversation log (default: chatbot_conversation_<timestamp>.txt)
  /memory [path]    Pattern memory size, or save it as key|response lines
  /help             Show this help
  /exit             Quit

Anything else is sent to the bot.
""")

    def _cmd_stats(self) -> None:
        """Show topic analytics."""
        print("\n" + "=" * 40)
        print("  Topic Analytics")
        print("=" * 40)
        print(f"\nTurns processed: {self.session.turn_count}")
        for name, count in self.session.most_discussed(n=len(self.session.topic_analytics())):
            if count:
                print(f"  {name}: {count}")
        print()

    def _cmd_history(self) -> None:
        """Show conversation history."""
        turns = self.session.history_dicts()
        if not turns:
            print("  (no messages yet)")
            return
        for turn in turns:
            print(f"  {turn['speaker']}: {turn['text']}")

    def _cmd_save(self, args: str) -> None:
        """Export conversation log."""
        path = args.strip() or datetime.now().strftime(DEFAULT_EXPORT_FILENAME)
        try:
            written = self.session.export_conversation(Path(path))
            print(f"✓ Conversation saved to: {written}")
        except ConversationExportError as e:
            print(f"❌ Error saving: {e}")

    def _cmd_memory(self, args: str) -> None:
        """Show or save pattern memory."""
        memory = self.session.pattern_memory
        path = args.strip()
        if not path:
            print(f"📋 Pattern memory entries: {len(memory)}")
            return
        try:
            written = self.kb_writer.save(memory, Path(path))
            print(f"✓ Pattern memory saved to: {written}")
        except OSError as e:
            print(f"❌ Error saving: {e}")
