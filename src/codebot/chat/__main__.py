#!/usr/bin/env python3
"""Entry point for running chat interface as a module.

Usage:
    python -m codebot.chat
    python -m codebot.chat --knowledge-base ./data/knowledge_base.txt
"""

import argparse
import logging


def main():
    parser = argparse.ArgumentParser(
        description="CodeBot rule-based chatbot interface",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Embedded knowledge base
  python -m codebot.chat

  # Seed pattern memory from a file
  python -m codebot.chat --knowledge-base ./data/knowledge_base.txt

  # Reproducible replies, remembered answers replayed
  python -m codebot.chat --seed 42 --use-pattern-memory
        """
    )

    parser.add_argument(
        "--knowledge-base",
        default=None,
        help="key|response file seeding pattern memory (default: embedded table)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible replies"
    )

    parser.add_argument(
        "--use-pattern-memory",
        action="store_true",
        help="Replay remembered replies when the input matches"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    # Import here to avoid circular import warning
    from codebot.chat.interface import ChatInterface
    from codebot.config.settings import Settings

    overrides = {}
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.use_pattern_memory:
        overrides["use_pattern_memory"] = True
    if args.debug:
        overrides["debug"] = True
    settings = Settings(**overrides)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    interface = ChatInterface(settings=settings, knowledge_base=args.knowledge_base)
    interface.start()


if __name__ == "__main__":
    main()
