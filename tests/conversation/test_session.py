"""Tests for ConversationSession."""

import logging
import re

import pytest

from codebot.config.constants import EMPTY_INPUT_PROMPT
from codebot.conversation.intent import Intent
from codebot.conversation.memory import Speaker
from codebot.conversation.templates import JOKES
from codebot.persistence.conversation_log import ANALYTICS_HEADER, LOG_HEADER, ConversationExportError


class TestProcessTurn:
    """Tests for the per-turn pipeline."""

    def test_introduction(self, session):
        """Test a self-introduction is answered by name."""
        reply = session.process_turn("My name is Alex")

        assert "Alex" in reply
        assert "CodeBot" in reply
        assert session.topic_analytics()["PERSONAL"] == 1

    def test_joke(self, session):
        """Test joke requests return one of the fixed jokes."""
        assert session.process_turn("Tell me a joke") in JOKES

    def test_time(self, session):
        """Test a time request contains an HH:MM:SS time."""
        reply = session.process_turn("What time is it?")

        assert re.search(r"\b\d{2}:\d{2}:\d{2}\b", reply)
        assert session.topic_analytics()["TIME"] == 1

    def test_greeting_reply(self, predictable_session):
        """Test the greeting template reaches the user unchanged."""
        assert predictable_session.process_turn("Hello!") == "Hello! How can I help you today?"

    def test_each_turn_appends_user_then_bot(self, session):
        """Test every processed input adds exactly two turns."""
        session.process_turn("hello")
        session.process_turn("I like java")

        history = session.history()
        assert len(history) == 4
        assert [turn.speaker for turn in history] == [
            Speaker.USER,
            Speaker.BOT,
            Speaker.USER,
            Speaker.BOT,
        ]
        assert history[0].text == "hello"
        assert history[2].text == "I like java"

    def test_counts_sum_to_turns(self, session):
        """Test topic counts always sum to the processed turn count."""
        inputs = ["hello", "help me", "what is python", "xyz", "bye"]
        for text in inputs:
            session.process_turn(text)

        assert sum(session.topic_analytics().values()) == len(inputs)
        assert session.turn_count == len(inputs)

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
    def test_empty_input_leaves_state(self, session, text):
        """Test blank input gets a prompt and changes nothing."""
        reply = session.process_turn(text)

        assert reply == EMPTY_INPUT_PROMPT
        assert session.history() == []
        assert session.turn_count == 0
        assert session.context.turn_counter == 0

    def test_records_pattern_memory(self, session):
        """Test replies are recorded under the first three words."""
        reply = session.process_turn("Tell me about machine learning")
        assert session.pattern_memory.get("tell me about") == reply

    def test_context_tracks_last_intent(self, session):
        """Test the context follows the most recent intent."""
        session.process_turn("hello")
        session.process_turn("goodbye")

        assert session.context.last_intent == Intent.FAREWELL
        assert session.context.turn_counter == 2

    def test_debug_log(self, session, caplog):
        """Test each turn logs its intent at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="codebot.conversation.session"):
            session.process_turn("hello")
        assert "intent=GREETING" in caplog.text


class TestViews:
    """Tests for read-only views."""

    def test_history_is_a_copy(self, session):
        """Test mutating a returned history does not affect the session."""
        session.process_turn("hello")

        history = session.history()
        history.clear()

        assert len(session.history()) == 2

    def test_history_dicts(self, predictable_session):
        """Test the presentation view."""
        predictable_session.process_turn("hello")
        assert predictable_session.history_dicts() == [
            {"speaker": "USER", "text": "hello"},
            {"speaker": "BOT", "text": "Hello! How can I help you today?"},
        ]

    def test_analytics_start_at_zero(self, session):
        """Test every intent is present with a zero count."""
        analytics = session.topic_analytics()
        assert set(analytics) == {intent.name for intent in Intent}
        assert all(count == 0 for count in analytics.values())

    def test_analytics_is_a_copy(self, session):
        """Test mutating returned analytics does not affect the session."""
        session.topic_analytics()["GREETING"] = 99
        assert session.topic_analytics()["GREETING"] == 0

    def test_most_discussed(self, session):
        """Test ranking by count with declaration-order ties."""
        for text in ["hello", "hi", "help"]:
            session.process_turn(text)

        assert session.most_discussed(3) == [("GREETING", 2), ("HELP", 1), ("FAREWELL", 0)]

    def test_keywords(self, session):
        """Test keyword extraction on raw text."""
        assert session.keywords("I love Python programming!") == ["love", "python", "programming!"]

    def test_classify_does_not_record(self, session):
        """Test classify leaves the session untouched."""
        assert session.classify("Goodbye!") == Intent.FAREWELL
        assert session.turn_count == 0


class TestExport:
    """Tests for conversation export."""

    def test_export_format(self, predictable_session, tmp_path):
        """Test the written log layout."""
        predictable_session.process_turn("hello")
        path = predictable_session.export_conversation(tmp_path / "chat.txt")

        lines = path.read_text(encoding="utf-8").splitlines()

        assert lines[0] == LOG_HEADER
        assert lines[1] == "Date: 2026-01-31 14:05:09"
        assert lines[2] == ""
        assert lines[3] == "USER: hello"
        assert lines[4] == "BOT: Hello! How can I help you today?"
        assert lines[5] == ""
        assert lines[6] == ANALYTICS_HEADER
        assert lines[7] == "GREETING: 1"
        assert len(lines) == 7 + len(Intent)

    def test_export_matches_render(self, session, tmp_path):
        """Test the file holds exactly the rendered text."""
        session.process_turn("hello")
        path = session.export_conversation(tmp_path / "chat.txt")
        assert path.read_text(encoding="utf-8") == session.render_conversation()

    def test_export_logs_success(self, session, tmp_path, caplog):
        """Test a successful export is logged."""
        with caplog.at_level(logging.INFO, logger="codebot.conversation.session"):
            session.export_conversation(tmp_path / "chat.txt")
        assert "Conversation exported" in caplog.text

    def test_export_failure_keeps_session_usable(self, session, tmp_path, caplog):
        """Test a write error is reported and the session carries on."""
        session.process_turn("hello")

        with caplog.at_level(logging.ERROR, logger="codebot.conversation.session"):
            with pytest.raises(ConversationExportError):
                session.export_conversation(tmp_path / "missing" / "chat.txt")

        assert "Conversation export failed" in caplog.text
        assert len(session.history()) == 2

        session.process_turn("bye")
        assert len(session.history()) == 4

    def test_export_error_is_os_error(self, session, tmp_path):
        """Test callers catching OSError also catch export failures."""
        with pytest.raises(OSError):
            session.export_conversation(tmp_path)
