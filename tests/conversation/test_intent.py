"""Tests for IntentClassifier."""

import re

import pytest

from codebot.conversation.intent import INTENT_RULES, Intent, IntentClassifier, IntentRule


class TestClassify:
    """Tests for rule-based classification."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("hello there", Intent.GREETING),
            ("good morning everyone", Intent.GREETING),
            ("whats up", Intent.GREETING),
            ("goodbye for now", Intent.FAREWELL),
            ("talk to you later", Intent.FAREWELL),
            ("i need help", Intent.HELP),
            ("what time is it", Intent.TIME),
            ("what is the date today", Intent.TIME),
            ("i love python", Intent.TECHNOLOGY),
            ("tell me about machine learning", Intent.TECHNOLOGY),
            ("my homework is due", Intent.EDUCATION),
            ("where do penguins live", Intent.QUESTION),
            ("could you explain that", Intent.QUESTION),
            ("my name is alex", Intent.PERSONAL),
            ("im feeling tired", Intent.PERSONAL),
            ("xyz", Intent.UNKNOWN),
        ],
    )
    def test_examples(self, classifier, text, expected):
        """Test representative inputs."""
        assert classifier.classify(text) == expected

    def test_greeting_beats_question(self, classifier):
        """Test "how are you" is a greeting, not a question."""
        assert classifier.classify("how are you") == Intent.GREETING

    def test_time_beats_interrogative(self, classifier):
        """Test time words pre-empt the interrogative-word rule."""
        assert classifier.classify("what time is it") == Intent.TIME

    def test_farewell_beats_time(self, classifier):
        """Test "now" in a farewell does not make it a time request."""
        assert classifier.classify("bye now") == Intent.FAREWELL

    def test_word_boundaries(self, classifier):
        """Test "hi" inside another word is not a greeting."""
        assert classifier.classify("this thing") == Intent.UNKNOWN

    def test_question_mark_fallback(self, classifier):
        """Test unmatched text with "?" is a question."""
        assert classifier.classify("pizza?") == Intent.QUESTION

    def test_long_input_fallback(self, classifier):
        """Test unmatched text over ten words is personal."""
        text = "one two three four five six seven eight nine ten eleven"
        assert classifier.classify(text) == Intent.PERSONAL

    def test_ten_words_is_unknown(self, classifier):
        """Test exactly ten unmatched words stay unknown."""
        text = "one two three four five six seven eight nine ten"
        assert classifier.classify(text) == Intent.UNKNOWN

    def test_empty_is_unknown(self, classifier):
        """Test empty text."""
        assert classifier.classify("") == Intent.UNKNOWN

    def test_deterministic(self, classifier):
        """Test repeated classification gives the same intent."""
        results = {classifier.classify("can you help me with java") for _ in range(20)}
        assert results == {Intent.HELP}


class TestRuleTable:
    """Tests for the ordered rule table."""

    def test_priority_order(self, classifier):
        """Test the documented priority."""
        assert classifier.priority == [
            Intent.GREETING,
            Intent.FAREWELL,
            Intent.HELP,
            Intent.TIME,
            Intent.TECHNOLOGY,
            Intent.EDUCATION,
            Intent.QUESTION,
            Intent.PERSONAL,
        ]

    def test_matching_rule(self, classifier):
        """Test the first matching rule is returned."""
        rule = classifier.matching_rule("hello what time is it")
        assert rule is not None
        assert rule.intent == Intent.GREETING

    def test_no_matching_rule(self, classifier):
        """Test None when nothing matches."""
        assert classifier.matching_rule("xyz") is None

    def test_custom_order_changes_result(self):
        """Test reordering rules changes which intent wins."""
        by_intent = {rule.intent: rule for rule in INTENT_RULES}
        question_first = IntentClassifier(
            [by_intent[Intent.QUESTION], by_intent[Intent.TIME]]
        )
        assert question_first.classify("what time is it") == Intent.QUESTION

    def test_duplicate_intents_rejected(self):
        """Test an intent cannot appear twice."""
        rule = IntentRule(Intent.HELP, (re.compile(r"\bhelp\b"),))
        with pytest.raises(ValueError):
            IntentClassifier([rule, rule])
