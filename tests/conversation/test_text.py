"""Tests for TextNormalizer and Tokenizer."""

import pytest

from codebot.conversation.text import STOP_WORDS


class TestNormalize:
    """Tests for text normalization."""

    def test_lowercases_and_trims(self, normalizer):
        """Test case folding and trimming."""
        assert normalizer.normalize("  Hello There  ") == "hello there"

    def test_collapses_whitespace(self, normalizer):
        """Test runs of whitespace become single spaces."""
        assert normalizer.normalize("what\t is \n\n up") == "what is up"

    def test_strips_disallowed_characters(self, normalizer):
        """Test only [a-z0-9 ?!.] survive."""
        assert normalizer.normalize("I'm #1, really?!.") == "im 1 really?!."

    def test_none_is_empty(self, normalizer):
        """Test None input gives empty string."""
        assert normalizer.normalize(None) == ""

    def test_only_punctuation_is_empty(self, normalizer):
        """Test input made entirely of removed characters."""
        assert normalizer.normalize(" ,;: ") == ""

    def test_no_double_spaces_after_removal(self, normalizer):
        """Test a removed token does not leave a double space."""
        assert normalizer.normalize("hello - world") == "hello world"

    @pytest.mark.parametrize("raw", ["Héllo wörld", "CAFÉ", "tab\there"])
    def test_output_alphabet(self, normalizer, raw):
        """Test every output character is in the allowed set."""
        allowed = set("abcdefghijklmnopqrstuvwxyz0123456789 ?!.")
        assert set(normalizer.normalize(raw)) <= allowed


class TestTokenize:
    """Tests for tokenization."""

    def test_drops_stop_words(self, tokenizer):
        """Test stop words are filtered out."""
        assert tokenizer.tokenize("the cat is on the mat") == ["cat", "mat"]

    def test_keeps_order_and_duplicates(self, tokenizer):
        """Test order preserved, duplicates retained."""
        assert tokenizer.tokenize("great great bad") == ["great", "great", "bad"]

    def test_empty_text(self, tokenizer):
        """Test empty input has no tokens."""
        assert tokenizer.tokenize("") == []

    def test_stop_word_set_size(self):
        """Test the stop-word list is the small fixed set."""
        assert 20 <= len(STOP_WORDS) <= 30
        assert "the" in STOP_WORDS

    def test_extract_keywords_requires_length(self, tokenizer):
        """Test keywords are tokens longer than three characters."""
        assert tokenizer.extract_keywords("i like java and python a lot") == [
            "like",
            "java",
            "python",
        ]

    def test_words_keeps_stop_words(self, tokenizer):
        """Test plain word split includes stop words."""
        assert tokenizer.words("what is the time") == ["what", "is", "the", "time"]
