"""
Chatbot constants.

Thresholds, probabilities and fixed phrase lists shared by the response
pipeline. Runtime overrides go through ``codebot.config.settings``.
"""

# ==============================================================================
# Identity
# ==============================================================================

DEFAULT_BOT_NAME = "CodeBot"
"""Name substituted for the {name} placeholder and used in introductions."""

EMPTY_INPUT_PROMPT = "I didn't catch that. Could you please say something?"
"""Returned for empty/blank input. Session state is left untouched."""

TIME_FORMAT = "%H:%M:%S"
"""Format of the {time} placeholder and of time sentences."""

EXPORT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
"""Format of the Date: header in conversation exports."""

DEFAULT_EXPORT_FILENAME = "chatbot_conversation_%Y%m%d_%H%M%S.txt"
"""strftime pattern for the export file name when none is given."""

# ==============================================================================
# Intent Classification
# ==============================================================================

LONG_INPUT_WORD_COUNT = 10
"""Unmatched inputs with more words than this are treated as PERSONAL."""

# ==============================================================================
# Sentiment / Tone
# ==============================================================================

NEUTRAL_POSITIVE = 0.5
NEUTRAL_NEGATIVE = 0.5
NEUTRAL_NEUTRAL = 1.0
"""Score returned when no lexicon word is present. Not a probability
distribution: positive + negative + neutral != 1 here."""

PERSONAL_SENTIMENT_THRESHOLD = 0.6
"""Above this, PERSONAL replies switch to an affirming or empathetic sentence."""

ENTHUSIASM_THRESHOLD = 0.7
"""Positive score above which an enthusiastic marker is appended."""

EMPATHY_THRESHOLD = 0.7
"""Negative score above which an empathetic marker is appended."""

ENTHUSIASTIC_MARKERS = [" 😊", " That's great!", " I love your enthusiasm!", " Awesome!"]
EMPATHETIC_MARKERS = [
    " I understand.",
    " I'm here if you need to talk.",
    " Things will get better.",
    " Take care.",
]

# ==============================================================================
# Context
# ==============================================================================

CONTINUATION_PROBABILITY = 0.3
"""Chance of prefixing a connector when the same intent repeats."""

CONTINUATION_CONNECTORS = ["Also, ", "Additionally, ", "By the way, ", "Furthermore, "]

# ==============================================================================
# Pattern Memory
# ==============================================================================

PATTERN_KEY_TOKENS = 3
"""Number of leading words forming a recorded interaction key."""

KNOWLEDGE_BASE_SEPARATOR = "|"
