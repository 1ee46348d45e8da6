"""
Application settings using Pydantic.

This module provides runtime configuration with environment variable support.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from codebot.config.constants import (
    CONTINUATION_PROBABILITY,
    DEFAULT_BOT_NAME,
    EMPATHY_THRESHOLD,
    ENTHUSIASM_THRESHOLD,
    PERSONAL_SENTIMENT_THRESHOLD,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Settings can be overridden via environment variables prefixed with CODEBOT_
    For example: CODEBOT_BOT_NAME=Ada
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow other env vars without error
    )

    # Identity
    bot_name: str = Field(
        default=DEFAULT_BOT_NAME,
        description="Name the bot introduces itself with",
        min_length=1,
    )

    # Knowledge base
    knowledge_base_path: Optional[Path] = Field(
        default=None,
        description="key|response file seeding pattern memory (embedded defaults if unset)",
    )

    use_pattern_memory: bool = Field(
        default=False,
        description="Reuse pattern memory entries as replies",
    )

    # Tone
    enthusiasm_threshold: float = Field(
        default=ENTHUSIASM_THRESHOLD,
        description="Positive score above which an enthusiastic marker is added",
        ge=0.0,
        le=1.0,
    )

    empathy_threshold: float = Field(
        default=EMPATHY_THRESHOLD,
        description="Negative score above which an empathetic marker is added",
        ge=0.0,
        le=1.0,
    )

    personal_sentiment_threshold: float = Field(
        default=PERSONAL_SENTIMENT_THRESHOLD,
        description="Sentiment score that switches PERSONAL replies",
        ge=0.0,
        le=1.0,
    )

    # Context
    continuation_probability: float = Field(
        default=CONTINUATION_PROBABILITY,
        description="Chance of a continuity connector on repeated intents",
        ge=0.0,
        le=1.0,
    )

    # Runtime
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for reproducible replies",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )
