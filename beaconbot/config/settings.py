"""
Application settings and configuration.

This module defines the configuration class for managing environment variables.
"""

import os
from typing import FrozenSet, Optional


def parse_chat_ids(value: Optional[str]) -> FrozenSet[str]:
    """
    Parse a comma-separated list of chat IDs.

    Args:
        value: Raw value, e.g. "-1001234,5678"

    Returns:
        Set of chat IDs as strings (blank entries are skipped)
    """
    if not value:
        return frozenset()
    return frozenset(part.strip() for part in value.split(",") if part.strip())


class Config:
    """Configuration class for managing environment variables."""

    TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
    BEACON_API_URL: str = os.getenv("BEACON_API_URL", "")
    # Chats the bot answers in; help chats are always included
    ALLOWED_CHAT_IDS: FrozenSet[str] = parse_chat_ids(os.getenv("ALLOWED_CHAT_IDS"))
    # Chats that may receive help listings
    HELP_CHAT_IDS: FrozenSet[str] = parse_chat_ids(os.getenv("HELP_CHAT_IDS"))
    # Seconds; parsed by request_timeout()
    REQUEST_TIMEOUT: str = os.getenv("REQUEST_TIMEOUT", "10")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration.

        Checks that all required settings are present.

        Returns:
            True if validation succeeds

        Raises:
            ValueError: If any required settings are missing or invalid
        """
        required = ["TELEGRAM_BOT_TOKEN", "BEACON_API_URL"]
        missing = [var for var in required if not getattr(cls, var)]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")
        cls.request_timeout()
        return True

    @classmethod
    def request_timeout(cls) -> float:
        """
        Beacon node request timeout.

        Returns:
            Timeout in seconds

        Raises:
            ValueError: If REQUEST_TIMEOUT is not a positive number
        """
        try:
            timeout = float(cls.REQUEST_TIMEOUT)
        except (TypeError, ValueError):
            raise ValueError(f"REQUEST_TIMEOUT must be a number of seconds, got {cls.REQUEST_TIMEOUT!r}") from None
        if timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds")
        return timeout

    @classmethod
    def all_chat_ids(cls) -> FrozenSet[str]:
        """Chats the bot listens to: the allow-list plus the help chats."""
        return cls.ALLOWED_CHAT_IDS | cls.HELP_CHAT_IDS
