"""
Configuration module.

This module provides configuration management for the bot.
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from beaconbot.config.settings import Config, parse_chat_ids

# Create a global config instance
config = Config()

__all__ = ["Config", "config", "parse_chat_ids"]
