"""
Bot command handling module.

This module contains all chat command processing logic including:
- Command parsing
- Command registry and resolution
- Command dispatch
- Command handlers
- Message routing
"""

from beaconbot.bot.catalog import build_registry
from beaconbot.bot.parser import parse_command
from beaconbot.bot.router import BotContext, handle_message, process_message

__all__ = ["BotContext", "build_registry", "handle_message", "parse_command", "process_message"]
