"""
Services layer.

This module contains the clients the bot talks to:
- Beacon node client for chain queries
- Telegram client for receiving and sending messages
"""

from beaconbot.services.beacon_client import BeaconClient
from beaconbot.services.telegram_client import build_application, send_structured, send_text

__all__ = [
    "BeaconClient",
    "build_application",
    "send_structured",
    "send_text",
]
