#!/usr/bin/env python3
"""
Beacon chain chat bot entry point.

Usage:
    beaconbot --token <telegram bot token> --api-url <beacon node url>

Both options may instead be given through the environment (or a .env file):
    - TELEGRAM_BOT_TOKEN: Telegram bot token
    - BEACON_API_URL: Beacon node API address
    - ALLOWED_CHAT_IDS: Comma-separated chats the bot answers in
    - HELP_CHAT_IDS: Comma-separated chats that may receive help listings
    - REQUEST_TIMEOUT: Beacon node request timeout in seconds (default 10)
    - LOG_LEVEL: Logging level (default INFO)
"""

import argparse
import logging
import sys
from typing import List, Optional

from beaconbot.bot import BotContext, build_registry
from beaconbot.config import Config, config
from beaconbot.services import BeaconClient, build_application


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
        force=True,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="beaconbot",
        description="Chat bot answering beacon chain queries.",
    )
    parser.add_argument(
        "--token",
        default=Config.TELEGRAM_BOT_TOKEN,
        help="Bot token (env: TELEGRAM_BOT_TOKEN)",
    )
    parser.add_argument(
        "--api-url",
        default=Config.BEACON_API_URL,
        help="Beacon node API address (env: BEACON_API_URL)",
    )
    args = parser.parse_args(argv)

    Config.TELEGRAM_BOT_TOKEN = args.token or ""
    Config.BEACON_API_URL = args.api_url or ""
    try:
        Config.validate()
    except ValueError as e:
        parser.error(str(e))
    return args


def create_context() -> BotContext:
    """
    Build the registry, beacon client and chat policy from configuration.

    The bot id is filled in once the chat client has logged in.
    """
    return BotContext(
        bot_id="",
        registry=build_registry(),
        client=BeaconClient(config.BEACON_API_URL, timeout=config.request_timeout()),
        allowed_chat_ids=config.ALLOWED_CHAT_IDS,
        help_chat_ids=config.HELP_CHAT_IDS,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(config.LOG_LEVEL)
    logger = logging.getLogger("beaconbot")

    if not config.all_chat_ids():
        logger.warning("No ALLOWED_CHAT_IDS or HELP_CHAT_IDS configured, every message will be ignored")

    application = build_application(args.token, create_context())
    logger.info(f"Starting bot against beacon node {config.BEACON_API_URL}. Press CTRL-C to exit.")
    application.run_polling()
    return 0


if __name__ == "__main__":
    sys.exit(main())
