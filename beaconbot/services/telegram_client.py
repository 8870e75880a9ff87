"""
Telegram bot client service.

This module provides functionality for receiving messages from and sending
replies to Telegram chats.
"""

import logging
from functools import partial

from telegram import Bot, Update
from telegram.error import TelegramError
from telegram.ext import Application, ContextTypes, MessageHandler, filters

from beaconbot.bot.messages import HelpDocument, render_help_html
from beaconbot.bot.router import BotContext, handle_message

logger = logging.getLogger(__name__)

BOT_CONTEXT_KEY = "bot_context"


async def send_text(bot: Bot, chat_id: str, message: str) -> bool:
    """
    Send a plain text message to a chat.

    Args:
        bot: Telegram bot
        chat_id: Telegram chat ID to send message to
        message: Message text to send

    Returns:
        True if message sent successfully, False otherwise
    """
    try:
        await bot.send_message(chat_id=chat_id, text=message)
        logger.info(f"Successfully sent message to chat {chat_id}")
        return True
    except TelegramError as e:
        logger.error(f"Telegram error sending message to chat {chat_id}: {e}")
        return False


async def send_structured(bot: Bot, chat_id: str, document: HelpDocument) -> bool:
    """
    Send a help listing to a chat, rendered as HTML.

    Args:
        bot: Telegram bot
        chat_id: Telegram chat ID to send message to
        document: Help listing to send

    Returns:
        True if message sent successfully, False otherwise
    """
    try:
        await bot.send_message(
            chat_id=chat_id,
            text=render_help_html(document),
            disable_notification=True,
            parse_mode="HTML",
        )
        logger.info(f"Successfully sent help to chat {chat_id}")
        return True
    except TelegramError as e:
        logger.error(f"Telegram error sending help to chat {chat_id}: {e}")
        return False


async def on_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Telegram update callback: route a text message through the bot."""
    message = update.effective_message
    if message is None or not message.text or update.effective_chat is None:
        return

    author = update.effective_user
    author_id = str(author.id) if author else ""
    bot_context: BotContext = context.application.bot_data[BOT_CONTEXT_KEY]

    await handle_message(
        str(update.effective_chat.id),
        author_id,
        message.text,
        bot_context,
        partial(send_text, context.bot),
        partial(send_structured, context.bot),
    )


async def _post_init(application: Application) -> None:
    bot_context: BotContext = application.bot_data[BOT_CONTEXT_KEY]
    bot_context.bot_id = str(application.bot.id)
    logger.info(f"Bot is now running as {application.bot.username}")


async def _post_shutdown(application: Application) -> None:
    bot_context: BotContext = application.bot_data[BOT_CONTEXT_KEY]
    await bot_context.client.aclose()
    logger.info("Closed beacon node client")


def build_application(bot_token: str, bot_context: BotContext) -> Application:
    """
    Build the Telegram application that feeds messages to the bot.

    Args:
        bot_token: Telegram bot token
        bot_context: Registry, beacon client and chat policy

    Returns:
        Application ready for ``run_polling``
    """
    application = (
        Application.builder()
        .token(bot_token)
        .post_init(_post_init)
        .post_shutdown(_post_shutdown)
        .build()
    )
    application.bot_data[BOT_CONTEXT_KEY] = bot_context
    # New messages only; edits would answer the same command twice
    application.add_handler(MessageHandler(filters.UpdateType.MESSAGES & filters.TEXT, on_message))
    return application
