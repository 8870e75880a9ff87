"""Tests for the Telegram client service."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from telegram import Chat, Message, Update
from telegram.error import NetworkError
from telegram.ext import MessageHandler

from beaconbot.bot.messages import HelpDocument, HelpField
from beaconbot.services import telegram_client
from beaconbot.services.telegram_client import (
    BOT_CONTEXT_KEY,
    build_application,
    on_message,
    send_structured,
    send_text,
)
from tests.conftest import ALLOWED_CHAT, USER_ID


@pytest.fixture
def bot():
    bot = MagicMock()
    bot.send_message = AsyncMock()
    return bot


@pytest.mark.asyncio
async def test_send_text(bot):
    assert await send_text(bot, ALLOWED_CHAT, "Pong!")
    bot.send_message.assert_awaited_once_with(chat_id=ALLOWED_CHAT, text="Pong!")


@pytest.mark.asyncio
async def test_send_text_failure_is_swallowed(bot):
    bot.send_message.side_effect = NetworkError("timed out")
    assert not await send_text(bot, ALLOWED_CHAT, "Pong!")


@pytest.mark.asyncio
async def test_send_structured_renders_html(bot):
    document = HelpDocument(title="block (b) commands", fields=[HelpField("!block.graffiti (g)", "<graffiti>")])

    assert await send_structured(bot, ALLOWED_CHAT, document)

    kwargs = bot.send_message.await_args.kwargs
    assert kwargs["parse_mode"] == "HTML"
    assert "<b>block (b) commands</b>" in kwargs["text"]
    assert "&lt;graffiti&gt;" in kwargs["text"]


@pytest.mark.asyncio
async def test_send_structured_failure_is_swallowed(bot):
    bot.send_message.side_effect = NetworkError("timed out")
    assert not await send_structured(bot, ALLOWED_CHAT, HelpDocument(title="x"))


def _update(text, chat_id=1001, user_id=42):
    update = MagicMock()
    update.effective_message.text = text
    update.effective_chat.id = chat_id
    update.effective_user.id = user_id
    return update


@pytest.mark.asyncio
async def test_on_message_routes_text(bot_context, bot):
    context = MagicMock()
    context.bot = bot
    context.application.bot_data = {BOT_CONTEXT_KEY: bot_context}

    with patch.object(telegram_client, "handle_message", AsyncMock(return_value=True)) as handle:
        await on_message(_update("!ping"), context)

    args = handle.await_args.args
    assert args[:4] == (ALLOWED_CHAT, USER_ID, "!ping", bot_context)


@pytest.mark.asyncio
async def test_on_message_ignores_updates_without_text(bot_context):
    context = MagicMock()
    context.application.bot_data = {BOT_CONTEXT_KEY: bot_context}

    with patch.object(telegram_client, "handle_message", AsyncMock()) as handle:
        await on_message(_update(None), context)

    handle.assert_not_awaited()


def test_build_application(bot_context):
    application = build_application("123456:TEST-TOKEN", bot_context)

    assert application.bot_data[BOT_CONTEXT_KEY] is bot_context
    handlers = application.handlers[0]
    assert len(handlers) == 1
    assert isinstance(handlers[0], MessageHandler)


def test_edited_messages_are_not_answered(bot_context):
    handler = build_application("123456:TEST-TOKEN", bot_context).handlers[0][0]
    message = Message(
        message_id=1,
        date=datetime.now(timezone.utc),
        chat=Chat(id=1001, type=Chat.GROUP),
        text="!ping",
    )

    assert handler.check_update(Update(update_id=1, message=message))
    assert not handler.check_update(Update(update_id=2, edited_message=message))


@pytest.mark.asyncio
async def test_post_shutdown_closes_client(bot_context):
    application = MagicMock()
    application.bot_data = {BOT_CONTEXT_KEY: bot_context}

    await telegram_client._post_shutdown(application)

    bot_context.client.aclose.assert_awaited_once()
