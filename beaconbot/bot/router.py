"""
Command routing logic.

This module filters incoming messages and routes them to the parser,
resolver and dispatcher, then hands the reply to the chat client.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Callable, FrozenSet, Optional

from beaconbot.bot.dispatcher import Reply, dispatch
from beaconbot.bot.messages import HelpDocument, build_full_help, get_pong_message
from beaconbot.bot.parser import parse_command, strip_prefix
from beaconbot.bot.registry import HELP_TOKEN, Registry
from beaconbot.bot.resolver import resolve

if TYPE_CHECKING:
    from beaconbot.services.beacon_client import BeaconClient

logger = logging.getLogger(__name__)

PING_LITERAL = "ping"


@dataclass
class BotContext:
    """Everything a message needs to be processed."""
    bot_id: str
    registry: Registry
    client: "BeaconClient"
    allowed_chat_ids: FrozenSet[str] = field(default_factory=frozenset)
    help_chat_ids: FrozenSet[str] = field(default_factory=frozenset)

    def is_allowed(self, chat_id: str) -> bool:
        return chat_id in self.allowed_chat_ids or chat_id in self.help_chat_ids

    def is_help_allowed(self, chat_id: str) -> bool:
        return chat_id in self.help_chat_ids


async def process_message(
    chat_id: str,
    author_id: str,
    message_text: str,
    context: BotContext,
) -> Optional[Reply]:
    """
    Work out the reply to a chat message.

    Args:
        chat_id: Chat the message arrived in
        author_id: Sender of the message
        message_text: Message text
        context: Registry, beacon client and chat policy

    Returns:
        Reply to send, or None if the bot should stay silent
    """
    if not context.is_allowed(chat_id):
        return None
    if author_id == context.bot_id:
        return None

    body = strip_prefix(message_text)
    if body is None:
        return None

    if body == PING_LITERAL:
        return Reply(text=get_pong_message())
    if body == HELP_TOKEN:
        if not context.is_help_allowed(chat_id):
            return None
        return Reply(document=build_full_help(context.registry.groups))

    invocation = parse_command(message_text)
    if invocation is None:
        return None

    resolution = resolve(context.registry, invocation)
    logger.info(
        f"Processing {invocation.group}.{invocation.command} from chat_id {chat_id}: "
        f"{type(resolution).__name__}"
    )
    return await dispatch(
        resolution,
        invocation,
        context.client,
        help_allowed=context.is_help_allowed(chat_id),
    )


async def handle_message(
    chat_id: str,
    author_id: str,
    message_text: str,
    context: BotContext,
    send_text_func: Callable[[str, str], Awaitable[bool]],
    send_structured_func: Callable[[str, HelpDocument], Awaitable[bool]],
) -> bool:
    """
    Process a chat message and send the reply, if any.

    Args:
        chat_id: Chat the message arrived in
        author_id: Sender of the message
        message_text: Message text
        context: Registry, beacon client and chat policy
        send_text_func: Sends plain text (chat_id, text)
        send_structured_func: Sends a help listing (chat_id, document)

    Returns:
        False if a reply could not be sent, True otherwise
    """
    reply = await process_message(chat_id, author_id, message_text, context)
    if reply is None:
        return True

    if reply.is_structured:
        sent = await send_structured_func(chat_id, reply.document)
    else:
        sent = await send_text_func(chat_id, reply.text)
    if not sent:
        logger.error(f"Failed to deliver reply to chat_id {chat_id} for {message_text!r}")
    return sent
