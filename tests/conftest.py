"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import pytest

from beaconbot.bot.catalog import build_registry
from beaconbot.bot.registry import Command, CommandGroup, Registry
from beaconbot.bot.router import BotContext
from beaconbot.models.chain import BlockSummary
from beaconbot.services.beacon_client import BeaconClient

ALLOWED_CHAT = "1001"
HELP_CHAT = "2002"
OTHER_CHAT = "3003"
BOT_ID = "999"
USER_ID = "42"


async def echo_handler(command, parameters, client):
    """Handler that reports what it was called with."""
    return f"{command.name}:{','.join(parameters)}"


@pytest.fixture
def beacon_client():
    """Beacon client double with async methods."""
    return AsyncMock(spec=BeaconClient)


@pytest.fixture
def sample_registry():
    """Small registry with one aliased group."""
    block = CommandGroup(
        name="block",
        alias="b",
        description="Block things",
        commands=(
            Command("graffiti", "g", "Graffiti of the block", "Graffiti for block {0}: {1}", echo_handler),
            Command("proposer", "p", "Proposer of the block", "Proposer for block {0} is {1}", echo_handler),
        ),
    )
    plain = CommandGroup(
        name="plain",
        commands=(Command("only", description="No alias", handler=echo_handler),),
    )
    return Registry([block, plain])


@pytest.fixture
def registry():
    """The bot's real registry."""
    return build_registry()


@pytest.fixture
def bot_context(registry, beacon_client):
    return BotContext(
        bot_id=BOT_ID,
        registry=registry,
        client=beacon_client,
        allowed_chat_ids=frozenset({ALLOWED_CHAT}),
        help_chat_ids=frozenset({HELP_CHAT}),
    )


@pytest.fixture
def sample_block():
    return BlockSummary(
        slot=12345,
        proposer_index=777,
        graffiti=b"prysm".ljust(32, b"\x00"),
    )
