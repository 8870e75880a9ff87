"""
The bot's command groups.

Response templates take positional ``str.format`` placeholders filled in
by the group's handler.
"""

from beaconbot.bot.commands import (
    handle_block_command,
    handle_current_command,
    handle_state_command,
    handle_validator_command,
)
from beaconbot.bot.registry import Command, CommandGroup, Registry

CURRENT_GROUP = CommandGroup(
    name="current",
    alias="c",
    description="Information about the current head of the chain.",
    commands=(
        Command("slot", "s", "Current head slot", "The current slot is {0}", handle_current_command),
        Command("epoch", "e", "Current head epoch", "The current epoch is {0}", handle_current_command),
        Command(
            "justified", "j", "Latest justified epoch",
            "The current justified epoch is {0}", handle_current_command,
        ),
        Command(
            "finalized", "f", "Latest finalized epoch",
            "The current finalized epoch is {0}", handle_current_command,
        ),
    ),
)

STATE_GROUP = CommandGroup(
    name="state",
    alias="s",
    description="Committee and proposer assignments. Takes an epoch.",
    commands=(
        Command(
            "committees", "c", "Number of committees and assigned validators for an epoch",
            "Epoch {0} has {1} committees with {2} validators", handle_state_command,
        ),
        Command(
            "proposers", "p", "Block proposer for each slot of an epoch",
            "Proposers for epoch {0} (slot: validator):\n{1}", handle_state_command,
        ),
    ),
)

VALIDATOR_GROUP = CommandGroup(
    name="val",
    alias="v",
    description="Information about a validator. Takes a validator index.",
    commands=(
        Command("balance", "b", "Validator balance", "Balance of validator {0} is {1} ETH", handle_validator_command),
        Command(
            "effective", "e", "Validator effective balance",
            "Effective balance of validator {0} is {1} ETH", handle_validator_command,
        ),
        Command("status", "s", "Validator status", "Status of validator {0} is {1}", handle_validator_command),
        Command(
            "activation", "a", "Epoch the validator was activated",
            "Validator {0} was activated in epoch {1}", handle_validator_command,
        ),
    ),
)

BLOCK_GROUP = CommandGroup(
    name="block",
    alias="b",
    description="Information about the block at a slot. Takes a slot.",
    commands=(
        Command("graffiti", "g", "Graffiti of the block", "Graffiti for block {0}: {1}", handle_block_command),
        Command(
            "proposer", "p", "Proposer index of the block",
            "Proposer for block {0} is validator {1}", handle_block_command,
        ),
    ),
)

ALL_GROUPS = (CURRENT_GROUP, STATE_GROUP, VALIDATOR_GROUP, BLOCK_GROUP)


def build_registry() -> Registry:
    """Build the registry of every command group."""
    return Registry(ALL_GROUPS)
