"""
Bot command handlers.

This module contains one handler per command group. Each handler checks
its own parameters, queries the beacon node and formats the reply with
the command's response template.
"""

import logging
from typing import TYPE_CHECKING, Sequence

from beaconbot.bot.messages import get_numeric_parameter_message
from beaconbot.exceptions import CommandError
from beaconbot.models.chain import FAR_FUTURE_EPOCH, MAX_UINT64, format_gwei

if TYPE_CHECKING:
    from beaconbot.bot.registry import Command
    from beaconbot.services.beacon_client import BeaconClient

logger = logging.getLogger(__name__)


def parse_numeric_parameter(parameters: Sequence[str], what: str, command: str) -> int:
    """
    Read the single numeric parameter of a command.

    Args:
        parameters: Parameters from the message
        what: What the number is, for the error message (e.g. "slot")
        command: Command name, for the error message

    Returns:
        The parameter as a non-negative integer

    Raises:
        CommandError: If there is not exactly one parameter or it is not a
            decimal number between 0 and 2**64-1
    """
    if len(parameters) != 1 or not parameters[0].isdecimal():
        raise CommandError(get_numeric_parameter_message(what, command))
    value = int(parameters[0])
    if value > MAX_UINT64:
        raise CommandError(get_numeric_parameter_message(what, command))
    return value


async def handle_current_command(
    command: "Command", parameters: Sequence[str], client: "BeaconClient"
) -> str:
    """
    Handle current.* commands - facts about the chain head.

    Parameters are ignored.
    """
    if command.name in ("slot", "epoch"):
        head = await client.get_chain_head()
        value = head.slot if command.name == "slot" else head.epoch
        return command.response_text.format(value)

    checkpoints = await client.get_finality_checkpoints()
    if command.name == "justified":
        return command.response_text.format(checkpoints.current_justified.epoch)
    if command.name == "finalized":
        return command.response_text.format(checkpoints.finalized.epoch)
    return ""


async def handle_state_command(
    command: "Command", parameters: Sequence[str], client: "BeaconClient"
) -> str:
    """
    Handle state.* commands - committee and proposer assignments for an epoch.

    Args:
        command: Resolved command
        parameters: Exactly one epoch number
        client: Beacon node client

    Returns:
        Reply text
    """
    epoch = parse_numeric_parameter(parameters, "epoch", command.name)

    if command.name == "committees":
        committees = await client.get_committees(epoch)
        if not committees:
            return f"No committees found for epoch {epoch}"
        validator_count = sum(len(c.validators) for c in committees)
        return command.response_text.format(epoch, len(committees), validator_count)

    if command.name == "proposers":
        duties = await client.get_proposer_duties(epoch)
        if not duties:
            return f"No proposer duties found for epoch {epoch}"
        listing = "\n".join(f"{duty.slot}: {duty.validator_index}" for duty in duties)
        return command.response_text.format(epoch, listing)
    return ""


async def handle_validator_command(
    command: "Command", parameters: Sequence[str], client: "BeaconClient"
) -> str:
    """
    Handle val.* commands - a single validator in the head state.

    Args:
        command: Resolved command
        parameters: Exactly one validator index
        client: Beacon node client

    Returns:
        Reply text
    """
    index = parse_numeric_parameter(parameters, "validator index", command.name)
    validator = await client.get_validator(index)
    if validator is None:
        return f"No validator found with index {index}"

    if command.name == "balance":
        return command.response_text.format(index, format_gwei(validator.balance))
    if command.name == "effective":
        return command.response_text.format(index, format_gwei(validator.effective_balance))
    if command.name == "status":
        status = validator.status
        if validator.slashed:
            status = f"{status} (slashed)"
        return command.response_text.format(index, status)
    if command.name == "activation":
        if validator.activation_epoch == FAR_FUTURE_EPOCH:
            return f"Validator {index} is not yet scheduled for activation"
        return command.response_text.format(index, validator.activation_epoch)
    return ""


async def handle_block_command(
    command: "Command", parameters: Sequence[str], client: "BeaconClient"
) -> str:
    """
    Handle block.* commands - the canonical block at a slot.

    Args:
        command: Resolved command
        parameters: Exactly one slot number
        client: Beacon node client

    Returns:
        Reply text
    """
    slot = parse_numeric_parameter(parameters, "slot", command.name)
    block = await client.get_block(slot)
    if block is None:
        return f"No block found for slot {slot}"

    if command.name == "graffiti":
        graffiti = block.graffiti_text
        if not graffiti:
            return f"Graffiti for block {slot} is empty"
        logger.debug(f"Graffiti for block {slot}: {graffiti!r}")
        return command.response_text.format(slot, graffiti)
    if command.name == "proposer":
        return command.response_text.format(slot, block.proposer_index)
    return ""
