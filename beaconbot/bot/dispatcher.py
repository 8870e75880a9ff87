"""
Command dispatch.

This module turns a resolved command into a reply. It is the one place
where handler errors are converted into messages for the user.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from beaconbot.bot.messages import (
    HelpDocument,
    build_group_help,
    get_backend_unavailable_message,
    get_error_message,
)
from beaconbot.bot.parser import ParsedInvocation
from beaconbot.bot.resolver import CommandFound, HelpRequested, Resolution
from beaconbot.exceptions import BackendUnavailableError, CommandError

if TYPE_CHECKING:
    from beaconbot.services.beacon_client import BeaconClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    """A message to send back: plain text or a help listing."""
    text: Optional[str] = None
    document: Optional[HelpDocument] = None

    @property
    def is_structured(self) -> bool:
        return self.document is not None


async def dispatch(
    resolution: Resolution,
    invocation: ParsedInvocation,
    client: "BeaconClient",
    help_allowed: bool = False,
) -> Optional[Reply]:
    """
    Run a resolved command.

    Args:
        resolution: Result of resolving the invocation
        invocation: The parsed message
        client: Beacon node client handed to the handler
        help_allowed: Whether the chat may receive help listings

    Returns:
        Reply to send, or None to stay silent
    """
    if isinstance(resolution, HelpRequested):
        if not help_allowed:
            return None
        return Reply(document=build_group_help(resolution.group))

    if not isinstance(resolution, CommandFound):
        logger.debug(f"Ignoring unresolved command {invocation.group}.{invocation.command}")
        return None

    group, command = resolution.group, resolution.command
    if command.handler is None:
        logger.error(f"Command {group.name}.{command.name} has no handler")
        return None

    try:
        result = await command.handler(command, invocation.parameters, client)
    except CommandError as e:
        logger.info(f"Rejected {group.name}.{command.name} {list(invocation.parameters)}: {e.message}")
        return Reply(text=e.message)
    except BackendUnavailableError as e:
        logger.error(f"Beacon node unavailable for {group.name}.{command.name}: {e}")
        return Reply(text=get_backend_unavailable_message())
    except Exception:
        logger.exception(f"Error processing command {group.name}.{command.name}")
        return Reply(text=get_error_message())

    if not result:
        return None
    return Reply(text=result)
