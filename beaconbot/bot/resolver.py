"""
Command resolution.

Matches a parsed invocation against the registry. The group is looked up
first; an unknown group stops resolution before the command is examined.
"""

from dataclasses import dataclass
from typing import Union

from beaconbot.bot.parser import ParsedInvocation
from beaconbot.bot.registry import HELP_COMMAND, Command, CommandGroup, Registry


@dataclass(frozen=True)
class GroupNotFound:
    """No group matches the group token."""


@dataclass(frozen=True)
class CommandNotFound:
    """The group exists but no command in it matches."""
    group: CommandGroup


@dataclass(frozen=True)
class CommandFound:
    group: CommandGroup
    command: Command


@dataclass(frozen=True)
class HelpRequested:
    """``help`` was asked for within a group."""
    group: CommandGroup


Resolution = Union[GroupNotFound, CommandNotFound, CommandFound, HelpRequested]


def resolve(registry: Registry, invocation: ParsedInvocation) -> Resolution:
    group = registry.lookup_group(invocation.group)
    if group is None:
        return GroupNotFound()

    command = registry.lookup_command(group, invocation.command)
    if command is None:
        return CommandNotFound(group)
    if command is HELP_COMMAND:
        return HelpRequested(group)
    return CommandFound(group, command)
