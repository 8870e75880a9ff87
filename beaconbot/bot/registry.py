"""
Command registry.

This module holds the command data model and the read-only lookup table
built from it once at startup.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from beaconbot.exceptions import RegistryError

if TYPE_CHECKING:
    from beaconbot.services.beacon_client import BeaconClient

HELP_TOKEN = "help"

# (command, parameters, client) -> reply text
Handler = Callable[["Command", Sequence[str], "BeaconClient"], Awaitable[str]]


@dataclass(frozen=True)
class Command:
    """A single command within a group."""
    name: str
    alias: str = ""
    description: str = ""
    response_text: str = ""
    handler: Optional[Handler] = field(default=None, compare=False, repr=False)

    def tokens(self) -> List[str]:
        """Tokens that select this command: the name and, if set, the alias."""
        return [self.name, self.alias] if self.alias else [self.name]


@dataclass(frozen=True)
class CommandGroup:
    """A named group of commands, e.g. ``block``."""
    name: str
    alias: str = ""
    description: str = ""
    commands: Tuple[Command, ...] = ()

    def tokens(self) -> List[str]:
        return [self.name, self.alias] if self.alias else [self.name]


# Stands in for "help" in every group; never stored in a group's commands
HELP_COMMAND = Command(
    name=HELP_TOKEN,
    description="List the commands in this group",
)


class Registry:
    """
    Read-only lookup table of command groups.

    Groups and commands are indexed by both canonical name and alias.
    Conflicting entries are rejected when the registry is built.
    """

    def __init__(self, groups: Iterable[CommandGroup]):
        self._groups: Tuple[CommandGroup, ...] = tuple(groups)
        self._group_index: Dict[str, CommandGroup] = {}
        self._command_index: Dict[str, Dict[str, Command]] = {}

        for group in self._groups:
            if not group.name:
                raise RegistryError("Command group name must not be empty")
            for token in group.tokens():
                if token in self._group_index:
                    raise RegistryError(
                        f"Command group token '{token}' of '{group.name}' is already "
                        f"used by '{self._group_index[token].name}'"
                    )
                self._group_index[token] = group
            self._command_index[group.name] = self._index_commands(group)

    @staticmethod
    def _index_commands(group: CommandGroup) -> Dict[str, Command]:
        index: Dict[str, Command] = {}
        for command in group.commands:
            if not command.name:
                raise RegistryError(f"Command in group '{group.name}' has an empty name")
            for token in command.tokens():
                if token == HELP_TOKEN:
                    raise RegistryError(
                        f"Command '{command.name}' in group '{group.name}' may not use "
                        f"the reserved token '{HELP_TOKEN}'"
                    )
                if token in index:
                    raise RegistryError(
                        f"Command token '{token}' of '{group.name}.{command.name}' is "
                        f"already used by '{group.name}.{index[token].name}'"
                    )
                index[token] = command
        return index

    @property
    def groups(self) -> Tuple[CommandGroup, ...]:
        """All groups, in registration order."""
        return self._groups

    def lookup_group(self, token: str) -> Optional[CommandGroup]:
        """
        Find a group by canonical name or alias.

        Matching is exact and case-sensitive.

        Returns:
            The group, or None if no group matches
        """
        return self._group_index.get(token)

    def lookup_command(self, group: CommandGroup, token: str) -> Optional[Command]:
        """
        Find a command in a group by canonical name or alias.

        ``help`` resolves in every group to HELP_COMMAND.

        Returns:
            The command, HELP_COMMAND, or None if nothing matches
        """
        if token == HELP_TOKEN:
            return HELP_COMMAND
        return self._command_index.get(group.name, {}).get(token)
