"""
Message templates for bot responses.

This module contains the fixed replies and the help listings.
"""

import html
from dataclasses import dataclass, field
from typing import Iterable, List

from beaconbot.bot.parser import COMMAND_PREFIX, GROUP_SEPARATOR
from beaconbot.bot.registry import HELP_TOKEN, Command, CommandGroup


@dataclass
class HelpField:
    """One entry in a help listing."""
    name: str
    value: str


@dataclass
class HelpDocument:
    """Structured help listing, rendered by the chat client."""
    title: str
    description: str = ""
    fields: List[HelpField] = field(default_factory=list)


def get_pong_message() -> str:
    """Get reply for the ping literal."""
    return "Pong!"


def get_backend_unavailable_message() -> str:
    """Get message when the beacon node cannot be reached."""
    return "The beacon node is temporarily unavailable, please try again later."


def get_error_message() -> str:
    """Get generic error message."""
    return "Error processing command. Please try again."


def get_numeric_parameter_message(what: str, command: str) -> str:
    """Get message for a missing or non-numeric parameter."""
    return f"Expected 1 numeric parameter ({what}) for {command}"


def _label(name: str, alias: str) -> str:
    return f"{name} ({alias})" if alias else name


def _invocation(group: CommandGroup, command: Command) -> str:
    return f"{COMMAND_PREFIX}{group.name}{GROUP_SEPARATOR}{command.name}"


def build_group_help(group: CommandGroup) -> HelpDocument:
    """
    Build the help listing for a single group.

    Each command is listed with its alias and one-line description.
    """
    fields = [
        HelpField(
            name=_invocation(group, command) + (f" ({command.alias})" if command.alias else ""),
            value=command.description or "-",
        )
        for command in group.commands
    ]
    return HelpDocument(
        title=f"{_label(group.name, group.alias)} commands",
        description=group.description,
        fields=fields,
    )


def build_full_help(groups: Iterable[CommandGroup]) -> HelpDocument:
    """Build the listing of every group and its commands."""
    fields = []
    for group in groups:
        names = ", ".join(_label(c.name, c.alias) for c in group.commands)
        value = f"{group.description}\nCommands: {names}" if group.description else f"Commands: {names}"
        fields.append(HelpField(name=f"{COMMAND_PREFIX}{_label(group.name, group.alias)}", value=value))
    return HelpDocument(
        title="Available Commands",
        description=(
            f"Usage: {COMMAND_PREFIX}group{GROUP_SEPARATOR}command param1,param2. "
            f"Use {COMMAND_PREFIX}group{GROUP_SEPARATOR}{HELP_TOKEN} for details on a group."
        ),
        fields=fields,
    )


def render_help_html(document: HelpDocument) -> str:
    """Render a help listing as Telegram HTML."""
    lines = [f"📚 <b>{html.escape(document.title)}</b>"]
    if document.description:
        lines.append(html.escape(document.description))
    lines.append("")
    for item in document.fields:
        lines.append(f"<code>{html.escape(item.name)}</code> - {html.escape(item.value)}")
    return "\n".join(lines)
