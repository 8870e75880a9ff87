"""
Command parsing utilities.

This module handles parsing of ``!group.command p1,p2`` bot commands from
message text.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

COMMAND_PREFIX = "!"
GROUP_SEPARATOR = "."
PARAMETER_SEPARATOR = ","

_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True)
class ParsedInvocation:
    """A command message split into its tokens."""
    group: str
    command: str
    parameters: Tuple[str, ...] = ()


def strip_prefix(message_text: str) -> Optional[str]:
    """
    Remove the command prefix.

    Returns:
        Text after the prefix, or None if the message does not start with it
    """
    if not message_text or not message_text.startswith(COMMAND_PREFIX):
        return None
    return message_text[len(COMMAND_PREFIX):]


def parse_command(message_text: str) -> Optional[ParsedInvocation]:
    """
    Parse command from message text.

    The group is everything before the first ".", the command runs up to
    the first whitespace character and the rest is a comma-separated
    parameter list. Parameters are trimmed but empty ones are kept in
    place so handlers can check arity.

    Args:
        message_text: Message text from chat

    Returns:
        ParsedInvocation, or None if the text is not a group command

    Examples:
        >>> parse_command("!block.graffiti 12345")
        ParsedInvocation(group='block', command='graffiti', parameters=('12345',))
        >>> parse_command("!g.c a,,b").parameters
        ('a', '', 'b')
        >>> parse_command("!ping") is None
        True
    """
    body = strip_prefix(message_text)
    if body is None:
        return None

    group, separator, rest = body.partition(GROUP_SEPARATOR)
    if not separator or not rest.strip():
        return None

    match = _WHITESPACE.search(rest)
    if match is None:
        return ParsedInvocation(group=group, command=rest)

    command = rest[:match.start()]
    parameter_list = rest[match.end():]
    if not parameter_list.strip():
        # "!g.c " carries no parameters, same as "!g.c"
        return ParsedInvocation(group=group, command=command)

    parameters = tuple(p.strip() for p in parameter_list.split(PARAMETER_SEPARATOR))
    return ParsedInvocation(group=group, command=command, parameters=parameters)
