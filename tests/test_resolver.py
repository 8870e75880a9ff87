"""Tests for command resolution."""

import pytest

from beaconbot.bot.catalog import ALL_GROUPS
from beaconbot.bot.parser import ParsedInvocation, parse_command
from beaconbot.bot.resolver import (
    CommandFound,
    CommandNotFound,
    GroupNotFound,
    HelpRequested,
    resolve,
)


@pytest.mark.parametrize("command", ["graffiti", "help", "anything", ""])
def test_unknown_group_never_resolves(sample_registry, command):
    assert resolve(sample_registry, ParsedInvocation("nope", command)) == GroupNotFound()


def test_unknown_command(sample_registry):
    result = resolve(sample_registry, parse_command("!block.unknown 1"))
    assert isinstance(result, CommandNotFound)
    assert result.group.name == "block"


def test_help_in_known_group(sample_registry):
    result = resolve(sample_registry, parse_command("!b.help"))
    assert isinstance(result, HelpRequested)
    assert result.group.name == "block"


def test_aliases_resolve_block_graffiti(sample_registry):
    invocation = parse_command("!b.g 12345")
    result = resolve(sample_registry, invocation)
    assert isinstance(result, CommandFound)
    assert (result.group.name, result.command.name) == ("block", "graffiti")
    assert invocation.parameters == ("12345",)


def test_aliases_and_names_resolve_to_same_command(registry):
    for group in ALL_GROUPS:
        for command in group.commands:
            by_name = resolve(registry, ParsedInvocation(group.name, command.name))
            by_alias = resolve(registry, ParsedInvocation(group.alias, command.alias))
            assert isinstance(by_name, CommandFound)
            assert by_alias == by_name
            assert by_alias.command is command
