"""Tests for chain models and formatting."""

from beaconbot.bot.messages import HelpDocument, HelpField, build_full_help, render_help_html
from beaconbot.models.chain import BlockSummary, ChainHead, format_gwei


def test_format_gwei():
    assert format_gwei(32000000000) == "32"
    assert format_gwei(31999876543) == "31.999876543"
    assert format_gwei(1500000000) == "1.5"
    assert format_gwei(0) == "0"


def test_epoch_from_slot():
    assert ChainHead(slot=31, root="0x").epoch == 0
    assert ChainHead(slot=32, root="0x").epoch == 1


def test_graffiti_text():
    assert BlockSummary(1, 1, b"abc".ljust(32, b"\x00")).graffiti_text == "abc"
    assert BlockSummary(1, 1, bytes(32)).graffiti_text == ""
    assert BlockSummary(1, 1, b"\xff\xfe").graffiti_text == "\ufffd\ufffd"


def test_full_help_lists_groups(registry):
    document = build_full_help(registry.groups)
    block = document.fields[-1]
    assert block.name == "!block (b)"
    assert "graffiti (g), proposer (p)" in block.value


def test_render_help_html_escapes():
    html = render_help_html(HelpDocument(title="a&b", description="x<y", fields=[HelpField("!g.c", "d")]))
    assert "<b>a&amp;b</b>" in html
    assert "x&lt;y" in html
    assert "<code>!g.c</code> - d" in html
