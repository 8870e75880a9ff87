"""
Beacon chain chat bot.

Turns ``!group.command p1,p2`` chat messages into beacon-node queries
and replies with formatted text.
"""

__version__ = "0.1.0"
