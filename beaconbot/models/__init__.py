"""
Data models for the application.

This module contains the chain data returned by the beacon node client.
"""

from beaconbot.models.chain import (
    SLOTS_PER_EPOCH,
    BlockSummary,
    ChainHead,
    Checkpoint,
    Committee,
    FinalityCheckpoints,
    ProposerDuty,
    ValidatorInfo,
)

__all__ = [
    "SLOTS_PER_EPOCH",
    "BlockSummary",
    "ChainHead",
    "Checkpoint",
    "Committee",
    "FinalityCheckpoints",
    "ProposerDuty",
    "ValidatorInfo",
]
