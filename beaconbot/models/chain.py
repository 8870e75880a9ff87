"""
Beacon chain data models.

This module contains data models for the chain data the bot reports on.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

SLOTS_PER_EPOCH = 32
GWEI_PER_ETH = 10**9
MAX_UINT64 = 2**64 - 1
FAR_FUTURE_EPOCH = MAX_UINT64


def _hex_to_bytes(value: str) -> bytes:
    if value.startswith("0x"):
        value = value[2:]
    return bytes.fromhex(value)


@dataclass
class ChainHead:
    """Model for the current head of the chain."""
    slot: int
    root: str

    @property
    def epoch(self) -> int:
        return self.slot // SLOTS_PER_EPOCH

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ChainHead":
        """Build from the ``data`` object of ``/eth/v1/beacon/headers/head``."""
        return cls(
            slot=int(data["header"]["message"]["slot"]),
            root=data["root"],
        )


@dataclass
class Checkpoint:
    """Model for a justification or finality checkpoint."""
    epoch: int
    root: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Checkpoint":
        return cls(epoch=int(data["epoch"]), root=data["root"])


@dataclass
class FinalityCheckpoints:
    """Model for the finality checkpoints of a state."""
    previous_justified: Checkpoint
    current_justified: Checkpoint
    finalized: Checkpoint

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "FinalityCheckpoints":
        return cls(
            previous_justified=Checkpoint.from_api(data["previous_justified"]),
            current_justified=Checkpoint.from_api(data["current_justified"]),
            finalized=Checkpoint.from_api(data["finalized"]),
        )


@dataclass
class BlockSummary:
    """Model for the parts of a block the bot reports on."""
    slot: int
    proposer_index: int
    graffiti: bytes

    @property
    def graffiti_text(self) -> str:
        """
        Graffiti as text.

        Returns:
            Decoded graffiti with trailing zero bytes removed, or an empty
            string if the graffiti is all zeroes
        """
        return self.graffiti.rstrip(b"\x00").decode("utf-8", errors="replace")

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "BlockSummary":
        """Build from the ``data`` object of ``/eth/v2/beacon/blocks/{slot}``."""
        message = data["message"]
        return cls(
            slot=int(message["slot"]),
            proposer_index=int(message["proposer_index"]),
            graffiti=_hex_to_bytes(message["body"]["graffiti"]),
        )


@dataclass
class ValidatorInfo:
    """Model for a single validator."""
    index: int
    status: str
    balance: int  # Gwei
    effective_balance: int  # Gwei
    slashed: bool
    activation_epoch: int
    exit_epoch: int
    pubkey: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ValidatorInfo":
        validator = data["validator"]
        return cls(
            index=int(data["index"]),
            status=data["status"],
            balance=int(data["balance"]),
            effective_balance=int(validator["effective_balance"]),
            slashed=bool(validator["slashed"]),
            activation_epoch=int(validator["activation_epoch"]),
            exit_epoch=int(validator["exit_epoch"]),
            pubkey=validator["pubkey"],
        )


@dataclass
class Committee:
    """Model for a beacon committee."""
    index: int
    slot: int
    validators: List[int] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Committee":
        return cls(
            index=int(data["index"]),
            slot=int(data["slot"]),
            validators=[int(v) for v in data["validators"]],
        )


@dataclass
class ProposerDuty:
    """Model for a block proposal assignment."""
    slot: int
    validator_index: int

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ProposerDuty":
        return cls(slot=int(data["slot"]), validator_index=int(data["validator_index"]))


def format_gwei(amount: int) -> str:
    """
    Format a Gwei amount as ETH.

    Examples:
        >>> format_gwei(32000000000)
        '32'
        >>> format_gwei(31999876543)
        '31.999876543'
    """
    whole, fraction = divmod(amount, GWEI_PER_ETH)
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:09d}".rstrip("0")
