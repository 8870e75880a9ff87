"""
Beacon node client service.

This module wraps the standard beacon-node HTTP API and returns the
chain models the command handlers format.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from beaconbot.exceptions import BackendUnavailableError
from beaconbot.models.chain import (
    SLOTS_PER_EPOCH,
    BlockSummary,
    ChainHead,
    Committee,
    FinalityCheckpoints,
    ProposerDuty,
    ValidatorInfo,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
# Answers about the requested slot, epoch or index rather than the node
NOT_FOUND_STATUSES = (400, 404)


class BeaconClient:
    """Async client for a beacon node's HTTP API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Beacon node API address, e.g. http://localhost:3500
            timeout: Per-request timeout in seconds
            client: Pre-built httpx client (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        """
        Issue a GET request and return the ``data`` member of the response.

        Returns:
            The decoded ``data`` value, or None if the node answered 404, or
            400 for an identifier it cannot serve (e.g. an index past the
            end of the validator set)

        Raises:
            BackendUnavailableError: On transport errors or any other
                non-success status
        """
        try:
            response = await self._client.get(path, params=params)
            if response.status_code in NOT_FOUND_STATUSES:
                logger.debug(f"Beacon node has nothing at {path} ({response.status_code})")
                return None
            response.raise_for_status()
            return response.json()["data"]
        except httpx.HTTPStatusError as e:
            logger.error(f"Beacon node returned {e.response.status_code} for {path}")
            raise BackendUnavailableError(f"Beacon node returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Error calling beacon node at {path}: {e}")
            raise BackendUnavailableError(str(e)) from e
        except (ValueError, KeyError) as e:
            logger.error(f"Malformed response from beacon node at {path}: {e}")
            raise BackendUnavailableError("Malformed response from beacon node") from e

    async def get_chain_head(self) -> ChainHead:
        data = await self._get("/eth/v1/beacon/headers/head")
        if data is None:
            raise BackendUnavailableError("Beacon node has no chain head")
        return ChainHead.from_api(data)

    async def get_finality_checkpoints(self) -> FinalityCheckpoints:
        data = await self._get("/eth/v1/beacon/states/head/finality_checkpoints")
        if data is None:
            raise BackendUnavailableError("Beacon node has no head state")
        return FinalityCheckpoints.from_api(data)

    async def get_block(self, slot: int) -> Optional[BlockSummary]:
        """
        Get the canonical block at a slot.

        Returns:
            The block, or None if the slot is empty or unknown
        """
        data = await self._get(f"/eth/v2/beacon/blocks/{slot}")
        if data is None:
            return None
        return BlockSummary.from_api(data)

    async def get_validator(self, index: int) -> Optional[ValidatorInfo]:
        """
        Get a validator from the head state.

        Returns:
            The validator, or None if no validator has that index
        """
        data = await self._get(f"/eth/v1/beacon/states/head/validators/{index}")
        if data is None:
            return None
        return ValidatorInfo.from_api(data)

    async def get_committees(self, epoch: int) -> List[Committee]:
        """
        Get the committees of an epoch.

        Committees are read from the state at the epoch's first slot; a
        node only computes them for epochs near the state it is asked about.
        """
        state_id = epoch * SLOTS_PER_EPOCH
        data = await self._get(
            f"/eth/v1/beacon/states/{state_id}/committees", params={"epoch": epoch}
        )
        return [Committee.from_api(item) for item in data or []]

    async def get_proposer_duties(self, epoch: int) -> List[ProposerDuty]:
        data = await self._get(f"/eth/v1/validator/duties/proposer/{epoch}")
        return [ProposerDuty.from_api(item) for item in data or []]
