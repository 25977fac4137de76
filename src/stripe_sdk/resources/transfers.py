"""
Transfers resource for Stripe SDK.

This module provides both async and sync interfaces for transfers to
connected accounts and their reversals.
"""
from __future__ import annotations

from typing import Optional

from ..models.base import ListParams
from ..models.list_object import ListObject
from ..models.transfer import (
    Transfer,
    TransferParams,
    TransferReversal,
    TransferReversalParams,
    TransferReversalUpdateParams,
    TransferUpdateParams,
)
from .base import (
    AsyncAPIResource,
    AsyncNestedAPIResource,
    SyncAPIResource,
    SyncNestedAPIResource,
)

_REVERSALS_PATH = "/transfers/{parent_id}/reversals"


class AsyncTransfersResource(AsyncAPIResource[Transfer, TransferParams, TransferUpdateParams]):
    """Async resource for transfers.

    Example:
        ```python
        async with AsyncStripeClient(api_key="...") as client:
            transfer = await client.transfers.create(
                TransferParams(amount=2000, currency="usd", destination="acct_123")
            )
            reversal = await client.transfers.reverse(
                transfer.id, TransferReversalParams(amount=500)
            )
        ```
    """

    path = "/transfers"
    model = Transfer

    async def list(self, params: Optional[ListParams] = None) -> ListObject[Transfer]:
        """Fetch one page of transfers, newest first."""
        return await self._list(self.path, Transfer, params)

    async def reverse(
        self,
        transfer_id: str,
        params: Optional[TransferReversalParams] = None,
    ) -> TransferReversal:
        """Reverse a transfer.

        Args:
            transfer_id: The transfer to reverse
            params: Reversal details; without an amount the whole
                remaining amount is reversed

        Returns:
            The created TransferReversal
        """
        return await self._create(
            _REVERSALS_PATH.format(parent_id=transfer_id),
            TransferReversal,
            params,
        )


class TransfersResource(SyncAPIResource[Transfer, TransferParams, TransferUpdateParams]):
    """Sync resource for transfers.

    Example:
        ```python
        with StripeClient(api_key="...") as client:
            transfer = client.transfers.create(
                TransferParams(amount=2000, currency="usd", destination="acct_123")
            )
            transfer = client.transfers.update(
                transfer.id, TransferUpdateParams(description="June payout")
            )
        ```
    """

    path = "/transfers"
    model = Transfer

    def list(self, params: Optional[ListParams] = None) -> ListObject[Transfer]:
        """Fetch one page of transfers, newest first."""
        return self._list(self.path, Transfer, params)

    def reverse(
        self,
        transfer_id: str,
        params: Optional[TransferReversalParams] = None,
    ) -> TransferReversal:
        """Reverse a transfer.

        Args:
            transfer_id: The transfer to reverse
            params: Reversal details; without an amount the whole
                remaining amount is reversed

        Returns:
            The created TransferReversal
        """
        return self._create(
            _REVERSALS_PATH.format(parent_id=transfer_id),
            TransferReversal,
            params,
        )


class AsyncTransferReversalsResource(
    AsyncNestedAPIResource[TransferReversal, TransferReversalParams, TransferReversalUpdateParams]
):
    """Async resource for the reversals of a transfer."""

    path = _REVERSALS_PATH
    model = TransferReversal


class TransferReversalsResource(
    SyncNestedAPIResource[TransferReversal, TransferReversalParams, TransferReversalUpdateParams]
):
    """Sync resource for the reversals of a transfer."""

    path = _REVERSALS_PATH
    model = TransferReversal


__all__ = [
    "AsyncTransfersResource",
    "TransfersResource",
    "AsyncTransferReversalsResource",
    "TransferReversalsResource",
]
