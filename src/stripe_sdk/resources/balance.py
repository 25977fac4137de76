"""
Balance resources for Stripe SDK.

The balance is a singleton with no identifier; balance transactions are
read-only and can only be retrieved or listed.
"""
from __future__ import annotations

from typing import Optional

from ..models.balance import Balance, BalanceTransaction
from ..models.base import ListParams
from ..models.list_object import ListObject
from .base import AsyncBaseResource, SyncBaseResource


class AsyncBalanceResource(AsyncBaseResource):
    """Async resource for the account balance."""

    async def retrieve(self) -> Balance:
        """Retrieve the balance of the current account."""
        return await self._retrieve("/balance", Balance)


class BalanceResource(SyncBaseResource):
    """Sync resource for the account balance."""

    def retrieve(self) -> Balance:
        """Retrieve the balance of the current account."""
        return self._retrieve("/balance", Balance)


class AsyncBalanceTransactionsResource(AsyncBaseResource):
    """Async resource for balance transactions."""

    path = "/balance_transactions"

    async def retrieve(self, id: str) -> BalanceTransaction:
        """Retrieve a balance transaction by ID."""
        return await self._retrieve(f"{self.path}/{id}", BalanceTransaction)

    async def list(self, params: Optional[ListParams] = None) -> ListObject[BalanceTransaction]:
        """Fetch one page of balance transactions, newest first."""
        return await self._list(self.path, BalanceTransaction, params)


class BalanceTransactionsResource(SyncBaseResource):
    """Sync resource for balance transactions."""

    path = "/balance_transactions"

    def retrieve(self, id: str) -> BalanceTransaction:
        """Retrieve a balance transaction by ID."""
        return self._retrieve(f"{self.path}/{id}", BalanceTransaction)

    def list(self, params: Optional[ListParams] = None) -> ListObject[BalanceTransaction]:
        """Fetch one page of balance transactions, newest first."""
        return self._list(self.path, BalanceTransaction, params)


__all__ = [
    "AsyncBalanceResource",
    "BalanceResource",
    "AsyncBalanceTransactionsResource",
    "BalanceTransactionsResource",
]
