"""
Accounts resource for Stripe SDK.

This module provides both async and sync interfaces for connected accounts.
"""
from __future__ import annotations

from typing import Optional

from ..models.account import Account, AccountParams
from ..models.base import ListParams
from ..models.list_object import ListObject
from .base import AsyncAPIResource, SyncAPIResource


class AsyncAccountsResource(AsyncAPIResource[Account, AccountParams, AccountParams]):
    """Async resource for connected accounts.

    Example:
        ```python
        async with AsyncStripeClient(api_key="...") as client:
            account = await client.accounts.create(
                AccountParams(account_type="custom", country="US", email="jenny@example.com")
            )
            account = await client.accounts.update(
                account.id, AccountParams(metadata={"tier": "gold"})
            )
        ```
    """

    path = "/accounts"
    model = Account

    async def list(self, params: Optional[ListParams] = None) -> ListObject[Account]:
        """Fetch one page of connected accounts."""
        return await self._list(self.path, Account, params)


class AccountsResource(SyncAPIResource[Account, AccountParams, AccountParams]):
    """Sync resource for connected accounts.

    Example:
        ```python
        with StripeClient(api_key="...") as client:
            account = client.accounts.retrieve("acct_123")
            page = client.accounts.list(ListParams(limit=10))
        ```
    """

    path = "/accounts"
    model = Account

    def list(self, params: Optional[ListParams] = None) -> ListObject[Account]:
        """Fetch one page of connected accounts."""
        return self._list(self.path, Account, params)


__all__ = [
    "AsyncAccountsResource",
    "AccountsResource",
]
