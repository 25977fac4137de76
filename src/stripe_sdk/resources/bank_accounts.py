"""
Bank accounts resource for Stripe SDK.

Bank accounts are attached to a connected account as external accounts, so
every operation takes the owning account ID first.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from ..models.bank_account import BankAccount, BankAccountParams, BankAccountUpdateParams
from .base import AsyncNestedAPIResource, SyncNestedAPIResource


def _external_account_payload(params: BankAccountParams) -> Optional[Dict[str, Any]]:
    # Creation takes the bank details nested under ``external_account``.
    return {"external_account": params.to_params()}


class AsyncBankAccountsResource(
    AsyncNestedAPIResource[BankAccount, BankAccountParams, BankAccountUpdateParams]
):
    """Async resource for a connected account's bank accounts.

    Example:
        ```python
        bank_account = await client.bank_accounts.create(
            "acct_123",
            BankAccountParams(
                country="US",
                currency="usd",
                account_number="000123456789",
                routing_number="110000000",
            ),
        )
        ```
    """

    path = "/accounts/{parent_id}/external_accounts"
    model = BankAccount

    def _create_payload(self, params: BankAccountParams) -> Optional[Dict[str, Any]]:
        return _external_account_payload(params)


class BankAccountsResource(
    SyncNestedAPIResource[BankAccount, BankAccountParams, BankAccountUpdateParams]
):
    """Sync resource for a connected account's bank accounts.

    Example:
        ```python
        bank_account = client.bank_accounts.update(
            "acct_123", "ba_456", BankAccountUpdateParams(default_for_currency=True)
        )
        ```
    """

    path = "/accounts/{parent_id}/external_accounts"
    model = BankAccount

    def _create_payload(self, params: BankAccountParams) -> Optional[Dict[str, Any]]:
        return _external_account_payload(params)


__all__ = [
    "AsyncBankAccountsResource",
    "BankAccountsResource",
]
