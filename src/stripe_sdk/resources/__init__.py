"""
Resources for the Stripe SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import (
    AsyncAPIResource,
    AsyncBaseResource,
    AsyncNestedAPIResource,
    SyncAPIResource,
    SyncBaseResource,
    SyncNestedAPIResource,
)
from .accounts import AccountsResource, AsyncAccountsResource
from .balance import (
    AsyncBalanceResource,
    AsyncBalanceTransactionsResource,
    BalanceResource,
    BalanceTransactionsResource,
)
from .bank_accounts import AsyncBankAccountsResource, BankAccountsResource
from .sources import AsyncSourcesResource, SourcesResource
from .transfers import (
    AsyncTransferReversalsResource,
    AsyncTransfersResource,
    TransferReversalsResource,
    TransfersResource,
)

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "SyncBaseResource",
    "AsyncAPIResource",
    "SyncAPIResource",
    "AsyncNestedAPIResource",
    "SyncNestedAPIResource",
    # Accounts
    "AccountsResource",
    "AsyncAccountsResource",
    # Balance
    "BalanceResource",
    "AsyncBalanceResource",
    "BalanceTransactionsResource",
    "AsyncBalanceTransactionsResource",
    # Bank accounts
    "BankAccountsResource",
    "AsyncBankAccountsResource",
    # Sources
    "SourcesResource",
    "AsyncSourcesResource",
    # Transfers
    "TransfersResource",
    "AsyncTransfersResource",
    "TransferReversalsResource",
    "AsyncTransferReversalsResource",
]
