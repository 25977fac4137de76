"""
Stripe Python SDK

Typed bindings for the Stripe REST API: connected accounts, balances, bank
accounts, payment sources and transfers.
"""
from logging import NullHandler

from .client import SDK_VERSION, AsyncStripeClient, StripeClient
from .config import StripeSettings, get_settings
from .decoding import decode, decode_list, decode_source
from .logging import get_logger
from .models.errors import (
    APIError,
    AuthenticationError,
    CardError,
    DecodeError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    StripeError,
)
from .models.base import ListParams
from .models.currency import Currency
from .models.list_object import ListObject
from .models.account import Account, AccountParams, TOSAcceptanceParams
from .models.balance import Balance, BalanceTransaction
from .models.bank_account import BankAccount, BankAccountParams, BankAccountUpdateParams
from .models.source import Card, OwnerParams, PaymentSource, RedirectParams, Source, SourceParams
from .models.transfer import (
    Transfer,
    TransferParams,
    TransferReversal,
    TransferReversalParams,
    TransferReversalUpdateParams,
    TransferUpdateParams,
)

get_logger(__name__).addHandler(NullHandler())

__version__ = SDK_VERSION

__all__ = [
    # Clients
    "StripeClient",
    "AsyncStripeClient",
    "StripeSettings",
    "get_settings",
    # Decoding
    "decode",
    "decode_list",
    "decode_source",
    # Errors
    "StripeError",
    "APIError",
    "InvalidRequestError",
    "AuthenticationError",
    "CardError",
    "PermissionDeniedError",
    "NotFoundError",
    "RateLimitError",
    "DecodeError",
    # Shared models
    "Currency",
    "ListObject",
    "ListParams",
    # Accounts
    "Account",
    "AccountParams",
    "TOSAcceptanceParams",
    # Balance
    "Balance",
    "BalanceTransaction",
    # Bank accounts
    "BankAccount",
    "BankAccountParams",
    "BankAccountUpdateParams",
    # Sources
    "Card",
    "Source",
    "PaymentSource",
    "SourceParams",
    "OwnerParams",
    "RedirectParams",
    # Transfers
    "Transfer",
    "TransferParams",
    "TransferUpdateParams",
    "TransferReversal",
    "TransferReversalParams",
    "TransferReversalUpdateParams",
]
