"""Stripe SDK Models."""
from .base import Amount, ListParams, Metadata, StripeObject, StripeParams, Timestamp, to_datetime
from .currency import Currency
from .list_object import ListObject
from .account import (
    Account,
    AccountParams,
    DeclineChargeOn,
    PayoutSchedule,
    TOSAcceptance,
    TOSAcceptanceParams,
)
from .balance import Balance, BalanceAmount, BalanceTransaction, FeeDetails
from .bank_account import BankAccount, BankAccountParams, BankAccountUpdateParams
from .source import (
    Address,
    Card,
    OwnerParams,
    PaymentSource,
    RedirectParams,
    Source,
    SourceAddress,
    SourceCard,
    SourceOwner,
    SourceParams,
    SourceRedirect,
)
from .transfer import (
    Transfer,
    TransferParams,
    TransferReversal,
    TransferReversalParams,
    TransferReversalUpdateParams,
    TransferUpdateParams,
)
from .errors import (
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

__all__ = [
    "Amount",
    "Metadata",
    "Timestamp",
    "to_datetime",
    "StripeObject",
    "StripeParams",
    "ListParams",
    "Currency",
    "ListObject",
    "Account",
    "AccountParams",
    "DeclineChargeOn",
    "PayoutSchedule",
    "TOSAcceptance",
    "TOSAcceptanceParams",
    "Balance",
    "BalanceAmount",
    "BalanceTransaction",
    "FeeDetails",
    "BankAccount",
    "BankAccountParams",
    "BankAccountUpdateParams",
    "Address",
    "Card",
    "OwnerParams",
    "PaymentSource",
    "RedirectParams",
    "Source",
    "SourceAddress",
    "SourceCard",
    "SourceOwner",
    "SourceParams",
    "SourceRedirect",
    "Transfer",
    "TransferParams",
    "TransferReversal",
    "TransferReversalParams",
    "TransferReversalUpdateParams",
    "TransferUpdateParams",
    "StripeError",
    "APIError",
    "InvalidRequestError",
    "AuthenticationError",
    "CardError",
    "PermissionDeniedError",
    "NotFoundError",
    "RateLimitError",
    "DecodeError",
]
