"""Bank account models for Stripe SDK."""
from __future__ import annotations

from typing import Literal, Optional

from .base import Metadata, StripeObject, StripeParams
from .currency import Currency


class BankAccount(StripeObject):
    """A bank account attached to a connected account as an external account."""

    id: str
    object: str
    account: str
    account_holder_name: str
    account_holder_type: str  # individual | company
    bank_name: str
    country: str
    currency: Currency
    default_for_currency: bool
    fingerprint: str
    last4: str
    metadata: Metadata
    routing_number: str
    status: str  # new | validated | verified | verification_failed | errored


class BankAccountParams(StripeParams):
    """Details of a bank account to attach to an account."""

    object: Literal["bank_account"] = "bank_account"
    country: str
    currency: str
    account_number: str
    account_holder_name: Optional[str] = None
    account_holder_type: Optional[Literal["individual", "company"]] = None
    routing_number: Optional[str] = None
    default_for_currency: Optional[bool] = None
    metadata: Optional[Metadata] = None


class BankAccountUpdateParams(StripeParams):
    """Updatable fields of an attached bank account."""

    account_holder_name: Optional[str] = None
    account_holder_type: Optional[Literal["individual", "company"]] = None
    default_for_currency: Optional[bool] = None
    metadata: Optional[Metadata] = None
