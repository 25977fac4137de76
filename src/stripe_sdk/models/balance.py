"""Balance models for Stripe SDK."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import Amount, StripeObject, Timestamp
from .currency import Currency
from .source import PaymentSource


class BalanceAmount(StripeObject):
    """Funds in one currency, broken down by source type."""

    currency: str
    amount: Amount
    source_types: Dict[str, int]


class Balance(StripeObject):
    """The balance of the current account."""

    object: str
    available: List[BalanceAmount]
    connect_reserved: Optional[List[Any]] = None
    livemode: bool
    pending: List[BalanceAmount]


class FeeDetails(StripeObject):
    amount: Amount
    application: Optional[str] = None
    currency: Currency
    description: str
    fee_type: str = Field(alias="type")  # application_fee | stripe_fee | tax


class BalanceTransaction(StripeObject):
    """A single movement of funds through the account balance."""

    id: str
    object: str
    amount: Amount
    available_on: Timestamp
    created: Timestamp
    currency: Currency
    description: str
    fee: Amount
    fee_details: List[FeeDetails]
    net: Amount
    source: PaymentSource
    status: str  # available | pending
    transaction_type: str = Field(alias="type")
