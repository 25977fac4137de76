"""Transfer models for Stripe SDK."""
from __future__ import annotations

from typing import Optional

from .base import Amount, Metadata, StripeObject, StripeParams, Timestamp
from .currency import Currency
from .list_object import ListObject


class TransferReversal(StripeObject):
    """A reversal of part or all of a transfer."""

    id: str
    object: str
    amount: Amount
    balance_transaction: Optional[str] = None
    created: Timestamp
    currency: Currency
    metadata: Metadata
    transfer: str


class Transfer(StripeObject):
    """Funds moved from the platform balance to a connected account."""

    id: str
    object: str
    amount: Amount
    amount_reversed: Amount
    balance_transaction: str
    created: Timestamp
    currency: Currency
    description: Optional[str] = None
    destination: str
    destination_payment: str
    livemode: bool
    metadata: Metadata
    reversals: ListObject[TransferReversal]
    reversed: bool
    source_transaction: Optional[str] = None
    source_type: str
    transfer_group: Optional[str] = None


class TransferParams(StripeParams):
    """Parameters for creating a transfer."""

    amount: Amount
    currency: str
    destination: str
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
    source_transaction: Optional[str] = None
    source_type: Optional[str] = None  # card | bank_account | fpx
    transfer_group: Optional[str] = None


class TransferUpdateParams(StripeParams):
    """Fields of a transfer that can change after creation."""

    description: Optional[str] = None
    metadata: Optional[Metadata] = None


class TransferReversalParams(StripeParams):
    """Parameters for reversing a transfer.

    Leaving ``amount`` unset reverses the whole remaining amount.
    """

    amount: Optional[Amount] = None
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
    refund_application_fee: Optional[bool] = None


class TransferReversalUpdateParams(StripeParams):
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
