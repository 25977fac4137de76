"""Payment source models for Stripe SDK.

A payment source arrives on the wire as one of several shapes, told apart by
the ``object`` field. :data:`PaymentSource` is the closed union over the
shapes this SDK understands; a payload with any other ``object`` value fails
to decode instead of being squeezed into the wrong model.
"""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .base import Amount, Metadata, StripeObject, StripeParams, Timestamp


class Address(StripeParams):
    """A postal address sent as part of source owner details."""

    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class SourceAddress(StripeObject):
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class SourceOwner(StripeObject):
    """Owner details as stored on a source, including verified values."""

    address: Optional[SourceAddress] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    verified_address: Optional[SourceAddress] = None
    verified_email: Optional[str] = None
    verified_name: Optional[str] = None
    verified_phone: Optional[str] = None


class SourceCard(StripeObject):
    """Card details embedded in a card-type source.

    Unlike :class:`Card` this carries no ``id`` of its own.
    """

    address_line1_check: Optional[str] = None  # pass | fail | unavailable | unchecked
    address_zip_check: Optional[str] = None
    brand: str
    country: str
    cvc_check: Optional[str] = None
    exp_month: int
    exp_year: int
    fingerprint: str
    funding: str  # credit | debit | prepaid | unknown
    last4: str
    three_d_secure: Optional[str] = None
    tokenization_method: Optional[str] = None


class SourceRedirect(StripeObject):
    failure_reason: Optional[str] = None
    return_url: str
    status: str  # pending | succeeded | not_required | failed
    url: str


class Card(StripeObject):
    """A card payment source."""

    id: str
    object: Literal["card"]
    account: Optional[str] = None
    address_city: Optional[str] = None
    address_country: Optional[str] = None
    address_line1: Optional[str] = None
    address_line1_check: Optional[str] = None
    address_line2: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_zip_check: Optional[str] = None
    brand: str
    country: str
    customer: Optional[str] = None
    cvc_check: Optional[str] = None
    dynamic_last4: Optional[str] = None
    exp_month: int
    exp_year: int
    fingerprint: str
    funding: str
    last4: str
    metadata: Metadata
    name: Optional[str] = None
    tokenization_method: Optional[str] = None


class Source(StripeObject):
    """A generic payment source object (``object == "source"``)."""

    id: str
    object: Literal["source"]
    amount: Optional[Amount] = None
    client_secret: Optional[str] = None
    created: Timestamp
    currency: Optional[str] = None
    flow: str  # redirect | receiver | code_verification | none
    livemode: bool
    metadata: Metadata
    owner: Optional[SourceOwner] = None
    redirect: Optional[SourceRedirect] = None
    statement_descriptor: Optional[str] = None
    status: str
    source_type: str = Field(alias="type")
    usage: str  # reusable | single_use
    card: Optional[SourceCard] = None


PaymentSource = Annotated[Union[Card, Source], Field(discriminator="object")]
"""Any payment source, selected by its ``object`` field."""


class OwnerParams(StripeParams):
    address: Optional[Address] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class RedirectParams(StripeParams):
    return_url: str


class SourceParams(StripeParams):
    """Parameters for creating or updating a source."""

    source_type: Optional[str] = Field(default=None, alias="type")
    amount: Optional[Amount] = None
    currency: Optional[str] = None
    flow: Optional[Literal["redirect", "receiver", "code_verification", "none"]] = None
    metadata: Optional[Metadata] = None
    owner: Optional[OwnerParams] = None
    redirect: Optional[RedirectParams] = None
    token: Optional[str] = None
    usage: Optional[Literal["reusable", "single_use"]] = None
