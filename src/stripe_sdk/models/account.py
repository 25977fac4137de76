"""Connected account models for Stripe SDK."""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import Field

from .bank_account import BankAccount
from .base import Metadata, StripeObject, StripeParams, Timestamp
from .list_object import ListObject


class DeclineChargeOn(StripeObject):
    """Account-level rules for declining charges on failed checks."""

    avs_failure: Optional[bool] = None
    cvc_failure: Optional[bool] = None


class PayoutSchedule(StripeObject):
    """When funds are paid out to the account's external accounts."""

    delay_days: int
    interval: str  # manual | daily | weekly | monthly
    monthly_anchor: Optional[int] = None
    weekly_anchor: Optional[str] = None


class TOSAcceptance(StripeObject):
    """Who accepted the terms of service, and when."""

    date: Optional[Timestamp] = None
    ip: Optional[str] = None
    user_agent: Optional[str] = None


class Account(StripeObject):
    """A connected account."""

    id: str
    object: str
    business_name: Optional[str] = None
    business_url: Optional[str] = None
    charges_enabled: bool
    country: str
    debit_negative_balances: Optional[bool] = None
    decline_charge_on: Optional[DeclineChargeOn] = None
    default_currency: str
    details_submitted: bool
    display_name: Optional[str] = None
    email: str
    external_accounts: ListObject[BankAccount]
    legal_entity: Optional[dict[str, Any]] = None
    metadata: Metadata
    payout_schedule: Optional[PayoutSchedule] = None
    payout_statement_descriptor: Optional[str] = None
    payouts_enabled: bool
    product_description: Optional[str] = None
    statement_descriptor: str
    support_email: Optional[str] = None
    support_phone: Optional[str] = None
    timezone: str
    tos_acceptance: Optional[TOSAcceptance] = None
    account_type: Optional[str] = Field(default=None, alias="type")  # standard | custom | express
    verification: Optional[dict[str, Any]] = None


class TOSAcceptanceParams(StripeParams):
    """Terms of service acceptance details sent when creating an account."""

    date: Optional[Timestamp] = None
    ip: Optional[str] = None
    user_agent: Optional[str] = None


class AccountParams(StripeParams):
    """Parameters for creating or updating an account.

    ``email``, ``external_account`` and ``tos_acceptance`` are required by
    the API for standard accounts; the SDK leaves that check to the server.
    """

    country: Optional[str] = None
    email: Optional[str] = None
    account_type: Optional[Literal["standard", "custom", "express"]] = Field(
        default=None, alias="type"
    )
    external_account: Optional[str] = None
    metadata: Optional[Metadata] = None
    tos_acceptance: Optional[TOSAcceptanceParams] = None
