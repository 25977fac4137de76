"""
Sources resource for Stripe SDK.

Responses are decoded as :data:`~stripe_sdk.models.source.PaymentSource`,
so callers get either a :class:`Card` or a :class:`Source` depending on the
``object`` field the API returns.
"""
from __future__ import annotations

from typing import Union

from ..models.source import Card, PaymentSource, Source, SourceParams
from .base import AsyncAPIResource, SyncAPIResource


class AsyncSourcesResource(AsyncAPIResource[Union[Card, Source], SourceParams, SourceParams]):
    """Async resource for payment sources.

    Example:
        ```python
        source = await client.sources.create(
            SourceParams(source_type="card", token="tok_visa", usage="reusable")
        )
        if isinstance(source, Card):
            print(source.last4)
        ```
    """

    # Update posts to the same plural collection as create and retrieve.
    path = "/sources"
    model = PaymentSource


class SourcesResource(SyncAPIResource[Union[Card, Source], SourceParams, SourceParams]):
    """Sync resource for payment sources."""

    path = "/sources"
    model = PaymentSource


__all__ = [
    "AsyncSourcesResource",
    "SourcesResource",
]
