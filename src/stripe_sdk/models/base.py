"""Base models and wire scalar types for the Stripe SDK."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

# Minor currency units (cents for usd).
Amount = Annotated[int, Field(ge=0)]

# Seconds since the epoch, UTC.
Timestamp = Annotated[int, Field(ge=0)]

Metadata = Dict[str, str]


def to_datetime(timestamp: int) -> datetime:
    """Convert a wire timestamp to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class StripeObject(BaseModel):
    """Base model for resources decoded from API responses.

    Instances are snapshots of server state and cannot be mutated; an
    update always returns a new object decoded from the server reply.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a wire-shaped dictionary."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StripeObject":
        """Create model from dictionary."""
        return cls.model_validate(data)


class StripeParams(BaseModel):
    """Base model for request parameters.

    Optional fields default to ``None``, which means "absent": they are left
    out of the encoded payload entirely. Required fields are always encoded.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        validate_assignment=True,
        extra="forbid",
    )

    def to_params(self) -> dict[str, Any]:
        """Encode to the request payload, omitting absent optional fields.

        A nested params object with nothing set is omitted as well. An empty
        ``{}`` would reach the API as ``key=``, which clears the value.
        Plain mappings such as ``metadata={}`` are kept as given.
        """
        params = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if not isinstance(value, StripeParams):
                continue
            key = field.alias or name
            nested = value.to_params()
            if nested:
                params[key] = nested
            else:
                params.pop(key, None)
        return params


class ListParams(StripeParams):
    """Cursor parameters for fetching a single page of a list."""

    limit: Optional[int] = Field(default=None, ge=1, le=100)
    starting_after: Optional[str] = None
    ending_before: Optional[str] = None
