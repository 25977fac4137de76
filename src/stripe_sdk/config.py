"""Client configuration read from the environment."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE = "https://api.stripe.com/v1"


class StripeSettings(BaseSettings):
    """Settings used by the clients for any argument the caller leaves unset.

    Every field maps to a ``STRIPE_``-prefixed environment variable, e.g.
    ``STRIPE_API_KEY`` or ``STRIPE_MAX_NETWORK_RETRIES``.
    """

    api_key: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    api_version: Optional[str] = None
    stripe_account: Optional[str] = None
    timeout: float = Field(default=80.0, gt=0)
    max_network_retries: int = Field(default=0, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="STRIPE_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> StripeSettings:
    """Return the process-wide settings, loaded once."""
    return StripeSettings()
