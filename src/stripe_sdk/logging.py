"""
Logging utilities for the Stripe SDK with sensitive data masking.

The SDK logs through the standard library under the ``stripe_sdk`` logger
namespace and never configures handlers itself. Enable output with, e.g.:

    logging.getLogger("stripe_sdk").setLevel(logging.DEBUG)

Anything that may carry secrets (API keys, account numbers, client secrets)
is passed through :func:`mask_sensitive_data` before it is logged.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Sequence

MASK_PATTERN = "***"

MAX_LOG_MESSAGE_LENGTH = 2000

SENSITIVE_FIELDS = frozenset({
    "account_number",
    "api_key",
    "authorization",
    "client_secret",
    "cvc",
    "number",
    "password",
    "secret",
    "stripe_account",
    "token",
})

_SENSITIVE_FRAGMENTS = ("secret", "password", "token", "api_key", "credential", "auth")

_INLINE_PATTERNS = [
    (re.compile(r"\b(sk_live_|sk_test_|rk_live_|rk_test_)[a-zA-Z0-9]+\b"), r"\1***"),
    (re.compile(r"(Bearer\s+)[a-zA-Z0-9._-]+", re.IGNORECASE), r"\1***"),
]


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Standard library logger
    """
    return logging.getLogger(name)


def mask_value(value: str, show_chars: int = 4) -> str:
    """Mask a sensitive value, showing only the first and last characters.

    Args:
        value: The value to mask
        show_chars: Number of characters to keep at start and end

    Returns:
        Masked string
    """
    if not value or len(value) <= show_chars * 2:
        return MASK_PATTERN

    return f"{value[:show_chars]}...{value[-show_chars:]}"


def is_sensitive_key(key: str) -> bool:
    """Check if a key name indicates sensitive data."""
    key_lower = key.lower().replace("-", "_")
    return key_lower in SENSITIVE_FIELDS or any(
        fragment in key_lower for fragment in _SENSITIVE_FRAGMENTS
    )


def mask_sensitive_data(
    data: Any,
    additional_fields: Optional[Sequence[str]] = None,
    _depth: int = 0,
    _max_depth: int = 10,
) -> Any:
    """Recursively mask sensitive data in a data structure.

    Args:
        data: The data structure to mask (dict, list, or scalar)
        additional_fields: Additional field names to mask

    Returns:
        Copy of data with sensitive values masked
    """
    if _depth > _max_depth:
        return data

    if isinstance(data, dict):
        result = {}
        for key, value in data.items():
            if is_sensitive_key(str(key)) or (additional_fields and key in additional_fields):
                result[key] = MASK_PATTERN
            else:
                result[key] = mask_sensitive_data(value, additional_fields, _depth + 1, _max_depth)
        return result

    if isinstance(data, (list, tuple)):
        return type(data)(
            mask_sensitive_data(item, additional_fields, _depth + 1, _max_depth)
            for item in data
        )

    if isinstance(data, str):
        return _mask_inline_patterns(data)

    return data


def _mask_inline_patterns(text: str) -> str:
    if len(text) > MAX_LOG_MESSAGE_LENGTH:
        text = text[:MAX_LOG_MESSAGE_LENGTH] + "...[truncated]"
    for pattern, replacement in _INLINE_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Mask sensitive HTTP headers."""
    return {
        key: MASK_PATTERN if key.lower() in ("authorization", "stripe-account") else value
        for key, value in headers.items()
    }


__all__ = [
    "get_logger",
    "mask_value",
    "is_sensitive_key",
    "mask_sensitive_data",
    "mask_headers",
]
