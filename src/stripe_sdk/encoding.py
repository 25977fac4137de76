"""
Form encoding for request bodies and query strings.

The API takes ``application/x-www-form-urlencoded`` bodies and expresses
nesting with brackets:

    {"metadata": {"order": "6735"}, "owner": {"address": {"city": "Paris"}}}

becomes::

    metadata[order]=6735&owner[address][city]=Paris
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple


def encode_form(data: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """Flatten an encoded parameter payload into form fields.

    ``None`` values are dropped, booleans become ``true``/``false``, lists are
    indexed (``key[0]``) and an empty mapping is sent as an empty string,
    which the API reads as "clear this value".

    Args:
        data: Parameter payload as produced by ``StripeParams.to_params()``

    Returns:
        Ordered list of ``(key, value)`` pairs
    """
    if not data:
        return []
    fields: List[Tuple[str, str]] = []
    for key, value in data.items():
        _flatten(str(key), value, fields)
    return fields


def _flatten(key: str, value: Any, fields: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        if not value:
            fields.append((key, ""))
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, fields)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{key}[{index}]", item, fields)
    elif isinstance(value, bool):
        fields.append((key, "true" if value else "false"))
    else:
        fields.append((key, str(value)))


__all__ = ["encode_form"]
