"""
Response decoding for the Stripe SDK.

Every response body goes through :func:`decode`, which validates it against
the target model, generic list or tagged union and turns any validation
failure into :class:`~stripe_sdk.models.errors.DecodeError`.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .logging import get_logger
from .models.errors import DecodeError
from .models.list_object import ListObject
from .models.source import PaymentSource

logger = get_logger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _target_name(target: Any) -> str:
    if target is PaymentSource:
        return "PaymentSource"
    return getattr(target, "__name__", repr(target))


def decode(target: Any, data: Any) -> Any:
    """Decode raw response data into ``target``.

    Args:
        target: A model class, a parametrized ``ListObject`` or an annotated
            union such as :data:`PaymentSource`
        data: The JSON-decoded response body

    Returns:
        The decoded object

    Raises:
        DecodeError: If ``data`` does not match ``target``
    """
    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate(data)
        return _adapter(target).validate_python(data)
    except ValidationError as exc:
        name = _target_name(target)
        logger.warning("Failed to decode %s: %d validation error(s)", name, exc.error_count())
        raise DecodeError(
            f"Response does not match {name}: {exc.errors()[0]['msg']}",
            target=name,
            errors=exc.errors(include_url=False, include_input=False),
        ) from exc


def decode_list(item_type: Type[T], data: Any) -> ListObject[T]:
    """Decode a list envelope whose items are ``item_type``."""
    return decode(ListObject[item_type], data)  # type: ignore[valid-type]


def decode_source(data: Any) -> Any:
    """Decode a payment source into the variant named by its ``object`` field."""
    return decode(PaymentSource, data)


__all__ = [
    "decode",
    "decode_list",
    "decode_source",
]
