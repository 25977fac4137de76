"""Error models for Stripe SDK.

Three kinds of failure reach the caller:

- :class:`APIError` and its subclasses: the server answered with an error
  object. Fix the request.
- :class:`DecodeError`: the server answered, but the body does not match the
  expected shape. Update the SDK's models.
- ``httpx.TransportError``: the request never completed. These come from
  httpx untouched.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class StripeError(Exception):
    """Base exception for Stripe SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "stripe_error"
        self.details = details or {}
        self.request_id = request_id

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "request_id": self.request_id,
            }
        }


class APIError(StripeError):
    """Error object returned by the API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        error_type: Optional[str] = None,
        param: Optional[str] = None,
        decline_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
        body: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code or error_type or "api_error", details, request_id)
        self.status_code = status_code
        self.error_type = error_type
        self.param = param
        self.decline_code = decline_code
        self.body = body

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: dict[str, Any],
        request_id: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "APIError":
        """Create the matching APIError subclass from an error response body."""
        error_data = body.get("error", body)
        if isinstance(error_data, str):
            error_data = {"message": error_data}

        kwargs: Dict[str, Any] = dict(
            message=error_data.get("message", "Unknown error"),
            status_code=status_code,
            code=error_data.get("code"),
            error_type=error_data.get("type"),
            param=error_data.get("param"),
            decline_code=error_data.get("decline_code"),
            details={k: v for k, v in error_data.items() if k not in _ERROR_FIELDS},
            request_id=request_id,
            body=body,
        )

        if kwargs["error_type"] == "card_error":
            return CardError(**kwargs)
        if status_code == 429:
            return RateLimitError(retry_after=retry_after, **kwargs)
        error_cls = _STATUS_ERRORS.get(status_code, cls)
        return error_cls(**kwargs)


class InvalidRequestError(APIError):
    """The request had invalid parameters."""


class AuthenticationError(APIError):
    """The API key was missing or invalid."""


class CardError(APIError):
    """The card could not be charged."""


class PermissionDeniedError(APIError):
    """The API key does not have access to the requested resource."""


class NotFoundError(APIError):
    """The requested resource does not exist."""


class RateLimitError(APIError):
    """Too many requests hit the API too quickly."""

    def __init__(self, message: str, status_code: int = 429, retry_after: Optional[int] = None, **kwargs: Any):
        super().__init__(message, status_code, **kwargs)
        self.retry_after = retry_after


class DecodeError(StripeError):
    """A response body did not match the expected type.

    This signals drift between the API and the SDK's models, not a problem
    with the request.
    """

    def __init__(
        self,
        message: str,
        target: Optional[str] = None,
        errors: Optional[List[dict[str, Any]]] = None,
    ):
        super().__init__(
            message,
            code="decode_error",
            details={"target": target, "errors": errors or []},
        )
        self.target = target
        self.errors = errors or []


_ERROR_FIELDS = frozenset({"message", "code", "type", "param", "decline_code"})

_STATUS_ERRORS: Dict[int, type] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    402: CardError,
    403: PermissionDeniedError,
    404: NotFoundError,
}
