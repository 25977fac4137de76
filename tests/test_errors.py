"""
Tests for error handling
"""
import pytest

from stripe_sdk import (
    APIError,
    AuthenticationError,
    CardError,
    DecodeError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    StripeError,
)


class TestStripeError:
    """Tests for the base exception."""

    def test_str_includes_code(self):
        """Should format as [code] message."""
        error = StripeError("Something went wrong", code="custom")

        assert str(error) == "[custom] Something went wrong"

    def test_default_code(self):
        """Should fall back to a generic code."""
        assert StripeError("oops").code == "stripe_error"

    def test_to_dict(self):
        """Should serialise to an error envelope."""
        error = StripeError("oops", code="x", details={"a": 1}, request_id="req_1")

        assert error.to_dict() == {
            "error": {"code": "x", "message": "oops", "details": {"a": 1}, "request_id": "req_1"}
        }


class TestFromResponse:
    """Tests for mapping error bodies to exceptions."""

    @pytest.mark.parametrize(
        "status_code,expected",
        [
            (400, InvalidRequestError),
            (401, AuthenticationError),
            (402, CardError),
            (403, PermissionDeniedError),
            (404, NotFoundError),
            (429, RateLimitError),
            (500, APIError),
            (502, APIError),
        ],
    )
    def test_status_mapping(self, status_code, expected):
        """Should choose the subclass from the status code."""
        error = APIError.from_response(status_code, {"error": {"message": "failed"}})

        assert type(error) is expected
        assert error.status_code == status_code

    def test_card_error_by_type(self):
        """Should map card_error bodies to CardError whatever the status."""
        body = {
            "error": {
                "type": "card_error",
                "code": "card_declined",
                "decline_code": "insufficient_funds",
                "message": "Your card has insufficient funds.",
                "charge": "ch_123",
            }
        }

        error = APIError.from_response(400, body, request_id="req_9")

        assert isinstance(error, CardError)
        assert error.code == "card_declined"
        assert error.decline_code == "insufficient_funds"
        assert error.details == {"charge": "ch_123"}
        assert error.request_id == "req_9"
        assert error.body == body

    def test_code_falls_back_to_type(self):
        """Should use the error type as code when there is no code."""
        error = APIError.from_response(400, {"error": {"type": "invalid_request_error", "message": "bad"}})

        assert error.code == "invalid_request_error"
        assert error.error_type == "invalid_request_error"

    def test_string_error(self):
        """Should accept a bare string error."""
        error = APIError.from_response(500, {"error": "Internal error"})

        assert error.message == "Internal error"
        assert error.code == "api_error"

    def test_rate_limit_retry_after(self):
        """Should carry the Retry-After value."""
        error = APIError.from_response(429, {"error": {"message": "slow down"}}, retry_after=30)

        assert isinstance(error, RateLimitError)
        assert error.retry_after == 30

    def test_hierarchy(self):
        """Should keep every API error catchable as StripeError."""
        assert issubclass(NotFoundError, APIError)
        assert issubclass(APIError, StripeError)
        assert issubclass(DecodeError, StripeError)
        assert not issubclass(DecodeError, APIError)


class TestDecodeError:
    """Tests for DecodeError."""

    def test_details(self):
        """Should expose target and validation errors."""
        error = DecodeError("bad body", target="Transfer", errors=[{"loc": ("amount",)}])

        assert error.code == "decode_error"
        assert error.details["target"] == "Transfer"
        assert error.errors == [{"loc": ("amount",)}]
