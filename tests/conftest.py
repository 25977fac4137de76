"""
Pytest configuration and fixtures for Stripe SDK tests.
"""
from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from stripe_sdk import AsyncStripeClient, StripeClient, StripeSettings

BASE_URL = "https://api.stripe.com/v1"

_SETTINGS_ENV = (
    "STRIPE_API_KEY",
    "STRIPE_API_BASE",
    "STRIPE_API_VERSION",
    "STRIPE_STRIPE_ACCOUNT",
    "STRIPE_TIMEOUT",
    "STRIPE_MAX_NETWORK_RETRIES",
)


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


@dataclass
class RecordedRequest:
    method: str
    url: str
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def form(self) -> List[Tuple[str, str]]:
        """Decoded form body as ordered ``(key, value)`` pairs."""
        return parse_qsl(self.content.decode("utf-8"), keep_blank_values=True)

    @property
    def query(self) -> List[Tuple[str, str]]:
        return parse_qsl(urlsplit(self.url).query, keep_blank_values=True)


class _LocalHTTPXMock:
    """Minimal pytest-httpx-style mock that also records outgoing requests."""

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[RecordedRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, response=response)
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    @property
    def last_request(self) -> RecordedRequest:
        assert self.requests, "No request was sent"
        return self.requests[-1]

    def _handle(self, method: str, url: str, params: Any, kwargs: dict[str, Any]) -> httpx.Response:
        full_url = _append_query_params(str(url), params)
        self.requests.append(
            RecordedRequest(
                method=method.upper(),
                url=full_url,
                content=kwargs.get("content") or b"",
                headers=dict(kwargs.get("headers") or {}),
            )
        )
        match = self._pop_match(method, full_url)
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _append_query_params(url: str, params: Any) -> str:
    if not params:
        return url
    query = urlencode(params, doseq=True)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock(monkeypatch):
    """Patch httpx so requests are served from registered responses."""
    mock = _LocalHTTPXMock()

    async def _async_request(self, method, url, params=None, **kwargs):
        return mock._handle(method, url, params, kwargs)

    def _sync_request(self, method, url, params=None, **kwargs):
        return mock._handle(method, url, params, kwargs)

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    monkeypatch.setattr(httpx.Client, "request", _sync_request)
    return mock


BANK_ACCOUNT = {
    "id": "ba_123",
    "object": "bank_account",
    "account": "acct_123",
    "account_holder_name": "Jenny Rosen",
    "account_holder_type": "individual",
    "bank_name": "STRIPE TEST BANK",
    "country": "US",
    "currency": "usd",
    "default_for_currency": True,
    "fingerprint": "1JWtPxqbdX5Gamtc",
    "last4": "6789",
    "metadata": {},
    "routing_number": "110000000",
    "status": "new",
}

CARD = {
    "id": "card_123",
    "object": "card",
    "address_zip": None,
    "brand": "Visa",
    "country": "US",
    "cvc_check": "pass",
    "exp_month": 8,
    "exp_year": 2030,
    "fingerprint": "Xt5EWLLDS7FJjR1c",
    "funding": "credit",
    "last4": "4242",
    "metadata": {},
}

TRANSFER_REVERSAL = {
    "id": "trr_123",
    "object": "transfer_reversal",
    "amount": 500,
    "balance_transaction": "txn_456",
    "created": 1700000100,
    "currency": "usd",
    "metadata": {},
    "transfer": "tr_123",
}

# Mock response data
MOCK_RESPONSES = {
    "account": {
        "id": "acct_123",
        "object": "account",
        "business_name": None,
        "charges_enabled": False,
        "country": "US",
        "default_currency": "usd",
        "details_submitted": False,
        "email": "jenny@example.com",
        "external_accounts": {
            "object": "list",
            "data": [BANK_ACCOUNT],
            "has_more": False,
            "total_count": 1,
            "url": "/v1/accounts/acct_123/external_accounts",
        },
        "metadata": {},
        "payout_schedule": {"delay_days": 2, "interval": "daily"},
        "payouts_enabled": False,
        "statement_descriptor": "",
        "timezone": "Etc/UTC",
        "tos_acceptance": {"date": None, "ip": None, "user_agent": None},
        "type": "custom",
    },
    "balance": {
        "object": "balance",
        "available": [{"currency": "usd", "amount": 120000, "source_types": {"card": 120000}}],
        "livemode": False,
        "pending": [{"currency": "usd", "amount": 5000, "source_types": {"card": 5000}}],
    },
    "balance_transaction": {
        "id": "txn_123",
        "object": "balance_transaction",
        "amount": 2000,
        "available_on": 1700100000,
        "created": 1700000000,
        "currency": "usd",
        "description": "Payment for order 6735",
        "fee": 59,
        "fee_details": [
            {
                "amount": 59,
                "application": None,
                "currency": "usd",
                "description": "Stripe processing fees",
                "type": "stripe_fee",
            }
        ],
        "net": 1941,
        "source": CARD,
        "status": "available",
        "type": "charge",
    },
    "bank_account": BANK_ACCOUNT,
    "card": CARD,
    "source": {
        "id": "src_123",
        "object": "source",
        "amount": None,
        "client_secret": "src_client_secret_abc",
        "created": 1700000000,
        "currency": None,
        "flow": "none",
        "livemode": False,
        "metadata": {},
        "owner": {
            "address": None,
            "email": "jenny@example.com",
            "name": None,
            "phone": None,
            "verified_address": None,
            "verified_email": None,
            "verified_name": None,
            "verified_phone": None,
        },
        "statement_descriptor": None,
        "status": "chargeable",
        "type": "card",
        "usage": "reusable",
        "card": {
            "brand": "Visa",
            "country": "US",
            "exp_month": 8,
            "exp_year": 2030,
            "fingerprint": "Xt5EWLLDS7FJjR1c",
            "funding": "credit",
            "last4": "4242",
            "three_d_secure": "optional",
        },
    },
    "transfer": {
        "id": "tr_123",
        "object": "transfer",
        "amount": 2000,
        "amount_reversed": 0,
        "balance_transaction": "txn_123",
        "created": 1700000000,
        "currency": "usd",
        "description": None,
        "destination": "acct_123",
        "destination_payment": "py_123",
        "livemode": False,
        "metadata": {},
        "reversals": {
            "object": "list",
            "data": [],
            "has_more": False,
            "total_count": 0,
            "url": "/v1/transfers/tr_123/reversals",
        },
        "reversed": False,
        "source_transaction": None,
        "source_type": "card",
        "transfer_group": None,
    },
    "transfer_reversal": TRANSFER_REVERSAL,
}


def list_of(url: str, *items: dict, has_more: bool = False) -> dict:
    """Wrap items in a list envelope."""
    return {"object": "list", "data": list(items), "has_more": has_more, "url": url}


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "sk_test_123"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return BASE_URL


@pytest.fixture
def settings(monkeypatch) -> StripeSettings:
    """Settings isolated from the developer's environment and .env file."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    return StripeSettings(_env_file=None)


@pytest.fixture
def client(api_key: str, base_url: str, settings: StripeSettings) -> StripeClient:
    """Create a sync test client."""
    client = StripeClient(api_key=api_key, base_url=base_url, settings=settings)
    yield client
    client.close()


@pytest.fixture
async def async_client(api_key: str, base_url: str, settings: StripeSettings) -> AsyncStripeClient:
    """Create an async test client."""
    client = AsyncStripeClient(api_key=api_key, base_url=base_url, settings=settings)
    yield client
    await client.close()


@pytest.fixture
def mock_responses() -> dict:
    """Return a fresh copy of the mock response data."""
    return copy.deepcopy(MOCK_RESPONSES)
