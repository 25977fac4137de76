"""
Stripe Python SDK

Typed bindings for the Stripe REST API.

Example usage:
    ```python
    from stripe_sdk import StripeClient, TransferParams, TransferReversalParams

    with StripeClient(api_key="sk_test_...") as client:
        # Move funds to a connected account
        transfer = client.transfers.create(
            TransferParams(amount=2000, currency="usd", destination="acct_123")
        )

        # Reverse part of it
        reversal = client.transfers.reverse(
            transfer.id, TransferReversalParams(amount=500)
        )

        # Inspect the platform balance
        balance = client.balance.retrieve()
    ```
"""
from __future__ import annotations

import time
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from .config import StripeSettings, get_settings
from .encoding import encode_form
from .logging import get_logger, mask_headers, mask_sensitive_data, mask_value
from .models.errors import APIError, DecodeError
from .resources.accounts import AccountsResource, AsyncAccountsResource
from .resources.balance import (
    AsyncBalanceResource,
    AsyncBalanceTransactionsResource,
    BalanceResource,
    BalanceTransactionsResource,
)
from .resources.bank_accounts import AsyncBankAccountsResource, BankAccountsResource
from .resources.sources import AsyncSourcesResource, SourcesResource
from .resources.transfers import (
    AsyncTransferReversalsResource,
    AsyncTransfersResource,
    TransferReversalsResource,
    TransfersResource,
)

logger = get_logger(__name__)

SDK_VERSION = "0.1.0"


class _BaseClient:
    """Configuration and response handling shared by both clients.

    Args:
        api_key: Secret API key (falls back to ``STRIPE_API_KEY``)
        base_url: API base URL including the version prefix
        api_version: Value for the ``Stripe-Version`` header
        stripe_account: Connected account to act as (``Stripe-Account`` header)
        timeout: Request timeout in seconds
        max_network_retries: Connection-level retries performed by the
            httpx transport
        settings: Settings to read defaults from (defaults to the environment)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        stripe_account: Optional[str] = None,
        timeout: Optional[float] = None,
        max_network_retries: Optional[int] = None,
        settings: Optional[StripeSettings] = None,
    ):
        settings = settings or get_settings()
        api_key = api_key or settings.api_key
        if not api_key:
            raise ValueError("API key is required")

        self._api_key = api_key
        self._base_url = (base_url or settings.api_base).rstrip("/")
        self._api_version = api_version or settings.api_version
        self._stripe_account = stripe_account or settings.stripe_account
        self._timeout = timeout if timeout is not None else settings.timeout
        self._max_network_retries = (
            max_network_retries if max_network_retries is not None else settings.max_network_retries
        )
        logger.debug("Client configured for %s with key %s", self._base_url, mask_value(self._api_key))

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "User-Agent": f"stripe-sdk-python/{SDK_VERSION}",
        }
        if self._api_version:
            headers["Stripe-Version"] = self._api_version
        if self._stripe_account:
            headers["Stripe-Account"] = self._stripe_account
        return headers

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _build_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]],
        data: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Build keyword arguments for ``httpx.Client.request``."""
        logger.debug(
            "Request %s %s %s",
            method,
            path,
            mask_sensitive_data(data if data is not None else params or {}),
        )
        kwargs: Dict[str, Any] = {}
        query = encode_form(params)
        if query:
            kwargs["params"] = query
        if method != "GET":
            kwargs["content"] = urlencode(encode_form(data)).encode("utf-8")
            kwargs["headers"] = {"Content-Type": "application/x-www-form-urlencoded"}
        return kwargs

    def _handle_response(self, response: httpx.Response, method: str, path: str, started: float) -> Dict[str, Any]:
        """Turn a raw response into a JSON object or raise the matching error."""
        request_id = response.headers.get("Request-Id")
        logger.debug(
            "Response %s %s -> %d (request_id=%s, %.1fms)",
            method,
            path,
            response.status_code,
            request_id,
            (time.monotonic() - started) * 1000,
        )

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {"error": {"message": response.text or response.reason_phrase}}
            if not isinstance(body, dict):
                body = {"error": {"message": str(body)}}
            raise self._api_error(response, body, request_id, method, path)

        try:
            body = response.json()
        except ValueError as e:
            raise DecodeError(f"Response to {method} {path} is not valid JSON", target="JSON") from e

        # Some endpoints answer 200 with an error object in the body.
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            raise self._api_error(response, body, request_id, method, path)
        if not isinstance(body, dict):
            raise DecodeError(f"Response to {method} {path} is not a JSON object", target="JSON")
        return body

    @staticmethod
    def _api_error(
        response: httpx.Response,
        body: Dict[str, Any],
        request_id: Optional[str],
        method: str,
        path: str,
    ) -> APIError:
        retry_after_header = response.headers.get("Retry-After")
        retry_after = int(retry_after_header) if retry_after_header and retry_after_header.isdigit() else None
        error = APIError.from_response(response.status_code, body, request_id, retry_after)
        logger.warning("API error on %s %s: %s (status=%d)", method, path, error, response.status_code)
        return error


class StripeClient(_BaseClient):
    """
    Synchronous Stripe API client.

    Provides access to the API resources:
    - accounts: Connected accounts
    - balance: The platform balance
    - balance_transactions: Movements through the balance
    - bank_accounts: External bank accounts of a connected account
    - sources: Payment sources (cards and generic sources)
    - transfers: Transfers to connected accounts
    - transfer_reversals: Reversals of transfers

    Every operation is a single request. The client itself never retries;
    ``max_network_retries`` is handed to the httpx transport, which retries
    failed connection attempts only.
    """

    def __init__(self, *args: Any, http_client: Optional[httpx.Client] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._client: Optional[httpx.Client] = http_client

        self.accounts = AccountsResource(self)
        self.balance = BalanceResource(self)
        self.balance_transactions = BalanceTransactionsResource(self)
        self.bank_accounts = BankAccountsResource(self)
        self.sources = SourcesResource(self)
        self.transfers = TransfersResource(self)
        self.transfer_reversals = TransferReversalsResource(self)

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            logger.debug("Opening HTTP client with headers %s", mask_headers(self._headers()))
            self._client = httpx.Client(
                headers=self._headers(),
                timeout=self._timeout,
                transport=httpx.HTTPTransport(retries=self._max_network_retries),
            )
        return self._client

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Make a single HTTP request and return the decoded JSON object.

        Raises:
            APIError: The API answered with an error object
            DecodeError: The body is not a JSON object
            httpx.TransportError: The request did not complete
        """
        client = self._get_client()
        kwargs = self._build_request(method, path, params, data)
        started = time.monotonic()
        response = client.request(method, self._url(path), **kwargs)
        return self._handle_response(response, method, path, started)

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "StripeClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncStripeClient(_BaseClient):
    """
    Async Stripe API client.

    Same resources and behaviour as :class:`StripeClient`, with awaitable
    operations.

    Example:
        ```python
        async with AsyncStripeClient(api_key="sk_test_...") as client:
            account = await client.accounts.retrieve("acct_123")
        ```
    """

    def __init__(self, *args: Any, http_client: Optional[httpx.AsyncClient] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._client: Optional[httpx.AsyncClient] = http_client

        self.accounts = AsyncAccountsResource(self)
        self.balance = AsyncBalanceResource(self)
        self.balance_transactions = AsyncBalanceTransactionsResource(self)
        self.bank_accounts = AsyncBankAccountsResource(self)
        self.sources = AsyncSourcesResource(self)
        self.transfers = AsyncTransfersResource(self)
        self.transfer_reversals = AsyncTransferReversalsResource(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            logger.debug("Opening HTTP client with headers %s", mask_headers(self._headers()))
            self._client = httpx.AsyncClient(
                headers=self._headers(),
                timeout=self._timeout,
                transport=httpx.AsyncHTTPTransport(retries=self._max_network_retries),
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Make a single HTTP request and return the decoded JSON object."""
        client = await self._get_client()
        kwargs = self._build_request(method, path, params, data)
        started = time.monotonic()
        response = await client.request(method, self._url(path), **kwargs)
        return self._handle_response(response, method, path, started)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncStripeClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
