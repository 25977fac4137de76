"""
Base resource classes for Stripe SDK.

This module provides the foundation for all API resource classes,
supporting both synchronous and asynchronous clients.

Most resources only declare what differs between them: the collection path
and the entity type. The call plumbing (encode the params, send the request,
decode the response) lives here once:

    class TransfersResource(SyncAPIResource[Transfer, TransferParams, TransferUpdateParams]):
        path = "/transfers"
        model = Transfer
"""
from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Dict,
    Generic,
    Optional,
    TypeVar,
)

from ..decoding import decode
from ..models.base import ListParams, StripeParams
from ..models.list_object import ListObject

if TYPE_CHECKING:
    from ..client import AsyncStripeClient, StripeClient

ModelT = TypeVar("ModelT")
CreateT = TypeVar("CreateT", bound=StripeParams)
UpdateT = TypeVar("UpdateT", bound=StripeParams)


def _encode(params: Optional[StripeParams]) -> Optional[Dict[str, Any]]:
    return params.to_params() if params is not None else None


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncStripeClient") -> None:
        self._client = client

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a GET request.

        Args:
            path: API endpoint path
            params: Query parameters

        Returns:
            Response data as dictionary
        """
        return await self._client._request("GET", path, params=params)

    async def _post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a POST request.

        Args:
            path: API endpoint path
            data: Request body

        Returns:
            Response data as dictionary
        """
        return await self._client._request("POST", path, data=data)

    async def _create(self, path: str, target: Any, params: Optional[StripeParams]) -> Any:
        return decode(target, await self._post(path, _encode(params)))

    async def _retrieve(self, path: str, target: Any) -> Any:
        return decode(target, await self._get(path))

    async def _update(self, path: str, target: Any, params: Optional[StripeParams]) -> Any:
        return decode(target, await self._post(path, _encode(params)))

    async def _list(self, path: str, item_type: Any, params: Optional[ListParams]) -> Any:
        return decode(ListObject[item_type], await self._get(path, _encode(params)))


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "StripeClient") -> None:
        self._client = client

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a GET request.

        Args:
            path: API endpoint path
            params: Query parameters

        Returns:
            Response data as dictionary
        """
        return self._client._request("GET", path, params=params)

    def _post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a POST request.

        Args:
            path: API endpoint path
            data: Request body

        Returns:
            Response data as dictionary
        """
        return self._client._request("POST", path, data=data)

    def _create(self, path: str, target: Any, params: Optional[StripeParams]) -> Any:
        return decode(target, self._post(path, _encode(params)))

    def _retrieve(self, path: str, target: Any) -> Any:
        return decode(target, self._get(path))

    def _update(self, path: str, target: Any, params: Optional[StripeParams]) -> Any:
        return decode(target, self._post(path, _encode(params)))

    def _list(self, path: str, item_type: Any, params: Optional[ListParams]) -> Any:
        return decode(ListObject[item_type], self._get(path, _encode(params)))


class AsyncAPIResource(AsyncBaseResource, Generic[ModelT, CreateT, UpdateT]):
    """Async create/retrieve/update over a top-level collection.

    Subclasses set ``path`` (e.g. ``"/transfers"``) and ``model``.
    """

    path: ClassVar[str]
    model: ClassVar[Any]

    async def create(self, params: CreateT) -> ModelT:
        """Create a new object from ``params``."""
        return await self._create(self.path, self.model, params)

    async def retrieve(self, id: str) -> ModelT:
        """Retrieve an object by ID."""
        return await self._retrieve(f"{self.path}/{id}", self.model)

    async def update(self, id: str, params: UpdateT) -> ModelT:
        """Update an object. Fields left unset in ``params`` are not changed."""
        return await self._update(f"{self.path}/{id}", self.model, params)


class SyncAPIResource(SyncBaseResource, Generic[ModelT, CreateT, UpdateT]):
    """Sync create/retrieve/update over a top-level collection.

    Subclasses set ``path`` (e.g. ``"/transfers"``) and ``model``.
    """

    path: ClassVar[str]
    model: ClassVar[Any]

    def create(self, params: CreateT) -> ModelT:
        """Create a new object from ``params``."""
        return self._create(self.path, self.model, params)

    def retrieve(self, id: str) -> ModelT:
        """Retrieve an object by ID."""
        return self._retrieve(f"{self.path}/{id}", self.model)

    def update(self, id: str, params: UpdateT) -> ModelT:
        """Update an object. Fields left unset in ``params`` are not changed."""
        return self._update(f"{self.path}/{id}", self.model, params)


class AsyncNestedAPIResource(AsyncBaseResource, Generic[ModelT, CreateT, UpdateT]):
    """Async create/retrieve/update/list over a collection owned by a parent.

    ``path`` is a template with a ``{parent_id}`` placeholder, e.g.
    ``"/transfers/{parent_id}/reversals"``.
    """

    path: ClassVar[str]
    model: ClassVar[Any]

    def _collection(self, parent_id: str) -> str:
        return self.path.format(parent_id=parent_id)

    def _create_payload(self, params: CreateT) -> Optional[Dict[str, Any]]:
        return _encode(params)

    async def create(self, parent_id: str, params: CreateT) -> ModelT:
        """Create a new object under ``parent_id``."""
        raw = await self._post(self._collection(parent_id), self._create_payload(params))
        return decode(self.model, raw)

    async def retrieve(self, parent_id: str, id: str) -> ModelT:
        """Retrieve an object under ``parent_id`` by ID."""
        return await self._retrieve(f"{self._collection(parent_id)}/{id}", self.model)

    async def update(self, parent_id: str, id: str, params: UpdateT) -> ModelT:
        """Update an object under ``parent_id``."""
        return await self._update(f"{self._collection(parent_id)}/{id}", self.model, params)

    async def list(self, parent_id: str, params: Optional[ListParams] = None) -> ListObject[ModelT]:
        """Fetch one page of the objects under ``parent_id``."""
        return await self._list(self._collection(parent_id), self.model, params)


class SyncNestedAPIResource(SyncBaseResource, Generic[ModelT, CreateT, UpdateT]):
    """Sync create/retrieve/update/list over a collection owned by a parent.

    ``path`` is a template with a ``{parent_id}`` placeholder, e.g.
    ``"/transfers/{parent_id}/reversals"``.
    """

    path: ClassVar[str]
    model: ClassVar[Any]

    def _collection(self, parent_id: str) -> str:
        return self.path.format(parent_id=parent_id)

    def _create_payload(self, params: CreateT) -> Optional[Dict[str, Any]]:
        return _encode(params)

    def create(self, parent_id: str, params: CreateT) -> ModelT:
        """Create a new object under ``parent_id``."""
        return decode(self.model, self._post(self._collection(parent_id), self._create_payload(params)))

    def retrieve(self, parent_id: str, id: str) -> ModelT:
        """Retrieve an object under ``parent_id`` by ID."""
        return self._retrieve(f"{self._collection(parent_id)}/{id}", self.model)

    def update(self, parent_id: str, id: str, params: UpdateT) -> ModelT:
        """Update an object under ``parent_id``."""
        return self._update(f"{self._collection(parent_id)}/{id}", self.model, params)

    def list(self, parent_id: str, params: Optional[ListParams] = None) -> ListObject[ModelT]:
        """Fetch one page of the objects under ``parent_id``."""
        return self._list(self._collection(parent_id), self.model, params)


__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
    "AsyncAPIResource",
    "SyncAPIResource",
    "AsyncNestedAPIResource",
    "SyncNestedAPIResource",
]
