"""Paginated list envelope for the Stripe SDK."""
from __future__ import annotations

from typing import Generic, List, Literal, Optional, TypeVar

from .base import StripeObject

T = TypeVar("T")


class ListObject(StripeObject, Generic[T]):
    """A single page of a list endpoint.

    The same model decodes every element type: ``ListObject[Transfer]``,
    ``ListObject[BankAccount]`` and so on. ``data`` keeps the order the
    server sent. Fetching the next page is left to the caller, who passes
    ``last_id`` as ``starting_after`` on the next list call.

    Attributes:
        object: Always ``"list"``
        data: Items on this page
        has_more: Whether more items exist beyond this page
        total_count: Total number of items (only when the API includes it)
        url: The URL this list was fetched from
    """

    object: Literal["list"]
    data: List[T]
    has_more: bool
    total_count: Optional[int] = None
    url: str

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]

    @property
    def is_empty(self) -> bool:
        """Check if the page is empty."""
        return len(self.data) == 0

    @property
    def last_id(self) -> Optional[str]:
        """ID of the last item on the page, or None when it is empty."""
        if not self.data:
            return None
        return getattr(self.data[-1], "id", None)
