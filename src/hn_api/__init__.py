"""Async Hacker News API client with order-preserving batch resolution."""

__version__ = "0.1.0"

from hn_api.client import HNClient  # noqa: E402
from hn_api.errors import (  # noqa: E402
    DecodeError,
    HNClientError,
    ItemNotFoundError,
    NotFoundError,
    TransportError,
    UserNotFoundError,
)
from hn_api.types import Item, ItemType, Updates, User  # noqa: E402

__all__ = [
    "__version__",
    "HNClient",
    "HNClientError",
    "NotFoundError",
    "ItemNotFoundError",
    "UserNotFoundError",
    "TransportError",
    "DecodeError",
    "Item",
    "ItemType",
    "User",
    "Updates",
]
