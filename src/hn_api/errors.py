"""Errors raised by the Hacker News client."""


class HNClientError(Exception):
    """Base exception for Hacker News client errors.

    ``key`` is the item id, username or endpoint name the failure belongs to.
    """

    def __init__(self, key: object, message: str) -> None:
        super().__init__(message)
        self.key = key


class NotFoundError(HNClientError):
    """The store reported absence where a resource was required."""


class ItemNotFoundError(NotFoundError):
    """Item does not exist."""

    def __init__(self, item_id: int) -> None:
        super().__init__(item_id, f"Item {item_id} not found")


class UserNotFoundError(NotFoundError):
    """User does not exist, or an item has no author."""

    def __init__(self, username: str) -> None:
        super().__init__(username, f"User {username!r} not found")


class TransportError(HNClientError):
    """Network failure or non-success HTTP status."""

    def __init__(self, key: object, message: str, status_code: int | None = None) -> None:
        super().__init__(key, message)
        self.status_code = status_code


class DecodeError(HNClientError):
    """Response body could not be parsed into the expected shape."""
