"""Hacker News resource types."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from hn_api.errors import DecodeError


class ItemType(str, Enum):
    """Kind of an item."""

    STORY = "story"
    COMMENT = "comment"
    JOB = "job"
    POLL = "poll"
    POLLOPT = "pollopt"


def _timestamp(value: object) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, int):
        raise TypeError(f"timestamp must be an integer, got {value!r}")
    return datetime.fromtimestamp(value, tz=UTC)


def _int_list(value: object) -> list[int]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(x, int) for x in value):
        raise TypeError(f"expected a list of integers, got {value!r}")
    return list(value)


def _optional_int(value: object) -> int | None:
    if value is None:
        return None
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


def _optional_str(value: object) -> str | None:
    return str(value) if value is not None else None


@dataclass
class Item:
    """A story, comment, job, poll or poll option."""

    id: int
    type: ItemType
    by: str | None = None
    time: datetime | None = None
    text: str | None = None
    url: str | None = None
    title: str | None = None
    score: int | None = None
    parent: int | None = None
    poll: int | None = None
    descendants: int | None = None
    kids: list[int] = field(default_factory=list)
    parts: list[int] = field(default_factory=list)
    deleted: bool = False
    dead: bool = False

    @property
    def author(self) -> str | None:
        """Username of the author, None for deleted items."""
        return self.by or None

    @classmethod
    def from_api_response(cls, data: object) -> "Item":
        """Create an Item from a decoded item body.

        Raises:
            DecodeError: If the body does not have the shape of an item
        """
        if not isinstance(data, dict):
            raise DecodeError(None, f"Item body is not an object: {data!r}")

        item_id = data.get("id")
        if not isinstance(item_id, int):
            raise DecodeError(item_id, f"Item has no integer id: {data!r}")

        try:
            item_type = ItemType(data.get("type"))
        except ValueError as e:
            raise DecodeError(item_id, f"Item {item_id} has unknown type {data.get('type')!r}") from e

        try:
            return cls(
                id=item_id,
                type=item_type,
                by=_optional_str(data.get("by")),
                time=_timestamp(data.get("time")),
                text=_optional_str(data.get("text")),
                url=_optional_str(data.get("url")),
                title=_optional_str(data.get("title")),
                score=_optional_int(data.get("score")),
                parent=_optional_int(data.get("parent")),
                poll=_optional_int(data.get("poll")),
                descendants=_optional_int(data.get("descendants")),
                kids=_int_list(data.get("kids")),
                parts=_int_list(data.get("parts")),
                deleted=bool(data.get("deleted", False)),
                dead=bool(data.get("dead", False)),
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise DecodeError(item_id, f"Malformed item {item_id}: {e}") from e


@dataclass
class User:
    """A user account."""

    id: str
    created: datetime
    karma: int
    about: str | None = None
    submitted: list[int] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: object) -> "User":
        """Create a User from a decoded user body.

        Raises:
            DecodeError: If the body does not have the shape of a user
        """
        if not isinstance(data, dict):
            raise DecodeError(None, f"User body is not an object: {data!r}")

        username = data.get("id")
        if not isinstance(username, str) or not username:
            raise DecodeError(username, f"User has no id: {data!r}")

        karma = data.get("karma")
        if not isinstance(karma, int):
            raise DecodeError(username, f"User {username!r} has no integer karma")

        try:
            created = _timestamp(data.get("created"))
            if created is None:
                raise ValueError("missing created timestamp")
            return cls(
                id=username,
                created=created,
                karma=karma,
                about=_optional_str(data.get("about")),
                submitted=_int_list(data.get("submitted")),
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise DecodeError(username, f"Malformed user {username!r}: {e}") from e


@dataclass
class Updates:
    """Recently changed items and profiles."""

    items: list[int]
    profiles: list[str]

    @classmethod
    def from_api_response(cls, data: object) -> "Updates":
        """Create Updates from the decoded updates body.

        Raises:
            DecodeError: If the body does not have the shape of an updates feed
        """
        if not isinstance(data, dict):
            raise DecodeError("updates", f"Updates body is not an object: {data!r}")

        profiles = data.get("profiles", [])
        if not isinstance(profiles, list) or not all(isinstance(p, str) for p in profiles):
            raise DecodeError("updates", f"Malformed profiles list: {profiles!r}")

        try:
            items = _int_list(data.get("items"))
        except TypeError as e:
            raise DecodeError("updates", f"Malformed items list: {e}") from e

        return cls(items=items, profiles=list(profiles))
