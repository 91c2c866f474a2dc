"""Hacker News API client."""

import logging
from collections.abc import Sequence

import httpx

from hn_api.batch import gather_ordered
from hn_api.errors import DecodeError, ItemNotFoundError, UserNotFoundError
from hn_api.fetcher import Aggregate, ResourceFetcher
from hn_api.resolver import Resolver
from hn_api.types import Item, Updates, User

logger = logging.getLogger(__name__)


class HNClient:
    """Async client for the Hacker News API.

    No caching: every call goes to the network. Batch calls start one request
    per key concurrently and either return a complete, input-ordered list or
    raise a single error.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the HN API client.

        Args:
            base_url: Base URL for HN API (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            transport: Custom httpx transport
        """
        self.fetcher = ResourceFetcher(base_url=base_url, timeout=timeout, transport=transport)
        self.items: Resolver[int, Item] = Resolver(
            self.fetcher.fetch_item, Item.from_api_response, ItemNotFoundError
        )
        self.users: Resolver[str, User] = Resolver(
            self.fetcher.fetch_user, User.from_api_response, UserNotFoundError
        )

    async def __aenter__(self) -> "HNClient":
        """Enter async context."""
        await self.fetcher.__aenter__()
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context."""
        await self.fetcher.__aexit__(*args)

    async def get_item(self, item_id: int) -> Item:
        """Return the item with the specified id.

        Raises:
            ItemNotFoundError: If the item does not exist
        """
        return await self.items.get(item_id)

    async def try_get_item(self, item_id: int) -> Item | None:
        """Return the item with the specified id, None if it does not exist."""
        return await self.items.try_get(item_id)

    async def get_items(self, item_ids: Sequence[int]) -> list[Item]:
        """Return the items with the specified ids, in order.

        Fails if any item does not exist or any request fails.
        """
        return await self.items.get_many(item_ids)

    async def try_get_items(self, item_ids: Sequence[int]) -> list[Item | None]:
        """Return the items with the specified ids, None for missing ones.

        Fails if any request fails.
        """
        return await self.items.try_get_many(item_ids)

    async def get_user(self, username: str) -> User:
        """Return the user with the specified username.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return await self.users.get(username)

    async def try_get_user(self, username: str) -> User | None:
        """Return the user with the specified username, None if it does not exist."""
        return await self.users.try_get(username)

    async def get_users(self, usernames: Sequence[str]) -> list[User]:
        """Return the users with the specified usernames, in order."""
        return await self.users.get_many(usernames)

    async def try_get_users(self, usernames: Sequence[str]) -> list[User | None]:
        """Return the users with the specified usernames, None for missing ones."""
        return await self.users.try_get_many(usernames)

    async def get_authors(self, items: Sequence[Item]) -> list[User]:
        """Return the authors of the specified items, in order.

        Raises:
            UserNotFoundError: If an item has no author (raised before any
                request is made) or an author does not exist
        """
        usernames: list[str] = []
        for item in items:
            if item.author is None:
                raise UserNotFoundError("")
            usernames.append(item.author)
        return await self.users.get_many(usernames)

    async def try_get_authors(self, items: Sequence[Item | None]) -> list[User | None]:
        """Return the authors of the specified items, in order.

        Missing items, items without author and missing users all yield None.
        Only entries with an author are requested. Fails if any request fails.
        """
        usernames = [item.author if item is not None else None for item in items]

        async def resolve(username: str | None) -> User | None:
            if username is None:
                return None
            return await self.users.try_get(username)

        return await gather_ordered(usernames, resolve)

    async def get_max_item_id(self) -> int:
        """Return the id of the newest item.

        Walk backwards from it to reach the latest items.
        """
        result = await self.fetcher.fetch_aggregate(Aggregate.MAX_ITEM)
        if not isinstance(result, int) or isinstance(result, bool):
            raise DecodeError(Aggregate.MAX_ITEM.value, f"Unexpected max item response: {result!r}")
        return result

    async def _get_story_ids(self, endpoint: Aggregate) -> list[int]:
        result = await self.fetcher.fetch_aggregate(endpoint)
        if not isinstance(result, list) or not all(isinstance(x, int) for x in result):
            raise DecodeError(endpoint.value, f"Unexpected {endpoint.value} response: {result!r}")
        logger.debug("%s returned %d ids", endpoint.value, len(result))
        return result

    async def get_top_stories(self) -> list[int]:
        """Return the top story ids, ranked."""
        return await self._get_story_ids(Aggregate.TOP_STORIES)

    async def get_new_stories(self) -> list[int]:
        """Return the new story ids, most recent first."""
        return await self._get_story_ids(Aggregate.NEW_STORIES)

    async def get_best_stories(self) -> list[int]:
        """Return the best story ids, ranked."""
        return await self._get_story_ids(Aggregate.BEST_STORIES)

    async def get_ask_stories(self) -> list[int]:
        """Return up to 200 latest Ask HN story ids."""
        return await self._get_story_ids(Aggregate.ASK_STORIES)

    async def get_show_stories(self) -> list[int]:
        """Return up to 200 latest Show HN story ids."""
        return await self._get_story_ids(Aggregate.SHOW_STORIES)

    async def get_job_stories(self) -> list[int]:
        """Return up to 200 latest job story ids."""
        return await self._get_story_ids(Aggregate.JOB_STORIES)

    async def get_updates(self) -> Updates:
        """Return the items and profiles that changed recently."""
        result = await self.fetcher.fetch_aggregate(Aggregate.UPDATES)
        return Updates.from_api_response(result)
