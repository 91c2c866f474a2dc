"""HTTP transport for the Hacker News API."""

import logging
from enum import Enum

import httpx

from hn_api.config import settings
from hn_api.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)


class Aggregate(str, Enum):
    """Fixed endpoints returning id lists or summaries."""

    MAX_ITEM = "maxitem"
    TOP_STORIES = "topstories"
    NEW_STORIES = "newstories"
    BEST_STORIES = "beststories"
    ASK_STORIES = "askstories"
    SHOW_STORIES = "showstories"
    JOB_STORIES = "jobstories"
    UPDATES = "updates"


class ResourceFetcher:
    """One round trip per call against the HN Firebase API.

    Returns the decoded JSON body, ``None`` when the body is a JSON ``null``.
    Safe for concurrent use: all calls share one pooled ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        max_connections: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            base_url: Base URL for HN API (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            retries: Connection retries done by the transport (defaults to settings)
            max_connections: Connection pool size (defaults to settings)
            transport: Custom httpx transport, replaces the default one
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.retries = retries if retries is not None else settings.transport_retries
        self.max_connections = max_connections or settings.max_connections
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ResourceFetcher":
        """Enter async context."""
        limits = httpx.Limits(max_connections=self.max_connections)
        transport = self._transport or httpx.AsyncHTTPTransport(
            retries=self.retries, limits=limits
        )
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            headers={"User-Agent": settings.user_agent},
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise RuntimeError("ResourceFetcher must be used as async context manager")
        return self._client

    async def _get_json(self, key: object, path: str) -> object:
        url = f"{self.base_url}/{path}.json"
        logger.debug("GET %s", url)
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                key,
                f"HTTP {e.response.status_code} fetching {path}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise TransportError(key, f"Request for {path} failed: {e!r}") from e

        try:
            result: object = response.json()
        except ValueError as e:
            raise DecodeError(key, f"Invalid JSON body for {path}: {e}") from e
        return result

    async def fetch_item(self, item_id: int) -> object | None:
        """Fetch the raw body of an item, None if the item does not exist."""
        return await self._get_json(item_id, f"item/{item_id}")

    async def fetch_user(self, username: str) -> object | None:
        """Fetch the raw body of a user, None if the user does not exist."""
        return await self._get_json(username, f"user/{username}")

    async def fetch_aggregate(self, endpoint: Aggregate) -> object:
        """Fetch the raw body of an aggregate endpoint."""
        return await self._get_json(endpoint.value, endpoint.value)
