"""Test configuration and fixtures."""

import asyncio
import json
from collections.abc import AsyncGenerator

import httpx
import pytest

from hn_api.client import HNClient
from hn_api.fetcher import ResourceFetcher

TEST_BASE_URL = "https://hn.test/v0"


class FakeHN:
    """In-memory Hacker News API served through httpx.MockTransport.

    Unknown paths answer with a JSON ``null`` body like the real API.
    """

    def __init__(self) -> None:
        self.bodies: dict[str, object] = {}
        self.raw: dict[str, bytes] = {}
        self.statuses: dict[str, int] = {}
        self.timeouts: set[str] = set()
        self.delays: dict[str, float] = {}
        self.requests: list[str] = []

    def add_item(self, item_id: int, **fields: object) -> dict[str, object]:
        """Register an item; defaults to a story by 'pg'."""
        body: dict[str, object] = {
            "id": item_id,
            "type": "story",
            "by": "pg",
            "time": 1160418111,
            "title": f"Story {item_id}",
            "score": 10,
        }
        body.update(fields)
        self.bodies[f"item/{item_id}"] = body
        return body

    def add_user(self, username: str, karma: int = 100, **fields: object) -> dict[str, object]:
        """Register a user."""
        body: dict[str, object] = {
            "id": username,
            "created": 1160418092,
            "karma": karma,
            "submitted": [1, 2, 3],
        }
        body.update(fields)
        self.bodies[f"user/{username}"] = body
        return body

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/v0/").removesuffix(".json")
        self.requests.append(path)

        if path in self.delays:
            await asyncio.sleep(self.delays[path])
        if path in self.timeouts:
            raise httpx.ReadTimeout("timed out", request=request)
        if path in self.statuses:
            return httpx.Response(self.statuses[path], text="error")
        if path in self.raw:
            return httpx.Response(200, content=self.raw[path])

        body = self.bodies.get(path)
        return httpx.Response(
            200,
            content=json.dumps(body).encode(),
            headers={"Content-Type": "application/json"},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_hn() -> FakeHN:
    """Create an empty fake HN API."""
    return FakeHN()


@pytest.fixture
async def hn_client(fake_hn: FakeHN) -> AsyncGenerator[HNClient, None]:
    """Create a client talking to the fake HN API."""
    async with HNClient(base_url=TEST_BASE_URL, transport=fake_hn.transport) as client:
        yield client


@pytest.fixture
async def fetcher(fake_hn: FakeHN) -> AsyncGenerator[ResourceFetcher, None]:
    """Create a resource fetcher talking to the fake HN API."""
    async with ResourceFetcher(base_url=TEST_BASE_URL, transport=fake_hn.transport) as f:
        yield f
