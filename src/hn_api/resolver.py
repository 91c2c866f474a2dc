"""Strict and tolerant resolution of single resources and batches."""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Generic, TypeVar

from hn_api.batch import AbsencePolicy, gather_ordered
from hn_api.errors import DecodeError, NotFoundError

logger = logging.getLogger(__name__)

K = TypeVar("K")
R = TypeVar("R")


class Resolver(Generic[K, R]):
    """Turns raw fetches for one resource kind into decoded resources.

    ``get`` treats absence as an error, ``try_get`` as a valid ``None``.
    Every call performs exactly one round trip per key.
    """

    def __init__(
        self,
        fetch: Callable[[K], Awaitable[object | None]],
        decode: Callable[[object], R],
        not_found: Callable[[K], NotFoundError],
    ) -> None:
        """Initialize the resolver.

        Args:
            fetch: Fetches the raw body for a key, None on absence
            decode: Builds the resource from a raw body
            not_found: Builds the error raised on strict absence
        """
        self.fetch = fetch
        self.decode = decode
        self.not_found = not_found

    async def resolve(self, key: K, policy: AbsencePolicy) -> R | None:
        """Resolve a single key under the given absence policy."""
        raw = await self.fetch(key)
        if raw is None:
            logger.debug("Resource %r absent", key)
            if policy is AbsencePolicy.STRICT:
                raise self.not_found(key)
            return None

        try:
            return self.decode(raw)
        except DecodeError as e:
            if e.key is None:
                raise DecodeError(key, str(e)) from e
            raise

    async def resolve_many(self, keys: Iterable[K], policy: AbsencePolicy) -> list[R | None]:
        """Resolve all keys concurrently under the given absence policy."""
        return await gather_ordered(keys, lambda key: self.resolve(key, policy))

    async def get(self, key: K) -> R:
        """Return the resource, raising NotFoundError if it does not exist."""
        return await self.resolve(key, AbsencePolicy.STRICT)  # type: ignore[return-value]

    async def try_get(self, key: K) -> R | None:
        """Return the resource, or None if it does not exist."""
        return await self.resolve(key, AbsencePolicy.TOLERANT)

    async def get_many(self, keys: Iterable[K]) -> list[R]:
        """Return all resources in order.

        Fails with the first error observed if any key is absent or any
        request fails.
        """
        return await self.resolve_many(keys, AbsencePolicy.STRICT)  # type: ignore[return-value]

    async def try_get_many(self, keys: Iterable[K]) -> list[R | None]:
        """Return all resources in order, None for absent keys.

        Fails if any request fails.
        """
        return await self.resolve_many(keys, AbsencePolicy.TOLERANT)
