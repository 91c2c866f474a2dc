"""Order-preserving concurrent fan-out."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from enum import Enum
from typing import TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")
R = TypeVar("R")


class AbsencePolicy(Enum):
    """What a resolver does when the store reports a resource absent."""

    STRICT = "strict"  # Absence raises NotFoundError
    TOLERANT = "tolerant"  # Absence yields None


async def gather_ordered(
    keys: Iterable[K],
    resolve: Callable[[K], Awaitable[R]],
) -> list[R]:
    """Resolve every key concurrently and return results in input order.

    All keys are started at once with no concurrency cap. Results are written
    into a slot per input index, so completion order does not matter. If any
    resolution raises, that exception propagates unchanged, the remaining
    resolutions are cancelled and no partial result is returned. When several
    failures complete together, the one with the lowest input index wins.

    Args:
        keys: Keys to resolve
        resolve: Coroutine function resolving a single key

    Returns:
        One result per key, in the order of ``keys``
    """
    key_list = list(keys)
    if not key_list:
        return []

    slots: list[R | None] = [None] * len(key_list)
    tasks = {asyncio.ensure_future(resolve(key)): index for index, key in enumerate(key_list)}
    pending = set(tasks)

    try:
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_EXCEPTION)

            failures = sorted(
                (tasks[task], error)
                for task in done
                if (error := task.exception()) is not None
            )
            if failures:
                index, error = failures[0]
                logger.warning(
                    "Batch of %d aborted at key %r: %s", len(key_list), key_list[index], error
                )
                raise error

            for task in done:
                slots[tasks[task]] = task.result()
    finally:
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    return slots  # type: ignore[return-value]
