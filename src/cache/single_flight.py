# src/cache/single_flight.py — v1
"""In-process cache tier with deduplication of concurrent loads.

SingleFlight keeps two tables: resolved values, and tasks for loads that
are still running. For any key at most one loader call is in flight;
concurrent callers await the same task. A failed load leaves nothing
behind, so the next caller starts a fresh attempt.

The check for an existing task and the registration of a new one happen
without an intervening ``await``, which makes them atomic on a single
event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Loader = Callable[[str], Awaitable[T]]


class SingleFlight(Generic[T]):
    """Key -> value cache whose loads are coalesced per key."""

    def __init__(self, name: str = "cache") -> None:
        self._name = name
        self._resolved: dict[str, T] = {}
        self._pending: dict[str, asyncio.Task[T]] = {}

    async def resolve(self, key: str, loader: Loader[T]) -> T:
        """Return the value for ``key``, loading it at most once concurrently.

        Raises:
            Whatever ``loader`` raises; every concurrent waiter sees it.
        """
        if key in self._resolved:
            return self._resolved[key]

        task = self._pending.get(key)
        if task is None:
            task = asyncio.ensure_future(self._run(key, loader))
            task.add_done_callback(_consume_exception)
            self._pending[key] = task
            logger.debug("%s: started load for %s", self._name, key)
        else:
            logger.debug("%s: joined in-flight load for %s", self._name, key)

        # Shielded so a cancelled waiter does not cancel the shared load.
        return await asyncio.shield(task)

    async def _run(self, key: str, loader: Loader[T]) -> T:
        me = asyncio.current_task()
        try:
            value = await loader(key)
        finally:
            registered = self._pending.get(key) is me
            if registered:
                del self._pending[key]
        # A discard() during the load invalidates its result.
        if registered:
            self._resolved[key] = value
        return value

    def get(self, key: str) -> T | None:
        return self._resolved.get(key)

    def contains(self, key: str) -> bool:
        return key in self._resolved

    def is_pending(self, key: str) -> bool:
        return key in self._pending

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def __len__(self) -> int:
        return len(self._resolved)

    def discard(self, key: str) -> None:
        """Forget ``key`` in both tables. A running load is not cancelled."""
        self._resolved.pop(key, None)
        self._pending.pop(key, None)

    def clear(self) -> None:
        """Forget every key in both tables."""
        self._resolved.clear()
        self._pending.clear()


def _consume_exception(task: asyncio.Task) -> None:
    # Marks the failure as retrieved when every waiter was cancelled first.
    if not task.cancelled():
        task.exception()
