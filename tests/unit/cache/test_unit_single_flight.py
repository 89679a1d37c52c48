# tests/unit/cache/test_single_flight.py — v1
"""Tests for cache/single_flight.py — in-process tier and load dedup."""

from __future__ import annotations

import asyncio
import gc
import weakref

import pytest

from agentdocs.cache.single_flight import SingleFlight


class GatedLoader:
    """Loader that blocks until released and counts invocations."""

    def __init__(self, value: str = "value", error: Exception | None = None) -> None:
        self.calls: list[str] = []
        self.release = asyncio.Event()
        self.value = value
        self.error = error

    async def __call__(self, key: str) -> str:
        self.calls.append(key)
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return f"{self.value}:{key}"


async def _settle(rounds: int = 3) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


class TestResolve:
    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_load(self):
        flight: SingleFlight[str] = SingleFlight()
        loader = GatedLoader()

        waiters = [asyncio.create_task(flight.resolve("k", loader)) for _ in range(5)]
        await asyncio.sleep(0)
        assert flight.is_pending("k")
        loader.release.set()
        results = await asyncio.gather(*waiters)

        assert loader.calls == ["k"]
        assert results == ["value:k"] * 5
        assert flight.pending_count == 0

    @pytest.mark.asyncio
    async def test_resolved_value_served_without_load(self):
        flight: SingleFlight[str] = SingleFlight()
        loader = GatedLoader()
        loader.release.set()

        await flight.resolve("k", loader)
        await flight.resolve("k", loader)

        assert loader.calls == ["k"]
        assert flight.get("k") == "value:k"
        assert flight.contains("k")

    @pytest.mark.asyncio
    async def test_different_keys_load_in_parallel(self):
        flight: SingleFlight[str] = SingleFlight()
        loader = GatedLoader()

        a = asyncio.create_task(flight.resolve("a", loader))
        b = asyncio.create_task(flight.resolve("b", loader))
        await _settle()
        assert sorted(loader.calls) == ["a", "b"]
        assert flight.pending_count == 2

        loader.release.set()
        assert await a == "value:a"
        assert await b == "value:b"

    @pytest.mark.asyncio
    async def test_failure_propagates_to_all_waiters(self):
        flight: SingleFlight[str] = SingleFlight()
        loader = GatedLoader(error=RuntimeError("boom"))

        waiters = [asyncio.create_task(flight.resolve("k", loader)) for _ in range(3)]
        await asyncio.sleep(0)
        loader.release.set()
        results = await asyncio.gather(*waiters, return_exceptions=True)

        assert loader.calls == ["k"]
        assert all(isinstance(r, RuntimeError) for r in results)
        assert not flight.contains("k")
        assert not flight.is_pending("k")

    @pytest.mark.asyncio
    async def test_failure_allows_retry(self):
        flight: SingleFlight[str] = SingleFlight()
        failing = GatedLoader(error=RuntimeError("boom"))
        failing.release.set()

        with pytest.raises(RuntimeError):
            await flight.resolve("k", failing)

        ok = GatedLoader()
        ok.release.set()
        assert await flight.resolve("k", ok) == "value:k"
        assert ok.calls == ["k"]

    @pytest.mark.asyncio
    async def test_cancelled_waiter_does_not_cancel_load(self):
        flight: SingleFlight[str] = SingleFlight()
        loader = GatedLoader()

        first = asyncio.create_task(flight.resolve("k", loader))
        second = asyncio.create_task(flight.resolve("k", loader))
        await asyncio.sleep(0)
        first.cancel()
        await asyncio.sleep(0)

        loader.release.set()
        assert await second == "value:k"
        assert first.cancelled()
        assert flight.get("k") == "value:k"

    @pytest.mark.asyncio
    async def test_failure_after_all_waiters_cancelled_is_retrieved(self):
        flight: SingleFlight[str] = SingleFlight()
        release = asyncio.Event()

        async def loader(key: str) -> str:
            await release.wait()
            raise RuntimeError(f"boom:{key}")

        unretrieved: list[dict] = []
        loop = asyncio.get_running_loop()
        previous = loop.get_exception_handler()
        loop.set_exception_handler(lambda _loop, ctx: unretrieved.append(ctx))
        try:
            waiter = asyncio.create_task(flight.resolve("k", loader))
            await asyncio.sleep(0)
            load = weakref.ref(flight._pending["k"])
            waiter.cancel()
            await _settle()
            assert waiter.cancelled()

            release.set()
            await _settle()
            assert not flight.is_pending("k")

            del waiter
            gc.collect()
            assert load() is None
        finally:
            loop.set_exception_handler(previous)

        assert not any(
            "never retrieved" in ctx.get("message", "") for ctx in unretrieved
        )


class TestInvalidation:
    @pytest.mark.asyncio
    async def test_discard(self):
        flight: SingleFlight[str] = SingleFlight()
        loader = GatedLoader()
        loader.release.set()
        await flight.resolve("a", loader)
        await flight.resolve("b", loader)

        flight.discard("a")

        assert not flight.contains("a")
        assert flight.contains("b")
        assert len(flight) == 1

    @pytest.mark.asyncio
    async def test_discard_during_load_drops_result(self):
        flight: SingleFlight[str] = SingleFlight()
        loader = GatedLoader()

        waiter = asyncio.create_task(flight.resolve("k", loader))
        await asyncio.sleep(0)
        flight.discard("k")
        loader.release.set()

        assert await waiter == "value:k"
        assert not flight.contains("k")

    @pytest.mark.asyncio
    async def test_clear(self):
        flight: SingleFlight[str] = SingleFlight()
        loader = GatedLoader()
        loader.release.set()
        await flight.resolve("a", loader)

        flight.clear()

        assert len(flight) == 0
        assert flight.pending_count == 0
