# src/api/facade.py — v1
"""Public API facade — build a DocsCache from settings.

Usage:
    from agentdocs.api.facade import create_docs_cache
    async with create_docs_cache() as docs:
        typespec_docs = await docs.get_docs_by_category("typespec")
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable

from agentdocs.api.docs_cache import DocsCache
from agentdocs.cache.disk_store import DiskDocStore
from agentdocs.config.settings import Settings
from agentdocs.remote.client import DocsHostClient

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


def create_docs_cache(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: Callable[[], float] = time.time,
) -> DocsCache:
    """Instantiate a DocsCache wired to a disk store and the remote host.

    Args:
        settings: Application settings. Loaded from .env if None.
        transport: Optional httpx transport (tests pass a MockTransport).
        clock: Time source for cache validity checks.

    Returns:
        A DocsCache with empty in-process tables.
    """
    settings = settings or Settings()
    store = DiskDocStore(
        cache_dir=settings.resolved_cache_dir,
        ttl_seconds=settings.cache_ttl_seconds,
        clock=clock,
    )
    client = DocsHostClient(settings, transport=transport)
    logger.debug(
        "Documentation cache at %s (ttl=%.1fh)",
        store.cache_dir, settings.cache_ttl_hours,
    )
    return DocsCache(store, client, fetch_concurrency=settings.fetch_concurrency)


async def get_docs_by_category(
    category: str, settings: Settings | None = None,
) -> dict[str, str]:
    """One-shot helper: load ``category`` with a short-lived DocsCache."""
    async with create_docs_cache(settings) as docs:
        return await docs.get_docs_by_category(category)
