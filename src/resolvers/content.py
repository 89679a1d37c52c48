# src/resolvers/content.py — v1
"""Loader for a single document body."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agentdocs.core.errors import DocumentFetchFailed, RemoteHostError

if TYPE_CHECKING:
    from agentdocs.cache.base_cache_store import BaseDocStore
    from agentdocs.core.models import DocumentDescriptor
    from agentdocs.remote.client import DocsHostClient

logger = logging.getLogger(__name__)


class ContentResolver:
    """Resolve a document from the persistent store or its source URL."""

    def __init__(self, store: BaseDocStore, client: DocsHostClient) -> None:
        self._store = store
        self._client = client

    async def load(self, descriptor: DocumentDescriptor) -> str:
        """Return the body of ``descriptor``, fetching and persisting on miss.

        Raises:
            DocumentFetchFailed: On transport failure or non-2xx response.
        """
        filename = descriptor.filename
        cached = await self._store.read(filename)
        if cached is not None:
            return cached

        logger.info("Fetching %s from %s", filename, descriptor.url)
        try:
            content = await self._client.fetch_text(descriptor.url)
        except RemoteHostError as exc:
            logger.error(
                "Failed to fetch %s", filename,
                extra={"data": {"url": descriptor.url, "status": exc.status_code}},
            )
            raise DocumentFetchFailed(
                filename, descriptor.url, exc.status_code, str(exc),
            ) from exc

        logger.info("Successfully loaded %s (%d chars)", filename, len(content))
        await self._store.write(filename, content)
        return content
