# src/resolvers/metadata.py — v1
"""Loader for the document index (metadata).

Order: persistent store, then the remote directory listing. A remote
failure is fatal to this resolution: without an index nothing can be
located.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agentdocs.core.classifier import derive_category, derive_title, is_document
from agentdocs.core.errors import IndexUnavailable, RemoteHostError
from agentdocs.core.models import DocumentDescriptor

if TYPE_CHECKING:
    from agentdocs.cache.base_cache_store import BaseDocStore
    from agentdocs.remote.client import DocsHostClient

logger = logging.getLogger(__name__)


class MetadataResolver:
    """Build the list of DocumentDescriptor from cache or remote host."""

    def __init__(self, store: BaseDocStore, client: DocsHostClient) -> None:
        self._store = store
        self._client = client

    async def load(self, key: str) -> list[DocumentDescriptor]:
        """Loader for the metadata key.

        Raises:
            IndexUnavailable: If the remote listing fails.
        """
        cached = await self._store.read_metadata()
        if cached is not None:
            logger.info("Using cached metadata from disk (%d documents)", len(cached))
            return cached

        try:
            entries = await self._client.list_directory()
        except RemoteHostError as exc:
            logger.error(
                "Failed to fetch documentation metadata",
                extra={"data": {"url": exc.url, "status": exc.status_code}},
            )
            raise IndexUnavailable(exc.url, exc.status_code, str(exc)) from exc

        descriptors = [
            DocumentDescriptor(
                filename=entry.name,
                title=derive_title(entry.name),
                url=self._client.document_url(entry),
                category=derive_category(entry.name),
            )
            for entry in entries
            if is_document(entry.name, entry.type)
        ]
        logger.info("Found %d documentation files", len(descriptors))

        await self._store.write_metadata(descriptors)
        return descriptors
