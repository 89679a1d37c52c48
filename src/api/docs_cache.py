# src/api/docs_cache.py — v1
"""Two-tier documentation cache: the object callers hold.

DocsCache wires the persistent store, the remote client, the metadata
and content resolvers, and two SingleFlight tables (document bodies by
filename, the index under the metadata key). Build one per process with
``agentdocs.api.facade.create_docs_cache`` and pass it where needed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agentdocs.batch.loader import BatchLoader
from agentdocs.batch.models import BatchLoadResult
from agentdocs.cache.disk_store import METADATA_FILE
from agentdocs.cache.models import CacheStats
from agentdocs.cache.single_flight import SingleFlight
from agentdocs.core.errors import RoleNotFound
from agentdocs.core.models import TARGET_CATEGORIES, DocumentDescriptor
from agentdocs.core.sections import extract_section
from agentdocs.logging.context import operation_context, set_document_context
from agentdocs.resolvers.content import ContentResolver
from agentdocs.resolvers.metadata import MetadataResolver

if TYPE_CHECKING:
    from agentdocs.cache.base_cache_store import BaseDocStore
    from agentdocs.remote.client import DocsHostClient

logger = logging.getLogger(__name__)


class DocsCache:
    """Fetch, classify and cache remote documentation."""

    def __init__(
        self,
        store: BaseDocStore,
        client: DocsHostClient,
        fetch_concurrency: int = 0,
    ) -> None:
        self._store = store
        self._client = client
        self._metadata_resolver = MetadataResolver(store, client)
        self._content_resolver = ContentResolver(store, client)
        self._metadata: SingleFlight[list[DocumentDescriptor]] = SingleFlight("metadata")
        self._documents: SingleFlight[str] = SingleFlight("documents")
        self._batch = BatchLoader(
            get_metadata=self.list_documents,
            get_content=self.get_content,
            concurrency=fetch_concurrency,
        )

    @property
    def store(self) -> BaseDocStore:
        return self._store

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> DocsCache:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # --- Resolution ---

    async def list_documents(self) -> list[DocumentDescriptor]:
        """Return the full document index.

        Raises:
            IndexUnavailable: If neither tier holds it and the listing fails.
        """
        return await self._metadata.resolve(METADATA_FILE, self._metadata_resolver.load)

    async def get_content(self, descriptor: DocumentDescriptor) -> str:
        """Return one document body.

        Raises:
            DocumentFetchFailed: If neither tier holds it and the fetch fails.
        """
        async def _load(_key: str) -> str:
            set_document_context(descriptor.filename)
            return await self._content_resolver.load(descriptor)

        return await self._documents.resolve(descriptor.filename, _load)

    async def find_document(self, role: str) -> DocumentDescriptor:
        """First indexed document whose filename contains ``role``.

        Raises:
            RoleNotFound: If no filename matches; no content is fetched.
        """
        needle = role.lower()
        for doc in await self.list_documents():
            if needle in doc.filename.lower():
                return doc
        raise RoleNotFound(role)

    async def get_document_for_role(self, role: str) -> str:
        """Body of the well-known document for ``role`` (e.g. "capabilities")."""
        with operation_context("role_lookup"):
            doc = await self.find_document(role)
            return await self.get_content(doc)

    async def get_capability_docs(self) -> str:
        return await self.get_document_for_role("capabilities")

    async def get_authentication_docs(self) -> str:
        return await self.get_document_for_role("authentication")

    async def get_decorators_docs(self) -> str:
        return await self.get_document_for_role("decorators")

    async def get_scenarios_docs(self) -> str:
        return await self.get_document_for_role("scenarios")

    async def get_overview_docs(self) -> str:
        return await self.get_document_for_role("overview")

    async def get_capability_section(self, capability: str) -> str:
        """Section of the capabilities document describing ``capability``."""
        return extract_section(await self.get_capability_docs(), capability)

    # --- Categories ---

    async def load_category(self, category: str) -> BatchLoadResult:
        """Warm the whole corpus and return documents relevant to ``category``.

        Raises:
            ValueError: If ``category`` is not a target category.
            IndexUnavailable: If the index cannot be resolved.
        """
        _check_category(category)
        return await self._batch.load(category)

    async def get_docs_by_category(self, category: str) -> dict[str, str]:
        """Mapping of title -> content for documents relevant to ``category``."""
        result = await self.load_category(category)
        return result.documents

    async def get_metadata_for_category(self, category: str) -> list[DocumentDescriptor]:
        """Descriptors whose derived category equals ``category``."""
        return [d for d in await self.list_documents() if d.category == category]

    async def get_titles_for_category(self, category: str) -> list[str]:
        return [d.title for d in await self.get_metadata_for_category(category)]

    # --- Administration ---

    def stats(self) -> CacheStats:
        """Describe the persistent store. Never triggers a fetch."""
        exists = self._store.exists()
        files = self._store.list_keys() if exists else []
        return CacheStats(
            cache_dir=str(self._store.cache_dir),
            exists=exists,
            file_count=len(files),
            files=files,
        )

    async def clear(self, key: str | None = None) -> None:
        """Invalidate one key, or everything, in both tiers."""
        with operation_context("clear"):
            await self._clear(key)

    async def _clear(self, key: str | None) -> None:
        if key is not None:
            self._documents.discard(key)
            if key == METADATA_FILE:
                self._metadata.clear()
            await self._store.remove(key)
            logger.info("%s cache cleared", key)
            return

        self._documents.clear()
        self._metadata.clear()
        await self._store.remove_all()
        logger.info("All documentation caches cleared")


def _check_category(category: str) -> None:
    if category not in TARGET_CATEGORIES:
        raise ValueError(
            f"Unsupported category: {category!r} "
            f"(expected one of {', '.join(TARGET_CATEGORIES)})"
        )
