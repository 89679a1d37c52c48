# src/batch/loader.py — v1
"""Batch loader — warm the whole corpus, return one category.

Every indexed document is resolved concurrently, whether or not it is
relevant to the requested category, so a single pass leaves the disk
cache warm for any later request. Results are returned only after every
resolution has settled; a failed document is logged and omitted.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from typing import TYPE_CHECKING, Awaitable, Callable

from agentdocs.batch.models import BatchLoadResult
from agentdocs.core.classifier import should_include
from agentdocs.core.errors import DocsCacheError
from agentdocs.logging.context import operation_context

if TYPE_CHECKING:
    from agentdocs.core.models import DocumentDescriptor

logger = logging.getLogger(__name__)

MetadataFn = Callable[[], Awaitable["list[DocumentDescriptor]"]]
ContentFn = Callable[["DocumentDescriptor"], Awaitable[str]]


class BatchLoader:
    """Load all documents and filter them down to a target category.

    Args:
        get_metadata: Coroutine function returning the document index.
        get_content: Coroutine function resolving one descriptor.
        concurrency: Maximum simultaneous resolutions (0 = unbounded).
    """

    def __init__(
        self,
        get_metadata: MetadataFn,
        get_content: ContentFn,
        concurrency: int = 0,
    ) -> None:
        self._get_metadata = get_metadata
        self._get_content = get_content
        self._concurrency = concurrency

    async def load(self, category: str) -> BatchLoadResult:
        """Resolve every document; keep those relevant to ``category``.

        Raises:
            IndexUnavailable: If the index cannot be resolved.
        """
        with operation_context("batch_load", category=category):
            return await self._load(category)

    async def _load(self, category: str) -> BatchLoadResult:
        t0 = time.perf_counter()
        metadata = await self._get_metadata()
        logger.info("Downloading all %d documentation files", len(metadata))

        semaphore = (
            asyncio.Semaphore(self._concurrency) if self._concurrency > 0 else None
        )
        outcomes = await asyncio.gather(
            *(self._load_one(doc, semaphore) for doc in metadata)
        )

        result = BatchLoadResult(category=category, total=len(metadata))
        for doc, content in zip(metadata, outcomes):
            if content is None:
                result.failed.append(doc.filename)
                continue
            result.loaded += 1
            if should_include(doc.filename, category):
                result.documents[doc.title] = content

        result.duration_seconds = round(time.perf_counter() - t0, 3)
        logger.info(
            "Loaded %d %s documentation files (%d total cached, %d failed)",
            len(result.documents), category, result.loaded, len(result.failed),
        )
        return result

    async def _load_one(
        self,
        doc: DocumentDescriptor,
        semaphore: asyncio.Semaphore | None,
    ) -> str | None:
        """Resolve one document; a failure is logged and yields None."""
        guard = semaphore if semaphore is not None else contextlib.nullcontext()
        async with guard:
            try:
                return await self._get_content(doc)
            except Exception as exc:
                logger.error(
                    "Failed to load %s: %s", doc.filename, exc,
                    exc_info=not isinstance(exc, DocsCacheError),
                )
                return None
