# src/cache/disk_store.py — v1
"""File-based persistent store for documentation blobs.

One text file per document under the cache directory, named by the
document filename, plus a ``metadata.json`` index. Entries are valid for
a fixed window after their last modification. Every I/O failure is
logged and treated as a cache miss.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from agentdocs.cache.base_cache_store import BaseDocStore
from agentdocs.cache.validity import DEFAULT_TTL_SECONDS, is_valid
from agentdocs.core.errors import CacheIOError
from agentdocs.core.models import DescriptorList, DocumentDescriptor

logger = logging.getLogger(__name__)

METADATA_FILE = "metadata.json"


class DiskDocStore(BaseDocStore):
    """Persistent store backed by a single directory.

    The directory may be shared by several processes. Writes are not
    locked; the last writer wins.
    """

    def __init__(
        self,
        cache_dir: Path,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._root = Path(cache_dir).expanduser()
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    @property
    def cache_dir(self) -> Path:
        return self._root

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    async def read(self, key: str) -> str | None:
        """Return the blob for ``key`` if it is still valid."""
        path = self._entry_path(key)
        if not is_valid(path, self._ttl_seconds, now=self._clock()):
            return None
        try:
            content = self._read_text(path)
        except CacheIOError as exc:
            logger.warning("%s", exc)
            return None
        logger.info("Loaded %s from disk cache", key)
        return content

    async def write(self, key: str, content: str) -> None:
        """Create the directory if needed and write the blob."""
        path = self._entry_path(key)
        try:
            self._write_text(path, content)
        except CacheIOError as exc:
            logger.error("%s", exc)
            return
        logger.info("Saved %s to disk cache", key)

    async def remove(self, key: str) -> None:
        path = self._entry_path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.error("%s", CacheIOError(str(path), "delete", exc))
            return
        logger.info("Deleted %s from disk cache", key)

    async def remove_all(self) -> None:
        removed = 0
        for name in self.list_keys():
            path = self._root / name
            try:
                path.unlink()
                removed += 1
            except OSError as exc:
                logger.error("%s", CacheIOError(str(path), "delete", exc))
        logger.info("Deleted %d files from disk cache", removed)

    async def read_metadata(self) -> list[DocumentDescriptor] | None:
        """Return the persisted index if valid and well-formed."""
        raw = await self.read(METADATA_FILE)
        if raw is None:
            return None
        try:
            return DescriptorList.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Discarding malformed %s: %s", METADATA_FILE, exc.error_count(),
            )
            return None

    async def write_metadata(self, descriptors: list[DocumentDescriptor]) -> None:
        payload = json.dumps(
            [d.model_dump() for d in descriptors], indent=2,
        )
        await self.write(METADATA_FILE, payload)

    def list_keys(self) -> list[str]:
        if not self._root.is_dir():
            return []
        try:
            return sorted(p.name for p in self._root.iterdir() if p.is_file())
        except OSError as exc:
            logger.error("%s", CacheIOError(str(self._root), "list", exc))
            return []

    def exists(self) -> bool:
        return self._root.is_dir()

    def _entry_path(self, key: str) -> Path:
        """Return file path for a cache key."""
        safe_key = key.replace("/", "_").replace("\\", "_")
        return self._root / safe_key

    def _read_text(self, path: Path) -> str:
        try:
            return path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheIOError(str(path), "read", exc) from exc

    def _write_text(self, path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content.encode("utf-8"))
        except OSError as exc:
            raise CacheIOError(str(path), "write", exc) from exc
