# src/cache/base_cache_store.py — v1
"""Abstract persistent document store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from agentdocs.core.models import DocumentDescriptor


class BaseDocStore(ABC):
    """Persistent tier of the documentation cache.

    Reads only return entries inside the validity window. Failures degrade
    to a miss and are never raised to the caller.
    """

    @property
    @abstractmethod
    def cache_dir(self) -> Path:
        """Directory (or namespace) backing the store."""

    @abstractmethod
    async def read(self, key: str) -> str | None:
        """Return stored content if present and still valid."""

    @abstractmethod
    async def write(self, key: str, content: str) -> None:
        """Create or overwrite the entry for ``key``."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete the entry for ``key``; missing entries are ignored."""

    @abstractmethod
    async def remove_all(self) -> None:
        """Delete every entry."""

    @abstractmethod
    async def read_metadata(self) -> list[DocumentDescriptor] | None:
        """Return the persisted document index if present and valid."""

    @abstractmethod
    async def write_metadata(self, descriptors: list[DocumentDescriptor]) -> None:
        """Persist the document index."""

    @abstractmethod
    def list_keys(self) -> list[str]:
        """Names of all stored entries (diagnostics only)."""

    @abstractmethod
    def exists(self) -> bool:
        """Whether the backing directory exists."""
