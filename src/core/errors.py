# src/core/errors.py — v1
"""Error taxonomy for the documentation cache.

RemoteHostError      — transport failure or non-2xx response from the host.
IndexUnavailable     — the document listing could not be obtained.
DocumentFetchFailed  — one named document could not be fetched.
CacheIOError         — disk read/write/stat failure; never leaves the store.
RoleNotFound         — no indexed document matches a well-known role.
"""

from __future__ import annotations


class DocsCacheError(Exception):
    """Base class for all documentation cache errors."""


class RemoteHostError(DocsCacheError):
    """HTTP request to the content host failed."""

    def __init__(self, url: str, status_code: int | None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            detail = f"HTTP {status_code}"
            if reason:
                detail += f": {reason}"
        else:
            detail = reason or "transport error"
        super().__init__(f"{detail} ({url})")


class IndexUnavailable(DocsCacheError):
    """The remote directory listing failed; no document can be located."""

    def __init__(self, url: str, status_code: int | None, reason: str):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to load documentation list from {url}: {reason}")


class DocumentFetchFailed(DocsCacheError):
    """A single document body could not be fetched."""

    def __init__(
        self, filename: str, url: str, status_code: int | None, reason: str,
    ):
        self.filename = filename
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to load {filename} from {url}: {reason}")


class CacheIOError(DocsCacheError):
    """Disk cache operation failed."""

    def __init__(self, path: str, operation: str, cause: Exception):
        self.path = path
        self.operation = operation
        self.cause = cause
        super().__init__(f"Cache {operation} failed for {path}: {cause}")


class RoleNotFound(DocsCacheError):
    """No document in the index matches the requested role."""

    def __init__(self, role: str):
        self.role = role
        super().__init__(f"{role.capitalize()} documentation not found")
