# src/cache/models.py — v1
"""Cache diagnostics models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CacheStats(BaseModel):
    """Snapshot of the persistent store directory."""

    cache_dir: str
    exists: bool
    file_count: int = 0
    files: list[str] = Field(default_factory=list)
