# src/batch/models.py — v1
"""Batch loading models: BatchLoadResult."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BatchLoadResult(BaseModel):
    """Outcome of loading the whole corpus for one target category."""

    category: str
    documents: dict[str, str] = Field(default_factory=dict)
    total: int = 0
    loaded: int = 0
    failed: list[str] = Field(default_factory=list)
    duration_seconds: float = 0.0
