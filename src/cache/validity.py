# src/cache/validity.py — v1
"""Time-based validity of on-disk cache entries."""

from __future__ import annotations

import logging
import time
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60


def is_valid(
    path: Path,
    ttl_seconds: float = DEFAULT_TTL_SECONDS,
    now: float | None = None,
) -> bool:
    """True iff ``path`` exists and was modified less than ``ttl_seconds`` ago.

    A missing file or a failing stat counts as invalid.
    """
    try:
        if not path.exists():
            return False
        mtime = path.stat().st_mtime
    except OSError as exc:
        logger.warning("Failed to check cache validity for %s: %s", path, exc)
        return False

    current = time.time() if now is None else now
    return current - mtime < ttl_seconds
