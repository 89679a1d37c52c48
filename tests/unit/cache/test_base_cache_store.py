# tests/unit/cache/test_base_cache_store.py — v1
"""Tests for cache/base_cache_store.py — BaseDocStore ABC."""

from __future__ import annotations

import pytest

from agentdocs.cache.base_cache_store import BaseDocStore
from agentdocs.cache.disk_store import DiskDocStore


class TestBaseDocStore:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseDocStore()  # type: ignore[abstract]

    def test_has_required_methods(self):
        for method in [
            "read", "write", "remove", "remove_all",
            "read_metadata", "write_metadata", "list_keys", "exists",
        ]:
            assert hasattr(BaseDocStore, method)

    def test_disk_store_implements(self, tmp_path):
        assert isinstance(DiskDocStore(tmp_path), BaseDocStore)
