# tests/unit/cache/test_validity.py — v1
"""Tests for cache/validity.py — TTL checks on file mtimes."""

from __future__ import annotations

import os
from pathlib import Path

from agentdocs.cache.validity import DEFAULT_TTL_SECONDS, is_valid

T0 = 1_700_000_000.0


def _touch(path: Path, mtime: float) -> Path:
    path.write_text("x", encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path


class TestIsValid:
    def test_default_ttl_is_24h(self):
        assert DEFAULT_TTL_SECONDS == 24 * 60 * 60

    def test_missing_file(self, tmp_path: Path):
        assert is_valid(tmp_path / "missing.md") is False

    def test_fresh(self, tmp_path: Path):
        path = _touch(tmp_path / "a.md", T0)
        assert is_valid(path, now=T0 + 60) is True

    def test_just_inside_window(self, tmp_path: Path):
        path = _touch(tmp_path / "a.md", T0)
        assert is_valid(path, now=T0 + DEFAULT_TTL_SECONDS - 1) is True

    def test_expires_at_boundary(self, tmp_path: Path):
        path = _touch(tmp_path / "a.md", T0)
        assert is_valid(path, now=T0 + DEFAULT_TTL_SECONDS) is False

    def test_custom_ttl(self, tmp_path: Path):
        path = _touch(tmp_path / "a.md", T0)
        assert is_valid(path, ttl_seconds=10, now=T0 + 11) is False

    def test_stat_error_is_invalid(self, tmp_path: Path, monkeypatch):
        path = _touch(tmp_path / "a.md", T0)

        def boom(self, *args, **kwargs):
            raise PermissionError("denied")

        monkeypatch.setattr(Path, "stat", boom)
        assert is_valid(path, now=T0) is False
