# tests/unit/test_package.py — v1
"""Tests for the package root and subpackage imports."""

from __future__ import annotations

import importlib

import pytest

import agentdocs
from agentdocs.version import __version__


class TestPackage:
    def test_version_exported(self):
        assert agentdocs.__version__ == __version__

    @pytest.mark.parametrize("module", [
        "agentdocs.api.docs_cache",
        "agentdocs.api.facade",
        "agentdocs.batch.loader",
        "agentdocs.cache.disk_store",
        "agentdocs.cache.single_flight",
        "agentdocs.config.settings",
        "agentdocs.core.classifier",
        "agentdocs.logging.logger",
        "agentdocs.remote.client",
        "agentdocs.resolvers.metadata",
    ])
    def test_subpackage_modules_import(self, module: str):
        assert importlib.import_module(module).__name__ == module
