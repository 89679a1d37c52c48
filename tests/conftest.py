# tests/conftest.py — v1
"""Shared test fixtures for unit tests.

Provides isolated settings pointing at a temp cache directory and a fake
documentation host served through ``httpx.MockTransport``. No network.
"""

from __future__ import annotations

import asyncio
from collections import Counter
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from agentdocs.api.docs_cache import DocsCache
from agentdocs.api.facade import create_docs_cache
from agentdocs.cache.disk_store import DiskDocStore
from agentdocs.config.settings import Settings
from agentdocs.remote.client import DocsHostClient


SAMPLE_DOCS: dict[str, str] = {
    "typespec-capabilities.md": (
        "# Capabilities\n\n## WebSearch\nSearch the web.\n\n"
        "## OneDriveAndSharePoint\nFiles.\n"
    ),
    "typespec-authentication.md": "# Authentication\n\nOAuth and API keys.\n",
    "api-plugin-openapi.md": "# API plugins\n\nOpenAPI based plugins.\n",
    "publish-guide.md": "# Publishing\n\nSubmit to the store.\n",
    "copilot-studio-notes.md": "# Copilot Studio\n\nUnrelated.\n",
    "overview.md": "# Overview\n\nWhat agents are.\n",
}


class FakeDocsHost:
    """In-memory stand-in for the contents API and raw content host."""

    def __init__(self, settings: Settings, docs: dict[str, str] | None = None) -> None:
        self.settings = settings
        self.docs = dict(SAMPLE_DOCS if docs is None else docs)
        self.extra_entries: list[dict] = []
        self.failing: dict[str, int] = {}
        self.listing_status = 200
        self.listing_calls = 0
        self.doc_calls: Counter[str] = Counter()
        self.delay = 0.0

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        if self.delay:
            await asyncio.sleep(self.delay)

        if str(request.url).startswith(self.settings.listing_url):
            self.listing_calls += 1
            if self.listing_status != 200:
                return httpx.Response(self.listing_status)
            return httpx.Response(200, json=self.listing())

        name = request.url.path.rsplit("/", 1)[-1]
        self.doc_calls[name] += 1
        if name in self.failing:
            return httpx.Response(self.failing[name])
        if name not in self.docs:
            return httpx.Response(404)
        return httpx.Response(200, text=self.docs[name])

    def listing(self) -> list[dict]:
        entries = [
            {
                "name": name,
                "path": f"docs/{name}",
                "type": "file",
                "download_url": self.settings.raw_url_for(name),
            }
            for name in self.docs
        ]
        return entries + self.extra_entries


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(_env_file=None, cache_root=tmp_path / "docs")


@pytest.fixture
def host(settings: Settings) -> FakeDocsHost:
    return FakeDocsHost(settings)


@pytest.fixture
def store(settings: Settings) -> DiskDocStore:
    return DiskDocStore(settings.resolved_cache_dir, settings.cache_ttl_seconds)


@pytest_asyncio.fixture
async def client(settings: Settings, host: FakeDocsHost) -> DocsHostClient:
    client = DocsHostClient(settings, transport=host.transport)
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def docs_cache(settings: Settings, host: FakeDocsHost) -> DocsCache:
    cache = create_docs_cache(settings, transport=host.transport)
    yield cache
    await cache.aclose()
