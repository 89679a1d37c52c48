# src/remote/client.py — v1
"""HTTP client for the remote documentation host.

Two operations: list the documentation directory through the contents
API, and fetch a raw document body. Transport errors and non-2xx
responses surface as RemoteHostError carrying the URL and status.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from agentdocs.config.settings import Settings
from agentdocs.core.errors import RemoteHostError
from agentdocs.core.models import RemoteEntry, RemoteListing

logger = logging.getLogger(__name__)

LISTING_ACCEPT = "application/vnd.github.v3+json"


class DocsHostClient:
    """Async client over ``httpx.AsyncClient``.

    Args:
        settings: Remote host location, user agent and timeout.
        transport: Optional transport (``httpx.MockTransport`` in tests).
        client: Optional pre-built client; takes precedence over transport.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            transport=transport,
            timeout=settings.http_timeout_s,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
        )

    async def __aenter__(self) -> DocsHostClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def list_directory(self) -> list[RemoteEntry]:
        """Return every entry of the documentation directory.

        Raises:
            RemoteHostError: On transport failure, non-2xx status or an
                unexpected payload shape.
        """
        url = self._settings.listing_url
        logger.info("Fetching documentation file list from %s", url)
        response = await self._get(
            url,
            params={"ref": self._settings.docs_branch},
            headers={"Accept": LISTING_ACCEPT},
        )
        try:
            return RemoteListing.validate_json(response.content)
        except ValidationError as exc:
            raise RemoteHostError(
                url, response.status_code, f"unexpected listing payload: {exc.error_count()} errors",
            ) from exc

    async def fetch_text(self, url: str) -> str:
        """Return the decoded body at ``url``.

        Raises:
            RemoteHostError: On transport failure or non-2xx status.
        """
        response = await self._get(url)
        return response.text

    def document_url(self, entry: RemoteEntry) -> str:
        """Download URL for a listing entry, falling back to the raw host."""
        return entry.download_url or self._settings.raw_url_for(entry.name)

    async def _get(self, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.get(url, **kwargs)
        except httpx.HTTPError as exc:
            raise RemoteHostError(url, None, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise RemoteHostError(url, response.status_code, response.reason_phrase)
        return response
