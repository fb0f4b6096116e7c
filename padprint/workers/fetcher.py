"""Async pad fetcher.

Responsible solely for retrieving a pad's body and metadata.

Uses httpx.AsyncClient which is meant to be long-lived and reused.
A single shared client is managed by the module; see ``get_http_client``
and ``close_http_client`` for lifecycle hooks.  No timeout is configured
here, so the httpx default applies, and failures are never retried.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from padprint.core.config import Settings
from padprint.models.pad.document import RawDocument, RemoteMetadata

logger = logging.getLogger(__name__)

# Module-level shared client
_http_client: Optional[httpx.AsyncClient] = None


def get_http_client(settings: Settings) -> httpx.AsyncClient:
    """Return the shared AsyncClient.  Creates one from *settings* if missing."""
    global _http_client  # noqa: PLW0603
    if _http_client is None or _http_client.is_closed:
        _http_client = httpx.AsyncClient(
            follow_redirects=settings.http_follow_redirects,
            verify=settings.http_verify_ssl,
            headers={"User-Agent": settings.http_user_agent},
        )
    return _http_client


async def close_http_client() -> None:
    """Close the shared AsyncClient gracefully."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None and not _http_client.is_closed:
        await _http_client.aclose()
        _http_client = None
        logger.info("HTTP client closed.")


class FetchError(Exception):
    """Raised when the pad body or its metadata cannot be retrieved."""


async def _get(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """Perform a single HTTP GET, mapping every failure to :class:`FetchError`."""
    try:
        response = await client.get(url)
    except httpx.InvalidURL as exc:
        raise FetchError(f"Invalid URL '{url}': {exc}") from exc
    except httpx.RequestError as exc:
        raise FetchError(f"Request error for '{url}': {exc}") from exc

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            f"Unexpected status {response.status_code} for '{url}'"
        ) from exc
    return response


async def fetch_body(client: httpx.AsyncClient, url: str) -> RawDocument:
    """Download the raw markup from ``{url}/download``."""
    response = await _get(client, f"{url}/download")
    return RawDocument(body=response.text)


async def fetch_info(client: httpx.AsyncClient, url: str) -> RemoteMetadata:
    """Download the pad metadata from ``{url}/info``.

    The endpoint must answer with a JSON object.
    """
    info_url = f"{url}/info"
    response = await _get(client, info_url)
    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchError(f"Malformed metadata from '{info_url}': {exc}") from exc
    if not isinstance(payload, dict):
        raise FetchError(
            f"Malformed metadata from '{info_url}': expected an object, "
            f"got {type(payload).__name__}"
        )
    return payload


async def fetch_pad(
    client: httpx.AsyncClient, url: str
) -> tuple[RawDocument, RemoteMetadata]:
    """Fetch the body and the metadata of the pad at *url* concurrently.

    Both requests are in flight at the same time.  If either fails the whole
    fetch fails with the first :class:`FetchError`; no partial result is
    returned.  *url* must already have passed the allowlist.
    """
    logger.debug("Fetching pad %s", url)
    document, metadata = await asyncio.gather(
        fetch_body(client, url),
        fetch_info(client, url),
    )
    return document, metadata
