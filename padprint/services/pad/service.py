from __future__ import annotations

import logging

from markdown_it import MarkdownIt

from padprint.core.allowlist import is_allowed_url
from padprint.core.config import Settings
from padprint.models.pad.document import (
    DerivedMetadata,
    NormalizedDocument,
    RemoteMetadata,
    RenderResult,
)
from padprint.services.pad.normalizer import normalize_markdown
from padprint.services.pad.renderer import get_markdown_renderer, render_markdown
from padprint.workers.fetcher import fetch_pad, get_http_client

logger = logging.getLogger(__name__)


class DisallowedSourceError(Exception):
    """Raised when a pad URL does not start with the configured base URL."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Source not allowed: {url}")
        self.url = url


def assemble_render_result(
    url: str,
    normalized: NormalizedDocument,
    remote_meta: RemoteMetadata,
    derived_meta: DerivedMetadata,
    html: str,
) -> RenderResult:
    """Combine the pipeline outputs.  Derived metadata wins on key conflicts."""
    return RenderResult(
        url=url,
        metadata={**remote_meta, **derived_meta.model_dump()},
        raw_body=normalized.body,
        html=html,
    )


class PadService:
    """Fetch, clean up and render a pad."""

    def __init__(self, settings: Settings, markdown: MarkdownIt | None = None) -> None:
        self._settings = settings
        self._md = markdown or get_markdown_renderer()

    def is_allowed(self, url: object) -> bool:
        return is_allowed_url(url, self._settings.base_pad_url)

    async def render_pad(self, url: str) -> RenderResult:
        """Run the whole pipeline for *url*.

        Raises:
            DisallowedSourceError: *url* is outside the allowlist; nothing
                was fetched.
            FetchError: propagated from the fetcher when either the body or
                the metadata could not be retrieved.
        """
        if not self.is_allowed(url):
            raise DisallowedSourceError(url)

        client = get_http_client(self._settings)
        raw, remote_meta = await fetch_pad(client, url)
        normalized, derived_meta = normalize_markdown(raw.body)
        html = render_markdown(normalized.body, self._md)
        logger.info("Rendered pad %s (%d chars)", url, len(normalized.body))
        return assemble_render_result(url, normalized, remote_meta, derived_meta, html)
