from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

#: Metadata returned by the pad's ``/info`` endpoint.
RemoteMetadata = dict[str, Any]


class RawDocument(BaseModel):
    """Markup exactly as returned by the pad's ``/download`` endpoint."""

    model_config = ConfigDict(frozen=True)

    body: str


class NormalizedDocument(BaseModel):
    """Markup after the normalizer rewrites; this is what gets rendered."""

    model_config = ConfigDict(frozen=True)

    body: str


class DerivedMetadata(BaseModel):
    """Metadata synthesized from the document body itself."""

    model_config = ConfigDict(frozen=True)

    tags: list[str] = Field(default_factory=list)


class RenderResult(BaseModel):
    """Everything the print page needs, produced once per request.

    ``metadata`` is the remote metadata overlaid with the derived metadata;
    ``raw_body`` is the normalized markup the HTML was rendered from.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    metadata: RemoteMetadata
    raw_body: str
    html: str
