"""Markup cleanup applied to a pad before rendering.

Each stage is a pure ``str -> str`` function.  They run in the order listed
in ``_STAGES``; later stages expect the earlier ones to have run.
"""

from __future__ import annotations

import re

from padprint.models.pad.document import DerivedMetadata, NormalizedDocument

_UNDERLINE_RE = re.compile(r"\+\+([^+]+)\+\+")
_TAGS_LINE_RE = re.compile(r"^#+ tags\s?:([^\r\n]+)(?=\r?$)", re.MULTILINE)
_PREAMBLE_RE = re.compile(r"^[^#]+# ")


def unwrap_underlines(markdown: str) -> str:
    """Replace every ``++text++`` span with ``text``."""
    return _UNDERLINE_RE.sub(r"\1", markdown)


def strip_tags_line(markdown: str) -> str:
    """Blank out the first ``# tags: ...`` line, keeping its newlines."""
    return _TAGS_LINE_RE.sub("", markdown, count=1)


def strip_preamble(markdown: str) -> str:
    """Drop whatever precedes the first ``# `` heading marker."""
    return _PREAMBLE_RE.sub("# ", markdown, count=1)


_STAGES = (unwrap_underlines, strip_tags_line, strip_preamble)


def normalize_markdown(raw: str) -> tuple[NormalizedDocument, DerivedMetadata]:
    """Run every cleanup stage over *raw*.

    The tags line is removed but its content is not parsed, so the derived
    metadata always carries an empty ``tags`` list.
    """
    markdown = raw
    for stage in _STAGES:
        markdown = stage(markdown)
    return NormalizedDocument(body=markdown), DerivedMetadata(tags=[])
