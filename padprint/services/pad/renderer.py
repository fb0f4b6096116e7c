"""Markdown to HTML rendering.

One markdown-it-py engine (raw HTML allowed, typographer on, French quotes)
extended with a fixed set of features.  Each feature claims its own syntax,
so enabling or disabling one never changes how another renders.
"""

from __future__ import annotations

import enum
from functools import lru_cache
from typing import Callable, Iterable

from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.attrs import attrs_block_plugin, attrs_plugin
from mdit_py_plugins.container import container_plugin
from mdit_py_plugins.deflist import deflist_plugin

from padprint.services.pad.attributes import trailing_attrs_plugin
from padprint.services.pad.shortcodes import emoji_plugin

#: Guillemets with non-breaking spaces: double open/close, single open/close.
FRENCH_QUOTES = ["«\xa0", "\xa0»", "‹\xa0", "\xa0›"]


class RendererFeature(str, enum.Enum):
    ATTRIBUTES = "attributes"
    DEFLIST = "deflist"
    ANCHORS = "anchors"
    EMOJI = "emoji"
    INFO = "info"
    WARNING = "warning"


def _use_attributes(md: MarkdownIt) -> None:
    md.use(attrs_plugin).use(attrs_block_plugin).use(trailing_attrs_plugin)


def _use_anchors(md: MarkdownIt) -> None:
    md.use(anchors_plugin, min_level=1, max_level=6)


_FEATURE_PLUGINS: dict[RendererFeature, Callable[[MarkdownIt], None]] = {
    RendererFeature.ATTRIBUTES: _use_attributes,
    RendererFeature.DEFLIST: deflist_plugin,
    RendererFeature.ANCHORS: _use_anchors,
    RendererFeature.EMOJI: emoji_plugin,
    RendererFeature.INFO: lambda md: container_plugin(md, "info"),
    RendererFeature.WARNING: lambda md: container_plugin(md, "warning"),
}

DEFAULT_FEATURES: frozenset[RendererFeature] = frozenset(RendererFeature)


def build_markdown(
    features: Iterable[RendererFeature | str] = DEFAULT_FEATURES,
) -> MarkdownIt:
    """Build a renderer with the given *features* enabled.

    Features are applied in declaration order whatever the order given.
    Raises ``ValueError`` for an unknown feature name.
    """
    enabled = {RendererFeature(feature) for feature in features}
    md = MarkdownIt(
        "default",
        {"html": True, "typographer": True, "quotes": FRENCH_QUOTES},
    )
    for feature in RendererFeature:
        if feature in enabled:
            _FEATURE_PLUGINS[feature](md)
    return md


@lru_cache(maxsize=1)
def get_markdown_renderer() -> MarkdownIt:
    """Return the process-wide renderer with every feature enabled."""
    return build_markdown()


def render_markdown(body: str, md: MarkdownIt | None = None) -> str:
    """Render *body* to HTML.  Malformed markup yields best-effort HTML."""
    return (md or get_markdown_renderer()).render(body)
