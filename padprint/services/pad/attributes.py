"""Trailing ``{...}`` attributes on headings and paragraphs.

``# Title {.big}`` and ``Some text {#intro}`` put the attributes on the
enclosing ``<h1>`` / ``<p>`` and drop the braces from the text.  Runs right
after inline parsing so heading anchors slug the cleaned title.
"""

from __future__ import annotations

import re

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from mdit_py_plugins.attrs.parse import ParseError, parse

_TRAILING_ATTRS_RE = re.compile(r"[ \t]*(\{[^{}\n]*\})[ \t]*$")
_BLOCK_OPENERS = frozenset({"heading_open", "paragraph_open"})


def _trailing_attrs_rule(state: StateCore) -> None:
    tokens = state.tokens
    for idx in range(1, len(tokens)):
        inline = tokens[idx]
        opening = tokens[idx - 1]
        if inline.type != "inline" or opening.type not in _BLOCK_OPENERS:
            continue
        if not inline.children or inline.children[-1].type != "text":
            continue

        last = inline.children[-1]
        match = _TRAILING_ATTRS_RE.search(last.content)
        if match is None:
            continue
        braces = match.group(1)
        try:
            end, attrs = parse(braces)
        except ParseError:
            continue
        if end < len(braces) - 1:
            continue

        last.content = last.content[: match.start()]
        if inline.content.endswith(match.group(0)):
            inline.content = inline.content[: -len(match.group(0))]
        for key, value in attrs.items():
            if key == "class":
                opening.attrJoin("class", value)
            else:
                opening.attrSet(key, value)


def trailing_attrs_plugin(md: MarkdownIt) -> None:
    md.core.ruler.after("inline", "trailing_attrs", _trailing_attrs_rule)
