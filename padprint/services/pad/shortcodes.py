"""Emoji expansion for markdown-it.

Two syntaxes are recognised:

- ``:shortcode:`` resolved with the ``emoji`` package's alias table
  (``:smile:``, ``:+1:``, ``:tada:`` ...).  Unknown shortcodes are left as text.
- emoticon shortcuts (``:)``, ``:-D``, ``;)``, ``<3`` ...).  A shortcut only
  expands when it is surrounded by whitespace, punctuation or the edges of the
  text, so ``http://`` keeps its ``:/``.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Sequence

import emoji
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.rules_inline import StateInline
from markdown_it.token import Token

_SHORTCODE_RE = re.compile(r":([a-z0-9_+\-]+):")

#: Alias name -> emoticons that expand to it.
_SHORTCUTS: dict[str, tuple[str, ...]] = {
    "angry": (">:(", ">:-("),
    "blush": (':")', ':-")'),
    "broken_heart": ("</3", "<\\3"),
    "confused": (":/", ":-/"),
    "cry": (":'(", ":'-(", ":,(", ":,-("),
    "frowning": (":(", ":-("),
    "heart": ("<3",),
    "imp": ("]:(", "]:-("),
    "innocent": ("o:)", "O:)", "o:-)", "O:-)", "0:)", "0:-)"),
    "joy": (":')", ":'-)", ":,)", ":,-)", ":'D", ":'-D", ":,D", ":,-D"),
    "kissing": (":*", ":-*"),
    "laughing": ("x-)", "X-)"),
    "neutral_face": (":|", ":-|"),
    "open_mouth": (":o", ":-o", ":O", ":-O"),
    "rage": (":@", ":-@"),
    "smile": (":D", ":-D"),
    "smiley": (":)", ":-)"),
    "stuck_out_tongue": (":p", ":-p", ":P", ":-P"),
    "sunglasses": ("8-)", "B-)"),
    "sweat_smile": (",:)", ",:-)"),
    "unamused": (":s", ":-S", ":z", ":-Z", ":$", ":-$"),
    "wink": (";)", ";-)"),
}


def _shortcut_glyphs() -> dict[str, str]:
    glyphs: dict[str, str] = {}
    for name, shortcuts in _SHORTCUTS.items():
        alias = f":{name}:"
        glyph = emoji.emojize(alias, language="alias")
        if glyph == alias:
            continue
        for shortcut in shortcuts:
            glyphs[shortcut] = glyph
    return glyphs


_SHORTCUT_GLYPHS = _shortcut_glyphs()
_SHORTCUT_RE = re.compile(
    "|".join(re.escape(s) for s in sorted(_SHORTCUT_GLYPHS, key=len, reverse=True))
)


def _emoji_rule(state: StateInline, silent: bool) -> bool:
    if state.src[state.pos] != ":":
        return False
    match = _SHORTCODE_RE.match(state.src, state.pos, state.posMax)
    if match is None:
        return False
    glyph = emoji.emojize(match.group(0), language="alias")
    if glyph == match.group(0):
        return False
    if not silent:
        token = state.push("emoji", "", 0)
        token.content = glyph
        token.markup = match.group(1)
    state.pos = match.end()
    return True


def _is_boundary(char: str) -> bool:
    category = unicodedata.category(char)
    return category[0] in ("Z", "P") or category == "Cc"


def _emoji_token(glyph: str, markup: str, level: int) -> Token:
    token = Token("emoji", "", 0)
    token.content = glyph
    token.markup = markup
    token.level = level
    return token


def _text_token(content: str, level: int) -> Token:
    token = Token("text", "", 0)
    token.content = content
    token.level = level
    return token


def _split_shortcuts(token: Token) -> list[Token]:
    text = token.content
    pieces: list[Token] = []
    last = 0
    for match in _SHORTCUT_RE.finditer(text):
        start, end = match.span()
        if start > 0 and not _is_boundary(text[start - 1]):
            continue
        if end < len(text) and not _is_boundary(text[end]):
            continue
        if start > last:
            pieces.append(_text_token(text[last:start], token.level))
        pieces.append(_emoji_token(_SHORTCUT_GLYPHS[match.group(0)], match.group(0), token.level))
        last = end
    if not pieces:
        return [token]
    if last < len(text):
        pieces.append(_text_token(text[last:], token.level))
    return pieces


def _shortcut_rule(state: StateCore) -> None:
    # Text tokens only: code spans, raw HTML and link targets are untouched.
    for block in state.tokens:
        if block.type != "inline" or not block.children:
            continue
        children: list[Token] = []
        for child in block.children:
            if child.type == "text":
                children.extend(_split_shortcuts(child))
            else:
                children.append(child)
        block.children = children


def _render_emoji(self, tokens: Sequence[Token], idx: int, options, env) -> str:
    return tokens[idx].content


def emoji_plugin(md: MarkdownIt) -> None:
    md.inline.ruler.push("emoji", _emoji_rule)
    md.core.ruler.before("linkify", "emoji_shortcuts", _shortcut_rule)
    md.add_render_rule("emoji", _render_emoji)
