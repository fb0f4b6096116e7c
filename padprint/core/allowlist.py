"""Source allowlist.

The only gate between user input and an outgoing request: a pad URL is
fetched only if it starts with the configured base URL, compared without
regard to ASCII case.
"""

from __future__ import annotations

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def is_allowed_url(candidate: object, base_url: str) -> bool:
    """Return ``True`` if *candidate* begins with *base_url*.

    The base is a literal prefix, not a pattern.  Non-string candidates and
    an empty base are always rejected.
    """
    if not isinstance(candidate, str) or not base_url:
        return False
    return _fold(candidate).startswith(_fold(base_url))
