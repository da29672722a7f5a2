#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
SSML helpers for Fly Drone.

Dynamic values are escaped into XML entities before they are placed into a
speech template, and the spacing of the resulting markup is normalized so
the indentation of the templates never reaches the speech output.

Example:
    >>> ssml('<speak>\\n  {equation}\\n</speak>', equation='"1 + 1 > 1"')
    '<speak>&quot;1 + 1 &gt; 1&quot;</speak>'
"""

import re
from typing import Any

_WHITESPACE_RE = re.compile(r"\s+")

# Order matters: "&" first when escaping, last when unescaping
_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


def escape(text: str) -> str:
    """Escape the characters that would break SSML markup."""
    for char, entity in _ENTITIES:
        text = text.replace(char, entity)
    return text


def unescape(text: str) -> str:
    """Reverse escape()."""
    for char, entity in reversed(_ENTITIES):
        text = text.replace(entity, char)
    return text


def normalize(markup: str) -> str:
    """
    Collapse whitespace runs to a single space and remove the space left
    before a tag opens or after a tag closes.
    """
    markup = _WHITESPACE_RE.sub(" ", markup.strip())
    return markup.replace(" <", "<").replace("> ", ">")


def ssml(template: str, **values: Any) -> str:
    """
    Render a speech template.

    Args:
        template: SSML with {name} placeholders
        values: Placeholder values, escaped before substitution

    Returns:
        Normalized SSML text
    """
    escaped = {name: escape(str(value)) for name, value in values.items()}
    return normalize(template.format(**escaped))
