"""Escaping of raw type and signature strings.

Callers escape a raw value exactly once; escaping is not idempotent.
"""

from __future__ import annotations

import html
import re

from . import constants
from .style import RenderStyle

# Array.<string> and Array<string> both become string[].
_GENERIC_ARRAY_RE = re.compile(r"Array\.?<([^<>]+)>")
# A maximal run of capitalized words, e.g. "Tree", "HashMap", "Node2".
_TYPE_NAME_RE = re.compile(r"(?:[A-Z][a-z0-9]*)+")
_NON_ANCHOR_RE = re.compile(r"[^a-z0-9]")


def collapse_generics(raw: str) -> str:
    """Rewrite generic array notation into the suffix form.

    Nested generics collapse from the inside out, so
    ``Array.<Array.<string>>`` becomes ``string[][]``.
    """
    previous = None
    text = raw
    while text != previous:
        previous = text
        text = _GENERIC_ARRAY_RE.sub(r"\1[]", text)
    return text


def anchor_id(text: str) -> str:
    """Lowercase, alphanumeric-only anchor target for a name."""
    return _NON_ANCHOR_RE.sub("", text.lower())


def escape(raw: str, style: RenderStyle, *, link: bool = False) -> str:
    text = collapse_generics(raw)
    text = _escape_characters(text, style.escaped_characters)
    if link:
        text = _TYPE_NAME_RE.sub(lambda m: _link(m.group(0), style), text)
    return text


def escape_attribute(text: str) -> str:
    """Make unescaped text safe inside a single or double quoted attribute."""
    return html.escape(text, quote=True)


def escape_cell(text: str) -> str:
    """Make rendered text safe inside one Markdown table cell."""
    return " ".join(text.replace("|", "\\|").splitlines())


def _escape_characters(text: str, characters: frozenset[str]) -> str:
    for char, replacement in constants.ESCAPE_TABLE.items():
        if char in characters:
            text = text.replace(char, replacement)
    return text


def _link(name: str, style: RenderStyle) -> str:
    target = anchor_id(name)
    if style.is_html:
        return f"<a href='#{target}'>{name}</a>"
    return f"[{name}](#{target})"
