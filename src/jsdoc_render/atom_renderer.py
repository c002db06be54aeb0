"""Recursive renderer for documentation atoms.

Turns a signature, a parameter, a type annotation and so on into inline
text. Anything unrecognized renders as an empty string; callers concatenate
the output without checking.
"""

from __future__ import annotations

from typing import Any

from . import constants
from .atoms import (
    Atom,
    EmptyAtom,
    ListAtom,
    NameAtom,
    ObjectAtom,
    ParameterAtom,
    SignatureAtom,
    StringAtom,
    UnionAtom,
    build_atom,
)
from .escaping import escape, escape_attribute
from .style import DEFAULT_STYLE, RenderStyle


def render_atom(
    atom: Atom | Any,
    style: RenderStyle = DEFAULT_STYLE,
    *,
    link: bool = False,
) -> str:
    """Render an atom (or a raw node, which is classified first).

    ``link`` cross-links capitalized type names to section anchors.
    """
    atom = build_atom(atom)

    if isinstance(atom, ListAtom):
        return constants.LIST_SEPARATOR.join(
            render_atom(item, style, link=link) for item in atom.items
        )
    if isinstance(atom, StringAtom):
        return escape(atom.text, style, link=link)
    if isinstance(atom, EmptyAtom):
        return ""
    if isinstance(atom, SignatureAtom):
        return _render_signature(atom, style, link=link)
    if isinstance(atom, ObjectAtom):
        inner = constants.LIST_SEPARATOR.join(
            render_atom(p, style, link=link) for p in atom.properties
        )
        return style.code(f"{{ {inner} }}")
    if isinstance(atom, UnionAtom):
        return constants.UNION_SEPARATOR.join(
            render_atom(n, style, link=link) for n in atom.names
        )
    if isinstance(atom, ParameterAtom):
        return _render_parameter(atom, style)
    if isinstance(atom, NameAtom):
        return escape(atom.name, style)
    return ""


def _render_signature(atom: SignatureAtom, style: RenderStyle, *, link: bool) -> str:
    name = escape(atom.name, style)
    params = constants.LIST_SEPARATOR.join(render_atom(p, style) for p in atom.params)
    returns = render_atom(atom.returns, style, link=link) or style.void_type
    return f"{style.code(f'{name}({params})')}{style.arrow}{style.emphasis(returns)}"


def _render_parameter(atom: ParameterAtom, style: RenderStyle) -> str:
    name = escape(atom.name, style)
    marker = style.optional_marker if atom.optional else ""

    if style.is_html:
        # Tooltips carry plain text: no links, and attribute escaping only.
        plain = style.model_copy(update={"escaped_characters": frozenset()})
        tooltip = escape_attribute(render_atom(atom.type, plain))
        text = f"<b title='{tooltip}'>{name}</b>{marker}"
    else:
        text = f"{name}{marker}: {render_atom(atom.type, style)}"

    if atom.variable:
        text = f"{constants.VARIADIC_PREFIX}{text}"
    return text
