"""Return descriptors rendered as prose."""

from __future__ import annotations

from collections.abc import Sequence

from .atom_renderer import render_atom
from .models import ReturnDescriptor
from .style import DEFAULT_STYLE, RenderStyle


def sentence(text: str) -> str:
    """Turn a string into a complete sentence.

    >>> sentence("Hello")
    'Hello.'
    >>> sentence("Hi.")
    'Hi.'
    """
    text = text.rstrip()
    if not text:
        return ""
    return text if text.endswith(".") else f"{text}."


def render_return(ret: ReturnDescriptor, style: RenderStyle = DEFAULT_STYLE) -> str:
    description = (ret.description or "").strip()
    type_text = render_atom(ret.type, style, link=style.link_types) if ret.type else ""

    if description and type_text:
        return f"Returns {sentence(description)} {style.emphasis(f'({type_text})')}"
    if description:
        return f"Returns {sentence(description)}"
    if type_text and style.describe_return_types:
        shown = style.code(type_text) if style.is_html else style.emphasis(type_text)
        return f"Returns a {shown}."
    return ""


def render_returns(
    returns: Sequence[ReturnDescriptor | dict],
    style: RenderStyle = DEFAULT_STYLE,
) -> list[str]:
    """One fragment per descriptor; descriptors with nothing to say are dropped."""
    fragments = (render_return(_coerce(r), style) for r in returns)
    return [f for f in fragments if f]


def is_simple_return(returns: Sequence[ReturnDescriptor | dict]) -> bool:
    """A lone return whose description is empty or not a finished sentence.

    Such a return reads as a continuation of the paragraph before it.
    """
    if len(returns) != 1:
        return False
    description = (_coerce(returns[0]).description or "").rstrip()
    return not description or not description.endswith(".")


def _coerce(ret: ReturnDescriptor | dict) -> ReturnDescriptor:
    if isinstance(ret, ReturnDescriptor):
        return ret
    return ReturnDescriptor.model_validate(ret)
