"""One section: heading line plus body."""

from __future__ import annotations

from . import constants
from .body import render_access, render_body
from .escaping import anchor_id, escape
from .models import Section, SectionKind
from .style import DEFAULT_STYLE, RenderStyle


def heading_prefix(section: Section, style: RenderStyle = DEFAULT_STYLE) -> str:
    """Modules and classes sit one level above functions, members and the rest."""
    if section.kind in constants.OUTER_KINDS:
        return style.outer_heading
    return style.inner_heading


def heading_text(section: Section, style: RenderStyle = DEFAULT_STYLE) -> str:
    """Visible heading text: the name, with ``()`` for functions."""
    suffix = "()" if section.kind == SectionKind.FUNCTION else ""
    return f"{escape(section.name or '', style)}{suffix}"


def render_heading(
    section: Section,
    prefix: str,
    style: RenderStyle = DEFAULT_STYLE,
) -> str:
    anchor = ""
    if style.is_html and section.name:
        anchor = f"<a id='{anchor_id(section.name)}'></a>"

    access = render_access(section, style)
    if access and not style.is_html:
        access = f" {access}"

    return f"{prefix}{anchor}{heading_text(section, style)}{access}"


def render_section(
    section: Section,
    prefix: str | None = None,
    style: RenderStyle = DEFAULT_STYLE,
    *,
    signature: bool = True,
) -> str:
    """Render a section (a function, class, and so on) as Markdown.

    ``prefix`` is the heading marker, usually ``"## "``; it defaults to the
    level chosen from the section kind.
    """
    if prefix is None:
        prefix = heading_prefix(section, style)

    md = [render_heading(section, prefix, style)]
    body = render_body(section, style, signature=signature)
    if body:
        md.append(body)
    return constants.BLOCK_SEPARATOR.join(md)
