"""Table of contents and whole-document assembly around ``render``."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from . import constants
from .blocks import BlockBuilder
from .escaping import anchor_id
from .models import Section, SectionKind
from .render import render, renderable_sections
from .section import heading_prefix, heading_text
from .style import DEFAULT_STYLE, RenderOptions, RenderStyle, coerce_options

_SLUG_DROP_RE = re.compile(r"[^\w\- ]")


def heading_slug(text: str) -> str:
    """Anchor GitHub generates for a plain Markdown heading."""
    return _SLUG_DROP_RE.sub("", text.lower()).replace(" ", "-")


def section_target(section: Section, style: RenderStyle = DEFAULT_STYLE) -> str:
    if style.is_html:
        return anchor_id(section.name or "")
    plain = f"{section.name or ''}{'()' if section.kind == SectionKind.FUNCTION else ''}"
    if not section.is_public:
        plain = f"{plain} {style.private_marker} {section.access}"
    return heading_slug(plain)


def render_toc(
    sections: Iterable[Section | dict[str, Any]],
    style: RenderStyle = DEFAULT_STYLE,
    *,
    include_private: bool = False,
) -> str:
    """Bullet list of links; inner-level entries nest under the last outer one."""
    lines = []
    under_outer = False
    for section in renderable_sections(sections, include_private=include_private):
        if not section.name:
            continue
        outer = heading_prefix(section, style) == style.outer_heading
        indent = constants.LIST_INDENT if (under_outer and not outer) else ""
        under_outer = under_outer or outer
        text = heading_text(section, style)
        lines.append(f"{indent}- [{text}](#{section_target(section, style)})")
    return "\n".join(lines)


def render_document(
    sections: Iterable[Section | dict[str, Any]],
    options: RenderOptions | dict[str, Any] | None = None,
    style: RenderStyle = DEFAULT_STYLE,
) -> str:
    """Title, table of contents (when enabled), then the rendered sections."""
    options = coerce_options(options)
    sections = list(sections)

    md = BlockBuilder()
    if options.title:
        md.append(f"{constants.TITLE_HEADING}{options.title}")
    if options.toc:
        md.append(render_toc(sections, style, include_private=options.include_private))
    md.append(render(sections, options.model_copy(update={"title": None}), style))
    return md.build()
