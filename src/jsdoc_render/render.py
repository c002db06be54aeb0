"""Document entry point: filter sections, render each, join them."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from . import constants
from .logging import log_event
from .models import Section, coerce_section, is_record
from .section import render_section
from .style import DEFAULT_STYLE, RenderOptions, RenderStyle, coerce_options


def renderable_sections(
    sections: Iterable[Section | dict[str, Any]],
    *,
    include_private: bool = False,
) -> list[Section]:
    """Drop undocumented and package sections, and private ones unless asked.

    Entries that are not objects at all are skipped too.
    """
    models = (coerce_section(raw) for raw in sections if is_record(raw))
    return [s for s in models if is_renderable(s, include_private=include_private)]


def is_renderable(section: Section, *, include_private: bool = False) -> bool:
    if section.undocumented or section.kind in constants.SKIPPED_KINDS:
        return False
    return include_private or not section.is_private


def render(
    sections: Iterable[Section | dict[str, Any]],
    options: RenderOptions | dict[str, Any] | None = None,
    style: RenderStyle = DEFAULT_STYLE,
) -> str:
    """Render a JSDoc document into a Markdown document.

    Takes the list of sections given by ``jsdoc -X``; ``options`` may set a
    ``title`` and ``include_private``. Example::

        render([{
            "name": "len",
            "kind": "function",
            "description": "Returns the number of keys in a HAMT tree.",
            "params": [{"type": {"names": ["Tree"]}, "name": "data"}],
            "returns": [{"type": {"names": ["number"]}}],
        }])
    """
    options = coerce_options(options)
    sections = list(sections)
    kept = renderable_sections(sections, include_private=options.include_private)

    output = constants.BLOCK_SEPARATOR.join(
        render_section(section, style=style, signature=options.signature)
        for section in kept
    )

    if options.title:
        heading = f"{constants.TITLE_HEADING}{options.title}"
        output = f"{heading}{constants.BLOCK_SEPARATOR}{output}" if output else heading

    log_event(
        "sections_filtered",
        level=logging.DEBUG,
        input_sections=len(sections),
        rendered_sections=len(kept),
        include_private=options.include_private,
    )
    return output
