"""Body of a section: everything under the heading.

Blocks come in a fixed order: signature (with parameters), description,
returns, examples. A step with nothing to show adds no block.
"""

from __future__ import annotations

import re

from .atom_renderer import render_atom
from .blocks import BlockBuilder
from .constants import NO_SIGNATURE_KINDS
from .escaping import escape_attribute
from .models import Section
from .params import render_params
from .returns import is_simple_return, render_returns
from .style import DEFAULT_STYLE, RenderStyle

_CAPTION_RE = re.compile(r"^\s*<caption>(.*?)</caption>[ \t]*\n?", re.DOTALL)
_BACKTICK_RUN_RE = re.compile(r"`+")


def render_body(
    section: Section,
    style: RenderStyle = DEFAULT_STYLE,
    *,
    signature: bool = True,
) -> str:
    md = BlockBuilder()

    if signature:
        md.append(render_signature_block(section, style))

    if section.description:
        badge = render_access(section, style)
        md.append(f"{badge} {section.description}" if badge else section.description)

    if section.returns:
        returns = render_returns(section.returns, style)
        # A return that doesn't end in a dot continues the last paragraph.
        if returns and is_simple_return(section.returns) and md:
            md.merge_into_last(returns[0])
        else:
            md.extend(returns)

    md.extend(render_example(ex, style) for ex in section.examples)

    return md.build()


def render_signature_block(section: Section, style: RenderStyle = DEFAULT_STYLE) -> str:
    """Signature with its parameter (or property) table, if it has one."""
    params = section.params or section.properties
    if not params and (
        not style.signature_for_all_kinds or section.kind in NO_SIGNATURE_KINDS
    ):
        return ""

    summary = render_atom(section, style, link=style.link_types)
    table = render_params(params, style) if params else ""
    if not summary and not table:
        return ""

    if style.is_html:
        if table:
            return f"<details>\n<summary>{summary}</summary>\n\n{table}\n</details>"
        return f"<details>\n<summary>{summary}</summary>\n</details>"

    if not summary:
        return table
    quote = f"> {summary}"
    return f"{quote}\n\n{table}" if table else quote


def render_access(section: Section, style: RenderStyle = DEFAULT_STYLE) -> str:
    """Badge for a non-public section, or an empty string."""
    if section.is_public:
        return ""
    if style.is_html:
        return f"<span title='{escape_attribute(section.access)}'>{style.private_marker}</span>"
    return f"{style.private_marker} _{section.access}_"


def render_example(example: str, style: RenderStyle = DEFAULT_STYLE) -> str:
    """Fenced code block; a leading <caption> becomes a line above the fence."""
    caption = ""
    match = _CAPTION_RE.match(example)
    if match:
        caption = match.group(1).strip()
        example = example[match.end():]

    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(example)), default=0)
    fence = "`" * max(3, longest + 1)
    block = f"{fence}{style.example_language}\n{example}\n{fence}"
    if caption:
        return f"{style.emphasis(caption)}\n\n{block}"
    return block
