"""Parameter and property lists, rendered as a table or a nested bullet list.

Input order is preserved. Nesting of deep parameters (``options.prefix``)
comes from the dot count of each name; the flat list is never re-grouped.
"""

from __future__ import annotations

from collections.abc import Sequence

from . import constants
from .atom_renderer import render_atom
from .escaping import escape_cell
from .models import Parameter
from .style import DEFAULT_STYLE, ParamMode, RenderStyle

_TABLE_HEADER = "| Param | Type | Description |\n| --- | --- | --- |"


def render_params(
    params: Sequence[Parameter | dict],
    style: RenderStyle = DEFAULT_STYLE,
) -> str:
    """Render params or properties in the style's parameter mode."""
    items = [_coerce(p) for p in params]
    if not items:
        return ""
    if style.param_mode == ParamMode.LIST:
        return "\n".join(render_param_line(p, style) for p in items)
    rows = [render_param_row(p, style) for p in items]
    return "\n".join([_TABLE_HEADER, *rows])


def render_param_row(param: Parameter, style: RenderStyle = DEFAULT_STYLE) -> str:
    """One table row: full dotted name, type with optional suffix, description."""
    name = f"`{param.name}`" if param.name else ""

    type_text = ""
    if param.type:
        opt = style.optional_suffix if param.optional else ""
        type_text = f"{render_atom(param.type, style)}{opt}"

    description = param.description or ""
    cells = [escape_cell(name), escape_cell(type_text), escape_cell(description)]
    return "| " + " | ".join(cells) + " |"


def render_param_line(param: Parameter, style: RenderStyle = DEFAULT_STYLE) -> str:
    """One bullet: last path segment, indented by depth, then type and description."""
    indent = constants.LIST_INDENT * param.depth
    segment = (param.name or "").rsplit(".", 1)[-1]
    line = f"{indent}- `{segment}`" if segment else f"{indent}-"

    annotation = _annotation(param, style)
    if annotation:
        line = f"{line} {annotation}"
    if param.description:
        line = f"{line}{constants.DESCRIPTION_DASH}{_single_line(param.description)}"
    return line


def _annotation(param: Parameter, style: RenderStyle) -> str:
    type_text = render_atom(param.type, style) if param.type else ""
    if param.optional:
        # Without a type the suffix loses its leading separator.
        type_text = f"{type_text}{style.optional_suffix}" if type_text else (
            style.optional_suffix.lstrip(", ")
        )
    if not type_text:
        return ""
    return style.emphasis(f"({type_text})")


def _single_line(text: str) -> str:
    return " ".join(text.splitlines())


def _coerce(param: Parameter | dict) -> Parameter:
    if isinstance(param, Parameter):
        return param
    return Parameter.model_validate(param)
