"""Render JSDoc section lists into Markdown API documents."""

from .atom_renderer import render_atom
from .models import Parameter, ReturnDescriptor, Section
from .render import render
from .style import Dialect, ParamMode, RenderOptions, RenderStyle
from .toc import render_document

__all__ = [
    "Dialect",
    "Parameter",
    "ParamMode",
    "RenderOptions",
    "RenderStyle",
    "ReturnDescriptor",
    "Section",
    "render",
    "render_atom",
    "render_document",
]
