"""Render style and render options.

``RenderStyle`` holds every markup symbol the renderers emit, so the
HTML-augmented and plain Markdown dialects can coexist side by side.
``RenderOptions`` holds the per-document choices (title, private sections,
table of contents, signatures).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from . import constants


class Dialect(StrEnum):
    HTML = "html"
    MARKDOWN = "markdown"


class ParamMode(StrEnum):
    TABLE = "table"
    LIST = "list"


class RenderStyle(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    dialect: Dialect = Dialect.HTML
    param_mode: ParamMode = ParamMode.TABLE
    arrow: str = constants.ARROW
    private_marker: str = constants.PRIVATE_MARKER
    optional_suffix: str = constants.OPTIONAL_SUFFIX_HTML
    optional_marker: str = constants.OPTIONAL_MARKER_HTML
    escaped_characters: frozenset[str] = constants.HTML_ESCAPED_CHARACTERS
    link_types: bool = True
    signature_for_all_kinds: bool = True
    describe_return_types: bool = True
    outer_heading: str = constants.OUTER_HEADING
    inner_heading: str = constants.INNER_HEADING
    example_language: str = constants.EXAMPLE_LANGUAGE
    void_type: str = constants.VOID_TYPE

    @field_validator("escaped_characters")
    @classmethod
    def _known_characters(cls, value: frozenset[str]) -> frozenset[str]:
        unknown = sorted(value - set(constants.ESCAPE_TABLE))
        if unknown:
            allowed = " ".join(constants.ESCAPE_TABLE)
            raise ValueError(
                f"cannot escape {', '.join(repr(c) for c in unknown)}; "
                f"choose from: {allowed}"
            )
        return value

    @classmethod
    def html(cls, **overrides: object) -> RenderStyle:
        return cls.model_validate(overrides)

    @classmethod
    def markdown(cls, **overrides: object) -> RenderStyle:
        """Plain Markdown preset: no inline HTML, list-mode parameters."""
        base = {
            "dialect": Dialect.MARKDOWN,
            "param_mode": ParamMode.LIST,
            "optional_suffix": constants.OPTIONAL_SUFFIX_MARKDOWN,
            "optional_marker": constants.OPTIONAL_MARKER_MARKDOWN,
            "escaped_characters": constants.MARKDOWN_ESCAPED_CHARACTERS,
        }
        names = {f.alias: name for name, f in cls.model_fields.items() if f.alias}
        base.update({names.get(key, key): value for key, value in overrides.items()})
        return cls.model_validate(base)

    @property
    def is_html(self) -> bool:
        return self.dialect == Dialect.HTML

    def code(self, text: str) -> str:
        if self.is_html:
            return f"<code>{text}</code>"
        return text

    def emphasis(self, text: str) -> str:
        if self.is_html:
            return f"<em>{text}</em>"
        return f"_{text}_"


class RenderOptions(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    title: str | None = None
    include_private: bool = False
    toc: bool = True
    signature: bool = True


DEFAULT_STYLE = RenderStyle()
DEFAULT_OPTIONS = RenderOptions()


def coerce_options(options: RenderOptions | dict | None) -> RenderOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions.model_validate(options)
