"""Domain models for jsdoc-render.

These mirror the records emitted by ``jsdoc -X``. Every field is optional so
that partially documented input still validates; unknown keys (``longname``,
``meta``, ``order`` ...) are kept as passthrough metadata.

Validation is lenient by default: ``null`` means "not supplied", and values
of the wrong shape are coerced or dropped so a malformed record renders as
an omission. Validating with ``context={STRICT_FIELDS: True}`` skips the
coercion and lets pydantic reject the record instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator

STRICT_FIELDS = "strict_fields"


class SectionKind(StrEnum):
    FUNCTION = "function"
    MEMBER = "member"
    CLASS = "class"
    MODULE = "module"
    TYPEDEF = "typedef"
    PACKAGE = "package"


class Access(StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"


def _lenient(info: ValidationInfo) -> bool:
    return not (info.context or {}).get(STRICT_FIELDS)


def _as_text(value: Any) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _as_records(value: Any) -> list[Any]:
    if isinstance(value, (Mapping, BaseModel)):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, (Mapping, BaseModel))]


def _as_strings(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


class _Record(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # A null field is an absent field, so as_node() leaves it out.
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def as_node(self) -> dict[str, Any]:
        """Return the raw mapping, holding only the fields that were supplied."""
        return self.model_dump(exclude_unset=True)


class Parameter(_Record):
    name: str | None = None
    type: Any = None  # raw type atom
    optional: bool = False
    variable: bool = False
    description: str | None = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def _text(cls, value: Any, info: ValidationInfo) -> Any:
        return _as_text(value) if _lenient(info) else value

    @field_validator("optional", "variable", mode="before")
    @classmethod
    def _flag(cls, value: Any, info: ValidationInfo) -> Any:
        return bool(value) if _lenient(info) else value

    @property
    def depth(self) -> int:
        """Number of ``.`` separators in the name (``options.prefix`` -> 1)."""
        return (self.name or "").count(".")

    @property
    def is_deep(self) -> bool:
        return self.depth > 0


class ReturnDescriptor(_Record):
    description: str | None = None
    type: Any = None  # raw type atom

    @field_validator("description", mode="before")
    @classmethod
    def _text(cls, value: Any, info: ValidationInfo) -> Any:
        return _as_text(value) if _lenient(info) else value


class Section(_Record):
    name: str | None = None
    kind: str | None = None
    scope: str | None = None
    access: str | None = None
    description: str | None = None
    params: list[Parameter] = []
    properties: list[Parameter] = []
    returns: list[ReturnDescriptor] = []
    examples: list[str] = []
    undocumented: bool = False

    @field_validator("name", "kind", "scope", "access", "description", mode="before")
    @classmethod
    def _text(cls, value: Any, info: ValidationInfo) -> Any:
        return _as_text(value) if _lenient(info) else value

    @field_validator("params", "properties", "returns", mode="before")
    @classmethod
    def _records(cls, value: Any, info: ValidationInfo) -> Any:
        return _as_records(value) if _lenient(info) else value

    @field_validator("examples", mode="before")
    @classmethod
    def _examples(cls, value: Any, info: ValidationInfo) -> Any:
        return _as_strings(value) if _lenient(info) else value

    @field_validator("undocumented", mode="before")
    @classmethod
    def _flag(cls, value: Any, info: ValidationInfo) -> Any:
        return bool(value) if _lenient(info) else value

    @property
    def is_private(self) -> bool:
        return self.access == Access.PRIVATE

    @property
    def is_public(self) -> bool:
        return not self.access or self.access == Access.PUBLIC


def is_record(value: Any) -> bool:
    """Whether ``value`` can be read as a section at all."""
    return isinstance(value, (Section, Mapping))


def coerce_section(section: Section | Mapping[str, Any]) -> Section:
    """Accept either a model or a raw mapping from the parser."""
    if isinstance(section, Section):
        return section
    return Section.model_validate(section)
