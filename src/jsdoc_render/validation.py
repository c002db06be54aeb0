"""Opt-in strict validation of parser output.

Rendering never needs this: malformed records render as omissions. The CLI
runs it only with ``--strict``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from .errors import StrictValidationError
from .models import STRICT_FIELDS, Parameter, Section, SectionKind, coerce_section, is_record
from .render import is_renderable


@dataclass(frozen=True)
class ValidationIssue:
    section: str
    message: str

    def __str__(self) -> str:
        return f"{self.section}: {self.message}"


def find_issues(
    sections: Iterable[Section | dict[str, Any]],
    *,
    include_private: bool = True,
) -> list[ValidationIssue]:
    """Problems in the sections that would be rendered, in input order.

    Sections are labelled by name, or by position in the input when unnamed.
    """
    issues: list[ValidationIssue] = []
    for position, raw in enumerate(sections, start=1):
        if not is_record(raw):
            issues.append(ValidationIssue(f"section #{position}", "not an object"))
            continue
        section = coerce_section(raw)
        if not is_renderable(section, include_private=include_private):
            continue

        label = section.name or f"section #{position}"
        if not section.name:
            issues.append(ValidationIssue(label, "missing name"))
        if isinstance(raw, Mapping):
            issues += _field_issues(label, raw)
        issues += _param_issues(label, "param", section.params)
        issues += _param_issues(label, "property", section.properties)
        for ret in section.returns:
            if ret.type is not None and not _is_type_node(ret.type):
                issues.append(ValidationIssue(label, "return type has no names"))
    return issues


def validate_sections(
    sections: Iterable[Section | dict[str, Any]],
    *,
    include_private: bool = True,
) -> list[Section]:
    """Return the sections as models, or raise ``StrictValidationError``."""
    records = list(sections)
    issues = find_issues(records, include_private=include_private)
    if issues:
        raise StrictValidationError(issues)
    return [coerce_section(r) for r in records]


def _field_issues(label: str, raw: Mapping[str, Any]) -> list[ValidationIssue]:
    """Fields that lenient loading would have coerced or dropped."""
    try:
        Section.model_validate(raw, context={STRICT_FIELDS: True})
    except ValidationError as exc:
        issues = []
        for err in exc.errors():
            where = ".".join(str(part) for part in err["loc"])
            issues.append(ValidationIssue(label, f"field '{where}': {err['msg']}"))
        return issues
    return []


def _param_issues(
    label: str, noun: str, params: Sequence[Parameter]
) -> list[ValidationIssue]:
    issues = []
    seen: set[str] = set()
    for position, param in enumerate(params, start=1):
        if not param.name:
            issues.append(ValidationIssue(label, f"{noun} #{position} has no name"))
            continue
        if param.is_deep:
            parent = param.name.rsplit(".", 1)[0]
            if parent not in seen:
                issues.append(
                    ValidationIssue(
                        label, f"{noun} '{param.name}' appears before '{parent}'"
                    )
                )
        seen.add(param.name)
        if param.type is not None and not _is_type_node(param.type):
            issues.append(ValidationIssue(label, f"{noun} '{param.name}' type has no names"))
    return issues


def _is_type_node(node: Any) -> bool:
    if isinstance(node, str):
        return True
    if not isinstance(node, Mapping):
        return False
    if node.get("kind") in (SectionKind.FUNCTION, SectionKind.TYPEDEF):
        return True
    return isinstance(node.get("names"), list)
