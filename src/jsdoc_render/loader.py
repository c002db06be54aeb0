"""Reading the parser's JSON output."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import IO, Any

from pydantic import ValidationError

from .errors import InputLoadError
from .models import STRICT_FIELDS, Section

STDIN_LABEL = "<stdin>"


def load_sections(
    path: Path | None = None,
    *,
    stream: IO[str] | None = None,
    strict: bool = False,
) -> list[Section]:
    """Load sections from a JSON file, or from ``stream`` (stdin) when no path is given."""
    if path is not None:
        source = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise InputLoadError(source, exc.strerror or str(exc)) from exc
    else:
        source = STDIN_LABEL
        text = (stream if stream is not None else sys.stdin).read()
    return parse_sections(text, source=source, strict=strict)


def parse_sections(
    text: str, *, source: str = STDIN_LABEL, strict: bool = False
) -> list[Section]:
    """Parse a JSON array of section records into models.

    With ``strict``, a field of the wrong shape fails the load instead of
    being coerced or dropped.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputLoadError(source, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(data, list):
        raise InputLoadError(source, "expected a JSON array of sections")

    sections: list[Section] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise InputLoadError(source, f"section #{index + 1} is not an object")
        try:
            sections.append(Section.model_validate(record, context={STRICT_FIELDS: strict}))
        except ValidationError as exc:
            first = exc.errors()[0]
            where = ".".join(str(part) for part in first["loc"])
            raise InputLoadError(
                source, f"section #{index + 1} field '{where}': {first['msg']}"
            ) from exc
    return sections
