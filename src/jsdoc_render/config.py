"""Render configuration loaded from a JSON file.

Shape::

    {
      "preset": "markdown",
      "options": {"title": "API", "includePrivate": false, "toc": true},
      "style": {"paramMode": "table", "escapedCharacters": ["&", "<", ">"]}
    }

Keys accept snake_case or camelCase. ``preset`` picks the style base the
``style`` keys override.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ConfigError
from .style import Dialect, RenderOptions, RenderStyle


class RenderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    options: RenderOptions = RenderOptions()
    style: RenderStyle = RenderStyle()
    # The "style" keys as written, so a different preset can be applied later.
    style_overrides: dict[str, Any] = {}


def build_style(dialect: Dialect | str | None, overrides: dict[str, Any]) -> RenderStyle:
    if dialect is None or Dialect(dialect) == Dialect.HTML:
        return RenderStyle.html(**overrides)
    return RenderStyle.markdown(**overrides)


def parse_config(data: Any, *, source: str = "config") -> RenderConfig:
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a JSON object")

    unknown = sorted(set(data) - {"preset", "options", "style"})
    if unknown:
        raise ConfigError(f"{source}: unknown keys: {', '.join(unknown)}")

    options_raw = data.get("options") or {}
    style_raw = data.get("style") or {}
    if not isinstance(options_raw, dict) or not isinstance(style_raw, dict):
        raise ConfigError(f"{source}: 'options' and 'style' must be objects")

    try:
        options = RenderOptions.model_validate(options_raw)
        style = build_style(data.get("preset"), style_raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(part) for part in first["loc"]) or "value"
        raise ConfigError(f"{source}: {where}: {first['msg']}") from exc
    except ValueError as exc:
        raise ConfigError(f"{source}: unknown preset {data.get('preset')!r}") from exc

    return RenderConfig(options=options, style=style, style_overrides=style_raw)


def load_config(path: Path | None) -> RenderConfig:
    """Load a config file, or return defaults when no path is given."""
    if path is None:
        return RenderConfig()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc.strerror or exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    return parse_config(data, source=str(path))
