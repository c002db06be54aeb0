"""Mapping of the paths given on the command line.

``~/x`` is under the home directory and ``@/x`` under the installed package
(where bundled presets would live). Absolute paths stay as they are; relative
ones are taken from the working directory unless a base is given.
"""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

from .errors import PathMappingError

_SEPARATORS_RE = re.compile(r"[\\/]+")
# "\name" (but not "\\server") and "C:name" (but not "C:\name" or "C:/name").
_AMBIGUOUS_WINDOWS_RE = re.compile(r"^(?:\\(?!\\)|[A-Za-z]:(?![/\\]).)")


def app_root() -> Path:
    """Directory of the installed package; the target of ``@``."""
    return Path(__file__).resolve().parent


def map_path(
    raw: str,
    *,
    app_root_abs: Path | None = None,
    base_dir: Path | None = None,
) -> Path:
    """Return the absolute, dot-free path that ``raw`` names.

    Raises ``PathMappingError`` for empty input, embedded NUL characters and
    Windows paths that are rooted but not fully qualified.
    """
    root = app_root() if app_root_abs is None else app_root_abs
    if not root.is_absolute():
        raise PathMappingError(f"app_root_abs must be absolute, got '{root}'.")

    text = unicodedata.normalize("NFC", raw)
    _reject_unusable(text)

    head, rest = text[:1], text[1:]
    if head == "@":
        path = root.joinpath(*_segments(rest))
    elif head == "~":
        try:
            path = Path("~" + _SEPARATORS_RE.sub("/", rest)).expanduser()
        except RuntimeError as exc:
            raise PathMappingError(f"Could not expand '{raw}': {exc}") from exc
    else:
        path = Path(_SEPARATORS_RE.sub("/", text))

    if not path.is_absolute():
        path = (base_dir or Path.cwd()) / path
    return path.resolve()


def _reject_unusable(text: str) -> None:
    if not text.strip():
        raise PathMappingError("Path is empty.")
    if "\0" in text:
        raise PathMappingError("Path contains a NUL character.")
    if _AMBIGUOUS_WINDOWS_RE.match(text):
        raise PathMappingError(
            f"'{text}' is relative to a drive or to the current drive root; "
            "give a fully qualified path."
        )


def _segments(text: str) -> list[str]:
    return [part for part in _SEPARATORS_RE.split(text) if part]
