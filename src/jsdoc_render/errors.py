"""Custom exception types for jsdoc-render.

The rendering functions never raise; these cover loading, configuration and
the opt-in strict validation layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import ValidationIssue


class JsdocRenderError(Exception):
    """Base class for all jsdoc-render errors."""


class InputLoadError(JsdocRenderError):
    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Could not load sections from {source}: {reason}")


class ConfigError(JsdocRenderError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class PathMappingError(JsdocRenderError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class StrictValidationError(JsdocRenderError):
    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        noun = "issue" if len(issues) == 1 else "issues"
        super().__init__(f"Strict validation found {len(issues)} {noun}.")
