"""Preferred key order for structured log events."""

from __future__ import annotations

DEFAULT_EVENT_KEY_ORDER = ("ts_utc", "level", "logger")

EVENT_KEY_ORDER: dict[str, tuple[str, ...]] = {
    "input_loaded": (*DEFAULT_EVENT_KEY_ORDER, "input_file", "section_count"),
    "config_loaded": (*DEFAULT_EVENT_KEY_ORDER, "config_file", "dialect", "param_mode"),
    "sections_filtered": (
        *DEFAULT_EVENT_KEY_ORDER,
        "input_sections",
        "rendered_sections",
        "include_private",
    ),
    "document_written": (*DEFAULT_EVENT_KEY_ORDER, "output_file", "chars"),
    "strict_validation_failed": (*DEFAULT_EVENT_KEY_ORDER, "issue_count", "first_issue"),
    "unexpected_error": (*DEFAULT_EVENT_KEY_ORDER, "error_type", "error"),
}

LOG_PATH_FIELDS = frozenset({"input_file", "output_file", "config_file"})


def ordered_keys(event: str, data: dict[str, object]) -> list[str]:
    """Known keys for ``event`` first, in schema order, then the rest sorted.

    Keys whose value is ``None`` are left out.
    """
    preferred = EVENT_KEY_ORDER.get(event, DEFAULT_EVENT_KEY_ORDER)
    present = [key for key in preferred if data.get(key) is not None]
    rest = sorted(key for key, value in data.items() if key not in preferred and value is not None)
    return present + rest
