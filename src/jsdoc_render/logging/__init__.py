"""Structured logging primitives for jsdoc-render."""

from .events import log_event, setup_logging, summarize_text
from .formatter import StructuredTextFormatter
from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER, LOG_PATH_FIELDS, ordered_keys

__all__ = [
    "DEFAULT_EVENT_KEY_ORDER",
    "EVENT_KEY_ORDER",
    "LOG_PATH_FIELDS",
    "StructuredTextFormatter",
    "log_event",
    "ordered_keys",
    "setup_logging",
    "summarize_text",
]
