"""Plain-text formatter for the JSON events written by ``log_event``."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from .schema import ordered_keys

_UTC_STAMP = "%Y-%m-%dT%H:%M:%S.%fZ"


def _event_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Decode a ``log_event`` payload; other records become a bare message."""
    message = record.getMessage()
    if message.startswith("{"):
        try:
            payload = json.loads(message)
        except json.JSONDecodeError:
            payload = None
        if isinstance(payload, dict):
            # Replaced by ts_utc in the rendered block.
            payload.pop("ts", None)
            return payload
    return {"event": record.name, "message": message}


class StructuredTextFormatter(logging.Formatter):
    """One ``=== event ===`` block per record, ``key: value`` lines below it.

    Blocks after the first are preceded by a blank line.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._emitted = 0

    def format(self, record: logging.LogRecord) -> str:
        fields = _event_fields(record)
        event = str(fields.pop("event", record.name))
        data = {
            "ts_utc": datetime.now(timezone.utc).strftime(_UTC_STAMP),
            "level": record.levelname,
            "logger": record.name,
            **fields,
        }

        lines = [f"=== {event} ==="]
        for key in ordered_keys(event, data):
            value = str(data[key]).replace("\n", "\\n")
            lines.append(f"{key}: {value}")
        if record.exc_info:
            lines += ["traceback:", self.formatException(record.exc_info)]

        block = "\n".join(lines)
        self._emitted += 1
        return block if self._emitted == 1 else f"\n{block}"
