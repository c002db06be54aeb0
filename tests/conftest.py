"""Pytest configuration and fixtures for jsdoc-render tests."""

import json
import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging() calls so one test cannot silence another."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.disable(logging.NOTSET)


@pytest.fixture
def len_section():
    """The `len` function section as emitted by jsdoc -X."""
    return {
        "id": "len",
        "longname": "len",
        "name": "len",
        "scope": "global",
        "kind": "function",
        "description": "Returns the number of keys.",
        "params": [{"type": {"names": ["Tree"]}, "name": "data"}],
        "returns": [{"type": {"names": ["number"]}}],
        "meta": {"lineno": 217, "filename": "index.js"},
        "order": 5,
    }


@pytest.fixture
def sample_sections(len_section):
    """A small module: module header, typedef, public, private and hidden entries."""
    return [
        {"name": "nested-hamt", "kind": "module", "description": "Nested HAMT trees."},
        {
            "name": "Tree",
            "kind": "typedef",
            "description": "A HAMT tree.",
            "properties": [
                {"name": "size", "type": {"names": ["number"]}, "description": "Key count"},
            ],
        },
        {
            "name": "set",
            "kind": "function",
            "description": "Sets data into a HAMT tree.",
            "params": [
                {"name": "tree", "type": {"names": ["Tree"]}, "description": "The tree"},
                {
                    "name": "keypath",
                    "type": {"names": ["Array.<string>", "string"]},
                    "description": "List of keys",
                },
                {"name": "options", "type": {"names": ["Object"]}, "optional": True},
                {
                    "name": "options.prefix",
                    "type": {"names": ["string"]},
                    "optional": True,
                    "description": "Key prefix",
                },
            ],
            "returns": [{"type": {"names": ["Tree"]}}],
            "examples": ["var tree = set(empty, 'user', { name: 'John' })"],
        },
        len_section,
        {
            "name": "setRaw",
            "kind": "function",
            "access": "private",
            "description": "Set raw data.",
            "params": [{"name": "data", "type": {"names": ["Tree"]}}],
        },
        {"name": "fromJS", "kind": "function", "undocumented": True, "description": "Hidden helper."},
        {"name": "nested-hamt", "kind": "package", "description": "Package metadata."},
    ]


@pytest.fixture
def sections_file(tmp_path: Path, sample_sections) -> Path:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(sample_sections), encoding="utf-8")
    return path
