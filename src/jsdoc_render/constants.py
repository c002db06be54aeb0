"""Centralized constants for jsdoc-render."""

from __future__ import annotations

# Application identity
APP_NAME = "jsdoc-render"

# Markup defaults
ARROW = " → "
PRIVATE_MARKER = "🔸"
OPTIONAL_SUFFIX_HTML = ", _optional_"
OPTIONAL_SUFFIX_MARKDOWN = ", optional"
OPTIONAL_MARKER_HTML = '<sub title="Optional">?</sub>'
OPTIONAL_MARKER_MARKDOWN = "?"
VARIADIC_PREFIX = "..."
VOID_TYPE = "void"
EXAMPLE_LANGUAGE = "js"
OUTER_HEADING = "## "
INNER_HEADING = "### "
TITLE_HEADING = "# "
BLOCK_SEPARATOR = "\n\n"
LIST_SEPARATOR = ", "
UNION_SEPARATOR = " | "
DESCRIPTION_DASH = " — "
LIST_INDENT = "  "

# Characters the escaper knows how to escape, in application order.
# "&" must come first so later entity references are not double-escaped.
ESCAPE_TABLE = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "*": "\\*",
    "_": "\\_",
    "`": "\\`",
}
HTML_ESCAPED_CHARACTERS = frozenset("&<>")
MARKDOWN_ESCAPED_CHARACTERS = frozenset("&<>*")

# Section kinds
OUTER_KINDS = frozenset({"module", "class"})
NO_SIGNATURE_KINDS = frozenset({"module", "class"})
SKIPPED_KINDS = frozenset({"package"})
PUBLIC_ACCESS = "public"
PRIVATE_ACCESS = "private"

# CLI
STDIN_MARKER = "-"
CLI_ERROR_PREFIX = "ERROR:"
CLI_PROG = APP_NAME
CLI_DESCRIPTION = "Render a JSDoc section list (jsdoc -X output) into Markdown."
