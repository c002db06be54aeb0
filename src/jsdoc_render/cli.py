"""CLI entry and startup wiring."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import constants
from .config import RenderConfig, build_style, load_config
from .errors import JsdocRenderError, StrictValidationError
from .loader import STDIN_LABEL, load_sections
from .logging import log_event, setup_logging, summarize_text
from .path_mapping import map_path
from .style import ParamMode, RenderOptions, RenderStyle
from .toc import render_document
from .validation import validate_sections


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(str(map_path(args.log_file)) if args.log_file else None)

        config_path = map_path(args.config) if args.config else None
        config = load_config(config_path)
        if config_path is not None:
            log_event(
                "config_loaded",
                config_file=config_path,
                dialect=config.style.dialect,
                param_mode=config.style.param_mode,
            )
        options, style = apply_overrides(config, args)

        input_path = _optional_path(args.input)
        sections = load_sections(input_path, strict=args.strict)
        log_event(
            "input_loaded",
            input_file=input_path if input_path is not None else STDIN_LABEL,
            section_count=len(sections),
        )

        if args.strict:
            validate_sections(sections, include_private=options.include_private)

        document = render_document(sections, options, style)
        _write_output(document, _optional_path(args.output))
    except StrictValidationError as exc:
        log_event(
            "strict_validation_failed",
            level=logging.WARNING,
            issue_count=len(exc.issues),
            first_issue=summarize_text(exc.issues[0]),
        )
        print(render_error(str(exc)), file=sys.stderr)
        for issue in exc.issues:
            print(f"  {issue}", file=sys.stderr)
        return 1
    except JsdocRenderError as exc:
        print(render_error(str(exc)), file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        log_event(
            "unexpected_error",
            level=logging.ERROR,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        print(render_error(f"Unexpected: {exc}"), file=sys.stderr)
        return 1

    return 0


def apply_overrides(
    config: RenderConfig, args: argparse.Namespace
) -> tuple[RenderOptions, RenderStyle]:
    """Command-line flags win over the config file."""
    updates: dict[str, object] = {}
    if args.title is not None:
        updates["title"] = args.title
    if args.private:
        updates["include_private"] = True
    if args.no_toc:
        updates["toc"] = False
    if args.no_signature:
        updates["signature"] = False
    options = config.options.model_copy(update=updates)

    style = config.style
    if args.dialect is not None:
        overrides = {
            k: v for k, v in config.style_overrides.items() if k != "dialect"
        }
        style = build_style(args.dialect, overrides)
    if args.params is not None:
        style = style.model_copy(update={"param_mode": ParamMode(args.params)})
    return options, style


def render_error(message: str) -> str:
    return f"{constants.CLI_ERROR_PREFIX} {message}"


def _optional_path(raw: str | None) -> Path | None:
    if raw is None or raw == constants.STDIN_MARKER:
        return None
    return map_path(raw)


def _write_output(document: str, path: Path | None) -> None:
    text = document + "\n"
    if path is None:
        sys.stdout.write(text)
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise JsdocRenderError(f"Could not write {path}: {exc.strerror or exc}") from exc
    log_event("document_written", output_file=path, chars=len(text))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=constants.CLI_PROG,
        description=constants.CLI_DESCRIPTION,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="JSON file from 'jsdoc -X' (default: stdin; '-' also means stdin).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output Markdown file (default: stdout). Accepts ~ and @ paths.",
    )
    parser.add_argument("--title", default=None, help="Document title (H1 heading).")
    parser.add_argument(
        "--private",
        action="store_true",
        help="Include sections marked @private.",
    )
    parser.add_argument(
        "--no-toc",
        action="store_true",
        help="Do not emit a table of contents.",
    )
    parser.add_argument(
        "--no-signature",
        action="store_true",
        help="Do not emit signature blocks.",
    )
    parser.add_argument(
        "--dialect",
        choices=["html", "markdown"],
        default=None,
        help="Output dialect: Markdown with embedded HTML, or plain Markdown.",
    )
    parser.add_argument(
        "--params",
        choices=["table", "list"],
        default=None,
        help="Render parameters as a table or as a nested list.",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON config file.")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed sections instead of omitting what is missing or malformed.",
    )
    parser.add_argument("--log-file", default=None, help="Write structured logs here.")
    return parser
