"""CLI entry and startup wiring."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DEFAULT_GROUPS, load_groups
from .constants import APP_NAME, BUILD_DONE_TEXT, BUILD_START_TEXT, ERROR_PREFIX
from .errors import HelperDocsError
from .logging_utils import log_event, setup_logging
from .models import ProjectPaths
from .service import generate_docs


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_file)
    except OSError as exc:
        _print_error(f"Failed to open log file: {args.log_file}: {exc}")
        return 1

    root = Path(args.root).expanduser().resolve()

    print(BUILD_START_TEXT)
    try:
        groups = load_groups(Path(args.config).expanduser()) if args.config else DEFAULT_GROUPS
        report = generate_docs(ProjectPaths.from_root(root), groups)
    except HelperDocsError as exc:
        log_event(
            "docs_run_failed",
            level=logging.ERROR,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        _print_error(str(exc))
        return 1

    print(
        f"{BUILD_DONE_TEXT}: {report.record_count} scripts, "
        f"{len(report.written_paths)} files written, "
        f"{len(report.unchanged_paths)} unchanged"
    )
    return 0


def _print_error(message: str) -> None:
    print(f"{ERROR_PREFIX} {message}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate markdown docs from annotated bash helper scripts.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root holding README.md, helpers/ and docs/ (default: current directory).",
    )
    parser.add_argument(
        "--config",
        required=False,
        help='Optional JSON registry file ({"groups": [...]}) replacing the built-in groups.',
    )
    parser.add_argument(
        "--log-file",
        required=False,
        help="Optional path for a structured run log.",
    )
    return parser
