"""Command line front end.

Runs actions against a list of images without a window: each action comes
from ``--action`` or from a line on stdin, status changes are printed.

    viewer-actions a.png b.png --action "mark" --action "exec_marked identify {}"
    printf 'next_file\\nexec echo {}\\n' | viewer-actions *.jpg
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Sequence

from PySide6.QtCore import QCoreApplication

from viewer_actions.app.backend import Backend
from viewer_actions.infra.logger import get_logger
from viewer_actions.infra.settings_manager import SettingsManager

_ENV_LOG_LEVEL = "VIEWER_ACTIONS_LOG_LEVEL"
_ENV_LOG_CATS = "VIEWER_ACTIONS_LOG_CATS"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="viewer-actions", description="Dispatch viewer actions over images")
    p.add_argument("images", nargs="*", help="Image files")
    p.add_argument("--settings", help="Path to settings JSON")
    p.add_argument("--mode", help="Start mode (viewer or gallery)")
    p.add_argument(
        "--action",
        dest="actions",
        action="append",
        default=[],
        help="Action to dispatch before reading stdin (repeatable)",
    )
    p.add_argument("--no-stdin", action="store_true", help="Do not read actions from stdin")
    p.add_argument("--log-level", help="Set log level")
    p.add_argument("--log-cats", help="Set log categories")
    return p


def _apply_logging_options(args: argparse.Namespace) -> None:
    # Reflected into env vars so every later setup_logger() call sees them.
    if args.log_level:
        os.environ[_ENV_LOG_LEVEL] = args.log_level
    if args.log_cats:
        os.environ[_ENV_LOG_CATS] = args.log_cats


def run_actions(backend: Backend, lines: Iterable[str]) -> int:
    """Dispatch each non-empty, non-comment line until exit is requested."""
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        backend.dispatch(line)
        if backend.exit_code is not None:
            return backend.exit_code
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _apply_logging_options(args)
    logger = get_logger("main")

    _app = QCoreApplication.instance() or QCoreApplication([sys.argv[0]])

    settings = SettingsManager(args.settings)
    if args.mode:
        settings.data["start_mode"] = args.mode

    backend = Backend(args.images, settings=settings)
    backend.viewer.statusTextChanged.connect(lambda text: print(f"status: {text}", flush=True))
    logger.debug("started: %d images, mode=%s", len(backend.images), backend.mode.name)

    code = run_actions(backend, args.actions)
    if backend.exit_code is not None:
        return code
    if not args.no_stdin and not sys.stdin.isatty():
        code = run_actions(backend, sys.stdin)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
