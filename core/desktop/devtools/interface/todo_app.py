#!/usr/bin/env python3
"""
todo: task list CLI and TUI.

Thin facade wiring the argparse surface to the command modules.
"""

import logging
import sys
from types import SimpleNamespace

from core import TodoError
from core.desktop.devtools.interface.cli_commands import (
    cmd_add,
    cmd_clear_completed,
    cmd_delete,
    cmd_list,
    cmd_move,
    cmd_toggle,
    default_deps,
)
from core.desktop.devtools.interface.cli_io import todo_error_response
from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser
from core.desktop.devtools.interface.tui_themes import THEMES


def _with_deps(command):
    return lambda args: command(args, default_deps(args))


def _tui(args) -> int:
    from core.desktop.devtools.interface.tui_app import cmd_tui

    try:
        return cmd_tui(args)
    except TodoError as exc:
        return todo_error_response("tui", exc)


COMMANDS = SimpleNamespace(
    cmd_tui=_tui,
    cmd_list=_with_deps(cmd_list),
    cmd_add=_with_deps(cmd_add),
    cmd_toggle=_with_deps(cmd_toggle),
    cmd_delete=_with_deps(cmd_delete),
    cmd_clear_completed=_with_deps(cmd_clear_completed),
    cmd_move=_with_deps(cmd_move),
)


def build_parser():
    return build_cli_parser(COMMANDS, THEMES)


def configure_logging(verbose: bool, interactive: bool) -> None:
    """Stderr logging for CLI commands; the full-screen TUI stays silent."""
    if interactive:
        logging.getLogger("todo_tui").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    configure_logging(getattr(args, "verbose", False), interactive=args.command == "tui")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
