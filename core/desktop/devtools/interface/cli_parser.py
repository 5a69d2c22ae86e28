"""CLI parser construction for the todo CLI/TUI."""

import argparse
from typing import Any, Mapping

from config import STORE_BACKENDS
from core.desktop.devtools.interface.i18n import supported_langs


def build_parser(commands: Any, themes: Mapping[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="todo: a task list with search, filters and drag-to-reorder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--store", choices=STORE_BACKENDS, help="storage backend (default from config)")
    parser.add_argument("--store-path", help="YAML file for the file backend")
    parser.add_argument("--convex-url", help="deployment url for the convex backend")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging to stderr")

    sub = parser.add_subparsers(dest="command", help="Commands")

    # tui
    tui_p = sub.add_parser("tui", help="Start the interactive list")
    tui_p.add_argument("--theme", choices=list(themes.keys()), help="palette")
    tui_p.add_argument("--lang", choices=supported_langs(), help="interface language (default from config)")
    tui_p.set_defaults(func=commands.cmd_tui)

    # list
    lp = sub.add_parser("list", help="Show todos")
    lp.add_argument("--filter", default="all", choices=["all", "active", "completed"])
    lp.add_argument("--search", default="", help="case-insensitive text match")
    lp.set_defaults(func=commands.cmd_list)

    # add
    ap = sub.add_parser("add", help="Create a todo")
    ap.add_argument("text", nargs="+")
    ap.add_argument("--description", "-d")
    ap.add_argument("--due-date")
    ap.set_defaults(func=commands.cmd_add)

    # toggle
    tp = sub.add_parser("toggle", help="Flip completed flag")
    tp.add_argument("todo_id")
    tp.set_defaults(func=commands.cmd_toggle)

    # delete
    dp = sub.add_parser("delete", help="Remove a todo")
    dp.add_argument("todo_id")
    dp.set_defaults(func=commands.cmd_delete)

    # clear-completed
    cp = sub.add_parser("clear-completed", help="Remove every completed todo")
    cp.set_defaults(func=commands.cmd_clear_completed)

    # move
    mp = sub.add_parser("move", help="Change a todo's position")
    mp.add_argument("todo_id")
    where = mp.add_mutually_exclusive_group(required=True)
    where.add_argument("--up", action="store_true", help="one slot up")
    where.add_argument("--down", action="store_true", help="one slot down")
    where.add_argument("--to", type=int, metavar="INDEX", help="0-based target position")
    mp.set_defaults(func=commands.cmd_move)

    return parser


__all__ = ["build_parser"]
