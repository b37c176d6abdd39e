"""CLI argument parser and dispatch for kanban-core."""

import argparse

from kanban_core.cli.board import board_show
from kanban_core.cli.call import call
from kanban_core.cli.serve import serve
from kanban_core.handlers import HANDLERS


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    seed_help = "YAML file with the starting board (default: built-in board)"

    # Subcommands only set --seed when given, so a value before the noun survives
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--seed", default=argparse.SUPPRESS, help=seed_help)

    parser = argparse.ArgumentParser(
        prog="kanban-core",
        description="In-memory kanban board backend",
    )
    parser.add_argument("--seed", default=None, help=seed_help)

    nouns = parser.add_subparsers(dest="noun")

    # --- serve ---
    serve_p = nouns.add_parser("serve", help="Answer JSON requests on stdin/stdout", parents=[common])
    serve_p.add_argument("-v", "--verbose", action="store_true", help="Log every mutation")
    serve_p.set_defaults(func=serve)

    # --- board ---
    board_p = nouns.add_parser("board", help="Show the starting board", parents=[common])
    board_p.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    board_p.set_defaults(func=board_show)

    # --- call ---
    call_p = nouns.add_parser("call", help="Run one request and print the response", parents=[common])
    call_p.add_argument("method", choices=sorted(HANDLERS), help="Request name")
    call_p.add_argument("params", nargs="?", default=None, help="Request params as a JSON object")
    call_p.set_defaults(func=call)

    return parser
