"""Shared helpers for CLI command handlers."""

import json
import sys

from kanban_core.model.loader import load_board
from kanban_core.store import BoardStore


def load_store_or_die(seed: str | None, json_mode: bool) -> BoardStore:
    """Build a store from the seed file (or the default board). Exit 1 on failure."""
    try:
        return BoardStore(load_board(seed))
    except Exception as e:
        error(str(e), json_mode)


def output_json(data: dict | list | None) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)
