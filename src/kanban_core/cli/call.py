"""Handler for 'kanban-core call'."""

import json

from kanban_core.cli._common import error, load_store_or_die, output_json
from kanban_core.handlers import dispatch


def call(args) -> int:
    """Run a single request against a freshly seeded store and print the response."""
    store = load_store_or_die(args.seed, True)

    try:
        params = json.loads(args.params) if args.params else {}
    except json.JSONDecodeError as e:
        error(f"params are not valid JSON: {e.msg}", True)

    response = dispatch(store, args.method, params)
    output_json(response)
    return 1 if "error" in response else 0
