"""Handler for 'kanban-core serve'."""

import logging
import sys

from kanban_core.cli._common import load_store_or_die
from kanban_core.server import serve as serve_lines

logger = logging.getLogger(__name__)


def serve(args) -> int:
    """Answer line-delimited JSON requests on stdin until it closes."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    store = load_store_or_die(args.seed, False)
    logger.info("serving board with %d columns", len(store.get_board().columns))

    if hasattr(sys.stdin, "reconfigure"):
        # invalid UTF-8 becomes U+FFFD and is answered as malformed JSON
        sys.stdin.reconfigure(errors="replace")

    try:
        serve_lines(store, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("stopped")
    return 0
