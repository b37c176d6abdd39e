"""Line-delimited JSON transport for the board handlers.

Each input line is a request object:

    {"id": 1, "method": "get_board", "params": {}}

and each output line is the matching response:

    {"id": 1, "result": {...}}
    {"id": 1, "error": {"kind": "NotFound", "message": "..."}}
"""

import json
import logging
from typing import IO

from kanban_core.errors import InvalidArgument
from kanban_core.handlers import dispatch
from kanban_core.store import BoardStore

logger = logging.getLogger(__name__)


def handle_line(store: BoardStore, line: str) -> dict:
    """Decode one request line, dispatch it, and return the response object."""
    try:
        request = json.loads(line)
    except json.JSONDecodeError as e:
        logger.warning("malformed request: %s", e)
        return {"id": None, "error": InvalidArgument(f"Malformed JSON: {e.msg}").to_dict()}
    except (ValueError, RecursionError) as e:
        # oversized integer literals, nesting deeper than the decoder allows
        logger.warning("undecodable request: %s", e)
        return {"id": None, "error": InvalidArgument("Request could not be decoded").to_dict()}

    if not isinstance(request, dict):
        return {"id": None, "error": InvalidArgument("Request must be an object").to_dict()}

    request_id = request.get("id")
    method = request.get("method")
    if not isinstance(method, str):
        return {"id": request_id, "error": InvalidArgument("Request method must be a string").to_dict()}

    response = dispatch(store, method, request.get("params"))
    return {"id": request_id, **response}


def serve(store: BoardStore, instream: IO[str], outstream: IO[str]) -> int:
    """Answer requests from instream until end of input.

    Returns the number of requests handled.
    """
    handled = 0
    for line in instream:
        if not line.strip():
            continue
        response = handle_line(store, line)
        outstream.write(json.dumps(response) + "\n")
        outstream.flush()
        handled += 1
    logger.info("input closed after %d requests", handled)
    return handled
