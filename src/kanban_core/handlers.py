"""Request handlers for the four remote calls a board client makes.

Each handler takes the store and the request's params record, checks the
record's shape, and delegates to the store. Business rules live in the
store; handlers only translate.
"""

import logging
from typing import Any, Callable

from kanban_core.errors import BoardError, InvalidArgument
from kanban_core.fields import int_field, optional_int_field, optional_str_field, record, str_field
from kanban_core.models import NewCardRequest, Position
from kanban_core.store import BoardStore

logger = logging.getLogger(__name__)

Handler = Callable[[BoardStore, dict], Any]


def _position(params: dict, key: str, prefix: str | None = None) -> Position:
    """Parse {columnId, position}, also accepting {<prefix>ColumnId, <prefix>Position}."""
    raw = record(params.get(key), key)
    column_keys = ["columnId"]
    index_keys = ["position"]
    if prefix:
        column_keys.append(f"{prefix}ColumnId")
        index_keys.append(f"{prefix}Position")
    return Position(
        column_id=int_field(raw, *column_keys, where=key),
        index=int_field(raw, *index_keys, where=key),
    )


def _card_id(params: dict) -> int:
    card = record(params.get("card"), "card")
    return int_field(card, "id", where="card")


def get_board(store: BoardStore, params: dict) -> dict:
    return store.get_board().to_dict()


def handle_add_card(store: BoardStore, params: dict) -> None:
    """Add a card. Any id the client generated is only a suggestion."""
    card = record(params.get("card"), "card")
    request = NewCardRequest(
        title=str_field(card, "title", "card"),
        description=optional_str_field(card, "description", "card"),
    )
    suggested_id = optional_int_field(card, "id", "card")
    at = _position(params, "pos")
    store.add_card(request, at, card_id=suggested_id)


def handle_move_card(store: BoardStore, params: dict) -> None:
    store.move_card(
        _card_id(params),
        _position(params, "from", "from"),
        _position(params, "to", "to"),
    )


def handle_remove_card(store: BoardStore, params: dict) -> None:
    column_id = int_field(params, "columnId", "column_id", where="params")
    store.remove_card(_card_id(params), column_id)


HANDLERS: dict[str, Handler] = {
    "get_board": get_board,
    "handle_add_card": handle_add_card,
    "handle_move_card": handle_move_card,
    "handle_remove_card": handle_remove_card,
}


def dispatch(store: BoardStore, name: str, params: Any = None) -> dict:
    """Run the named request and wrap the outcome.

    Returns {"result": value} on success or {"error": {"kind", "message"}}
    when the request is rejected.
    """
    try:
        handler = HANDLERS.get(name)
        if handler is None:
            raise InvalidArgument(f"Unknown request '{name}'")
        params = record({} if params is None else params, "params")
        return {"result": handler(store, params)}
    except BoardError as e:
        logger.warning("%s rejected: %s: %s", name, e.kind, e.message)
        return {"error": e.to_dict()}
