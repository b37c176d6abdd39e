"""Build the seed board a store starts from."""

import logging
from pathlib import Path

import yaml

from kanban_core.errors import InvalidArgument
from kanban_core.fields import int_field, optional_str_field, record, str_field
from kanban_core.models import Board, Card, Column

logger = logging.getLogger(__name__)


def default_board() -> Board:
    """The board a fresh process starts with when no seed file is given."""
    return Board(
        columns=[
            Column(
                id=0,
                title="Backlog",
                cards=[Card(id=0, title="Add kanban board", description="Use react-kanban")],
            ),
            Column(id=1, title="In Progress"),
        ]
    )


def board_from_dict(data: dict) -> Board:
    """Build a Board from a parsed seed document.

    Column and card ids must be unique, titles non-empty.
    """
    data = record(data, "board")
    raw_columns = data.get("columns") or []
    if not isinstance(raw_columns, list):
        raise InvalidArgument("board.columns must be a list")

    columns = []
    column_ids: set[int] = set()
    card_ids: set[int] = set()
    for i, raw_col in enumerate(raw_columns):
        where = f"columns[{i}]"
        raw_col = record(raw_col, where)
        column_id = int_field(raw_col, "id", where=where)
        if column_id in column_ids:
            raise InvalidArgument(f"Duplicate column id {column_id}")
        column_ids.add(column_id)

        raw_cards = raw_col.get("cards") or []
        if not isinstance(raw_cards, list):
            raise InvalidArgument(f"{where}.cards must be a list")
        cards = []
        for j, raw_card in enumerate(raw_cards):
            card = _card_from_dict(raw_card, f"{where}.cards[{j}]")
            if card.id in card_ids:
                raise InvalidArgument(f"Duplicate card id {card.id}")
            card_ids.add(card.id)
            cards.append(card)

        columns.append(Column(id=column_id, title=str_field(raw_col, "title", where), cards=cards))

    return Board(columns=columns)


def _card_from_dict(raw: dict, where: str) -> Card:
    raw = record(raw, where)
    title = str_field(raw, "title", where)
    if not title.strip():
        raise InvalidArgument(f"{where}.title must not be empty")
    return Card(
        id=int_field(raw, "id", where=where),
        title=title,
        description=optional_str_field(raw, "description", where),
    )


def load_board(path: str | Path | None = None) -> Board:
    """Load a seed board from a YAML file, or the default board if path is None."""
    if path is None:
        return default_board()

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise InvalidArgument(f"Invalid seed file {path}: {e}") from e

    board = board_from_dict(data)
    logger.info("loaded seed board from %s (%d columns)", path, len(board.columns))
    return board
