"""Card mutation operations for kanban boards.

Each operation validates everything it needs before touching the board, so
a rejected call leaves the board exactly as it was.
"""

from kanban_core.errors import Conflict, InvalidArgument, NotFound
from kanban_core.model.column import clamp_index, require_column
from kanban_core.models import Board, Card, Column, NewCardRequest, Position


def find_card_column(board: Board, card_id: int) -> Column | None:
    """Find the column containing a card."""
    for col in board.columns:
        if col.index_of(card_id) is not None:
            return col
    return None


def create_card(board: Board, request: NewCardRequest, at: Position, card_id: int) -> Card:
    """Insert a new card at `at`, shifting later cards down.

    Indexes past the end of the column append. Returns the stored card.
    """
    if not request.title or not request.title.strip():
        raise InvalidArgument("Card title must not be empty")
    column = require_column(board, at.column_id)
    index = clamp_index(at.index, len(column.cards))
    if find_card_column(board, card_id) is not None:
        raise Conflict(f"Card {card_id} already exists")

    card = Card(id=card_id, title=request.title, description=request.description)
    column.cards.insert(index, card)
    return card


def move_card(board: Board, card_id: int, source: Position, target: Position) -> Card:
    """Move the card at `source` to `target`.

    The card is removed before the target index is clamped, so moving down
    within one column lands on the slot the caller asked for.
    """
    source_column = require_column(board, source.column_id)
    target_column = require_column(board, target.column_id)
    if target.index < 0:
        raise InvalidArgument(f"Position must not be negative, got {target.index}")

    cards = source_column.cards
    if not 0 <= source.index < len(cards) or cards[source.index].id != card_id:
        if find_card_column(board, card_id) is None:
            raise NotFound(f"Card {card_id} not found")
        raise Conflict(f"Card {card_id} is not at position {source.index} of column {source.column_id}")

    card = cards.pop(source.index)
    index = clamp_index(target.index, len(target_column.cards))
    target_column.cards.insert(index, card)
    return card


def remove_card(board: Board, card_id: int, column_id: int) -> Card:
    """Delete a card from a column; later cards shift up by one."""
    column = require_column(board, column_id)
    index = column.index_of(card_id)
    if index is None:
        owner = find_card_column(board, card_id)
        if owner is None:
            raise NotFound(f"Card {card_id} not found")
        raise Conflict(f"Card {card_id} is in column {owner.id}, not {column_id}")
    return column.cards.pop(index)
