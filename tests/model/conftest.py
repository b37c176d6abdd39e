"""Shared test helpers for model tests."""

from kanban_core.models import Board, Card, Column


def _make_card(card_id, title=None, description=None):
    """Helper to build a card, titled after its id by default."""
    return Card(id=card_id, title=title or f"Card {card_id}", description=description)


def _make_column(column_id, title, card_ids=()):
    """Helper to build a column holding cards with the given ids."""
    return Column(id=column_id, title=title, cards=[_make_card(i) for i in card_ids])


def _make_board(*columns):
    """Helper to build a board from columns."""
    return Board(columns=list(columns))


def _ids(column):
    return [card.id for card in column.cards]
