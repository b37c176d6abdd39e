"""Board model: data lookups, mutations and seed loading."""

from kanban_core.model.card import create_card, find_card_column, move_card, remove_card
from kanban_core.model.column import clamp_index, find_column, require_column
from kanban_core.model.loader import board_from_dict, default_board, load_board

__all__ = [
    "board_from_dict",
    "clamp_index",
    "create_card",
    "default_board",
    "find_card_column",
    "find_column",
    "load_board",
    "move_card",
    "remove_card",
    "require_column",
]
