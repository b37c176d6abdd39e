"""Data models for kanban boards."""

import copy
from dataclasses import dataclass, field


@dataclass
class Card:
    """A unit of work owned by exactly one column."""

    id: int
    title: str
    description: str | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "description": self.description}


@dataclass(frozen=True)
class NewCardRequest:
    """The fields a client may supply for a card that does not exist yet."""

    title: str
    description: str | None = None


@dataclass
class Column:
    """A named, ordered sequence of cards."""

    id: int
    title: str
    cards: list[Card] = field(default_factory=list)

    def index_of(self, card_id: int) -> int | None:
        """Return the position of card_id in this column, or None."""
        for i, card in enumerate(self.cards):
            if card.id == card_id:
                return i
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "cards": [card.to_dict() for card in self.cards],
        }


@dataclass
class Board:
    """The full board state: an ordered sequence of columns."""

    columns: list[Column] = field(default_factory=list)

    def card_ids(self) -> list[int]:
        """Return every card id on the board, column by column."""
        return [card.id for col in self.columns for card in col.cards]

    def snapshot(self) -> "Board":
        """Return a deep copy that shares no mutable state with this board."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        return {"columns": [col.to_dict() for col in self.columns]}


@dataclass(frozen=True)
class Position:
    """A (column_id, index) coordinate within a board."""

    column_id: int
    index: int
