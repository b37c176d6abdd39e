"""The board store: canonical board state behind a single lock."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from kanban_core.ids import IdAllocator
from kanban_core.model.card import create_card, move_card, remove_card
from kanban_core.model.loader import default_board
from kanban_core.models import Board, Card, NewCardRequest, Position

logger = logging.getLogger(__name__)

Callback = Callable[["BoardStore", str, Card], None]


class BoardStore:
    """Owns a Board and applies add/move/remove to it atomically.

    Every public method runs under one lock, so no caller ever sees a
    half-applied mutation. Boards handed out are snapshots; changing them
    does not touch the store.
    """

    def __init__(self, board: Board | None = None) -> None:
        self._board = board.snapshot() if board is not None else default_board()
        self._ids = IdAllocator(self._board.card_ids())
        self._lock = threading.RLock()
        self._watchers: list[Callback] = []
        self._version = 0

    @property
    def version(self) -> int:
        """Number of successful mutations so far."""
        with self._lock:
            return self._version

    def get_board(self) -> Board:
        """Return an independent copy of the current board."""
        with self._lock:
            return self._board.snapshot()

    def add_card(self, request: NewCardRequest, at: Position, card_id: int | None = None) -> Card:
        """Insert a new card at `at` and return a copy of it as stored.

        A caller-supplied card_id is used only if no card has it yet.
        """
        with self._lock:
            if card_id is None:
                card_id = self._ids.peek()
            card = create_card(self._board, request, at, card_id)
            self._ids.observe(card.id)
            logger.debug("added card %d to column %d at %d", card.id, at.column_id, at.index)
            return self._changed("add", card)

    def move_card(self, card_id: int, source: Position, target: Position) -> None:
        with self._lock:
            card = move_card(self._board, card_id, source, target)
            logger.debug(
                "moved card %d from %d:%d to %d:%d",
                card_id,
                source.column_id,
                source.index,
                target.column_id,
                target.index,
            )
            self._changed("move", card)

    def remove_card(self, card_id: int, column_id: int) -> None:
        with self._lock:
            card = remove_card(self._board, card_id, column_id)
            logger.debug("removed card %d from column %d", card_id, column_id)
            self._changed("remove", card)

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Call callback(store, operation, card) after each mutation. Returns an unwatch callable."""
        with self._lock:
            self._watchers.append(callback)
        return lambda: self._unwatch(callback)

    def _unwatch(self, callback: Callback) -> None:
        with self._lock:
            if callback in self._watchers:
                self._watchers.remove(callback)

    def _changed(self, operation: str, card: Card) -> Card:
        """Bump the version and notify watchers with a copy of card.

        The mutation is already applied, so a failing watcher is logged
        rather than reported to the caller.
        """
        self._version += 1
        card = Card(id=card.id, title=card.title, description=card.description)
        for cb in list(self._watchers):
            try:
                cb(self, operation, card)
            except Exception:
                logger.exception("watcher failed after %s of card %d", operation, card.id)
        return card
