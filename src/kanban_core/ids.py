"""Card ID allocation."""

from typing import Iterable

from kanban_core.errors import Conflict
from kanban_core.fields import INT64_MAX


def max_id(ids: Iterable[int]) -> int | None:
    """Find the highest ID, or None if there are none."""
    highest = None
    for id_ in ids:
        if highest is None or id_ > highest:
            highest = id_
    return highest


def next_id(current_max: int | None) -> int:
    """Generate the next ID after current_max.

    - If None, returns 0
    - Otherwise returns current_max + 1
    """
    if current_max is None:
        return 0
    return current_max + 1


class IdAllocator:
    """Hands out strictly increasing card IDs for the life of the process.

    IDs supplied from outside (seed files, clients) are recorded with
    observe() so later allocations skip past them. Allocation stops with
    Conflict once the next ID would not fit in a signed 64-bit integer.
    """

    def __init__(self, existing: Iterable[int] = ()) -> None:
        self._next = next_id(max_id(existing))

    def next_id(self) -> int:
        card_id = self.peek()
        self._next += 1
        return card_id

    def observe(self, card_id: int) -> None:
        if card_id >= self._next:
            self._next = card_id + 1

    def peek(self) -> int:
        """Return the ID the next call to next_id() will hand out."""
        if self._next > INT64_MAX:
            raise Conflict("No card ids left: the highest id is already in use")
        return self._next
