"""Column lookups for kanban boards."""

from kanban_core.errors import InvalidArgument, NotFound
from kanban_core.models import Board, Column


def find_column(board: Board, column_id: int) -> Column | None:
    """Find a column by id."""
    for col in board.columns:
        if col.id == column_id:
            return col
    return None


def require_column(board: Board, column_id: int) -> Column:
    """Find a column by id. Raise NotFound listing the known ids if missing."""
    col = find_column(board, column_id)
    if col is not None:
        return col
    available = ", ".join(str(c.id) for c in board.columns) or "none"
    raise NotFound(f"Column {column_id} not found (available: {available})")


def clamp_index(index: int, length: int) -> int:
    """Clamp an insertion index into [0, length].

    Negative indexes are rejected rather than wrapped.
    """
    if index < 0:
        raise InvalidArgument(f"Position must not be negative, got {index}")
    return min(index, length)
