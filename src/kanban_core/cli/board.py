"""Handler for 'kanban-core board'."""

from rich.console import Console
from rich.table import Table

from kanban_core.cli._common import load_store_or_die, output_json
from kanban_core.models import Board


def build_board_table(board: Board) -> Table:
    """Lay the board out as a table with one column per board column."""
    table = Table(show_lines=False)
    for col in board.columns:
        cards = "card" if len(col.cards) == 1 else "cards"
        table.add_column(f"{col.title} ({len(col.cards)} {cards})")

    depth = max((len(col.cards) for col in board.columns), default=0)
    for i in range(depth):
        row = []
        for col in board.columns:
            row.append(f"{col.cards[i].id}  {col.cards[i].title}" if i < len(col.cards) else "")
        table.add_row(*row)
    return table


def board_show(args) -> int:
    """Render the seeded board."""
    store = load_store_or_die(args.seed, args.json)
    board = store.get_board()

    if args.json:
        output_json(board.to_dict())
    else:
        Console().print(build_board_table(board))

    return 0
