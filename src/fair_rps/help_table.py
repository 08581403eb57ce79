from __future__ import annotations

from typing import Final

from protocol import MoveRelation

CORNER_LABEL: Final[str] = "Moves"

_CELL = {"player_win": "Win", "computer_win": "Lose", "draw": "Draw"}


def build_help_table(relation: MoveRelation) -> list[list[str]]:
    """Outcome grid for every pair of moves.

    Row ``i``, column ``j`` reads from the row move's side: "Win" when the
    row move beats the column move, "Lose" when it is beaten, "Draw" on the
    diagonal.
    """
    table = [[CORNER_LABEL, *relation.moves]]
    for row_move in relation.moves:
        table.append([row_move, *(_CELL[relation.resolve(row_move, col)] for col in relation.moves)])
    return table


def format_help_table(table: list[list[str]]) -> str:
    return "\n".join("\t".join(row) for row in table)
