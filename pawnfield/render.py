"""
Text Rendering - Board snapshot to string.

Cell legend:
    ..   empty
    R2   red-owned, two pawns
    [B]  occupied by a blue card

Each row ends with both players' row scores.
"""

from __future__ import annotations

from .engine_core.board import Board, Cell
from .engine_core.card import Player
from .engine_core.scoring import score_board


def render_cell(cell: Cell) -> str:
    if cell.owner is None:
        return " .. "
    initial = cell.owner.value[0].upper()
    if cell.is_occupied:
        return f"[{initial}] "
    return f" {initial}{int(cell.pawns)} "


def render_board(board: Board) -> str:
    """Render every row with its score suffix."""
    sheet = score_board(board)
    lines = []
    for r in range(board.height):
        cells = "".join(render_cell(cell) for cell in board.row(r))
        scores = sheet.rows[r].scores
        lines.append(f"{cells}| R:{scores[Player.RED]} B:{scores[Player.BLUE]}")
    return "\n".join(lines)
