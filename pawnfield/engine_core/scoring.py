"""
Scoring - Row-majority scoring and win determination.

A row's score for a player is the sum of points of that player's
cards sitting in the row. The row goes to whoever scores strictly
more; a tie awards it to nobody. The game goes to whoever wins
strictly more rows; equal row-wins is a draw.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .board import Board
from .card import Player


@dataclass
class RowScore:
    """Scores for one row."""
    row: int
    scores: dict[Player, int]
    winner: Player | None = None


@dataclass
class ScoreSheet:
    """
    Full scoring breakdown for a board.

    is_final marks a sheet taken after the game ended; earlier sheets
    are projections only.
    """
    rows: list[RowScore] = field(default_factory=list)
    row_wins: dict[Player, int] = field(default_factory=dict)
    winner: Player | None = None
    is_final: bool = False

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def total_points(self, player: Player) -> int:
        return sum(r.scores[player] for r in self.rows)


def row_score(board: Board, player: Player, row: int) -> int:
    """Sum of points of player's cards occupying row."""
    return sum(
        cell.occupant.points
        for cell in board.row(row)
        if cell.occupant is not None and cell.owner is player
    )


def row_winner(board: Board, row: int) -> Player | None:
    red = row_score(board, Player.RED, row)
    blue = row_score(board, Player.BLUE, row)
    if red > blue:
        return Player.RED
    if blue > red:
        return Player.BLUE
    return None


def row_wins(board: Board) -> dict[Player, int]:
    """Number of rows each player wins outright."""
    tally = {Player.RED: 0, Player.BLUE: 0}
    for r in range(board.height):
        winner = row_winner(board, r)
        if winner is not None:
            tally[winner] += 1
    return tally


def overall_winner(board: Board) -> Player | None:
    """Player with more row-wins, or None for a draw."""
    return _leader(row_wins(board))


def score_board(board: Board, is_final: bool = False) -> ScoreSheet:
    """Build a ScoreSheet for every row of the board."""
    rows = []
    for r in range(board.height):
        scores = {p: row_score(board, p, r) for p in Player}
        rows.append(RowScore(row=r, scores=scores, winner=row_winner(board, r)))
    tally = {Player.RED: 0, Player.BLUE: 0}
    for row in rows:
        if row.winner is not None:
            tally[row.winner] += 1
    return ScoreSheet(rows=rows, row_wins=tally, winner=_leader(tally), is_final=is_final)


def _leader(tally: dict[Player, int]) -> Player | None:
    if tally[Player.RED] > tally[Player.BLUE]:
        return Player.RED
    if tally[Player.BLUE] > tally[Player.RED]:
        return Player.BLUE
    return None
