"""
Influence Propagation - Applies a played card's footprint to the board.

For each INFLUENCE offset around the placed card:
- off-board targets are skipped
- occupied cells are immune
- unowned cells become the player's with one pawn
- the player's own cells gain a pawn (max three)
- opponent cells lose a pawn, flipping to the player at zero

Every target's new value is worked out from the board as it stood
before propagation, then all of them are written together.
"""

from __future__ import annotations
import logging

from .board import Board, Cell, PawnAmount
from .card import Card, Player

logger = logging.getLogger(__name__)


def influenced_value(cell: Cell, player: Player) -> tuple[Player | None, PawnAmount] | None:
    """
    New (owner, pawns) for a cell receiving one unit of player's influence.

    Returns None when the cell is occupied and therefore unaffected.
    """
    if cell.is_occupied:
        return None
    if cell.owner is None:
        return player, PawnAmount.ONE
    if cell.owner is player:
        return player, cell.pawns.increment()
    # Attrition against the opponent
    remaining = cell.pawns.decrement()
    if remaining == PawnAmount.ZERO:
        return player, PawnAmount.ONE
    return cell.owner, remaining


def propagate_influence(
    board: Board,
    card: Card,
    row: int,
    col: int,
    player: Player,
) -> list[tuple[int, int]]:
    """
    Spread card's influence from (row, col) for player.

    Returns the coordinates whose ownership or pawn count changed.
    """
    updates = []
    for d_row, d_col in card.influence_offsets(player):
        target_row, target_col = row + d_row, col + d_col
        if not board.in_bounds(target_row, target_col):
            continue
        value = influenced_value(board.cell_at(target_row, target_col), player)
        if value is not None:
            updates.append((target_row, target_col, value))

    changed = []
    for target_row, target_col, (owner, pawns) in updates:
        board.set_cell(target_row, target_col, owner, pawns)
        changed.append((target_row, target_col))

    logger.debug(
        "%s influence from %s at (%d, %d) touched %d cell(s)",
        player.value, card.name, row, col, len(changed),
    )
    return changed
