"""
Board - Grid of cells with bounds-checked access.

Cell invariants:
- pawns stays within 0..3
- an unowned cell has no pawns and no occupant
- an occupied cell is owned by the occupant's player and is
  never targeted again by placement or influence

Only GameState holds a live Board; everyone else gets snapshots.
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from .card import Card, Player
from .errors import InvalidConfigurationError, InvalidPlacementError, OutOfBoundsError


class PawnAmount(IntEnum):
    """Visible pawn stack on a cell."""
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3

    def increment(self) -> PawnAmount:
        """One more pawn, saturating at THREE."""
        return PawnAmount(min(self + 1, PawnAmount.THREE))

    def decrement(self) -> PawnAmount:
        """One fewer pawn, floored at ZERO."""
        return PawnAmount(max(self - 1, PawnAmount.ZERO))


@dataclass
class Cell:
    """A single board slot."""
    owner: Player | None = None
    pawns: PawnAmount = PawnAmount.ZERO
    occupant: Card | None = None

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None

    @property
    def is_empty(self) -> bool:
        """Unowned with no pawns and no card."""
        return self.owner is None and self.occupant is None

    def accepts(self, card: Card, player: Player) -> bool:
        """Whether player may place card here."""
        if self.occupant is not None:
            return False
        if self.owner is None:
            return self.pawns == PawnAmount.ZERO
        return self.owner is player and self.pawns >= card.cost


class Board:
    """
    Rectangular grid of cells indexed [row][col].

    Usage:
        board = Board(width=5, height=3)
        board.place_occupant(1, 0, card, Player.RED)
        cell = board.cell_at(1, 0)
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidConfigurationError(
                f"Board dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self._cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell_at(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col); raises OutOfBoundsError off the board."""
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.height, self.width)
        return self._cells[row][col]

    def can_place(self, row: int, col: int, card: Card, player: Player) -> bool:
        """Placement precondition as a query (False when off the board)."""
        if not self.in_bounds(row, col):
            return False
        return self._cells[row][col].accepts(card, player)

    def check_placement(self, row: int, col: int, card: Card, player: Player) -> None:
        """
        Raise unless player may place card at (row, col). Never mutates.

        Raises:
            OutOfBoundsError: the cell is off the board
            InvalidPlacementError: the cell is occupied, owned by the
                opponent, or holds fewer pawns than the card costs
        """
        cell = self.cell_at(row, col)
        if not cell.accepts(card, player):
            raise InvalidPlacementError(_placement_reason(cell, card, player, row, col))

    def place_occupant(self, row: int, col: int, card: Card, player: Player) -> None:
        """Put card on the cell at (row, col) for player (see check_placement)."""
        self.check_placement(row, col, card, player)
        cell = self._cells[row][col]
        cell.occupant = card
        cell.owner = player
        # Pawns are not tracked once a card sits on the cell
        cell.pawns = PawnAmount.ZERO

    def set_cell(self, row: int, col: int, owner: Player | None, pawns: PawnAmount) -> None:
        """
        Overwrite ownership of an unoccupied cell (used by influence).

        Raises InvalidPlacementError if the cell is occupied, or if the
        owner/pawns pair is not one an open cell can hold (unowned with
        zero pawns, or owned with one to three).
        """
        cell = self.cell_at(row, col)
        pawns = PawnAmount(pawns)
        if cell.is_occupied:
            raise InvalidPlacementError(
                f"Cell ({row}, {col}) is occupied by {cell.occupant.name}; its owner is fixed"
            )
        if (owner is None) != (pawns == PawnAmount.ZERO):
            raise InvalidPlacementError(
                f"Cell ({row}, {col}) cannot hold {int(pawns)} pawn(s) with owner "
                f"{owner.value if owner else None}"
            )
        cell.owner = owner
        cell.pawns = pawns

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate (row, col, cell) in row-major order."""
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def row(self, row: int) -> list[Cell]:
        if not 0 <= row < self.height:
            raise OutOfBoundsError(row, 0, self.height, self.width)
        return list(self._cells[row])

    @property
    def occupied_count(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_occupied)

    def snapshot(self) -> Board:
        """Deep copy that shares nothing mutable with this board."""
        return deepcopy(self)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return False
        return (
            self.width == other.width
            and self.height == other.height
            and self._cells == other._cells
        )

    def __repr__(self):
        return f"Board(width={self.width}, height={self.height}, occupied={self.occupied_count})"


def _placement_reason(cell: Cell, card: Card, player: Player, row: int, col: int) -> str:
    if cell.occupant is not None:
        return f"Cell ({row}, {col}) is already occupied by {cell.occupant.name}"
    if cell.owner is not None and cell.owner is not player:
        return f"Cell ({row}, {col}) is owned by {cell.owner.value}"
    return (
        f"Cell ({row}, {col}) holds {int(cell.pawns)} pawn(s), "
        f"{card.name} costs {int(card.cost)}"
    )
