"""
Cards - Immutable card values and their influence footprints.

A card carries:
- A name (unique within a deck)
- A placement cost (pawns the target cell must already hold)
- A point value (counted in row scoring once placed)
- A footprint: an odd-sized square grid of InfluenceType tags
  centred on exactly one CENTER cell

Footprints are authored from RED's point of view. BLUE applies
them mirrored along the column axis so both players reach toward
each other across a shared board.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Sequence

from .errors import InvalidConfigurationError


class Player(Enum):
    """The two sides of the table."""
    RED = "red"
    BLUE = "blue"

    @property
    def opponent(self) -> Player:
        return Player.BLUE if self is Player.RED else Player.RED


class Cost(IntEnum):
    """Minimum pawns a friendly target cell must hold to accept the card."""
    ONE = 1
    TWO = 2
    THREE = 3


class InfluenceType(Enum):
    """Tag for one position of a footprint grid (value is its deck token)."""
    NONE = "X"
    INFLUENCE = "I"
    CENTER = "C"


Footprint = tuple[tuple[InfluenceType, ...], ...]


@dataclass(frozen=True)
class Card:
    """
    An immutable card definition.

    The footprint is stored as nested tuples so a card can be shared
    between hands, decks and board cells without copying.
    """
    name: str
    cost: Cost
    points: int
    footprint: Footprint

    def __post_init__(self):
        # Normalise lists/ints handed in by callers into immutable values
        try:
            object.__setattr__(self, "cost", Cost(self.cost))
        except ValueError:
            raise InvalidConfigurationError(
                f"Card '{self.name}': cost must be 1-3, got {self.cost!r}"
            ) from None
        object.__setattr__(
            self, "footprint", tuple(tuple(row) for row in self.footprint)
        )
        errors = footprint_errors(self.footprint)
        if not self.name:
            errors.append("name is empty")
        if not isinstance(self.points, int):
            errors.append(f"points must be an integer, got {self.points!r}")
        elif self.points < 1:
            errors.append("must be worth at least 1 point")
        if errors:
            raise InvalidConfigurationError(
                [f"Card '{self.name}': {e}" for e in errors]
            )

    @property
    def size(self) -> int:
        """Edge length of the footprint grid."""
        return len(self.footprint)

    @property
    def center(self) -> tuple[int, int]:
        """Position of the CENTER tag inside the footprint grid."""
        for r, row in enumerate(self.footprint):
            for c, tag in enumerate(row):
                if tag is InfluenceType.CENTER:
                    return r, c
        raise InvalidConfigurationError(f"Card '{self.name}' has no CENTER")

    def influence_offsets(self, player: Player = Player.RED) -> list[tuple[int, int]]:
        """
        Relative (row, col) offsets marked INFLUENCE, as seen by player.

        BLUE gets the column offsets negated.
        """
        center_row, center_col = self.center
        mirror = -1 if player is Player.BLUE else 1
        offsets = []
        for r, row in enumerate(self.footprint):
            for c, tag in enumerate(row):
                if tag is InfluenceType.INFLUENCE:
                    offsets.append((r - center_row, mirror * (c - center_col)))
        return offsets


def footprint_errors(footprint: Sequence[Sequence[InfluenceType]]) -> list[str]:
    """Return the problems with a footprint grid (empty if valid)."""
    errors: list[str] = []
    size = len(footprint)
    if size == 0:
        return ["footprint is empty"]
    if any(len(row) != size for row in footprint):
        errors.append("footprint must be square")
    if size % 2 == 0:
        errors.append(f"footprint size must be odd, got {size}")
    centers = sum(
        1 for row in footprint for tag in row if tag is InfluenceType.CENTER
    )
    if centers != 1:
        errors.append(f"footprint must contain exactly one CENTER, found {centers}")
    return errors


def validate_deck(cards: Iterable[Card], label: str = "deck") -> None:
    """
    Check a deck for duplicate names and mixed footprint sizes.

    Raises InvalidConfigurationError listing every problem found.
    """
    errors = []
    seen: set[str] = set()
    sizes: set[int] = set()
    for card in cards:
        if card.name in seen:
            errors.append(f"{label}: duplicate card name '{card.name}'")
        seen.add(card.name)
        sizes.add(card.size)
    if len(sizes) > 1:
        errors.append(f"{label}: mixed footprint sizes {sorted(sizes)}")
    if errors:
        raise InvalidConfigurationError(errors)


def check_footprint_sizes(red_deck: Iterable[Card], blue_deck: Iterable[Card]) -> None:
    """Both decks must share a single footprint size."""
    sizes = {card.size for card in red_deck} | {card.size for card in blue_deck}
    if len(sizes) > 1:
        raise InvalidConfigurationError(
            f"Decks use different footprint sizes: {sorted(sizes)}"
        )
