"""
Standard Decks - Built-in card lists.

EXAMPLE_BIG_DECK is five cards with wide 5x5 footprints, enough to
fill a starting hand of five with nothing left to draw.
"""

from __future__ import annotations

from ..engine_core.card import Card
from .parser import parse_deck

EXAMPLE_BIG_DECK = """
# name,     cost, points, footprint
Sentinel,   1, 1, X X X X X / X X I X X / X I C I X / X X I X X / X X X X X
Lancer,     1, 2, X X X X X / X X X X X / I I C I I / X X X X X / X X X X X
Warden,     1, 1, X X X X X / X I X I X / X X C X X / X I X I X / X X X X X
Outrider,   2, 3, X X I X X / X X X X X / X X C I I / X X X X X / X X I X X
Colossus,   3, 5, X X X X X / X I I I X / X I C I X / X I I I X / X X X X X
"""


def example_big_deck() -> list[Card]:
    """A fresh list of the example deck's cards, in draw order."""
    return parse_deck(EXAMPLE_BIG_DECK, label="example_big_deck")


DECKS = {
    "example_big_deck": example_big_deck,
}


def get_deck(name: str) -> list[Card]:
    """Look up a built-in deck by name."""
    if name not in DECKS:
        raise ValueError(f"Unknown deck: {name} (known: {', '.join(sorted(DECKS))})")
    return DECKS[name]()
