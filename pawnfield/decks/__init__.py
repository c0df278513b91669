"""Decks - Deck file parsing and built-in card lists."""

from .parser import parse_deck, parse_card, parse_footprint, load_deck
from .standard import EXAMPLE_BIG_DECK, DECKS, example_big_deck, get_deck

__all__ = [
    "parse_deck",
    "parse_card",
    "parse_footprint",
    "load_deck",
    "EXAMPLE_BIG_DECK",
    "DECKS",
    "example_big_deck",
    "get_deck",
]
