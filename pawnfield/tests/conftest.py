"""
Pytest fixtures for Pawnfield tests.
"""

import pytest

from ..decks import example_big_deck, parse_footprint
from ..engine_core.board import Board
from ..engine_core.card import Card
from ..engine_core.state import GameConfig, GameState


@pytest.fixture
def big_deck() -> list[Card]:
    """The built-in five-card deck: Sentinel, Lancer, Warden, Outrider, Colossus."""
    return example_big_deck()


@pytest.fixture
def cards(big_deck) -> dict[str, Card]:
    """Example deck cards by name."""
    return {card.name: card for card in big_deck}


@pytest.fixture
def config() -> GameConfig:
    """3 rows x 5 columns, hand of five, no shuffling."""
    return GameConfig(width=5, height=3, hand_size=5)


@pytest.fixture
def game(config) -> GameState:
    """Fresh game with both players using the example deck."""
    return GameState(config, example_big_deck(), example_big_deck())


@pytest.fixture
def board() -> Board:
    """Empty 3x5 board."""
    return Board(width=5, height=3)


@pytest.fixture
def make_card():
    """Factory: make_card('Name', cost, points, 'X I X / I C I / X I X')."""
    def _make(name: str, cost: int = 1, points: int = 1, footprint: str = "X I X / I C I / X I X") -> Card:
        return Card(name=name, cost=cost, points=points, footprint=parse_footprint(footprint))
    return _make
