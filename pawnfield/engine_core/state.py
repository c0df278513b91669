"""
Game State - The single owner of board, hands, decks and turn order.

Design principles:
- Single writer: only play_card() and pass_turn() mutate the state
- Validate first: every check runs before anything is touched, so a
  rejected call leaves the state exactly as it was
- Defensive reads: hands, decks and the board are handed out as copies
- Observable: listeners are called synchronously after each change
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence
import logging
import random

from .board import Board, Cell
from .card import Card, Player, check_footprint_sizes, validate_deck
from .errors import (
    GameOverError,
    InvalidConfigurationError,
    NotInHandError,
)
from .influence import propagate_influence
from .scoring import ScoreSheet, overall_winner, row_score, row_winner, row_wins, score_board

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """High-level game phases."""
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    """Construction parameters for a game."""
    width: int = 5
    height: int = 3
    hand_size: int = 5
    shuffle: bool = False
    random_seed: int | None = None

    def validate(self) -> None:
        errors = []
        if self.width <= 0:
            errors.append(f"width must be positive, got {self.width}")
        if self.height <= 0:
            errors.append(f"height must be positive, got {self.height}")
        if self.hand_size < 0:
            errors.append(f"hand_size must be >= 0, got {self.hand_size}")
        if errors:
            raise InvalidConfigurationError(errors)


@dataclass
class StateChange:
    """Event handed to listeners after a successful mutation."""
    kind: str  # card_played, passed, game_over
    player: Player
    turn_count: int
    card_name: str | None = None
    row: int | None = None
    col: int | None = None


Listener = Callable[["GameState", StateChange], None]


class GameState:
    """
    Complete game state.

    Usage:
        state = GameState(GameConfig(width=5, height=3), red_deck, blue_deck)
        state.subscribe(lambda s, change: print(change.kind))

        card = state.hand(Player.RED)[0]
        state.play_card(card, 1, 0)
        state.pass_turn()

        sheet = state.score_sheet()
    """

    def __init__(
        self,
        config: GameConfig,
        red_deck: Sequence[Card],
        blue_deck: Sequence[Card],
        rng: random.Random | None = None,
    ):
        config.validate()
        validate_deck(red_deck, label="red deck")
        validate_deck(blue_deck, label="blue deck")
        check_footprint_sizes(red_deck, blue_deck)

        self.config = config
        self._board = Board(config.width, config.height)
        self._decks: dict[Player, list[Card]] = {
            Player.RED: list(red_deck),
            Player.BLUE: list(blue_deck),
        }
        if config.shuffle:
            # The caller may inject its own generator; otherwise the seed decides
            rng = rng or random.Random(config.random_seed)
            for deck in self._decks.values():
                rng.shuffle(deck)

        self._hands: dict[Player, list[Card]] = {Player.RED: [], Player.BLUE: []}
        for player in Player:
            while len(self._hands[player]) < config.hand_size and self._decks[player]:
                self._draw(player)

        self._current_player = Player.RED
        self._consecutive_passes = 0
        self._game_over = False
        self._turn_count = 0

        self._listeners: dict[int, Listener] = {}
        self._next_handle = 1

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def consecutive_passes(self) -> int:
        return self._consecutive_passes

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def turn_count(self) -> int:
        return self._turn_count

    @property
    def phase(self) -> GamePhase:
        return GamePhase.GAME_OVER if self._game_over else GamePhase.AWAITING_MOVE

    @property
    def hand_size(self) -> int:
        return self.config.hand_size

    @property
    def width(self) -> int:
        return self._board.width

    @property
    def height(self) -> int:
        return self._board.height

    def hand(self, player: Player) -> list[Card]:
        """Copy of player's hand, in order."""
        return list(self._hands[player])

    def deck(self, player: Player) -> list[Card]:
        """Copy of player's remaining deck (front is drawn next)."""
        return list(self._decks[player])

    def deck_size(self, player: Player) -> int:
        return len(self._decks[player])

    def board_snapshot(self) -> Board:
        return self._board.snapshot()

    def cell(self, row: int, col: int) -> Cell:
        """Copy of one cell; raises OutOfBoundsError off the board."""
        return deepcopy(self._board.cell_at(row, col))

    def can_place(self, card: Card, row: int, col: int, player: Player | None = None) -> bool:
        player = player or self._current_player
        return self._board.can_place(row, col, card, player)

    def row_score(self, player: Player, row: int) -> int:
        return row_score(self._board, player, row)

    def row_winner(self, row: int) -> Player | None:
        return row_winner(self._board, row)

    def row_wins(self) -> dict[Player, int]:
        return row_wins(self._board)

    def winner(self) -> Player | None:
        """Current leader by row-wins; None is a draw. Final once game_over."""
        return overall_winner(self._board)

    def score_sheet(self) -> ScoreSheet:
        return score_board(self._board, is_final=self._game_over)

    # ========================================================================
    # Mutations
    # ========================================================================

    def play_card(self, card: Card | str, row: int, col: int) -> None:
        """
        Play card (or the card with that name) from the current hand at (row, col).

        Raises:
            GameOverError: the game has ended
            NotInHandError: the current player holds no such card
            OutOfBoundsError: (row, col) is off the board
            InvalidPlacementError: the cell does not accept the card
        """
        if self._game_over:
            raise GameOverError()

        player = self._current_player
        name = card if isinstance(card, str) else card.name
        index = self._find_in_hand(player, name)
        if index is None:
            raise NotInHandError(f"{name} is not in {player.value}'s hand")
        held = self._hands[player][index]

        self._board.check_placement(row, col, held, player)

        del self._hands[player][index]
        self._board.place_occupant(row, col, held, player)
        propagate_influence(self._board, held, row, col, player)
        if self._decks[player]:
            self._draw(player)

        logger.debug("%s played %s at (%d, %d)", player.value, held.name, row, col)

        self._consecutive_passes = 0
        self._current_player = player.opponent
        self._turn_count += 1
        self._notify(StateChange(
            kind="card_played",
            player=player,
            turn_count=self._turn_count,
            card_name=held.name,
            row=row,
            col=col,
        ))

    def pass_turn(self) -> None:
        """
        Pass without playing; the second pass in a row ends the game.

        Raises:
            GameOverError: the game has already ended
        """
        if self._game_over:
            raise GameOverError()

        player = self._current_player
        self._consecutive_passes += 1
        self._turn_count += 1
        logger.debug("%s passed (%d in a row)", player.value, self._consecutive_passes)

        if self._consecutive_passes >= 2:
            self._game_over = True
        else:
            self._current_player = player.opponent

        self._notify(StateChange(kind="passed", player=player, turn_count=self._turn_count))
        if self._game_over:
            winner = self.winner()
            logger.info(
                "Game over after %d turns: %s",
                self._turn_count, winner.value if winner else "draw",
            )
            self._notify(StateChange(kind="game_over", player=player, turn_count=self._turn_count))

    # ========================================================================
    # Listeners
    # ========================================================================

    def subscribe(self, listener: Listener) -> int:
        """Register a change listener; returns a handle for unsubscribe()."""
        handle = self._next_handle
        self._next_handle += 1
        self._listeners[handle] = listener
        return handle

    def unsubscribe(self, handle: int) -> bool:
        """Remove a listener. Returns False if the handle was unknown."""
        return self._listeners.pop(handle, None) is not None

    def _notify(self, change: StateChange) -> None:
        for listener in list(self._listeners.values()):
            listener(self, change)

    # ========================================================================
    # Helpers
    # ========================================================================

    def _find_in_hand(self, player: Player, name: str) -> int | None:
        for i, held in enumerate(self._hands[player]):
            if held.name == name:
                return i
        return None

    def _draw(self, player: Player) -> None:
        self._hands[player].append(self._decks[player].pop(0))

    def clone(self) -> GameState:
        """
        Deep copy for simulation.

        Listeners are not carried over, so experimenting on a clone
        never fires callbacks registered on the original.
        """
        listeners = self._listeners
        self._listeners = {}
        try:
            copy = deepcopy(self)
        finally:
            self._listeners = listeners
        return copy

    def __repr__(self):
        return (
            f"GameState(turn={self._turn_count}, current={self._current_player.value}, "
            f"passes={self._consecutive_passes}, game_over={self._game_over})"
        )
