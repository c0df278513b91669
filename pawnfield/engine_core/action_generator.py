"""
Action Generator - Enumerates every legal action for the current player.

Used by:
1. Bots to enumerate possible moves
2. The API/UI to show available placements
3. Validation (is this action in legal_actions?)
"""

from __future__ import annotations

from .action import Action
from .card import Card
from .state import GameState


def legal_placements(state: GameState, card: Card) -> list[tuple[int, int]]:
    """Cells where the current player may place card, in row-major order."""
    player = state.current_player
    board = state.board_snapshot()
    return [
        (r, c) for r, c, _ in board.cells()
        if board.can_place(r, c, card, player)
    ]


def legal_actions(state: GameState) -> list[Action]:
    """
    All legal actions: placements (hand order, then row-major) then pass.

    Returns an empty list once the game is over.
    """
    if state.game_over:
        return []

    player = state.current_player
    board = state.board_snapshot()
    actions = []
    seen: set[str] = set()
    for card in state.hand(player):
        if card.name in seen:
            continue
        seen.add(card.name)
        for r, c, _ in board.cells():
            if board.can_place(r, c, card, player):
                actions.append(Action.play_card(player, card.name, r, c))

    # Passing is always available
    actions.append(Action.pass_turn(player))
    return actions


def is_legal(state: GameState, action: Action) -> bool:
    """Check if a specific action is legal."""
    return action in legal_actions(state)
