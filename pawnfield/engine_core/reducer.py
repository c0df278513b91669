"""
Reducer - Applies actions to a game state.

The reducer is the bridge between the Action vocabulary used by bots,
sessions and the API, and the engine's mutation methods.

Design principles:
- Validates turn ownership before dispatching
- Engine errors become failure results carrying the error's code
- A failed action leaves the state untouched
"""

from __future__ import annotations
import logging

from .action import Action, ActionResult, ActionType
from .errors import EngineError
from .state import GameState

logger = logging.getLogger(__name__)


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Apply an action to the game state in place.

    Returns ActionResult describing success or the reason for failure.
    """
    if state.game_over:
        return ActionResult.failure("Game is over - no moves allowed", "GAME_OVER", action)

    if action.player is not state.current_player:
        logger.warning("Rejected %s: not their turn", action.describe())
        return ActionResult.failure(
            f"Not {action.player.value}'s turn", "NOT_YOUR_TURN", action
        )

    if action.action_type == ActionType.PLAY_CARD and (
        action.card_name is None or action.row is None or action.col is None
    ):
        return ActionResult.failure(
            "play_card action needs card_name, row and col", "INVALID_ACTION", action
        )

    handler = _HANDLERS.get(action.action_type)
    if handler is None:
        return ActionResult.failure(
            f"No handler for action type: {action.action_type}", "NO_HANDLER", action
        )

    try:
        changes = handler(state, action)
    except EngineError as e:
        logger.warning("Rejected %s: %s", action.describe(), e)
        return ActionResult.failure(str(e), e.code, action)

    return ActionResult.succeeded(action, changes)


def _handle_play_card(state: GameState, action: Action) -> list[str]:
    state.play_card(action.card_name, action.row, action.col)
    changes = [action.describe()]
    if state.game_over:
        changes.append("Game over")
    return changes


def _handle_pass(state: GameState, action: Action) -> list[str]:
    state.pass_turn()
    changes = [action.describe()]
    if state.game_over:
        winner = state.winner()
        changes.append(f"Game over - {winner.value} wins" if winner else "Game over - draw")
    return changes


_HANDLERS = {
    ActionType.PLAY_CARD: _handle_play_card,
    ActionType.PASS: _handle_pass,
}
