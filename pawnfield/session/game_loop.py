"""
Game Loop - Drives a game between humans and bots.

The loop:
1. A human action arrives (or nobody is human)
2. The reducer applies it to the canonical state
3. Bots take every turn that belongs to them
4. The result reports what happened and whether the game ended
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging

from ..bots import BotPolicy
from ..engine_core.action import Action
from ..engine_core.action_generator import legal_actions
from ..engine_core.card import Player
from ..engine_core.reducer import apply_action
from ..engine_core.state import GameState

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    WAITING_HUMAN_ACTION = "waiting_human_action"
    RUNNING_AUTOMA = "running_automa"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of processing a turn.

    Contains the actions taken and the game outcome once it is known.
    """
    success: bool
    loop_state: LoopState

    # Automa actions taken, described
    automa_actions: list[str] = field(default_factory=list)

    # Errors from a rejected human action
    errors: list[str] = field(default_factory=list)
    error_code: str | None = None

    # Game over info
    game_over: bool = False
    winner: Player | None = None


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(state, {Player.BLUE: MaxRowScorePolicy()})

        # Human (RED) moves, then BLUE answers
        result = loop.submit(Action.play_card(Player.RED, "Lancer", 1, 0))

        # Or let two bots play it out
        loop = GameLoop(state, {Player.RED: a, Player.BLUE: b})
        result = loop.run_to_completion()
    """

    def __init__(self, state: GameState, policies: dict[Player, BotPolicy] | None = None):
        self.state = state
        self.policies = policies or {}

    @property
    def loop_state(self) -> LoopState:
        if self.state.game_over:
            return LoopState.GAME_OVER
        if self.state.current_player in self.policies:
            return LoopState.RUNNING_AUTOMA
        return LoopState.WAITING_HUMAN_ACTION

    def step(self) -> Action:
        """Let the bot for the current player make one move."""
        player = self.state.current_player
        policy = self.policies.get(player)
        if policy is None:
            raise ValueError(f"No bot plays {player.value}")

        decision = policy.select_action(self.state.clone(), player, legal_actions(self.state))
        result = apply_action(self.state, decision.action)
        if not result.success:
            # A policy proposing an illegal move is a bug in the policy
            raise RuntimeError(
                f"{policy.get_name()} proposed an illegal move: {result.error}"
            )
        logger.debug("%s: %s", policy.get_name(), decision.action.describe())
        return decision.action

    def run_bots(self, max_turns: int | None = None) -> TurnResult:
        """Step while the current player is a bot and the game is running."""
        taken = []
        while not self.state.game_over and self.state.current_player in self.policies:
            if max_turns is not None and len(taken) >= max_turns:
                break
            taken.append(self.step().describe())
        return self._result(True, taken)

    def submit(self, action: Action) -> TurnResult:
        """Apply a human action, then let the bots answer."""
        result = apply_action(self.state, action)
        if not result.success:
            return TurnResult(
                success=False,
                loop_state=self.loop_state,
                errors=[result.error or "Action rejected"],
                error_code=result.error_code,
                game_over=self.state.game_over,
            )
        return self.run_bots()

    def run_to_completion(self, max_turns: int = 1000) -> TurnResult:
        """Bot vs bot until the game ends (or max_turns moves were made)."""
        missing = [p.value for p in Player if p not in self.policies]
        if missing:
            raise ValueError(f"No bot for: {', '.join(missing)}")
        return self.run_bots(max_turns=max_turns)

    def _result(self, success: bool, taken: list[str]) -> TurnResult:
        return TurnResult(
            success=success,
            loop_state=self.loop_state,
            automa_actions=taken,
            game_over=self.state.game_over,
            winner=self.state.winner() if self.state.game_over else None,
        )
