"""
Bot Policy - Interface for bot decision-making.

A BotPolicy looks at a game state and a player tag and proposes a
move. Policies never mutate the state they are given; anything that
needs to look ahead works on GameState.clone().
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable
import random

from ..engine_core.action import Action

if TYPE_CHECKING:
    from ..engine_core.card import Player
    from ..engine_core.state import GameState


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    Contains:
    - The action to take
    - Explanation (for UI/debugging)
    - Evaluation details
    """
    action: Action
    explanation: str = ""
    evaluated_actions: int = 0
    best_score: float = 0.0
    evaluation_details: dict[str, Any] = field(default_factory=dict)


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    Implementations range from simple fill-the-board rules to
    one-ply lookahead with a heuristic evaluator.
    """

    @abstractmethod
    def select_action(
        self,
        state: GameState,
        player: Player,
        legal_actions: list[Action],
    ) -> BotDecision:
        """
        Select an action from the legal actions.

        Args:
            state: Current game state (read only)
            player: The side the bot plays
            legal_actions: Legal actions to choose from

        Returns:
            BotDecision with the selected action
        """
        pass

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__


def _placements(legal_actions: list[Action]) -> list[Action]:
    return [a for a in legal_actions if not a.is_pass]


def _pass_from(legal_actions: list[Action], player: Player) -> Action:
    for action in legal_actions:
        if action.is_pass:
            return action
    return Action.pass_turn(player)


class FillFirstPolicy(BotPolicy):
    """
    Fill-first policy - plays the first placement it finds.

    Legal actions arrive in hand order and then row-major cell order,
    so this fills the board from the top-left with the earliest card
    that fits. Passes only when nothing can be placed.
    """

    def select_action(
        self,
        state: GameState,
        player: Player,
        legal_actions: list[Action],
    ) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        placements = _placements(legal_actions)
        if not placements:
            return BotDecision(
                action=_pass_from(legal_actions, player),
                explanation="No placement available",
                evaluated_actions=len(legal_actions),
            )

        return BotDecision(
            action=placements[0],
            explanation="Selected first legal placement",
            evaluated_actions=1,
        )


class RandomPolicy(BotPolicy):
    """
    Random policy - selects placements uniformly at random.

    Used for:
    - Testing
    - Baseline comparison

    Passing is only chosen when no placement exists, otherwise random
    games would end after two unlucky draws.
    """

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def select_action(
        self,
        state: GameState,
        player: Player,
        legal_actions: list[Action],
    ) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        placements = _placements(legal_actions)
        if not placements:
            return BotDecision(
                action=_pass_from(legal_actions, player),
                explanation="No placement available",
            )

        action = self.rng.choice(placements)
        return BotDecision(
            action=action,
            explanation="Selected randomly",
            evaluated_actions=len(placements),
        )


class CustomPolicy(BotPolicy):
    """
    Wraps a plain function as a policy.

    Usage:
        policy = CustomPolicy(lambda state, player, legal: legal[-1])
    """

    def __init__(
        self,
        choose: Callable[[GameState, Player, list[Action]], Action],
        name: str = "custom",
    ):
        self.choose = choose
        self.name = name

    def select_action(
        self,
        state: GameState,
        player: Player,
        legal_actions: list[Action],
    ) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")
        action = self.choose(state, player, legal_actions)
        if action not in legal_actions:
            raise ValueError(f"{self.name} chose an illegal action: {action.describe()}")
        return BotDecision(action=action, explanation=f"Chosen by {self.name}")

    def get_name(self) -> str:
        return self.name
