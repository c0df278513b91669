"""
Action System - Moves, and the results of applying them.

An action is one of:
1. Play a card from hand onto a cell
2. Pass

Bots, sessions and the API all speak in actions; the reducer turns
them into engine calls.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .card import Player


class ActionType(Enum):
    """Types of moves a player can make."""
    PLAY_CARD = "play_card"
    PASS = "pass"


@dataclass(frozen=True)
class Action:
    """A complete move for one player."""
    action_type: ActionType
    player: Player
    card_name: str | None = None
    row: int | None = None
    col: int | None = None

    @classmethod
    def play_card(cls, player: Player, card_name: str, row: int, col: int) -> Action:
        """Factory for a card placement."""
        return cls(
            action_type=ActionType.PLAY_CARD,
            player=player,
            card_name=card_name,
            row=row,
            col=col,
        )

    @classmethod
    def pass_turn(cls, player: Player) -> Action:
        """Factory for a pass."""
        return cls(action_type=ActionType.PASS, player=player)

    @property
    def is_pass(self) -> bool:
        return self.action_type == ActionType.PASS

    def describe(self) -> str:
        """Human-readable one-liner."""
        if self.is_pass:
            return f"{self.player.value} passes"
        return f"{self.player.value} plays {self.card_name} at ({self.row}, {self.col})"


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether the action succeeded
    - The error and its code (if it failed)
    - Human-readable changes (for UI/logs)
    """
    success: bool
    action: Action | None = None
    error: str | None = None
    error_code: str | None = None
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None, action: Action | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, action=action, error=error, error_code=error_code)

    @classmethod
    def succeeded(cls, action: Action, changes: list[str] | None = None) -> ActionResult:
        """Create a success result."""
        return cls(success=True, action=action, state_changes=changes or [])
