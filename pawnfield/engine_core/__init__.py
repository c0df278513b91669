"""
Engine Core - Game state management, move validation and scoring.

The engine:
1. Builds a Board and deals hands from two decks
2. Validates and applies card placements and passes
3. Propagates influence from placed cards
4. Tracks turn order and the two-pass game end
5. Scores rows and determines the winner
"""

from .errors import (
    EngineError,
    OutOfBoundsError,
    NotInHandError,
    InvalidPlacementError,
    GameOverError,
    InvalidConfigurationError,
)
from .card import Card, Cost, InfluenceType, Player, validate_deck, check_footprint_sizes
from .board import Board, Cell, PawnAmount
from .influence import propagate_influence
from .scoring import RowScore, ScoreSheet, score_board
from .state import GameConfig, GamePhase, GameState, StateChange
from .action import Action, ActionType, ActionResult
from .reducer import apply_action
from .action_generator import legal_actions, legal_placements, is_legal

__all__ = [
    "EngineError",
    "OutOfBoundsError",
    "NotInHandError",
    "InvalidPlacementError",
    "GameOverError",
    "InvalidConfigurationError",
    "Card",
    "Cost",
    "InfluenceType",
    "Player",
    "validate_deck",
    "check_footprint_sizes",
    "Board",
    "Cell",
    "PawnAmount",
    "propagate_influence",
    "RowScore",
    "ScoreSheet",
    "score_board",
    "GameConfig",
    "GamePhase",
    "GameState",
    "StateChange",
    "Action",
    "ActionType",
    "ActionResult",
    "apply_action",
    "legal_actions",
    "legal_placements",
    "is_legal",
]
