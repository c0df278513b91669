"""
Heuristic Evaluator - Scores game states for bot decision-making.

The evaluator assigns a numeric score to a state from one player's
point of view, based on:
- Row-wins margin (what decides the game)
- Row-score margin (points on the board)
- Territory margin (pawns controlled on open cells)

MaxRowScorePolicy uses it for one-ply lookahead.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import logging

from ..engine_core.card import Player
from ..engine_core.reducer import apply_action
from ..engine_core.scoring import score_board
from .policy import BotDecision, BotPolicy, _pass_from, _placements

if TYPE_CHECKING:
    from ..engine_core.action import Action
    from ..engine_core.state import GameState

logger = logging.getLogger(__name__)


@dataclass
class EvaluationWeights:
    """
    Weights for the heuristic evaluator.

    Higher values = more importance.
    """
    row_win: float = 10.0
    row_score: float = 1.0
    territory: float = 0.25


@dataclass
class StateEvaluation:
    """Result of evaluating a game state."""
    total_score: float
    feature_breakdown: dict[str, float] = field(default_factory=dict)


class HeuristicEvaluator:
    """
    Evaluates game states using weighted margins over the opponent.

    Positive scores favour the evaluating player.
    """

    def __init__(self, weights: EvaluationWeights | None = None):
        self.weights = weights or EvaluationWeights()

    def evaluate(self, state: GameState, for_player: Player) -> StateEvaluation:
        opponent = for_player.opponent
        board = state.board_snapshot()
        sheet = score_board(board)

        row_win_margin = sheet.row_wins[for_player] - sheet.row_wins[opponent]
        row_score_margin = sheet.total_points(for_player) - sheet.total_points(opponent)

        territory = 0
        for _, _, cell in board.cells():
            if cell.is_occupied or cell.owner is None:
                continue
            territory += int(cell.pawns) if cell.owner is for_player else -int(cell.pawns)

        features = {
            "row_wins": row_win_margin * self.weights.row_win,
            "row_score": row_score_margin * self.weights.row_score,
            "territory": territory * self.weights.territory,
        }
        return StateEvaluation(
            total_score=sum(features.values()),
            feature_breakdown=features,
        )


class MaxRowScorePolicy(BotPolicy):
    """
    Max-row-score policy - one-ply lookahead.

    1. Try each legal placement on a clone of the state
    2. Evaluate the resulting board
    3. Keep the best (earliest on ties)

    Passes only when no placement exists.
    """

    def __init__(self, evaluator: HeuristicEvaluator | None = None):
        self.evaluator = evaluator or HeuristicEvaluator()

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

        best_action = None
        best_eval = None
        for action in placements:
            trial = state.clone()
            result = apply_action(trial, action)
            if not result.success:
                continue
            evaluation = self.evaluator.evaluate(trial, player)
            if best_eval is None or evaluation.total_score > best_eval.total_score:
                best_action, best_eval = action, evaluation

        if best_action is None:
            return BotDecision(
                action=_pass_from(legal_actions, player),
                explanation="No placement survived simulation",
                evaluated_actions=len(placements),
            )

        logger.debug("%s picked %s (score %.2f)", self.get_name(), best_action.describe(), best_eval.total_score)
        return BotDecision(
            action=best_action,
            explanation=f"Best of {len(placements)} placement(s)",
            evaluated_actions=len(placements),
            best_score=best_eval.total_score,
            evaluation_details=best_eval.feature_breakdown,
        )
