"""
Tests for bot policies and the heuristic evaluator.
"""

import pytest

from ..bots import (
    POLICIES,
    CustomPolicy,
    EvaluationWeights,
    FillFirstPolicy,
    HeuristicEvaluator,
    MaxRowScorePolicy,
    RandomPolicy,
    create_policy,
)
from ..decks import example_big_deck
from ..engine_core.action import Action
from ..engine_core.action_generator import legal_actions
from ..engine_core.card import Player
from ..engine_core.state import GameConfig, GameState
from ..session import GameLoop


@pytest.fixture
def tiny_game() -> GameState:
    """1x1 board: a single placement ends all placing."""
    return GameState(GameConfig(width=1, height=1), example_big_deck(), example_big_deck())


class TestFillFirstPolicy:
    """Tests for FillFirstPolicy."""

    def test_picks_first_placement(self, game):
        decision = FillFirstPolicy().select_action(game, Player.RED, legal_actions(game))
        assert decision.action == Action.play_card(Player.RED, "Sentinel", 0, 0)

    def test_passes_without_placements(self, tiny_game):
        tiny_game.play_card("Sentinel", 0, 0)
        decision = FillFirstPolicy().select_action(tiny_game, Player.BLUE, legal_actions(tiny_game))
        assert decision.action.is_pass

    def test_requires_actions(self, game):
        with pytest.raises(ValueError):
            FillFirstPolicy().select_action(game, Player.RED, [])


class TestMaxRowScorePolicy:
    """Tests for the lookahead policy."""

    def test_prefers_highest_value_card(self, tiny_game):
        decision = MaxRowScorePolicy().select_action(tiny_game, Player.RED, legal_actions(tiny_game))

        assert decision.action == Action.play_card(Player.RED, "Colossus", 0, 0)
        assert decision.evaluated_actions == 5
        assert decision.best_score == 15.0

    def test_does_not_mutate_state(self, game):
        MaxRowScorePolicy().select_action(game, Player.RED, legal_actions(game))

        assert game.board_snapshot().occupied_count == 0
        assert game.turn_count == 0
        assert len(game.hand(Player.RED)) == 5

    def test_passes_without_placements(self, tiny_game):
        tiny_game.play_card("Sentinel", 0, 0)
        decision = MaxRowScorePolicy().select_action(tiny_game, Player.BLUE, legal_actions(tiny_game))
        assert decision.action == Action.pass_turn(Player.BLUE)

    def test_custom_evaluator(self, tiny_game):
        # Rewarding only territory makes every placement on a 1x1 board equal
        evaluator = HeuristicEvaluator(EvaluationWeights(row_win=0, row_score=0, territory=1))
        decision = MaxRowScorePolicy(evaluator).select_action(
            tiny_game, Player.RED, legal_actions(tiny_game)
        )
        assert decision.action.card_name == "Sentinel"


class TestHeuristicEvaluator:
    """Tests for state evaluation."""

    def test_empty_board_is_even(self, game):
        evaluation = HeuristicEvaluator().evaluate(game, Player.RED)
        assert evaluation.total_score == 0

    def test_breakdown(self, game):
        game.play_card("Colossus", 1, 2)
        evaluation = HeuristicEvaluator().evaluate(game, Player.RED)

        assert evaluation.feature_breakdown == {
            "row_wins": 10.0,
            "row_score": 5.0,
            "territory": 2.0,
        }
        assert evaluation.total_score == 17.0

    def test_symmetric(self, game):
        game.play_card("Colossus", 1, 2)
        game.play_card("Lancer", 0, 0)
        evaluator = HeuristicEvaluator()

        red = evaluator.evaluate(game, Player.RED).total_score
        blue = evaluator.evaluate(game, Player.BLUE).total_score
        assert red == -blue


class TestRandomPolicy:
    """Tests for RandomPolicy."""

    def test_seeded_choices_repeat(self, game):
        actions = legal_actions(game)
        first = [RandomPolicy(seed=5).select_action(game, Player.RED, actions).action for _ in range(3)]
        second = [RandomPolicy(seed=5).select_action(game, Player.RED, actions).action for _ in range(3)]
        assert first == second

    def test_never_passes_with_placements(self, game):
        policy = RandomPolicy(seed=1)
        actions = legal_actions(game)
        for _ in range(20):
            assert not policy.select_action(game, Player.RED, actions).action.is_pass


class TestCustomPolicy:
    """Tests for CustomPolicy."""

    def test_wraps_function(self, game):
        policy = CustomPolicy(lambda state, player, legal: legal[-1], name="passer")
        decision = policy.select_action(game, Player.RED, legal_actions(game))

        assert decision.action.is_pass
        assert policy.get_name() == "passer"

    def test_rejects_illegal_choice(self, game):
        policy = CustomPolicy(lambda state, player, legal: Action.play_card(player, "Dragon", 0, 0))
        with pytest.raises(ValueError, match="illegal action"):
            policy.select_action(game, Player.RED, legal_actions(game))


class TestCreatePolicy:
    """Tests for the policy registry."""

    @pytest.mark.parametrize("name,cls", [
        ("fill-first", FillFirstPolicy),
        ("max-row-score", MaxRowScorePolicy),
        ("random", RandomPolicy),
    ])
    def test_known_names(self, name, cls):
        assert isinstance(create_policy(name, seed=1), cls)
        assert name in POLICIES

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown policy"):
            create_policy("minimax")


class TestBotGames:
    """Whole games between bots."""

    @pytest.mark.parametrize("red,blue", [
        ("max-row-score", "fill-first"),
        ("fill-first", "max-row-score"),
        ("random", "random"),
    ])
    def test_game_finishes(self, game, red, blue):
        loop = GameLoop(game, {
            Player.RED: create_policy(red, seed=11),
            Player.BLUE: create_policy(blue, seed=12),
        })
        result = loop.run_to_completion()

        assert result.game_over
        assert game.game_over
        assert result.winner == game.winner()
        assert game.consecutive_passes == 2
        # Both hands are five cards and the decks are empty; at most ten placements
        assert game.board_snapshot().occupied_count <= 10
