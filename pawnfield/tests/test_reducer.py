"""
Tests for the reducer and legal action generation.

Tests:
- apply_action turn checks and error codes
- Failed actions leave the state untouched
- legal_actions ordering and contents
"""

import pytest

from ..engine_core.action import Action, ActionResult, ActionType
from ..engine_core.action_generator import is_legal, legal_actions, legal_placements
from ..engine_core.card import Player
from ..engine_core.reducer import apply_action
from ..engine_core.state import GameConfig, GameState


class TestAction:
    """Tests for the Action value type."""

    def test_play_card_constructor(self):
        action = Action.play_card(Player.RED, "Lancer", 1, 2)
        assert action.action_type == ActionType.PLAY_CARD
        assert not action.is_pass
        assert action.describe() == "red plays Lancer at (1, 2)"

    def test_pass_constructor(self):
        action = Action.pass_turn(Player.BLUE)
        assert action.is_pass
        assert action.describe() == "blue passes"

    def test_actions_compare_by_value(self):
        assert Action.play_card(Player.RED, "Lancer", 1, 2) == Action.play_card(Player.RED, "Lancer", 1, 2)
        assert Action.pass_turn(Player.RED) != Action.pass_turn(Player.BLUE)

    def test_result_helpers(self):
        action = Action.pass_turn(Player.RED)
        failed = ActionResult.failure("nope", "GAME_OVER", action)
        assert not failed.success
        assert failed.error_code == "GAME_OVER"
        ok = ActionResult.succeeded(action)
        assert ok.success
        assert ok.state_changes == []


class TestApplyAction:
    """Tests for apply_action."""

    def test_play_card_success(self, game):
        result = apply_action(game, Action.play_card(Player.RED, "Sentinel", 1, 1))

        assert result.success
        assert result.state_changes == ["red plays Sentinel at (1, 1)"]
        assert game.cell(1, 1).occupant.name == "Sentinel"
        assert game.current_player is Player.BLUE

    def test_pass_success(self, game):
        result = apply_action(game, Action.pass_turn(Player.RED))
        assert result.success
        assert game.consecutive_passes == 1

    def test_wrong_player(self, game):
        result = apply_action(game, Action.pass_turn(Player.BLUE))

        assert not result.success
        assert result.error_code == "NOT_YOUR_TURN"
        assert game.consecutive_passes == 0
        assert game.current_player is Player.RED

    @pytest.mark.parametrize("card,row,col,code", [
        ("Sentinel", 3, 0, "OUT_OF_BOUNDS"),
        ("Dragon", 0, 0, "NOT_IN_HAND"),
    ])
    def test_engine_errors_become_codes(self, game, card, row, col, code):
        result = apply_action(game, Action.play_card(Player.RED, card, row, col))
        assert not result.success
        assert result.error_code == code
        assert result.error
        assert game.turn_count == 0

    def test_invalid_placement_code(self, game):
        apply_action(game, Action.play_card(Player.RED, "Sentinel", 1, 1))
        result = apply_action(game, Action.play_card(Player.BLUE, "Sentinel", 1, 1))

        assert not result.success
        assert result.error_code == "INVALID_PLACEMENT"
        assert "occupied by Sentinel" in result.error

    def test_incomplete_play_card(self, game):
        action = Action(action_type=ActionType.PLAY_CARD, player=Player.RED)
        result = apply_action(game, action)

        assert not result.success
        assert result.error_code == "INVALID_ACTION"
        assert result.action is action
        assert game.turn_count == 0
        assert game.current_player is Player.RED

    def test_play_card_missing_coordinate(self, game):
        action = Action(action_type=ActionType.PLAY_CARD, player=Player.RED, card_name="Lancer", row=0)
        assert apply_action(game, action).error_code == "INVALID_ACTION"
        assert game.board_snapshot().occupied_count == 0

    def test_game_over(self, game):
        apply_action(game, Action.pass_turn(Player.RED))
        result = apply_action(game, Action.pass_turn(Player.BLUE))
        assert result.success
        assert result.state_changes[-1] == "Game over - draw"

        after = apply_action(game, Action.pass_turn(Player.BLUE))
        assert not after.success
        assert after.error_code == "GAME_OVER"

    def test_game_over_reports_winner(self, game):
        apply_action(game, Action.play_card(Player.RED, "Colossus", 0, 0))
        apply_action(game, Action.pass_turn(Player.BLUE))
        result = apply_action(game, Action.pass_turn(Player.RED))
        assert result.state_changes[-1] == "Game over - red wins"


class TestLegalActions:
    """Tests for legal action enumeration."""

    def test_opening_moves(self, game):
        actions = legal_actions(game)

        # Every card fits every empty cell, plus pass
        assert len(actions) == 5 * 15 + 1
        assert actions[0] == Action.play_card(Player.RED, "Sentinel", 0, 0)
        assert actions[14] == Action.play_card(Player.RED, "Sentinel", 2, 4)
        assert actions[15] == Action.play_card(Player.RED, "Lancer", 0, 0)
        assert actions[-1] == Action.pass_turn(Player.RED)

    def test_claimed_cells_excluded(self, game):
        game.play_card("Sentinel", 1, 1)
        actions = legal_actions(game)

        # One occupied cell and four red cells are closed to blue
        assert len(actions) == 5 * 10 + 1
        assert all(a.player is Player.BLUE for a in actions)
        assert Action.play_card(Player.BLUE, "Sentinel", 1, 2) not in actions

    def test_cost_filters_placements(self, game, cards):
        game.play_card("Sentinel", 1, 1)
        game.pass_turn()

        assert (1, 2) in legal_placements(game, cards["Warden"])
        assert (1, 2) not in legal_placements(game, cards["Outrider"])

    def test_empty_when_game_over(self, game):
        game.pass_turn()
        game.pass_turn()
        assert legal_actions(game) == []

    def test_pass_only_when_hand_empty(self, big_deck):
        game = GameState(GameConfig(hand_size=0), big_deck, list(big_deck))
        assert legal_actions(game) == [Action.pass_turn(Player.RED)]

    def test_every_legal_action_applies(self, game):
        for action in legal_actions(game):
            trial = game.clone()
            assert apply_action(trial, action).success, action.describe()

    def test_is_legal(self, game):
        assert is_legal(game, Action.play_card(Player.RED, "Lancer", 2, 4))
        assert not is_legal(game, Action.play_card(Player.RED, "Lancer", 3, 4))
        assert not is_legal(game, Action.pass_turn(Player.BLUE))
