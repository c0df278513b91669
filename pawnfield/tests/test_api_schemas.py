"""
Tests for API Pydantic schemas.

Validates that:
- Request defaults match a standard game
- Field constraints reject bad input
- Responses serialize enums as plain strings
"""

import pytest
from pydantic import ValidationError


class TestRequestSchemas:
    """Tests for request models."""

    def test_create_session_defaults(self):
        """Defaults describe a 3x5 game with a hand of five."""
        from pawnfield.api.schemas import CreateSessionRequest, PlayerColor

        request = CreateSessionRequest()
        assert (request.width, request.height, request.hand_size) == (5, 3, 5)
        assert request.human_player == PlayerColor.RED
        assert request.bot == "max-row-score"
        assert request.deck == "example_big_deck"
        assert not request.shuffle

    @pytest.mark.parametrize("field,value", [
        ("width", 0),
        ("height", 16),
        ("hand_size", -1),
        ("human_player", "green"),
    ])
    def test_create_session_rejects(self, field, value):
        from pawnfield.api.schemas import CreateSessionRequest

        with pytest.raises(ValidationError):
            CreateSessionRequest(**{field: value})

    def test_play_card_requires_name(self):
        """An empty card name is rejected."""
        from pawnfield.api.schemas import PlayCardRequest

        with pytest.raises(ValidationError):
            PlayCardRequest(card_name="", row=0, col=0)

    def test_play_card_from_json(self):
        from pawnfield.api.schemas import PlayCardRequest

        request = PlayCardRequest.model_validate({"card_name": "Lancer", "row": 1, "col": 2})
        assert (request.card_name, request.row, request.col) == ("Lancer", 1, 2)


class TestResponseSchemas:
    """Tests for response models."""

    def test_error_response(self):
        """ErrorResponse carries a code and the API version."""
        from pawnfield.api.schemas import ErrorCode, ErrorResponse

        error = ErrorResponse(error="Cell (9, 9) is outside the 3x5 board", error_code=ErrorCode.OUT_OF_BOUNDS)
        data = error.model_dump(mode="json")

        assert data["error_code"] == "OUT_OF_BOUNDS"
        assert data["api_version"] == "v1"
        assert data["details"] is None

    def test_cell_pawn_range(self):
        from pawnfield.api.schemas import CellInfo

        assert CellInfo(row=0, col=0, pawns=3).pawns == 3
        with pytest.raises(ValidationError):
            CellInfo(row=0, col=0, pawns=4)

    def test_card_cost_range(self):
        from pawnfield.api.schemas import CardInfo

        with pytest.raises(ValidationError):
            CardInfo(name="Lancer", cost=4, points=2)

    def test_game_state_serializes(self):
        """GameStateResponse dumps enums as strings."""
        from pawnfield.api.schemas import (
            CellInfo,
            GameStateResponse,
            PlayerColor,
            RowScoreInfo,
            ScoreInfo,
            SessionStatus,
        )

        response = GameStateResponse(
            session_id="session-123",
            status=SessionStatus.YOUR_TURN,
            width=1,
            height=1,
            cells=[CellInfo(row=0, col=0, owner=PlayerColor.BLUE, occupant="Lancer")],
            current_player=PlayerColor.RED,
            score=ScoreInfo(
                rows=[RowScoreInfo(row=0, blue=2, winner=PlayerColor.BLUE)],
                blue_row_wins=1,
                winner=PlayerColor.BLUE,
            ),
        )

        data = response.model_dump(mode="json")
        assert data["status"] == "your_turn"
        assert data["cells"][0]["owner"] == "blue"
        assert data["score"]["winner"] == "blue"
        assert data["legal_moves"] == []

    def test_error_codes_cover_engine_errors(self):
        """Every engine error code has a wire equivalent."""
        from pawnfield.api.schemas import ErrorCode
        from pawnfield.engine_core.errors import (
            GameOverError,
            InvalidPlacementError,
            NotInHandError,
            OutOfBoundsError,
        )

        for error in (GameOverError, InvalidPlacementError, NotInHandError, OutOfBoundsError):
            assert ErrorCode(error.code)
