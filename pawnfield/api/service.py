"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine actions
2. Manages sessions
3. Formats responses for clients

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    CreateSessionRequest,
    PlayCardRequest,
    # Responses
    SessionResponse,
    GameStateResponse,
    MoveResponse,
    ErrorResponse,
    # Shared
    CardInfo,
    CellInfo,
    MoveInfo,
    RowScoreInfo,
    ScoreInfo,
    # Enums
    ErrorCode,
    PlayerColor,
    SessionStatus,
)
from ..bots import create_policy
from ..decks import get_deck
from ..engine_core.action import Action
from ..engine_core.action_generator import legal_actions
from ..engine_core.card import Card, Player
from ..engine_core.state import GameConfig
from ..session import Session, SessionManager, SessionState


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest())
        state = service.get_game_state(session.session_id)
        move = service.play_card(session.session_id, PlayCardRequest(...))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """
        Create a new game session against a bot.

        Raises ValueError for unknown bots or decks; engine configuration
        problems surface as InvalidConfigurationError.
        """
        bot = create_policy(request.bot, seed=request.random_seed)
        config = GameConfig(
            width=request.width,
            height=request.height,
            hand_size=request.hand_size,
            shuffle=request.shuffle,
            random_seed=request.random_seed,
        )
        session = self.session_manager.create_session(
            config,
            red_deck=get_deck(request.deck),
            blue_deck=get_deck(request.deck),
            human_player=Player(request.human_player.value),
            bot=bot,
        )
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Get session status."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        return self._session_to_response(session)

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        """Get the full game state as the human sees it."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        return self._state_to_response(session)

    def play_card(self, session_id: str, request: PlayCardRequest) -> MoveResponse | ErrorResponse:
        """Play a card for the human, then let the bot reply."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        action = Action.play_card(session.human_player, request.card_name, request.row, request.col)
        return self._submit(session, action)

    def pass_turn(self, session_id: str) -> MoveResponse | ErrorResponse:
        """Pass for the human, then let the bot reply."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        return self._submit(session, Action.pass_turn(session.human_player))

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        """End a session."""
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        """List session IDs."""
        return self.session_manager.list_sessions()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _submit(self, session: Session, action: Action) -> MoveResponse | ErrorResponse:
        result = session.game_loop.submit(action)
        session.refresh()
        if not result.success:
            return ErrorResponse(
                error=result.errors[0] if result.errors else "Move rejected",
                error_code=_error_code(result.error_code),
                details={"action": action.describe()},
            )
        return MoveResponse(
            session_id=session.session_id,
            success=True,
            automa_actions=result.automa_actions,
            game_state=self._state_to_response(session),
        )

    def _status(self, session: Session) -> SessionStatus:
        if session.state == SessionState.ABANDONED:
            return SessionStatus.ABANDONED
        if session.game_state.game_over:
            return SessionStatus.GAME_OVER
        if session.is_human_turn():
            return SessionStatus.YOUR_TURN
        return SessionStatus.AUTOMA_THINKING

    def _session_to_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            status=self._status(session),
            human_player=PlayerColor(session.human_player.value),
            bot=session.bot_name,
            current_player=PlayerColor(session.game_state.current_player.value),
            turn_count=session.game_state.turn_count,
            created_at=session.created_at,
        )

    def _state_to_response(self, session: Session) -> GameStateResponse:
        state = session.game_state
        board = state.board_snapshot()
        human = session.human_player

        cells = [
            CellInfo(
                row=r,
                col=c,
                owner=_color(cell.owner),
                pawns=int(cell.pawns),
                occupant=cell.occupant.name if cell.occupant else None,
            )
            for r, c, cell in board.cells()
        ]

        legal_moves = []
        if session.is_human_turn():
            legal_moves = [
                MoveInfo(card_name=a.card_name, row=a.row, col=a.col)
                for a in legal_actions(state)
                if not a.is_pass
            ]

        sheet = state.score_sheet()
        score = ScoreInfo(
            rows=[
                RowScoreInfo(
                    row=row.row,
                    red=row.scores[Player.RED],
                    blue=row.scores[Player.BLUE],
                    winner=_color(row.winner),
                )
                for row in sheet.rows
            ],
            red_row_wins=sheet.row_wins[Player.RED],
            blue_row_wins=sheet.row_wins[Player.BLUE],
            winner=_color(sheet.winner),
            is_final=sheet.is_final,
        )

        return GameStateResponse(
            session_id=session.session_id,
            status=self._status(session),
            width=state.width,
            height=state.height,
            cells=cells,
            hand=[card_to_info(card) for card in state.hand(human)],
            deck_sizes={p.value: state.deck_size(p) for p in Player},
            opponent_hand_size=len(state.hand(human.opponent)),
            current_player=PlayerColor(state.current_player.value),
            consecutive_passes=state.consecutive_passes,
            turn_count=state.turn_count,
            legal_moves=legal_moves,
            score=score,
            game_over=state.game_over,
        )


def card_to_info(card: Card) -> CardInfo:
    """Convert a Card to its API form."""
    return CardInfo(
        name=card.name,
        cost=int(card.cost),
        points=card.points,
        footprint=[" ".join(tag.value for tag in row) for row in card.footprint],
    )


def _color(player: Player | None) -> PlayerColor | None:
    return PlayerColor(player.value) if player else None


def _error_code(code: str | None) -> ErrorCode:
    try:
        return ErrorCode(code)
    except ValueError:
        return ErrorCode.INTERNAL_ERROR


def _not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"Session {session_id} not found",
        error_code=ErrorCode.SESSION_NOT_FOUND,
    )
