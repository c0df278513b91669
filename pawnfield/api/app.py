"""
FastAPI Application - REST API for playing against a bot.

Endpoints:
    GET    /api/v1/health                   Health check
    POST   /api/v1/sessions                 Create game session
    GET    /api/v1/sessions                 List sessions
    GET    /api/v1/sessions/{id}            Get session status
    DELETE /api/v1/sessions/{id}            End session
    GET    /api/v1/sessions/{id}/state      Get game state
    POST   /api/v1/sessions/{id}/play       Play a card
    POST   /api/v1/sessions/{id}/pass       Pass

After every human move the bot answers immediately; the response
lists what it did and carries the updated game state.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Union
import logging
import os

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..engine_core.errors import InvalidConfigurationError
from .service import APIService
from .schemas import (
    CreateSessionRequest,
    PlayCardRequest,
    SessionResponse,
    GameStateResponse,
    MoveResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorCode,
)

logger = logging.getLogger(__name__)

# Environment configuration
PAWNFIELD_ENV = os.getenv("PAWNFIELD_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
SESSION_MAX_AGE = int(os.getenv("PAWNFIELD_SESSION_MAX_AGE", "3600"))

_STATUS_BY_CODE = {
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.NOT_YOUR_TURN: 409,
    ErrorCode.GAME_OVER: 409,
}


def create_app(service: APIService | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    docs_enabled = PAWNFIELD_ENV != "production"
    app = FastAPI(
        title="Pawnfield Engine API",
        description="""
Territory-control card game engine - play against an automa.

## Flow

1. `POST /sessions` to start a game (the bot opens if it plays RED)
2. `GET /sessions/{id}/state` for the board, your hand and legal moves
3. `POST /sessions/{id}/play` or `POST /sessions/{id}/pass`
4. Two passes in a row end the game; `score.is_final` turns true
        """,
        version=__version__,
        docs_url="/api/docs" if docs_enabled else None,
        redoc_url="/api/redoc" if docs_enabled else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Wrap an ErrorResponse with the matching HTTP status."""
        return JSONResponse(
            status_code=_STATUS_BY_CODE.get(error.error_code, 400),
            content=error.model_dump(mode="json"),
        )

    # =========================================================================
    # System
    # =========================================================================

    @app.get("/api/v1/health", response_model=HealthResponse, tags=["System"])
    async def health_check() -> HealthResponse:
        return HealthResponse(status="healthy", service="pawnfield", version=__version__)

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid parameters"}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(body: CreateSessionRequest) -> Union[SessionResponse, JSONResponse]:
        """Create a new game against a bot."""
        api_service.session_manager.cleanup_stale_sessions(SESSION_MAX_AGE)
        try:
            return api_service.create_session(body)
        except (ValueError, InvalidConfigurationError) as e:
            return make_error_response(
                ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)
            )

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        if not success:
            raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get the game state",
    )
    async def get_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        response = api_service.get_game_state(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/play",
        response_model=MoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Illegal placement"},
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "Not your turn or game over"},
        },
        tags=["Game"],
        summary="Play a card from your hand",
    )
    async def play_card(session_id: str, body: PlayCardRequest) -> Union[MoveResponse, JSONResponse]:
        response = api_service.play_card(session_id, body)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/pass",
        response_model=MoveResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "Not your turn or game over"},
        },
        tags=["Game"],
        summary="Pass your turn",
    )
    async def pass_turn(session_id: str) -> Union[MoveResponse, JSONResponse]:
        response = api_service.pass_turn(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    logger.info("API created (env=%s)", PAWNFIELD_ENV)
    return app


# For running directly: uvicorn pawnfield.api.app:app
app = create_app()
