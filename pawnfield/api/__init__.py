"""
API Module - HTTP interface for playing against the automa.

A client:
1. Creates a game session (choosing board size, deck and bot)
2. Reads the game state: board, hand, legal moves, scores
3. Plays cards or passes; the bot replies within the same request
4. Ends the session when done

All state is session-scoped and in memory.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    PlayCardRequest,
    # Responses
    SessionResponse,
    GameStateResponse,
    MoveResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
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
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "PlayCardRequest",
    # Responses
    "SessionResponse",
    "GameStateResponse",
    "MoveResponse",
    "ErrorResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    # Shared
    "CardInfo",
    "CellInfo",
    "MoveInfo",
    "RowScoreInfo",
    "ScoreInfo",
    # Enums
    "ErrorCode",
    "PlayerColor",
    "SessionStatus",
    # Service
    "APIService",
    "create_app",
]
