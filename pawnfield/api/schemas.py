"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between a client and the engine.
All responses include explicit types for OpenAPI schema generation.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has been ended
- OUT_OF_BOUNDS: Target cell lies outside the board
- NOT_IN_HAND: The named card is not in the player's hand
- INVALID_PLACEMENT: Target cell does not accept the card
- GAME_OVER: The game has already ended
- NOT_YOUR_TURN: The bot is to move
- VALIDATION_ERROR: Request parameters are invalid
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    YOUR_TURN = "your_turn"
    AUTOMA_THINKING = "automa_thinking"
    GAME_OVER = "game_over"
    ABANDONED = "abandoned"


class PlayerColor(str, Enum):
    """Player tags as they appear on the wire."""
    RED = "red"
    BLUE = "blue"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NOT_IN_HAND = "NOT_IN_HAND"
    INVALID_PLACEMENT = "INVALID_PLACEMENT"
    GAME_OVER = "GAME_OVER"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    name: str
    cost: int = Field(..., ge=1, le=3)
    points: int = Field(..., ge=1)
    footprint: list[str] = Field(
        default_factory=list, description="Footprint rows as 'X I C' token strings"
    )


class CellInfo(BaseModel):
    """One board cell."""
    row: int
    col: int
    owner: Optional[PlayerColor] = None
    pawns: int = Field(0, ge=0, le=3)
    occupant: Optional[str] = Field(None, description="Name of the card on the cell")


class RowScoreInfo(BaseModel):
    """Scores for one row."""
    row: int
    red: int = 0
    blue: int = 0
    winner: Optional[PlayerColor] = None


class ScoreInfo(BaseModel):
    """Score sheet for the whole board."""
    rows: list[RowScoreInfo] = Field(default_factory=list)
    red_row_wins: int = 0
    blue_row_wins: int = 0
    winner: Optional[PlayerColor] = Field(None, description="None means a draw (or no lead yet)")
    is_final: bool = False


class MoveInfo(BaseModel):
    """A legal placement available to the human player."""
    card_name: str
    row: int
    col: int


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new game session."""
    width: int = Field(5, ge=1, le=15, description="Board width (columns)")
    height: int = Field(3, ge=1, le=15, description="Board height (rows)")
    hand_size: int = Field(5, ge=0, le=20)
    shuffle: bool = False
    random_seed: Optional[int] = None
    human_player: PlayerColor = PlayerColor.RED
    bot: str = Field("max-row-score", description="fill-first, max-row-score or random")
    deck: str = Field("example_big_deck", description="Built-in deck used by both players")


class PlayCardRequest(BaseModel):
    """Request to play a card from the human's hand."""
    card_name: str = Field(..., min_length=1)
    row: int
    col: int


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """Response containing session information."""
    session_id: str
    status: SessionStatus
    human_player: PlayerColor
    bot: str
    current_player: PlayerColor
    turn_count: int = 0
    created_at: float = 0.0
    api_version: str = "v1"


class GameStateResponse(BaseModel):
    """Complete game state for display (from the human's point of view)."""
    session_id: str
    status: SessionStatus
    width: int
    height: int
    cells: list[CellInfo] = Field(default_factory=list)
    hand: list[CardInfo] = Field(default_factory=list)
    deck_sizes: dict[str, int] = Field(default_factory=dict)
    opponent_hand_size: int = 0
    current_player: PlayerColor
    consecutive_passes: int = Field(0, ge=0, le=2)
    turn_count: int = 0
    legal_moves: list[MoveInfo] = Field(default_factory=list)
    score: ScoreInfo
    game_over: bool = False
    api_version: str = "v1"


class MoveResponse(BaseModel):
    """Response after a human move (and the bot's reply)."""
    session_id: str
    success: bool
    automa_actions: list[str] = Field(default_factory=list)
    game_state: GameStateResponse
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """Response listing sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
