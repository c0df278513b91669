"""
Engine Errors - Distinguishable failure kinds for rejected calls.

Every error is raised before any state is touched, so a rejected
call always leaves the game unchanged. Each error carries a
machine-readable code that the reducer and API surface unchanged.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for all engine errors."""

    code = "ENGINE_ERROR"


class OutOfBoundsError(EngineError):
    """Raised when a row/col lies outside the board."""

    code = "OUT_OF_BOUNDS"

    def __init__(self, row: int, col: int, height: int, width: int):
        self.row = row
        self.col = col
        super().__init__(
            f"Cell ({row}, {col}) is outside the {height}x{width} board"
        )


class NotInHandError(EngineError):
    """Raised when the acting player does not hold the referenced card."""

    code = "NOT_IN_HAND"


class InvalidPlacementError(EngineError):
    """Raised when a target cell fails the ownership/cost/occupancy check."""

    code = "INVALID_PLACEMENT"


class GameOverError(EngineError):
    """Raised on any mutating call after the game has ended."""

    code = "GAME_OVER"

    def __init__(self, message: str = "Game is over - no moves allowed"):
        super().__init__(message)


class InvalidConfigurationError(EngineError):
    """Raised when decks, cards or engine parameters are malformed."""

    code = "INVALID_CONFIGURATION"

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        if len(errors) == 1:
            super().__init__(errors[0])
        else:
            super().__init__(
                f"Configuration invalid with {len(errors)} error(s): "
                + "; ".join(errors)
            )
