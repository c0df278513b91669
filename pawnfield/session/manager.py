"""
Session Manager - Creates and manages game sessions.

A session is one play-through between a human and a bot:
- Created when a client starts a game
- Holds the canonical GameState and the GameLoop driving it
- Destroyed when the client ends it or it goes stale

Sessions live in memory only. There is no persistence.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence
import logging
import time
import uuid

from ..bots import BotPolicy, MaxRowScorePolicy
from ..engine_core.card import Card, Player
from ..engine_core.state import GameConfig, GameState
from .game_loop import GameLoop

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Game completed
    ABANDONED = "abandoned"  # Client quit


@dataclass
class Session:
    """
    An in-memory game session.

    Contains:
    - The canonical game state
    - The loop that lets the bot answer human moves
    - Session metadata
    """
    session_id: str
    game_state: GameState
    game_loop: GameLoop
    human_player: Player
    created_at: float
    bot_name: str = ""
    state: SessionState = SessionState.ACTIVE
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_active(self) -> bool:
        """Check if session is still active."""
        return self.state == SessionState.ACTIVE

    def is_human_turn(self) -> bool:
        """Check if it's the human player's turn."""
        return (
            not self.game_state.game_over
            and self.game_state.current_player is self.human_player
        )

    def refresh(self) -> None:
        """Mark the session finished once the game has ended."""
        if self.game_state.game_over and self.state == SessionState.ACTIVE:
            self.state = SessionState.GAME_OVER


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions (and let the bot open if it moves first)
    - Track sessions
    - Clean up finished or stale sessions
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        config: GameConfig,
        red_deck: Sequence[Card],
        blue_deck: Sequence[Card],
        human_player: Player = Player.RED,
        bot: BotPolicy | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            config: Board size, hand size and shuffling
            red_deck: RED's cards in draw order
            blue_deck: BLUE's cards in draw order
            human_player: The side the human plays
            bot: Policy for the other side (MaxRowScorePolicy if omitted)

        Returns:
            New Session; if the bot moves first it has already moved
        """
        bot = bot or MaxRowScorePolicy()
        game_state = GameState(config, red_deck, blue_deck)
        game_loop = GameLoop(game_state, {human_player.opponent: bot})

        session = Session(
            session_id=str(uuid.uuid4()),
            game_state=game_state,
            game_loop=game_loop,
            human_player=human_player,
            created_at=time.time(),
            bot_name=bot.get_name(),
        )
        game_loop.run_bots()
        session.refresh()

        self._sessions[session.session_id] = session
        logger.info(
            "Created session %s (%dx%d, human=%s, bot=%s)",
            session.session_id, config.width, config.height,
            human_player.value, session.bot_name,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and forget it.

        Returns False if no such session existed.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        if reason == "completed" or session.game_state.game_over:
            session.state = SessionState.GAME_OVER
        else:
            session.state = SessionState.ABANDONED
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_sessions(self) -> list[str]:
        """IDs of every session still held."""
        return list(self._sessions)

    def list_active_sessions(self) -> list[str]:
        """IDs of sessions whose game is still running."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Remove sessions older than max_age_seconds.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        stale = [
            sid for sid, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
