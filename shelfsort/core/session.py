"""Game sessions: one player's board, progress and turn resolution."""
import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..config import get_settings
from ..errors import LevelNotCompleteError, SessionNotFoundError
from ..models.board import Board
from ..models.level import DifficultyDescriptor
from ..models.progress import PlayerProgress
from .generator import LevelGenerator, get_generator
from .matcher import detect_matches, is_won, match_reward
from .moves import MoveOutcome, apply_move
from ..utils.helpers import format_board_for_display

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """Everything a single move request resolved to."""
    outcome: MoveOutcome
    board: Board
    cleared: Tuple[int, ...] = ()
    coins_awarded: int = 0
    level_complete: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "outcome": self.outcome.value,
            "board": self.board.to_dict(),
            "cleared": list(self.cleared),
            "coins_awarded": self.coins_awarded,
            "level_complete": self.level_complete,
        }


class GameSession:
    """
    Owns one board and serializes moves against it.

    Each move fully resolves (move, one match pass, rewards, win check)
    before the call returns, so callers never observe a half-applied turn.
    """

    def __init__(
        self,
        session_id: Optional[str] = None,
        progress: Optional[PlayerProgress] = None,
        generator: Optional[LevelGenerator] = None,
        coins_per_match: Optional[int] = None,
        level_complete_bonus: Optional[int] = None,
    ):
        settings = get_settings()
        self.session_id = session_id or uuid.uuid4().hex
        self.progress = progress or PlayerProgress()
        self._generator = generator or get_generator()
        self.coins_per_match = (
            settings.coins_per_match if coins_per_match is None else coins_per_match
        )
        self.level_complete_bonus = (
            settings.level_complete_bonus
            if level_complete_bonus is None
            else level_complete_bonus
        )
        self.board = Board()
        self.descriptor: Optional[DifficultyDescriptor] = None
        self.won = False
        self.start_level()

    @property
    def level(self) -> int:
        return self.progress.current_level

    def start_level(self) -> Board:
        """Generate a fresh board for the player's current level."""
        result = self._generator.generate(self.level)
        self.board = result.board
        self.descriptor = result.descriptor
        self.won = False
        logger.info(
            "Session %s started level %d (%s)",
            self.session_id,
            self.level,
            result.descriptor.tier.value,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Session %s board:\n%s", self.session_id, format_board_for_display(self.board))
        return self.board

    def move(self, from_index: int, item_id: str, to_index: int) -> TurnResult:
        """
        Apply a move and resolve its matches and rewards.

        Rejected moves leave the board and progress untouched.
        """
        result = apply_move(self.board, from_index, item_id, to_index)
        if not result.applied:
            return TurnResult(outcome=result.outcome, board=self.board)

        cleared, board = detect_matches(result.board)
        self.board = board

        coins = 0
        if cleared:
            coins = match_reward(len(cleared), self.coins_per_match)
            self.progress.add_coins(coins)
            self.progress.increment_matches()
            logger.info(
                "Session %s cleared shelves %s for %d coins",
                self.session_id,
                list(cleared),
                coins,
            )

        level_complete = False
        if not self.won and is_won(board):
            self.won = True
            level_complete = True
            coins += self.level_complete_bonus
            self.progress.add_coins(self.level_complete_bonus)
            logger.info("Session %s completed level %d", self.session_id, self.level)

        return TurnResult(
            outcome=result.outcome,
            board=board,
            cleared=cleared,
            coins_awarded=coins,
            level_complete=level_complete,
        )

    def next_level(self) -> Board:
        """
        Advance to the next level.

        Raises:
            LevelNotCompleteError: If the current level has not been won.
        """
        if not self.won:
            raise LevelNotCompleteError(
                f"Level {self.level} is not complete ({self.board.item_count} items left)"
            )
        self.progress.increment_level()
        return self.start_level()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "session_id": self.session_id,
            "level": self.level,
            "won": self.won,
            "difficulty": self.descriptor.to_dict() if self.descriptor else None,
            "board": self.board.to_dict(),
            "progress": self.progress.to_dict(),
        }


class SessionStore:
    """In-memory sessions keyed by id; the oldest is evicted past the limit."""

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, GameSession]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, player_name: Optional[str] = None, **kwargs) -> GameSession:
        """Start a new session at level 1."""
        progress = PlayerProgress()
        if player_name:
            progress.player_name = player_name
        session = GameSession(progress=progress, **kwargs)
        self._sessions[session.session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted session %s", evicted_id)
        return session

    def get(self, session_id: str) -> GameSession:
        """
        Look up a session.

        Raises:
            SessionNotFoundError: If no session has this id.
        """
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)


# Singleton instance
_store = None


def get_session_store() -> SessionStore:
    """Get or create session store singleton instance."""
    global _store
    if _store is None:
        _store = SessionStore(max_sessions=get_settings().max_sessions)
    return _store
