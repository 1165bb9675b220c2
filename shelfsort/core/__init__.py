"""Core game engine package.

This package contains level generation, move application, match detection
and game sessions.
"""
from .difficulty import difficulty_for_level, tier_for_level, level_theme
from .generator import LevelGenerator, get_generator, generate_level
from .moves import MoveOutcome, MoveResult, apply_move
from .matcher import MatchResult, detect_matches, is_match, is_won, match_reward
from .session import GameSession, SessionStore, TurnResult, get_session_store

__all__ = [
    "difficulty_for_level",
    "tier_for_level",
    "level_theme",
    "LevelGenerator",
    "get_generator",
    "generate_level",
    "MoveOutcome",
    "MoveResult",
    "apply_move",
    "MatchResult",
    "detect_matches",
    "is_match",
    "is_won",
    "match_reward",
    "GameSession",
    "SessionStore",
    "TurnResult",
    "get_session_store",
]
