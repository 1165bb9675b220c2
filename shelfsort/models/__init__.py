"""Data models package.

This package contains board and level models, player progress, and API
schemas.
"""
from .board import (
    SHELF_CAPACITY,
    MATCH_COUNT,
    ITEM_CONFIGS,
    ItemType,
    Item,
    Shelf,
    Board,
)
from .level import (
    DifficultyTier,
    DifficultyDescriptor,
    GenerationResult,
    LevelTheme,
    LEVEL_THEMES,
    TIER_CONFIGS,
)
from .progress import (
    Decoration,
    DECORATIONS,
    PlayerProgress,
    list_decorations,
    purchase_decoration,
)

__all__ = [
    # Board models
    "SHELF_CAPACITY",
    "MATCH_COUNT",
    "ITEM_CONFIGS",
    "ItemType",
    "Item",
    "Shelf",
    "Board",
    # Level models
    "DifficultyTier",
    "DifficultyDescriptor",
    "GenerationResult",
    "LevelTheme",
    "LEVEL_THEMES",
    "TIER_CONFIGS",
    # Progress
    "Decoration",
    "DECORATIONS",
    "PlayerProgress",
    "list_decorations",
    "purchase_decoration",
]
